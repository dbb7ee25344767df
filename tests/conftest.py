"""Shared test fixtures for the cmdref test suite."""

from __future__ import annotations

import pytest

from cmdref.config import CacheSettings, SourceSettings
from cmdref.store import MemoryStore

INDEX_URL = "https://unpkg.com/linux-command/dist/data.json"
DETAIL_URL_BASE = "https://unpkg.com/linux-command/command"

START_MS = 1_760_000_000_000


class FakeClock:
    """Controllable epoch-millisecond clock."""

    def __init__(self, now: int = START_MS) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture()
def source_settings() -> SourceSettings:
    return SourceSettings(index_url=INDEX_URL, detail_url_base=DETAIL_URL_BASE)


@pytest.fixture()
def cache_settings() -> CacheSettings:
    return CacheSettings(backend="memory")


@pytest.fixture()
def index_payload() -> dict[str, dict[str, str]]:
    """Minimal dist/data.json body."""
    return {
        "ls": {"n": "ls", "d": "显示目录内容列表", "p": "/command/ls.md"},
        "grep": {"n": "grep", "d": "强大的文本搜索工具", "p": "/command/grep.md"},
        "tar": {"n": "tar", "d": "Linux下的归档使用工具", "p": "/command/tar.md"},
    }


@pytest.fixture()
def ls_markdown() -> str:
    """Reference page shaped like the upstream linux-command documents."""
    return (
        "ls\n"
        "===\n"
        "\n"
        "显示目录内容列表\n"
        "\n"
        "## 补充说明\n"
        "\n"
        "**ls命令** 用来显示目标列表 <!--rehype:style=color: red;-->\n"
        "See [GNU coreutils](https://www.gnu.org/software/coreutils/) for details.\n"
        "\n"
        "### 实例\n"
        "\n"
        "```shell\n"
        "ls -a\n"
        "```\n"
        "\n"
        "```bash\n"
        "ls -lh /tmp\n"
        "ls -1\n"
        "```\n"
        "\n"
        "```c\n"
        "int main(void) { return 0; }\n"
        "```\n"
    )
