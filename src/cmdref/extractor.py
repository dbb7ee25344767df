"""Reference document extractor.

Turns a linux-command markdown page into a ``CommandDetail``. Three
independent passes run over the raw text:

1. description: first prose line after the setext title underline
2. examples: bodies of ``shell``/``bash``/``sh`` fenced blocks, capped at 10
3. content: rehype annotations stripped, links flattened, length bounded
"""

from __future__ import annotations

import re

from cmdref.models.detail import CommandDetail

MAX_EXAMPLES = 10
MAX_CONTENT_LENGTH = 50_000
TRUNCATION_MARKER = "\n\n... (content truncated)"

_TITLE_RULE_RE = re.compile(r"^(?:={3,}|-{3,})$")
_SHELL_FENCES = ("```shell", "```bash", "```sh")
_FENCE = "```"
_REHYPE_COMMENT_RE = re.compile(r"<!--rehype:.*?-->")
_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")


def extract_description(markdown: str) -> str:
    """Return the first non-blank, non-heading line after the title rule, or ``""``."""
    title_seen = False

    for line in markdown.split("\n"):
        stripped = line.strip()

        if _TITLE_RULE_RE.match(stripped):
            title_seen = True
            continue

        if title_seen and stripped and not stripped.startswith("#"):
            return stripped

    return ""


def extract_examples(markdown: str) -> list[str]:
    """Collect shell code block bodies in document order.

    Fence lines are never part of an example. A block left open at the end
    of the document is dropped. Blocks past the tenth are discarded.
    """
    examples: list[str] = []
    in_shell_block = False
    buffer = ""

    for line in markdown.split("\n"):
        # An opener always restarts the buffer, even inside an open block
        if line.startswith(_SHELL_FENCES):
            in_shell_block = True
            buffer = ""
            continue

        if in_shell_block and line.startswith(_FENCE):
            in_shell_block = False
            body = buffer.strip()
            if body:
                examples.append(body)
            buffer = ""
            continue

        if in_shell_block:
            buffer += line + "\n"

    return examples[:MAX_EXAMPLES]


def clean_content(markdown: str) -> str:
    """Strip rehype annotations, flatten links to ``label (target)``, bound the length."""
    cleaned = _REHYPE_COMMENT_RE.sub("", markdown)
    cleaned = _LINK_RE.sub(r"\1 (\2)", cleaned)

    if len(cleaned) > MAX_CONTENT_LENGTH:
        cleaned = cleaned[:MAX_CONTENT_LENGTH] + TRUNCATION_MARKER

    return cleaned


def extract(name: str, markdown: str) -> CommandDetail:
    """Build the structured record for ``name`` from its raw markdown."""
    return CommandDetail(
        name=name,
        description=extract_description(markdown),
        content=clean_content(markdown),
        examples=extract_examples(markdown),
    )
