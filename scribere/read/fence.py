# scribere/read/fence.py

from __future__ import annotations

import re
from typing import Iterator, Tuple

from ..models.fence import FenceToken

# An OPENER: up to 3 spaces of indent, then 3+ backticks or tildes and the info string.
_OPENER_RE = re.compile(r"(?m)^(?P<indent> {0,3})(?P<fence>(?P<ch>`|~)(?P=ch){2,})(?P<info>[^\n]*)$")


def _line_end(text: str, idx: int) -> int:
    nl = text.find("\n", idx)
    return len(text) if nl == -1 else nl + 1


def _closer_re(token: FenceToken) -> re.Pattern:
    # A closer uses the same character, is at least as long, and carries no info string.
    return re.compile(rf"(?m)^ {{0,3}}{re.escape(token.char)}{{{token.length},}}[ \t]*\r?$")


def _strip_indent(code: str, indent: int) -> str:
    """Remove up to `indent` leading spaces from every line, as CommonMark does."""
    if not indent:
        return code
    lines = code.splitlines(keepends=True)
    out = []
    for line in lines:
        n = len(line) - len(line.lstrip(" "))
        out.append(line[min(n, indent):])
    return "".join(out)


def iter_fences(text: str) -> Iterator[Tuple[FenceToken, str]]:
    """
    Lazily yield `(opener, content)` for every top-level fenced code block.

    Content is the raw text between the opener line and the closer line, each
    line keeping its newline. A block whose closer never comes runs to the end
    of the document.
    """
    cursor = 0
    while cursor < len(text):
        m = _OPENER_RE.search(text, cursor)
        if not m:
            return

        char = m.group("ch")
        info = m.group("info")
        line_end = _line_end(text, m.start())
        if char == "`" and "`" in info:
            # Backtick fences can't carry backticks in their info string; it's inline code.
            cursor = line_end
            continue

        token = FenceToken(
            char=char,
            length=len(m.group("fence")),
            indent=len(m.group("indent")),
            info=info.strip(),
            line_start=m.start(),
            line_end=line_end,
        )

        closer = _closer_re(token).search(text, token.line_end)
        if closer:
            content_end = closer.start()
            cursor = _line_end(text, closer.start())
        else:
            content_end = len(text)
            cursor = len(text)

        yield token, _strip_indent(text[token.line_end:content_end], token.indent)
