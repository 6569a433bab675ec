# scribere/read/markdown.py

from __future__ import annotations

import logging
import re
from typing import Callable, Iterator, List, Optional, Tuple, Union

from ..models.codeblock import CodeBlock
from ..models.source import SourceCode
from .base import Reader
from .fence import iter_fences

log = logging.getLogger(__name__)

# A token is a run of non-space characters where quoted parts may contain spaces,
# so `file="my file.py"` stays one token.
_INFO_TOKEN_RE = re.compile(r"""(?:[^\s"']+|"[^"]*"|'[^']*')+""")


def parse_info(info: str) -> Tuple[str, List[Tuple[str, str]]]:
    """
    Split a fence info string into the language tag and its attributes.

    Accepts both plain (```python file=src/a.py) and braced
    (```{.python file=src/a.py}) forms. The first token is the language unless
    it contains '='. `name=value` tokens become attributes in order, with
    surrounding quotes stripped from the value; bare tokens become `(token, "")`.
    """
    tokens = [t.strip("{}") for t in _INFO_TOKEN_RE.findall(info)]
    tokens = [t for t in tokens if t]

    lang = ""
    attrs: List[Tuple[str, str]] = []
    for i, tok in enumerate(tokens):
        if i == 0 and "=" not in tok:
            lang = tok.lstrip(".")
            continue
        if "=" in tok:
            name, value = tok.split("=", 1)
            if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
                value = value[1:-1]
            attrs.append((name, value))
        else:
            attrs.append((tok, ""))
    return lang, attrs


class MarkdownReader(Reader):
    """
    Read fenced code blocks out of markdown.

    `filter`, when given, is called with every block and only blocks it
    accepts are yielded, e.g. `MarkdownReader(filter=lambda b: b.lang == "rust")`.
    """

    def __init__(self, filter: Optional[Callable[[CodeBlock], bool]] = None) -> None:
        self.filter = filter

    def read(self, source: Union[SourceCode, str]) -> Iterator[CodeBlock]:
        if isinstance(source, str):
            source = SourceCode.from_code(source)
        # Materialize now so read errors surface here and not at the first pull.
        text = source.text
        log.debug("reading %s (%d chars)", source.name or "<text>", len(text))
        return self._blocks(text)

    def _blocks(self, text: str) -> Iterator[CodeBlock]:
        for token, content in iter_fences(text):
            lang, attrs = parse_info(token.info)
            block = CodeBlock(lang=lang, content=content, attrs=tuple(attrs))
            if self.filter is None or self.filter(block):
                yield block
