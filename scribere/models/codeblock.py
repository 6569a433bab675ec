from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Tuple


@dataclass(frozen=True)
class CodeBlock:
    """A fenced code block found in a source document."""

    lang: str = ""
    content: str = ""
    # (name, value) pairs in the order they appear in the info string;
    # names may repeat.
    attrs: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.attrs, tuple):
            object.__setattr__(self, "attrs", tuple((str(k), str(v)) for k, v in self.attrs))

    def get_attr(self, name: str) -> Optional[str]:
        """Return the value of the first attribute called `name`, or None."""
        for key, value in self.attrs:
            if key == name:
                return value
        return None

    def with_attrs(self, attrs: Iterable[Tuple[str, str]]) -> "CodeBlock":
        return replace(self, attrs=tuple(attrs))
