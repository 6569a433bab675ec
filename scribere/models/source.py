from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Union

from ..errors import ReadError

CODE = "code"
FILE = "file"


@dataclass
class SourceCode:
    """
    A document to read code blocks from: either text held in memory or a
    path to a file on disk.

    A file source is read lazily by `materialize()`, which replaces it in
    place with the file's text. The change is one way; a materialized source
    never goes back to being a file source.
    """

    kind: str
    payload: Union[str, os.PathLike, None]
    # Path relative to the tree the source was walked from, if any.
    name: Optional[str] = None
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.kind not in (CODE, FILE):
            raise ValueError(f"kind must be one of {{'{CODE}','{FILE}'}}")

    @classmethod
    def from_code(cls, text: str, *, name: Optional[str] = None) -> "SourceCode":
        return cls(CODE, text, name=name)

    @classmethod
    def from_file(cls, path: Union[str, os.PathLike], *, name: Optional[str] = None, encoding: str = "utf-8") -> "SourceCode":
        return cls(FILE, os.fspath(path), name=name, encoding=encoding)

    @property
    def is_code(self) -> bool:
        return self.kind == CODE

    @property
    def is_file(self) -> bool:
        return self.kind == FILE

    def as_code(self) -> Optional[str]:
        return self.payload if self.is_code else None

    def as_file(self) -> Optional[str]:
        return self.payload if self.is_file else None

    def materialize(self) -> "SourceCode":
        """Read a file source into memory. No-op for in-memory sources."""
        if self.is_file:
            path = self.payload
            try:
                # newline="" keeps \r\n intact so file and in-memory sources read alike.
                with open(path, encoding=self.encoding, newline="") as f:
                    text = f.read()
            except (OSError, UnicodeDecodeError) as e:
                raise ReadError(f"Failed to read source '{path}': {e}") from e
            self.kind, self.payload = CODE, text
        return self

    @property
    def text(self) -> str:
        return self.materialize().payload
