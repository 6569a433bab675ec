from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator

from ..models.codeblock import CodeBlock
from ..models.source import SourceCode


class Reader(ABC):
    """Turns a source document into a lazy sequence of code blocks."""

    @abstractmethod
    def read(self, source: SourceCode) -> Iterator[CodeBlock]:
        """Materialize `source` and return an iterator over its code blocks.

        Raises ReadError if the source cannot be read.
        """
        raise NotImplementedError
