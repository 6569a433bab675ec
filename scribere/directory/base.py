"""
Directories that extracted code is written into.

A directory hands out at most one append handle at a time: the writer
closes the current file before it opens the next one, and asking for a
second handle while one is open is a programming error.
"""
from __future__ import annotations

import contextlib
import os
from abc import ABC, abstractmethod
from typing import BinaryIO, Iterator, Optional, Union

from ..errors import StorageOpenError, WriteIOError
from ..models.source import SourceCode


class Directory(ABC):
    """Output storage: open a file by relative path for appending, and walk the tree."""

    def __init__(self) -> None:
        self._open_path: Optional[str] = None

    @abstractmethod
    def _open(self, path: str) -> BinaryIO:
        """Open `path` for appending and return a binary writable handle."""
        raise NotImplementedError

    @abstractmethod
    def walk(self) -> Iterator[SourceCode]:
        """Yield every file in the directory as a source, with `name` set to its relative path."""
        raise NotImplementedError

    @contextlib.contextmanager
    def open_append(self, path: Union[str, os.PathLike]) -> Iterator[BinaryIO]:
        """
        Open `path` for appending for the duration of the `with` block.

        Raises StorageOpenError if the file can't be opened and WriteIOError
        if flushing it on close fails.
        """
        path = os.fspath(path)
        if self._open_path is not None:
            raise RuntimeError(
                f"cannot open '{path}': '{self._open_path}' is still open for appending"
            )
        try:
            handle = self._open(path)
        except OSError as e:
            raise StorageOpenError(path, e.strerror or str(e)) from e

        self._open_path = path
        try:
            yield handle
        except BaseException:
            # The error from the body is the one to report; a failing close must not mask it.
            self._open_path = None
            with contextlib.suppress(OSError):
                handle.close()
            raise
        self._open_path = None
        try:
            handle.close()
        except OSError as e:
            raise WriteIOError(path, e.strerror or str(e)) from e
