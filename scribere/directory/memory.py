from __future__ import annotations

from typing import Dict, Iterator

from ..errors import ReadError
from ..models.source import SourceCode
from .base import Directory


class _BufferWriter:
    """Append-only view of one in-memory file."""

    def __init__(self, buf: bytearray) -> None:
        self._buf = buf
        self.closed = False

    def write(self, data: bytes) -> int:
        if self.closed:
            raise ValueError("write to closed file")
        self._buf.extend(data)
        return len(data)

    def close(self) -> None:
        self.closed = True


class MemoryDirectory(Directory):
    """A directory kept in a dict, for tests and dry runs. Paths are used verbatim as keys."""

    def __init__(self) -> None:
        super().__init__()
        self._files: Dict[str, bytearray] = {}

    def _open(self, path: str) -> _BufferWriter:
        return _BufferWriter(self._files.setdefault(path, bytearray()))

    def walk(self) -> Iterator[SourceCode]:
        for name in sorted(self._files):
            try:
                text = self._files[name].decode("utf-8")
            except UnicodeDecodeError as e:
                raise ReadError(f"Failed to read source '{name}': {e}") from e
            yield SourceCode.from_code(text, name=name)

    def dump(self) -> Dict[str, bytes]:
        """Snapshot of every file written so far."""
        return {path: bytes(buf) for path, buf in self._files.items()}
