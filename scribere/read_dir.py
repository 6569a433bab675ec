"""
Read every source in a directory into one event stream.

Each source's first block is dispatched to a path derived from the source's
relative path, and the rest of its blocks follow it into the same file. By
default the path is used as is, so code from `src/a.md` lands in `src/a.md`
of the output directory; pass `target=strip_suffix` to write it to `src/a`
instead (handy for names like `src/lib.py.md`).
"""
from __future__ import annotations

import logging
import posixpath
from typing import Callable, Iterator, Optional

from .directory.base import Directory
from .errors import ReadError
from .models.event import Event
from .read import MarkdownReader, Reader

log = logging.getLogger(__name__)


def strip_suffix(name: str) -> str:
    """Drop the last extension: `src/lib.py.md` -> `src/lib.py`."""
    root, ext = posixpath.splitext(name)
    return root if ext else name


def read_dir(
    directory: Directory,
    reader: Optional[Reader] = None,
    *,
    target: Optional[Callable[[str], str]] = None,
) -> Iterator[Event]:
    """
    Lazily yield events for every code block of every source in `directory`.

    Raises WalkError (from the directory) or ReadError (from the reader)
    at the point in the stream where the failure happens.
    """
    reader = reader or MarkdownReader()
    target = target or (lambda name: name)

    for source in directory.walk():
        name = source.name or source.as_file()
        if name is None:
            raise ReadError("source has neither a name nor a path")
        log.debug("reading source %s", name)
        first = True
        for block in reader.read(source):
            yield Event(target=target(name) if first else None, block=block)
            first = False
