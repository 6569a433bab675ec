# scribere/directory/local.py
from __future__ import annotations

import logging
import os
from typing import BinaryIO, Iterable, Iterator, Set, Union

from ..errors import PathViolation, WalkError
from ..models.source import SourceCode
from ..utils.gitignore import get_gitignore
from .base import Directory

log = logging.getLogger(__name__)


class LocalDirectory(Directory):
    """
    A directory on the local filesystem.

    Files are opened in append mode and parent directories are created on
    demand. With `fresh=True`, a file is truncated the first time this
    instance opens it, so re-running a tangle over an old output tree doesn't
    pile onto last run's content; later openings in the same run still append.

    `walk()` yields files depth first in sorted order, skipping '.git/' and,
    unless `respect_gitignore` is False, anything the root's .gitignore or
    `ignore` patterns exclude.
    """

    def __init__(
        self,
        root: Union[str, os.PathLike],
        *,
        fresh: bool = False,
        respect_gitignore: bool = True,
        ignore: Iterable[str] = (),
        encoding: str = "utf-8",
    ) -> None:
        super().__init__()
        self.root = os.path.realpath(os.fspath(root))
        self.fresh = fresh
        self.respect_gitignore = respect_gitignore
        self.ignore = list(ignore)
        self.encoding = encoding
        self._truncated: Set[str] = set()

    def resolve(self, rel_path: str) -> str:
        """
        Join and normalize a root-relative path while enforcing containment.
        Raises PathViolation if the resolved path escapes the root.
        """
        target = os.path.join(self.root, *rel_path.replace("\\", "/").split("/"))
        resolved = os.path.abspath(target)
        if resolved == self.root or os.path.commonpath([self.root, resolved]) != self.root:
            raise PathViolation(rel_path)
        return resolved

    def _open(self, path: str) -> BinaryIO:
        dest = self.resolve(path)
        os.makedirs(os.path.dirname(dest), exist_ok=True)
        mode = "ab"
        if self.fresh and dest not in self._truncated:
            mode = "wb"
        handle = open(dest, mode)
        self._truncated.add(dest)
        log.debug("opened %s (%s)", dest, mode)
        return handle

    def walk(self) -> Iterator[SourceCode]:
        if not os.path.isdir(self.root):
            raise WalkError(f"Not a directory: '{self.root}'")
        spec = get_gitignore(self.root, self.ignore, read_file=self.respect_gitignore)

        def _raise(e: OSError) -> None:
            raise WalkError(f"Failed to walk '{e.filename}': {e.strerror or e}") from e

        for cur, dirs, files in os.walk(self.root, onerror=_raise):
            rel_dir = os.path.relpath(cur, self.root).replace(os.sep, "/")
            rel_dir = "" if rel_dir == "." else rel_dir + "/"
            # Prune in place so os.walk doesn't descend into ignored directories.
            dirs[:] = sorted(d for d in dirs if not spec.match_file(rel_dir + d + "/"))
            for name in sorted(files):
                rel = rel_dir + name
                if spec.match_file(rel):
                    continue
                yield SourceCode.from_file(os.path.join(cur, name), name=rel, encoding=self.encoding)
