from __future__ import annotations

import shutil
import tempfile
from typing import Optional

from .local import LocalDirectory


class TempDirectory(LocalDirectory):
    """
    A LocalDirectory rooted at a fresh temporary directory.

    The tree is removed by `cleanup()` or when leaving a `with` block.
    """

    def __init__(self, *, prefix: str = "scribere-", dir: Optional[str] = None, **kwargs) -> None:
        super().__init__(tempfile.mkdtemp(prefix=prefix, dir=dir), **kwargs)

    @property
    def path(self) -> str:
        return self.root

    def cleanup(self) -> None:
        shutil.rmtree(self.root, ignore_errors=True)

    def __enter__(self) -> "TempDirectory":
        return self

    def __exit__(self, *exc) -> None:
        self.cleanup()
