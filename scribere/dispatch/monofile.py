from __future__ import annotations

import os
from typing import Optional, Union

from ..models.codeblock import CodeBlock
from .base import Dispatch


class MonoFile(Dispatch):
    """
    Dispatch every block into a single file.

    Only the first block dispatched gets the path; every later one gets None,
    for as long as the dispatcher lives. Use a fresh instance per pass.
    """

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        self._path: Optional[str] = os.fspath(path)

    def dispatch_block(self, block: CodeBlock) -> Optional[str]:
        path, self._path = self._path, None
        return path
