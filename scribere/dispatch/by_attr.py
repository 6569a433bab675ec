from __future__ import annotations

from typing import Optional

from ..models.codeblock import CodeBlock
from .base import Dispatch


class ByAttr(Dispatch):
    """
    Dispatch blocks by the value of one of their attributes.

    A block with the attribute (first match wins) starts the file named by
    its value, taken verbatim as a relative path. A block without it gets
    None and so continues whatever file the previous block went to. Nothing
    is remembered between blocks. If the first block may lack the attribute,
    wrap the stream with `with_default`.
    """

    def __init__(self, name: str) -> None:
        self.name = name

    def dispatch_block(self, block: CodeBlock) -> Optional[str]:
        return block.get_attr(self.name)
