from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .codeblock import CodeBlock


@dataclass(frozen=True)
class Event:
    """
    A code block paired with the file it should be appended to.

    `target` only has meaning relative to the events before it: a path says
    "from this block on, append to this file", while None says "keep
    appending to the file of the previous event". A stream of events must be
    consumed from its first element for every block to land in the right
    file; starting halfway through loses the current target.
    """

    target: Optional[str]
    block: CodeBlock

    @classmethod
    def new_some(cls, target: str, block: CodeBlock) -> "Event":
        return cls(target=target, block=block)

    @classmethod
    def new_none(cls, block: CodeBlock) -> "Event":
        return cls(target=None, block=block)
