"""
Dispatch code blocks to the files they should be written into.

A dispatcher is stateful: for each block, in arrival order, it answers
either a path ("start appending to this file") or None ("keep appending to
the file of the previous block"). The first answer of a pass is expected to
be a path, but dispatchers don't check it; `write_events` does, and
`with_default` can supply one for dispatchers that may start with None.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Iterable, Iterator, Optional, Union

from ..models.codeblock import CodeBlock
from ..models.event import Event


class Dispatch(ABC):
    """Maps a sequence of code blocks to a sequence of events."""

    @abstractmethod
    def dispatch_block(self, block: CodeBlock) -> Optional[str]:
        """Return the target for `block`, or None to continue the current file."""
        raise NotImplementedError

    def dispatch(self, blocks: Iterable[CodeBlock]) -> Iterator[Event]:
        """
        Lazily turn `blocks` into events.

        Exceptions raised by `blocks` propagate at the position they occur;
        nothing is pulled ahead of the event being produced.
        """
        for block in blocks:
            yield Event(target=self.dispatch_block(block), block=block)


class FunctionDispatch(Dispatch):
    """Adapts a plain `block -> Optional[str]` callable to `Dispatch`."""

    def __init__(self, fn: Callable[[CodeBlock], Optional[str]]) -> None:
        self.fn = fn

    def dispatch_block(self, block: CodeBlock) -> Optional[str]:
        return self.fn(block)


DispatchLike = Union[Dispatch, Callable[[CodeBlock], Optional[str]]]


def as_dispatch(dispatcher: DispatchLike) -> Dispatch:
    if isinstance(dispatcher, Dispatch):
        return dispatcher
    if callable(dispatcher):
        return FunctionDispatch(dispatcher)
    raise TypeError(f"expected a Dispatch or a callable, got {type(dispatcher).__name__}")
