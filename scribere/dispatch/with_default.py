# scribere/dispatch/with_default.py

from __future__ import annotations

import os
from typing import Iterable, Iterator, Optional, Union

from ..models.event import Event


class WithDefault(Iterator[Event]):
    """
    Event iterator that gives the first event a target when it has none.

    The default is used up by the first pull: if that event already names a
    target, or the stream raises, the default is dropped. Every other event
    passes through untouched, so wrapping twice behaves like wrapping once
    with the inner default.

    `last_target` is the most recent target seen so far. When a stream is
    split, feed it as the default of the next part so that part starts in
    the right file.
    """

    def __init__(self, events: Iterable[Event], default: Union[str, os.PathLike]) -> None:
        self._events = iter(events)
        self._default: Optional[str] = os.fspath(default)
        self.last_target: Optional[str] = None

    def __iter__(self) -> "WithDefault":
        return self

    def __next__(self) -> Event:
        default, self._default = self._default, None
        event = next(self._events)
        if event.target is None and default is not None:
            event = Event.new_some(default, event.block)
        if event.target is not None:
            self.last_target = event.target
        return event


def with_default(events: Iterable[Event], default: Union[str, os.PathLike]) -> WithDefault:
    """Add a default target for the first event of `events`."""
    return WithDefault(events, default)
