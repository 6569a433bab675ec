# scribere/write_blocks.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import BinaryIO, Iterable, Iterator, List, Optional, Union

from ._logging import resolve_logger
from .directory.base import Directory
from .dispatch import DispatchLike, as_dispatch, with_default
from .errors import BlockIterationError, MissingInitialTarget, WriteIOError
from .models.codeblock import CodeBlock
from .models.event import Event


@dataclass
class WriteSummary:
    """Outcome of writing an event stream."""

    # Targets in the order they were opened; a file reopened later shows up again.
    files: List[str] = field(default_factory=list)
    blocks: int = 0
    bytes_written: int = 0


def _pull(events: Iterator[Event], stage: str) -> Optional[Event]:
    try:
        return next(events)
    except StopIteration:
        return None
    except Exception as e:
        raise BlockIterationError(stage, e) from e


def _append(handle: BinaryIO, path: str, content: str) -> int:
    data = content.encode("utf-8")
    try:
        handle.write(data)
    except OSError as e:
        raise WriteIOError(path, e.strerror or str(e)) from e
    return len(data)


def write_events(
    events: Iterable[Event],
    directory: Directory,
    *,
    stage: str = "events",
    logger: logging.Logger | None = None,
    log: bool = False,
) -> WriteSummary:
    """
    Append the content of every event's block to the file its target selects.

    An event with a target closes the current file and opens that one; an
    event without one keeps writing to the current file. Only one file is
    open at any time, and it is closed on every exit path.

    Raises:
        MissingInitialTarget: the first event has no target. Nothing is opened.
        BlockIterationError: pulling from `events` raised; the original
            exception is chained as `__cause__` and `stage` names the
            upstream that failed ("events" unless the caller says otherwise).
        StorageOpenError: the directory refused to open a target.
        WriteIOError: appending to or closing a file failed.

    Files completed before a failure are left as written.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    summary = WriteSummary()
    it = iter(events)

    event = _pull(it, stage)
    if event is None:
        lg.debug("no events to write")
        return summary
    if event.target is None:
        raise MissingInitialTarget()

    while event is not None:
        target = event.target
        summary.files.append(target)
        lg.info("writing %s", target)
        with directory.open_append(target) as handle:
            while True:
                summary.bytes_written += _append(handle, target, event.block.content)
                summary.blocks += 1
                event = _pull(it, stage)
                if event is None or event.target is not None:
                    break

    lg.info(
        "wrote %d block(s), %d byte(s) across %d file opening(s)",
        summary.blocks,
        summary.bytes_written,
        len(summary.files),
    )
    return summary


def write_blocks(
    blocks: Iterable[CodeBlock],
    directory: Directory,
    dispatcher: DispatchLike,
    *,
    default: Union[str, os.PathLike, None] = None,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> WriteSummary:
    """
    Dispatch `blocks` and write them into `directory`.

    `default`, when given, is the target for leading blocks the dispatcher
    leaves without one.
    """
    events: Iterable[Event] = as_dispatch(dispatcher).dispatch(blocks)
    if default is not None:
        events = with_default(events, default)
    return write_events(events, directory, stage="blocks", logger=logger, log=log)
