from __future__ import annotations

from .base import ScribereError


class WriteError(ScribereError):
    """Base class for failures while writing an event stream."""


class MissingInitialTarget(WriteError):
    """The first event of the stream does not name a file to write to."""

    def __init__(self, message: str = "the first event has no target file") -> None:
        super().__init__(message)


class BlockIterationError(WriteError):
    """The upstream block or event stream raised while being pulled."""

    def __init__(self, stage: str, cause: BaseException) -> None:
        super().__init__(f"error while iterating {stage}: {cause}")
        self.stage = stage


class StorageOpenError(WriteError):
    """The output directory refused to open a file for appending."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"cannot open '{path}': {message}")
        self.path = path


class PathViolation(StorageOpenError):
    """A target path resolves outside the output directory."""

    def __init__(self, path: str) -> None:
        super().__init__(path, "path escapes the output directory")


class WriteIOError(WriteError):
    """Appending block content to an open file failed."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"cannot write to '{path}': {message}")
        self.path = path
