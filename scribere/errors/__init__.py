from .base import ScribereError
from .read import ReadError, WalkError
from .write import (
    BlockIterationError,
    MissingInitialTarget,
    PathViolation,
    StorageOpenError,
    WriteError,
    WriteIOError,
)

__all__ = [
    "ScribereError",
    "ReadError",
    "WalkError",
    "WriteError",
    "MissingInitialTarget",
    "BlockIterationError",
    "StorageOpenError",
    "PathViolation",
    "WriteIOError",
]
