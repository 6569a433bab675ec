from .core import tangle, tangle_dir
from .directory import Directory, LocalDirectory, MemoryDirectory, TempDirectory
from .dispatch import ByAttr, Dispatch, MonoFile, WithDefault, as_dispatch, with_default
from .errors import (
    BlockIterationError,
    MissingInitialTarget,
    PathViolation,
    ReadError,
    ScribereError,
    StorageOpenError,
    WalkError,
    WriteError,
    WriteIOError,
)
from .models import CodeBlock, Event, SourceCode
from .read import MarkdownReader, Reader
from .read_dir import read_dir, strip_suffix
from .write_blocks import WriteSummary, write_blocks, write_events

__all__ = [
    "tangle",
    "tangle_dir",
    "CodeBlock",
    "Event",
    "SourceCode",
    "Reader",
    "MarkdownReader",
    "Dispatch",
    "MonoFile",
    "ByAttr",
    "WithDefault",
    "as_dispatch",
    "with_default",
    "Directory",
    "LocalDirectory",
    "MemoryDirectory",
    "TempDirectory",
    "read_dir",
    "strip_suffix",
    "write_events",
    "write_blocks",
    "WriteSummary",
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
