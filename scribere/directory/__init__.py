from .base import Directory
from .local import LocalDirectory
from .memory import MemoryDirectory
from .tmpdir import TempDirectory

__all__ = ["Directory", "LocalDirectory", "MemoryDirectory", "TempDirectory"]
