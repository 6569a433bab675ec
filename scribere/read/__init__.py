from .base import Reader
from .fence import iter_fences
from .markdown import MarkdownReader, parse_info

__all__ = ["Reader", "MarkdownReader", "iter_fences", "parse_info"]
