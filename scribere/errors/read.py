from .base import ScribereError


class ReadError(ScribereError):
    """A source could not be materialized or scanned for code blocks."""


class WalkError(ScribereError):
    """Walking a directory for sources failed."""
