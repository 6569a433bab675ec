class ScribereError(Exception):
    """Base class for every error raised by scribere."""
