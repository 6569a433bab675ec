# scribere/utils/__init__.py
from .gitignore import get_gitignore

__all__ = ["get_gitignore"]
