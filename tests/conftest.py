# conftest.py - shared pytest fixtures
import pytest

from scribere.directory import MemoryDirectory
from scribere.models import CodeBlock


@pytest.fixture
def memdir():
    return MemoryDirectory()


@pytest.fixture
def make_blocks():
    """Build plain code blocks from contents: make_blocks("1\\n", "2\\n")."""
    def _make(*contents):
        return [CodeBlock(lang="", content=c) for c in contents]
    return _make
