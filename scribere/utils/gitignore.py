# scribere/utils/gitignore.py
import os
from typing import Iterable, List

import pathspec

DEFAULT_IGNORES: List[str] = [".git/"]


def get_gitignore(root: str, extra: Iterable[str] = (), *, read_file: bool = True) -> pathspec.PathSpec:
    """
    Return a PathSpec compiled from `root`/.gitignore plus `extra` patterns.
    With `read_file=False` the .gitignore is not consulted.
    Always ignores '.git/'. A missing or unreadable .gitignore still yields a
    valid spec with the defaults.
    """
    lines: List[str] = list(DEFAULT_IGNORES)
    lines.extend(extra)

    if not read_file:
        return pathspec.GitIgnoreSpec.from_lines(lines)

    gi = os.path.join(os.path.abspath(root or "."), ".gitignore")
    try:
        with open(gi, "r", encoding="utf-8", errors="ignore") as f:
            lines.extend(f.read().splitlines())
    except OSError:
        pass

    return pathspec.GitIgnoreSpec.from_lines(lines)
