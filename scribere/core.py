# scribere/core.py
import logging
import os
from typing import Callable, Optional, Union

from ._logging import resolve_logger
from .directory import Directory, LocalDirectory
from .dispatch import DispatchLike
from .models.source import SourceCode
from .read import MarkdownReader, Reader
from .read_dir import read_dir
from .write_blocks import WriteSummary, write_blocks, write_events


def _as_source(source: Union[SourceCode, str, os.PathLike]) -> SourceCode:
    # Plain strings are markdown text; anything path-like is a file.
    if isinstance(source, SourceCode):
        return source
    if isinstance(source, str):
        return SourceCode.from_code(source)
    if isinstance(source, os.PathLike):
        return SourceCode.from_file(source)
    raise TypeError(f"expected SourceCode, str or os.PathLike, got {type(source).__name__}")


def tangle(
    source: Union[SourceCode, str, os.PathLike],
    directory: Directory,
    dispatcher: DispatchLike,
    *,
    default: Union[str, os.PathLike, None] = None,
    reader: Optional[Reader] = None,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> WriteSummary:
    """
    Extract the code blocks of one document and write them into `directory`.

    `source` is markdown text (str), a path (os.PathLike) or a SourceCode.
    `dispatcher` chooses the file of each block (e.g. `MonoFile("out.py")` or
    `ByAttr("file")`); `default` covers leading blocks it leaves without one.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    src = _as_source(source)
    lg.info("tangling %s", src.name or src.as_file() or "<text>")
    blocks = (reader or MarkdownReader()).read(src)
    return write_blocks(blocks, directory, dispatcher, default=default, logger=logger, log=log)


def tangle_dir(
    input_dir: Union[str, os.PathLike],
    output_dir: Union[str, os.PathLike],
    *,
    target: Optional[Callable[[str], str]] = None,
    reader: Optional[Reader] = None,
    fresh: bool = False,
    respect_gitignore: bool = True,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> WriteSummary:
    """
    Tangle every document under `input_dir` into `output_dir`.

    Blocks of `input_dir/<rel>` go to `output_dir/<target(rel)>`, `target`
    defaulting to the relative path itself (see `read_dir.strip_suffix`).
    """
    if os.path.realpath(input_dir) == os.path.realpath(output_dir):
        raise ValueError("input_dir and output_dir must differ")
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    lg.info("tangling directory %s into %s", os.fspath(input_dir), os.fspath(output_dir))
    # Keep an output tree nested in the input tree out of the walk.
    rel_out = os.path.relpath(os.path.realpath(output_dir), os.path.realpath(input_dir))
    ignore = [] if rel_out.startswith("..") else ["/" + rel_out.replace(os.sep, "/") + "/"]
    source_dir = LocalDirectory(input_dir, respect_gitignore=respect_gitignore, ignore=ignore)
    out = LocalDirectory(output_dir, fresh=fresh)
    return write_events(
        read_dir(source_dir, reader, target=target), out, stage="sources", logger=logger, log=log
    )
