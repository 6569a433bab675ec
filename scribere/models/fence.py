from dataclasses import dataclass


@dataclass
class FenceToken:
    """An opening fence: a run of 3+ backticks or 3+ tildes at the start of a line."""
    char: str             # '`' or '~'
    length: int           # run length (>=3)
    indent: int           # spaces before the fence (0..3)
    info: str             # info string after the fence, stripped
    line_start: int       # abs index of start of the fence's line
    line_end: int         # abs index AFTER the fence's line, newline included
