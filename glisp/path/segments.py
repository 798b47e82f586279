from __future__ import annotations

from typing import Iterator

from glisp import PathType, SegmentType, SExpression
from glisp.errors import GlispPathError
from glisp.types.collections import Vector
from glisp.types.symbol import Keyword

K_PATH = Keyword("path")


def is_path(exp: SExpression) -> bool:
    return isinstance(exp, Vector) and len(exp) > 0 and K_PATH == exp[0]


def iterate_segments(path: PathType) -> Iterator[SegmentType]:
    """
    Split a flat path into segments, each a command keyword followed by its
    points: ``[:path :M [0 0] :L [1 1] :Z]`` yields ``[:M [0 0]]``,
    ``[:L [1 1]]`` and ``[:Z]``.

    A leading ``:path`` tag is skipped. Tokens at segment boundaries are not
    validated; callers expect a command keyword there.
    """
    if not isinstance(path, (list, tuple)):
        raise GlispPathError(f"Invalid path: {path!r}")
    return _segments(path)


def _segments(path: PathType) -> Iterator[SegmentType]:
    start = 1 if path and K_PATH == path[0] else 0
    end = len(path)
    for i in range(start + 1, end + 1):
        if i == end or isinstance(path[i], Keyword):
            yield list(path[start:i])
            start = i
