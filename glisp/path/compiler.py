"""
Path compiler: walks the ``:style`` / ``:transform`` / ``:path`` grammar and
flattens it into drawing commands.

    [:transform [a b c d tx ty]
      [:style nil
        [:path :M [0 0] :L [10 0] :Z]]]

``:transform`` nodes compose with the inherited matrix (``inherited * own``)
and apply to every point below them. ``:style`` nodes pass the inherited
matrix through unchanged; their second element holds style data and is not
compiled. Any other shape compiles to nothing.
"""

from __future__ import annotations

import logging
import numbers
from typing import Callable, Iterator, Optional

import numpy as np

from glisp import PathType, SExpression
from glisp.path import affine
from glisp.path.backend import Path2D, PathBackend
from glisp.path.segments import K_PATH, iterate_segments
from glisp.printer.printer import format_number
from glisp.types.collections import Vector
from glisp.types.symbol import Keyword

logger = logging.getLogger(__name__)

K_STYLE = Keyword("style")
K_TRANSFORM = Keyword("transform")

# command -> (backend method, number of points)
PATH_COMMANDS: dict[Keyword, tuple[str, int]] = {
    Keyword("M"): ("move_to", 1),
    Keyword("L"): ("line_to", 1),
    Keyword("C"): ("bezier_curve_to", 3),
    Keyword("Z"): ("close_path", 0),
}


def _tag(exp: SExpression) -> Optional[Keyword]:
    if isinstance(exp, Vector) and exp and isinstance(exp[0], Keyword):
        return exp[0]
    return None


def _compose(exp: Vector, transform: np.ndarray) -> Optional[np.ndarray]:
    """Matrix for the children of a ``:transform`` node, None if its matrix is malformed."""
    own = affine.parse_matrix(exp[1]) if len(exp) > 1 else None
    if own is None:
        logger.debug("Skipping :transform with malformed matrix: %r", exp[1:2])
        return None
    return affine.multiply(transform, own)


def transform_path(path: PathType, transform: np.ndarray) -> Vector:
    """Copy of ``path`` with every point mapped through ``transform``."""
    return Vector(
        Vector(affine.transform_point(transform, p)) if affine.is_point(p) else p
        for p in path
    )


def iterate_paths(exp: SExpression, transform: Optional[np.ndarray] = None) -> Iterator[Vector]:
    """Yield every reachable ``:path`` node, already transformed, in tree order."""
    if transform is None:
        transform = affine.identity()

    tag = _tag(exp)
    if tag == K_PATH:
        yield transform_path(exp, transform)
    elif tag == K_STYLE:
        for child in exp[2:]:
            yield from iterate_paths(child, transform)
    elif tag == K_TRANSFORM:
        new_transform = _compose(exp, transform)
        if new_transform is not None:
            for child in exp[2:]:
                yield from iterate_paths(child, new_transform)


# ----------------- SVG path data -----------------
def _token_to_svg(token: SExpression) -> str:
    if isinstance(token, Keyword):
        return token.id
    if isinstance(token, (list, tuple, np.ndarray)):
        return ",".join(_token_to_svg(v) for v in token)
    if isinstance(token, numbers.Real):
        return format_number(token)
    return str(token)


def get_svg_path_data(path: PathType) -> str:
    """``[:path :M [0 0] :L [1 1]]`` -> ``"M 0,0 L 1,1"``. Points are not transformed."""
    if path and K_PATH == path[0]:
        path = path[1:]
    return " ".join(_token_to_svg(token) for token in path)


def get_svg_path_data_recursive(exp: SExpression) -> str:
    """SVG path data for a whole tree, with transforms applied."""
    return _convert_path(exp, affine.identity())


def _convert_path(exp: SExpression, transform: np.ndarray) -> str:
    tag = _tag(exp)
    if tag == K_PATH:
        return get_svg_path_data(transform_path(exp, transform))
    if tag == K_STYLE:
        return " ".join(_convert_path(e, transform) for e in exp[2:])
    if tag == K_TRANSFORM:
        new_transform = _compose(exp, transform)
        if new_transform is None:
            return ""
        return " ".join(_convert_path(e, new_transform) for e in exp[2:])
    return ""


# ----------------- Drawing backend -----------------
def _is_untagged_path(exp: SExpression) -> bool:
    """A flat path whose leading :path tag was omitted, e.g. ``[:M [0 0] :Z]``."""
    tag = _tag(exp)
    return tag is not None and tag not in (K_PATH, K_STYLE, K_TRANSFORM)


def _draw_segments(path: PathType, backend: PathBackend) -> None:
    for cmd, *pts in iterate_segments(path):
        entry = PATH_COMMANDS.get(cmd) if isinstance(cmd, Keyword) else None
        if entry is None:
            logger.debug("Ignoring unsupported path command %r", cmd)
            continue
        method, arity = entry
        if len(pts) < arity or not all(affine.is_point(p) for p in pts[:arity]):
            logger.debug("Ignoring %r segment with points %r", cmd, pts)
            continue
        args = [v for p in pts[:arity] for v in p]
        getattr(backend, method)(*args)


def convert_to_path2d(
    exp: SExpression,
    path: Optional[PathBackend] = None,
    factory: Callable[[], PathBackend] = Path2D,
) -> PathBackend:
    """
    Drive a drawing backend with every path reachable from ``exp``.

    ``exp`` may also be a bare path whose ``:path`` tag was omitted.
    ``path`` receives the calls when given; otherwise a new one is made with
    ``factory``. Malformed trees leave the backend untouched.
    """
    if path is None:
        path = factory()
    if _is_untagged_path(exp):
        _draw_segments(transform_path(exp, affine.identity()), path)
        return path
    for transformed in iterate_paths(exp):
        _draw_segments(transformed, path)
    return path
