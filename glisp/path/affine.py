"""2x3 affine transforms backed by numpy.

A transform node stores its matrix as six numbers ``[a b c d tx ty]``
(column-major 2x3), mapping a point as::

    x' = a*x + c*y + tx
    y' = b*x + d*y + ty

Internally matrices are 3x3 homogeneous ``numpy`` arrays so that
composition is a plain matrix product.
"""

from __future__ import annotations

import numbers
from typing import Optional, Sequence

import numpy as np

from glisp import SExpression


def identity() -> np.ndarray:
    return np.eye(3)


def from_values(values: Sequence[float]) -> np.ndarray:
    a, b, c, d, tx, ty = (float(v) for v in values)
    return np.array(
        [
            [a, c, tx],
            [b, d, ty],
            [0.0, 0.0, 1.0],
        ]
    )


def to_values(matrix: np.ndarray) -> list[float]:
    return [
        float(matrix[0, 0]), float(matrix[1, 0]),
        float(matrix[0, 1]), float(matrix[1, 1]),
        float(matrix[0, 2]), float(matrix[1, 2]),
    ]


def multiply(outer: np.ndarray, inner: np.ndarray) -> np.ndarray:
    """``outer * inner``: the result applies ``inner`` first, then ``outer``."""
    return outer @ inner


def transform_point(matrix: np.ndarray, point: Sequence[float]) -> tuple[float, float]:
    x, y = float(point[0]), float(point[1])
    out = matrix @ np.array([x, y, 1.0])
    return float(out[0]), float(out[1])


def is_point(value: SExpression) -> bool:
    return (
        isinstance(value, (list, tuple, np.ndarray))
        and len(value) == 2
        and all(isinstance(v, numbers.Real) and not isinstance(v, bool) for v in value)
    )


def parse_matrix(value: SExpression) -> Optional[np.ndarray]:
    """Matrix for a ``:transform`` node's second element, or None if malformed."""
    if not isinstance(value, (list, tuple, np.ndarray)) or len(value) != 6:
        return None
    if not all(isinstance(v, numbers.Real) and not isinstance(v, bool) for v in value):
        return None
    return from_values(value)
