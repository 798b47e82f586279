import numpy as np
import pytest
from hypothesis import given, strategies as st

from glisp.path import affine
from tests.helpers import V


def test_identity_leaves_points_unchanged():
    assert affine.transform_point(affine.identity(), (3, 4)) == (3.0, 4.0)


def test_from_values_layout():
    # [a b c d tx ty]: x' = a*x + c*y + tx, y' = b*x + d*y + ty
    m = affine.from_values([1, 2, 3, 4, 5, 6])
    assert affine.transform_point(m, (1, 1)) == (1 + 3 + 5, 2 + 4 + 6)
    assert affine.to_values(m) == [1, 2, 3, 4, 5, 6]


def test_multiply_applies_inner_first():
    translate = affine.from_values([1, 0, 0, 1, 10, 0])
    scale = affine.from_values([2, 0, 0, 2, 0, 0])
    # scale then translate
    assert affine.transform_point(affine.multiply(translate, scale), (1, 0)) == (12.0, 0.0)
    # translate then scale
    assert affine.transform_point(affine.multiply(scale, translate), (1, 0)) == (22.0, 0.0)


@pytest.mark.parametrize(
    "value",
    [None, V(1, 2, 3), V(1, 2, 3, 4, 5, "x"), V(1, 2, 3, 4, 5, True), 7],
)
def test_parse_matrix_rejects_malformed(value):
    assert affine.parse_matrix(value) is None


def test_parse_matrix_accepts_vectors_and_arrays():
    assert affine.parse_matrix(V(1, 0, 0, 1, 0, 0)) is not None
    assert affine.parse_matrix(np.array([1.0, 0, 0, 1, 0, 0])) is not None


@pytest.mark.parametrize(
    "value, expected",
    [(V(1, 2), True), (V(1.5, -2), True), (V(1), False), (V(1, "a"), False), ("ab", False)],
)
def test_is_point(value, expected):
    assert affine.is_point(value) is expected


_coef = st.floats(-10, 10, allow_nan=False)


@given(st.lists(_coef, min_size=6, max_size=6), _coef, _coef)
def test_transform_matches_formula(values, x, y):
    a, b, c, d, tx, ty = values
    px, py = affine.transform_point(affine.from_values(values), (x, y))
    assert np.isclose(px, a * x + c * y + tx)
    assert np.isclose(py, b * x + d * y + ty)
