"""Unit tests for hesskit/symmetric.py."""

import numpy as np
import pytest

from hesskit.symmetric import SymmetricMatrix


def test_new_matrix_is_zero():
    """A new matrix has the requested dimension and zero entries."""
    m = SymmetricMatrix(3)
    assert m.symmetric == 3
    assert m.shape == (3, 3)
    np.testing.assert_array_equal(m.to_array(), np.zeros((3, 3)))


def test_set_sym_mirrors_reads():
    """Writing (i, j) is visible at (j, i) regardless of write order."""
    m = SymmetricMatrix(3)
    m.set_sym(0, 2, 4.5)
    m.set_sym(2, 1, -1.0)
    assert m[2, 0] == 4.5
    assert m[0, 2] == 4.5
    assert m[1, 2] == -1.0
    expected = np.array([[0.0, 0.0, 4.5], [0.0, 0.0, -1.0], [4.5, -1.0, 0.0]])
    np.testing.assert_array_equal(m.to_array(), expected)


def test_data_uses_upper_triangle_only():
    """Initial data below the diagonal is ignored."""
    data = np.array([[1.0, 2.0], [99.0, 3.0]])
    m = SymmetricMatrix(2, data)
    np.testing.assert_array_equal(m.to_array(), [[1.0, 2.0], [2.0, 3.0]])


def test_fill_resets_every_cell():
    """fill overwrites every stored entry."""
    m = SymmetricMatrix(2, np.eye(2))
    m.fill(np.nan)
    assert np.isnan(m.to_array()).all()


def test_to_array_returns_a_copy():
    """Modifying the dense copy leaves the matrix unchanged."""
    m = SymmetricMatrix(2, np.eye(2))
    arr = m.to_array()
    arr[0, 0] = 5.0
    assert m[0, 0] == 1.0


def test_array_protocol():
    """np.asarray produces the dense symmetric matrix."""
    m = SymmetricMatrix(2)
    m.set_sym(0, 1, 2.0)
    np.testing.assert_array_equal(np.asarray(m), [[0.0, 2.0], [2.0, 0.0]])
    assert np.asarray(m, dtype=np.float32).dtype == np.float32


def test_empty_matrix():
    """A zero-dimensional matrix is valid."""
    m = SymmetricMatrix(0)
    assert m.to_array().shape == (0, 0)
    assert "SymmetricMatrix(0" in repr(m)


def test_invalid_arguments_raise():
    """Negative sizes, wrong data shapes and out-of-range indices are rejected."""
    with pytest.raises(ValueError):
        SymmetricMatrix(-1)
    with pytest.raises(ValueError, match="shape"):
        SymmetricMatrix(2, np.zeros((3, 3)))
    m = SymmetricMatrix(2)
    with pytest.raises(IndexError):
        m.set_sym(0, 2, 1.0)
    with pytest.raises(IndexError):
        _ = m[-1, 0]


def test_array_protocol_refuses_copy_free_conversion():
    """Requesting a conversion without a copy raises ValueError."""
    m = SymmetricMatrix(2, np.eye(2))
    with pytest.raises(ValueError, match="without a copy"):
        m.__array__(copy=False)
    np.testing.assert_array_equal(m.__array__(copy=True), np.eye(2))
