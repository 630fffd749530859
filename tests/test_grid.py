"""PaddedGrid construction, validation and cell access.

Tests:
    - one-cell zero border around a +1/-1 interior
    - bool and ternary (-1 = background) input
    - InvalidDimensions for empty / 1-D / ragged / 3-D input
    - InvalidCellValue with the offending position
    - accumulate keeps the sign, refuses the border
"""

import numpy as np
import pytest

from tracelab.compass import Polarity
from tracelab.errors import InvalidCellValue, InvalidDimensions, TracingError
from tracelab.grid import PaddedGrid


def test_padding_and_classification():
    g = PaddedGrid([[1, 0, 1], [0, 1, 0]])
    assert (g.height, g.width) == (2, 3)
    assert g.shape == (4, 5)
    cells = g.cells
    assert (cells[0, :] == 0).all() and (cells[-1, :] == 0).all()
    assert (cells[:, 0] == 0).all() and (cells[:, -1] == 0).all()
    np.testing.assert_array_equal(g.interior(), [[1, -1, 1], [-1, 1, -1]])


def test_bool_and_ternary_input():
    a = PaddedGrid(np.array([[True, False]]))
    b = PaddedGrid([[1, -1]])
    c = PaddedGrid([[1.0, 0.0]])
    for g in (a, b, c):
        np.testing.assert_array_equal(g.interior(), [[1, -1]])


def test_input_is_not_mutated():
    bits = np.array([[1, 0], [0, 1]])
    before = bits.copy()
    g = PaddedGrid(bits)
    g.accumulate(1, 1, 2)
    np.testing.assert_array_equal(bits, before)


@pytest.mark.parametrize("bits", [
    [],
    [[]],
    [1, 0, 1],
    [[1, 0], [1]],
    np.zeros((2, 2, 2)),
    np.zeros((0, 3)),
])
def test_invalid_dimensions(bits):
    with pytest.raises(InvalidDimensions):
        PaddedGrid(bits)


@pytest.mark.parametrize("bits, row, col", [
    ([[1, 2]], 0, 1),
    ([[0, 1], [0.5, 1]], 1, 0),
    ([[1, np.nan]], 0, 1),
    ([["1", "0"]], 0, 0),
    ([[1, None]], 0, 1),
])
def test_invalid_cell_value(bits, row, col):
    with pytest.raises(InvalidCellValue) as info:
        PaddedGrid(bits)
    assert (info.value.row, info.value.col) == (row, col)
    assert isinstance(info.value, TracingError)
    assert isinstance(info.value, ValueError)


def test_border_reads_zero():
    g = PaddedGrid([[1]])
    for x, y in [(0, 0), (1, 0), (2, 0), (0, 1), (2, 1), (0, 2), (1, 2), (2, 2)]:
        assert g.value(x, y) == 0
    assert g.value(1, 1) == 1


def test_accumulate_preserves_sign():
    g = PaddedGrid([[1, 0]])
    assert g.accumulate(1, 1, 4) == 5
    assert g.accumulate(2, 1, -8) == -9
    assert g.value(1, 1) == 5 and g.value(2, 1) == -9
    with pytest.raises(ValueError):
        g.accumulate(1, 1, -1)


def test_accumulate_refuses_border():
    g = PaddedGrid([[1]])
    with pytest.raises(IndexError):
        g.accumulate(0, 1, 1)
    with pytest.raises(IndexError):
        g.accumulate(1, 2, 1)


def test_pristine_and_matches():
    g = PaddedGrid([[1, 0]])
    assert g.is_pristine(1, 1, Polarity.OUTLINE)
    assert g.is_pristine(2, 1, Polarity.HOLE)
    assert not g.is_pristine(2, 1, Polarity.OUTLINE)
    g.accumulate(1, 1, 2)
    assert not g.is_pristine(1, 1, Polarity.OUTLINE)
    assert g.matches(1, 1, Polarity.OUTLINE)
    assert not g.matches(0, 0, Polarity.OUTLINE) and not g.matches(0, 0, Polarity.HOLE)


def test_cells_view_is_read_only():
    g = PaddedGrid([[1]])
    with pytest.raises(ValueError):
        g.cells[1, 1] = 7
