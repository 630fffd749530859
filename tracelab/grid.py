# grid.py
# classified cell grid with a one-cell neutral border

from __future__ import annotations
import numpy as np

from .compass import Polarity
from .errors import InvalidCellValue, InvalidDimensions

FOREGROUND = 1
_ACCEPTED = (-1, 0, 1)  # 1 = foreground; 0 and -1 = background


def _is_accepted(v) -> bool:
    return not isinstance(v, str) and v in _ACCEPTED


def validate_bits(bits) -> np.ndarray:
    """Return `bits` as a 2-D array, or raise before anything is traced."""
    try:
        arr = np.asarray(bits)
    except ValueError as exc:  # ragged nested lists
        raise InvalidDimensions("grid rows must all have the same length") from exc
    if arr.ndim != 2 or 0 in arr.shape:
        raise InvalidDimensions(f"expected a non-empty rectangular 2-D grid, got shape {arr.shape}")
    if arr.dtype == bool:
        return arr
    if arr.dtype.kind in "iuf":
        bad = ~np.isin(arr, _ACCEPTED)
    else:
        bad = np.array([[not _is_accepted(v) for v in row] for row in arr.tolist()], dtype=bool)
    if bad.any():
        row, col = (int(i) for i in np.argwhere(bad)[0])
        raise InvalidCellValue(arr.tolist()[row][col], row, col)
    return arr


class PaddedGrid:
    """
    (H+2) x (W+2) int32 cells: +1 foreground, -1 background, 0 border.
    Tracers add crossing weights to interior cells; the sign never changes
    and the border is never written. Coordinates are (x, y) in padded space,
    so the interior spans 1..W and 1..H.
    """

    def __init__(self, bits):
        arr = validate_bits(bits)
        self.height, self.width = arr.shape
        self._cells = np.zeros((self.height + 2, self.width + 2), dtype=np.int32)
        self._cells[1:-1, 1:-1] = np.where(arr == FOREGROUND, 1, -1)

    @property
    def shape(self):
        return self._cells.shape

    @property
    def cells(self) -> np.ndarray:
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def interior(self) -> np.ndarray:
        return self._cells[1:-1, 1:-1].copy()

    def is_interior(self, x: int, y: int) -> bool:
        return 1 <= x <= self.width and 1 <= y <= self.height

    def value(self, x: int, y: int) -> int:
        return int(self._cells[y, x])

    def accumulate(self, x: int, y: int, weight: int) -> int:
        if not self.is_interior(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the interior {self.width}x{self.height}")
        cell = int(self._cells[y, x])
        if cell * weight < 0:
            raise ValueError(f"weight {weight} would flip the sign of cell ({x}, {y})")
        self._cells[y, x] = cell + weight
        return cell + weight

    def matches(self, x: int, y: int, polarity: Polarity) -> bool:
        return polarity.matches(int(self._cells[y, x]))

    def is_pristine(self, x: int, y: int, polarity: Polarity) -> bool:
        """True while no contour of this polarity has started at or crossed the cell."""
        return int(self._cells[y, x]) == polarity.sign
