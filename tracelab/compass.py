# compass.py
# Moore neighbourhood, crossing codes and the outline/hole polarity tables.
#
#          N
#    +-----------+
#    | 7   0   1 |
#  W | 6   c   2 | E      heading = index into NEIGHBOURS
#    | 5   4   3 |        a quarter turn is +/-2
#    +-----------+
#          S

from __future__ import annotations
from enum import Enum, IntFlag
from typing import Dict, Tuple

IntPoint = Tuple[int, int]

# (dx, dy) with +y down, clockwise from north
NEIGHBOURS: Tuple[IntPoint, ...] = (
    (0, -1), (1, -1), (1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1),
)
N, NE, E, SE, S, SW, W, NW = range(8)
QUARTER_TURN = 2


def rotate(heading: int, steps: int) -> int:
    return (heading + steps) % len(NEIGHBOURS)


# --- crossing codes ----------------------------------------------------------

class Crossing(IntFlag):
    """Direction a tracer was heading when it marked a cell (outline weights)."""
    UP = 1
    RIGHT = 2
    DOWN = 4
    LEFT = 8


_RISING = (
    Crossing.UP,
    Crossing.UP | Crossing.RIGHT,
    Crossing.UP | Crossing.LEFT,
    Crossing.UP | Crossing.RIGHT | Crossing.LEFT,
)
_FALLING = (
    Crossing.DOWN,
    Crossing.DOWN | Crossing.RIGHT,
    Crossing.DOWN | Crossing.LEFT,
    Crossing.DOWN | Crossing.RIGHT | Crossing.LEFT,
)

# crossing code -> change of the nesting level matching the cell's sign
LEVEL_SHIFT: Dict[int, int] = {
    **{int(code): +1 for code in _RISING},
    **{int(code): -1 for code in _FALLING},
}


def crossing_code(cell: int) -> int:
    """Accumulated code of a cell; interior cells start at magnitude 1."""
    return abs(cell) - 1


def level_shift(cell: int) -> int:
    return LEVEL_SHIFT.get(crossing_code(cell), 0)


# --- polarity ----------------------------------------------------------------

class Polarity(Enum):
    """
    Outline (foreground, clockwise) or hole (background, counterclockwise).

    Each member carries everything the tracer needs so its step logic is
    written once:
      sign            sign of the cells it follows; also the default turn direction
      start_heading   heading at the seed cell
      closing_heading heading the closing loop rotates back to
      weights         signed crossing weight per cardinal heading (N, E, S, W)
      corners         cell corner (0/1, 0/1) emitted per cardinal heading
    """
    OUTLINE = (
        1, E, N,
        (Crossing.UP, Crossing.RIGHT, Crossing.DOWN, Crossing.LEFT),
        ((0, 1), (0, 0), (1, 0), (1, 1)),
    )
    HOLE = (
        -1, S, W,
        (-int(Crossing.DOWN), -int(Crossing.LEFT), -int(Crossing.UP), -int(Crossing.RIGHT)),
        ((1, 1), (0, 1), (0, 0), (1, 0)),
    )

    def __init__(self, sign, start_heading, closing_heading, weights, corners):
        self.sign = sign
        self.start_heading = start_heading
        self.closing_heading = closing_heading
        self.weights = tuple(int(w) for w in weights)
        self.corners = corners

    @property
    def is_outline(self) -> bool:
        return self is Polarity.OUTLINE

    @property
    def turn(self) -> int:
        """Heading steps for a quarter turn in the default direction."""
        return QUARTER_TURN * self.sign

    def matches(self, cell: int) -> bool:
        return cell * self.sign > 0

    def weight(self, heading: int) -> int:
        return self.weights[heading // QUARTER_TURN]

    def corner(self, heading: int) -> IntPoint:
        return self.corners[heading // QUARTER_TURN]
