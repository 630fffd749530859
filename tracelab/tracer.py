# tracer.py
# Pavlidis boundary following over a PaddedGrid (4-connected regions)

from __future__ import annotations
from typing import List, Tuple

from .compass import NEIGHBOURS, IntPoint, Polarity, rotate
from .contours import Contour
from .grid import PaddedGrid


class BoundaryTracer:
    """
    Walks one closed contour from a seed cell and returns it sealed.

    The tracer stays on cells matching its polarity. Each step looks at the
    front cell and the two cells flanking it (relative to the heading) and
    picks, in priority order:

      diagonal  lead-side diagonal and front match: step diagonally, turn back
      straight  front matches: step forward
      inner     the two cells on the turning side match: turn, step, turn back
      dead end  nothing matches: turn in the default direction

    Every step adds the polarity's crossing weight to the cell being left,
    which is what the scan cursor reads later to keep its nesting levels.
    """

    def __init__(self, grid: PaddedGrid, polarity: Polarity, seed: IntPoint,
                 levels: Tuple[int, int] = (0, 0)):
        self.grid = grid
        self.polarity = polarity
        self.seed = seed
        self.levels = levels
        self.x, self.y = seed
        self.heading = polarity.start_heading
        self.running = False
        self.vertices: List[IntPoint] = []

    # --- primitives ----------------------------------------------------------

    def _looks(self, offset: int) -> bool:
        dx, dy = NEIGHBOURS[rotate(self.heading, offset)]
        return self.grid.matches(self.x + dx, self.y + dy, self.polarity)

    def _mark(self):
        self.grid.accumulate(self.x, self.y, self.polarity.weight(self.heading))

    def _turn(self, quarters: int):
        self.heading = rotate(self.heading, quarters * self.polarity.turn)

    def _move(self, offset: int):
        dx, dy = NEIGHBOURS[rotate(self.heading, offset)]
        self.x += dx
        self.y += dy

    def _emit(self):
        cx, cy = self.polarity.corner(self.heading)
        # padded cell (x, y) has its top-left corner at (x-1, y-1)
        self.vertices.append((self.x - 1 + cx, self.y - 1 + cy))

    # --- stepping ------------------------------------------------------------

    def step(self):
        lead = -self.polarity.sign
        side = self.polarity.sign
        if self._looks(lead) and self._looks(0):
            self._mark()
            self._move(lead)
            self._turn(-1)
            self._emit()
        elif self._looks(0):
            self._mark()
            self._move(0)
        elif self._looks(side) and self._looks(2 * side):
            self._mark()
            self._turn(+1)
            self._mark()
            self._emit()
            self._turn(-1)
            self._move(side)
            self._emit()
        else:
            self._mark()
            self._turn(+1)
            self._emit()

    def _closed(self) -> bool:
        return (self.x, self.y) == self.seed and len(self.vertices) > 2

    def _close(self):
        # rotate in place on the seed until the heading is back where it started
        while True:
            self._mark()
            if self.heading == self.polarity.closing_heading:
                break
            self._turn(+1)
            self._emit()

    def trace(self) -> Contour:
        if self.running or self.vertices:
            raise RuntimeError("a BoundaryTracer traces exactly one contour")
        self.running = True
        self._emit()
        while True:
            self.step()
            if self._closed():
                break
        self._close()
        self.running = False
        sx, sy = self.seed
        return Contour(
            polarity=self.polarity,
            vertices=tuple(self.vertices),
            seed=(sx - 1, sy - 1),
            levels=self.levels,
        )
