# scan.py
# row-major scan cursor: finds contour seeds and keeps nesting levels

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from .compass import Polarity, level_shift
from .contours import ContourCollector
from .errors import TraceCancelled
from .grid import PaddedGrid
from .tracer import BoundaryTracer

logger = logging.getLogger(__name__)


@dataclass
class TraceContext:
    """Everything one sweep owns; built fresh for every call."""
    grid: PaddedGrid
    collector: ContourCollector = field(default_factory=ContourCollector)


class ScanCursor:
    """
    Sweeps the interior top-to-bottom, left-to-right. Both levels reset at
    every row start. At each cell:
      - levels equal and the cell is untouched foreground -> trace an outline
      - outline level ahead and the cell is untouched background -> trace a hole
      - then the cell's crossing code raises or lowers the level of its sign
    """

    def __init__(self, context: TraceContext):
        self.context = context
        self.x = 1
        self.y = 1
        self.outline_level = 0
        self.hole_level = 0
        self.running = False

    def run(self, should_stop: Optional[Callable[[], bool]] = None) -> ContourCollector:
        """
        Trace everything and return the collector. `should_stop` is polled
        only between rows; tracer runs are never interrupted.
        """
        grid = self.context.grid
        self.running = True
        try:
            for y in range(1, grid.height + 1):
                if should_stop is not None and should_stop():
                    raise TraceCancelled(y - 1)
                self.y = y
                self.outline_level = 0
                self.hole_level = 0
                for x in range(1, grid.width + 1):
                    self.x = x
                    self.visit()
        finally:
            self.running = False
        return self.context.collector

    def _start_polarity(self) -> Optional[Polarity]:
        grid = self.context.grid
        if self.outline_level == self.hole_level and grid.is_pristine(self.x, self.y, Polarity.OUTLINE):
            return Polarity.OUTLINE
        if self.outline_level > self.hole_level and grid.is_pristine(self.x, self.y, Polarity.HOLE):
            return Polarity.HOLE
        return None

    def visit(self):
        polarity = self._start_polarity()
        if polarity is not None:
            tracer = BoundaryTracer(
                self.context.grid, polarity, (self.x, self.y),
                levels=(self.outline_level, self.hole_level),
            )
            contour = tracer.trace()
            self.context.collector.append(contour)
            logger.debug(
                "%s #%d from cell %s: %d vertices",
                polarity.name.lower(), len(self.context.collector), contour.seed, len(contour.vertices),
            )
        self._shift_levels()

    def _shift_levels(self):
        cell = self.context.grid.value(self.x, self.y)
        delta = level_shift(cell)
        if cell > 0:
            self.outline_level += delta
        else:
            self.hole_level += delta


def trace_bits(bits, should_stop: Optional[Callable[[], bool]] = None) -> ContourCollector:
    """Validate `bits`, sweep once, and return every contour in discovery order."""
    context = TraceContext(PaddedGrid(bits))
    return ScanCursor(context).run(should_stop)
