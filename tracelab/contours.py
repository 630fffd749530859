# contours.py
# sealed contour records, the per-run collector, and polygon helpers

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from .compass import IntPoint, Polarity


@dataclass(frozen=True)
class Contour:
    polarity: Polarity
    vertices: Tuple[IntPoint, ...]   # grid-corner coords, start vertex stored once
    seed: IntPoint                   # (x, y) of the cell the scan started it from
    levels: Tuple[int, int]          # (outline level, hole level) at discovery

    @property
    def is_outline(self) -> bool:
        return self.polarity.is_outline

    def signed_area(self) -> float:
        return signed_area(self.vertices)

    def contains(self, x: float, y: float) -> bool:
        return contains_point(self.vertices, x, y)


class ContourCollector:
    """Append-only list of sealed contours in discovery order."""

    def __init__(self):
        self._contours: List[Contour] = []

    def append(self, contour: Contour):
        if not isinstance(contour, Contour):
            raise TypeError(f"expected a Contour, got {type(contour).__name__}")
        self._contours.append(contour)

    def __len__(self):
        return len(self._contours)

    def __iter__(self) -> Iterator[Contour]:
        return iter(self._contours)

    def __getitem__(self, i) -> Contour:
        return self._contours[i]

    def outlines(self) -> List[Contour]:
        return [c for c in self._contours if c.is_outline]

    def holes(self) -> List[Contour]:
        return [c for c in self._contours if not c.is_outline]


# --- polygon helpers ---------------------------------------------------------

def signed_area(vertices: Sequence[IntPoint]) -> float:
    """Shoelace area on raw (x right, y down) coords: clockwise on screen > 0."""
    n = len(vertices)
    if n < 3:
        return 0.0
    s = 0
    for i in range(n):
        x0, y0 = vertices[i]
        x1, y1 = vertices[(i + 1) % n]
        s += x0 * y1 - x1 * y0
    return s / 2.0


def contains_point(vertices: Sequence[IntPoint], x: float, y: float) -> bool:
    """Even-odd ray cast; points exactly on an edge are not meaningful here."""
    inside = False
    n = len(vertices)
    for i in range(n):
        x0, y0 = vertices[i]
        x1, y1 = vertices[(i + 1) % n]
        if (y0 > y) != (y1 > y):
            xc = x0 + (y - y0) * (x1 - x0) / (y1 - y0)
            if x < xc:
                inside = not inside
    return inside
