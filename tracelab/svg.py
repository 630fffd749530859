# svg.py
# path-data serializer (M / H / V / Z) and a minimal SVG writer

from __future__ import annotations
from pathlib import Path
from typing import Iterable, Sequence

from .compass import IntPoint
from .contours import Contour


def path_d(points: Sequence[IntPoint], close: bool = False) -> str:
    """One contour as `M x y` followed by H/V lines; `Z` when `close`."""
    if not points:
        return ""
    x0, y0 = points[0]
    parts = [f"M{x0} {y0}"]
    px, py = x0, y0
    for x, y in points[1:]:
        if y == py and x != px:
            parts.append(f"H{x}")
        elif x == px and y != py:
            parts.append(f"V{y}")
        else:
            raise ValueError(f"({px}, {py}) -> ({x}, {y}) is not an axis-aligned edge")
        px, py = x, y
    if close:
        parts.append("Z")
    return "".join(parts)


def paths_d(contours: Iterable[Contour], close_paths: bool = False) -> str:
    # commands are self-delimiting, no separator needed
    return "".join(path_d(c.vertices, close_paths) for c in contours)


def write_svg(contours: Iterable[Contour], size, out_path, close_paths: bool = True) -> str:
    """Write every contour as one even-odd filled path; size = (W, H)."""
    w, h = size
    d = paths_d(contours, close_paths)
    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}">',
        f'<path d="{d}" fill="black" fill-rule="evenodd" />',
        '</svg>',
    ]
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text("\n".join(parts))
    return str(out_path)
