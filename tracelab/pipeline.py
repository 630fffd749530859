# pipeline.py
# Entry points: bits/images -> path data, and a batch runner over a glob of files.

from __future__ import annotations
import glob
import logging
import os
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

import numpy as np

from .binarise import binarise, foreground_mask
from .io_save_load import load_gray, save_json
from .scan import trace_bits
from .svg import paths_d, write_svg

logger = logging.getLogger(__name__)


# ----------------------------
# Options (one place)
# ----------------------------

@dataclass
class TraceOptions:
    close_paths: bool = False
    # exact pixel value treated as foreground; takes precedence over threshold
    foreground: Optional[int] = None
    # dark pixels (<= threshold) are foreground; None = Otsu
    threshold: Optional[int] = None


# ----------------------------
# Core entry points
# ----------------------------

def bits_to_paths(bits, close_paths: bool = False,
                  should_stop: Optional[Callable[[], bool]] = None) -> str:
    """
    2-D array of bits (1 = foreground) -> SVG path data.
    Outlines run clockwise, holes counterclockwise, in scan discovery order.
    """
    return paths_d(trace_bits(bits, should_stop), close_paths)


def image_to_paths(image, foreground, close_paths: bool = False) -> str:
    """Single-channel image (numpy or PIL); pixels equal to `foreground` are traced."""
    return bits_to_paths(foreground_mask(image, foreground), close_paths)


def image_mask(gray: np.ndarray, options: TraceOptions) -> np.ndarray:
    if options.foreground is not None:
        return foreground_mask(gray, options.foreground)
    fg, _ = binarise(gray, options.threshold)
    return fg


# ----------------------------
# Batch runner
# ----------------------------

def process_images(input_glob: str, out_dir: str = "out", options: TraceOptions | None = None) -> List[Dict]:
    """
    For each file matching `input_glob`:
      - load as 8-bit gray, build the foreground mask from `options`
      - trace, write <out_dir>/<stem>.svg
    Writes <out_dir>/summary.json and returns its rows for notebook use.
    """
    options = options or TraceOptions()
    os.makedirs(out_dir, exist_ok=True)
    rows: List[Dict] = []
    paths = sorted(glob.glob(input_glob))
    if not paths:
        logger.warning("no files match %s", input_glob)
    for path in paths:
        gray = load_gray(path)
        fg = image_mask(gray, options)
        try:
            contours = trace_bits(fg)
        except ValueError:
            logger.error("failed to trace %s", path)
            raise
        h, w = fg.shape
        stem = os.path.splitext(os.path.basename(path))[0]
        out_svg = write_svg(contours, size=(w, h), out_path=os.path.join(out_dir, stem + ".svg"),
                            close_paths=options.close_paths)
        n_outlines, n_holes = len(contours.outlines()), len(contours.holes())
        logger.info("traced %s: %d outlines, %d holes", os.path.basename(path), n_outlines, n_holes)
        rows.append({
            "file": os.path.basename(path),
            "width": int(w),
            "height": int(h),
            "outlines": n_outlines,
            "holes": n_holes,
            "svg": out_svg,
            "d": paths_d(contours, options.close_paths),
        })
    save_json(os.path.join(out_dir, "summary.json"), {"results": rows})
    return rows
