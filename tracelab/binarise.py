# binarise.py
# image buffer -> foreground bits (exact value match or dark-pixel threshold)

from __future__ import annotations
import numpy as np
from skimage.filters import threshold_otsu

from .errors import InvalidDimensions


def single_channel(image) -> np.ndarray:
    """numpy array or PIL image -> 2-D array (a trailing channel axis of 1 is dropped)."""
    arr = np.asarray(image)
    if arr.ndim == 3 and arr.shape[2] == 1:
        arr = arr[:, :, 0]
    if arr.ndim != 2 or 0 in arr.shape:
        raise InvalidDimensions(f"expected a non-empty single-channel image, got shape {arr.shape}")
    return arr


def foreground_mask(image, value) -> np.ndarray:
    """Pixels equal to `value` are foreground."""
    return single_channel(image) == value


def binarise(gray, threshold: int | None = None) -> tuple[np.ndarray, int]:
    gray = single_channel(gray)
    if threshold is None:
        threshold = int(threshold_otsu(gray))
    fg = gray <= threshold   # black = foreground
    return fg, threshold
