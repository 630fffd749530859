"""Image buffer -> foreground bits.

Tests:
    - exact-value foreground mask from numpy and PIL input
    - trailing single channel axis accepted, RGB rejected
    - explicit threshold and Otsu threshold (dark = foreground)
"""

import numpy as np
import pytest
from PIL import Image

from tracelab.binarise import binarise, foreground_mask, single_channel
from tracelab.errors import InvalidDimensions


def test_foreground_mask_numpy():
    img = np.array([[255, 0], [0, 255]], dtype=np.uint8)
    np.testing.assert_array_equal(foreground_mask(img, 255), [[True, False], [False, True]])


def test_foreground_mask_pil():
    img = Image.fromarray(np.array([[0, 7, 7]], dtype=np.uint8))
    np.testing.assert_array_equal(foreground_mask(img, 7), [[False, True, True]])


def test_single_channel_axis_is_dropped():
    img = np.zeros((2, 3, 1), dtype=np.uint8)
    assert single_channel(img).shape == (2, 3)


@pytest.mark.parametrize("img", [
    np.zeros((2, 3, 3), dtype=np.uint8),
    np.zeros((4,), dtype=np.uint8),
    np.zeros((0, 4), dtype=np.uint8),
])
def test_rejects_non_single_channel(img):
    with pytest.raises(InvalidDimensions):
        foreground_mask(img, 1)


def test_binarise_explicit_threshold():
    gray = np.array([[0, 100, 200]], dtype=np.uint8)
    fg, thr = binarise(gray, threshold=100)
    assert thr == 100
    np.testing.assert_array_equal(fg, [[True, True, False]])


def test_binarise_otsu_splits_dark_from_light():
    gray = np.array([[10, 20, 30, 220, 230, 240],
                     [30, 20, 10, 240, 230, 220]], dtype=np.uint8)
    fg, thr = binarise(gray)
    assert 30 <= thr < 220
    np.testing.assert_array_equal(fg[:, :3], np.ones((2, 3), dtype=bool))
    np.testing.assert_array_equal(fg[:, 3:], np.zeros((2, 3), dtype=bool))
