# io_save_load.py
# load/save helpers

from __future__ import annotations
import json
from pathlib import Path

import numpy as np
from PIL import Image


def load_gray(path) -> np.ndarray:
    with Image.open(path) as im:
        return np.array(im.convert('L'), dtype=np.uint8)


def save_json(path, obj: dict) -> str:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(obj, f, ensure_ascii=False, indent=2)
    return str(path)
