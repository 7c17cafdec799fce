"""
Photo sources for the "add memory" command.
"""
from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, Optional

import cv2
import numpy as np

IMAGE_SUFFIXES = {".jpg", ".jpeg", ".png", ".bmp", ".webp"}


def collect_photos(paths: Iterable[Path]) -> List[Path]:
    """Expand directories into their image files (sorted); keep files as given."""
    found: List[Path] = []
    for path in map(Path, paths):
        if path.is_dir():
            found.extend(sorted(p for p in path.iterdir() if p.suffix.lower() in IMAGE_SUFFIXES))
        else:
            found.append(path)
    return found


def load_photo(path: Path, max_side: int = 512) -> Optional[np.ndarray]:
    """
    Read an image as BGR and shrink it so its longer side is at most
    ``max_side``. Returns None if the file cannot be decoded.
    """
    image = cv2.imread(str(path), cv2.IMREAD_COLOR)
    if image is None:
        return None
    h, w = image.shape[:2]
    factor = max_side / max(h, w)
    if factor < 1:
        image = cv2.resize(image, (int(w * factor), int(h * factor)), interpolation=cv2.INTER_AREA)
    return image


class PhotoQueue:
    """Hands out the configured photos one at a time, then wraps around."""

    def __init__(self, paths: Iterable[Path]) -> None:
        self._paths = collect_photos(paths)
        self._next = 0

    def __len__(self) -> int:
        return len(self._paths)

    def next_path(self) -> Optional[Path]:
        if not self._paths:
            return None
        path = self._paths[self._next % len(self._paths)]
        self._next += 1
        return path
