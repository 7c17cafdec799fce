"""
SceneRenderer — draws the composition onto an OpenCV canvas.

This is the rendering side of the core's boundary: it creates the
handles, reads their transforms every frame and never moves them.
"""
from __future__ import annotations
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

import cv2
import numpy as np

from memory_tree.domain.models import vec3
from memory_tree.utils.constants import CAMERA_POSITION
from memory_tree.utils.geometry import euler_matrix

Color = Tuple[int, int, int]   # BGR

# ---- palette -------------------------------------------------------------
GOLD  = (55, 175, 212)
CREAM = (167, 238, 252)
RED   = (0, 0, 136)
GREEN = (0, 68, 0)
CANE_RED = (0, 0, 170)
WHITE = (255, 255, 255)

DUST_EXTENT = 25.0
DUST_SPIN = 0.05          # rad/s about Y
NEAR_PLANE = 0.1


class Shape(str, Enum):
    ORNAMENT = "ORNAMENT"
    GIFT     = "GIFT"
    CANE     = "CANE"
    PHOTO    = "PHOTO"


@dataclass
class SceneHandle:
    """A drawable item. ``size`` is its half-extent in world units at scale 1."""
    shape: Shape
    color: Color
    size: float
    position: np.ndarray = field(default_factory=vec3)
    rotation: np.ndarray = field(default_factory=vec3)
    scale: np.ndarray = field(default_factory=lambda: vec3((1.0, 1.0, 1.0)))
    image: Optional[np.ndarray] = None


def make_decorations(count: int, rng: np.random.Generator) -> List[SceneHandle]:
    """Mix of candy canes (10%), gift boxes (30%) and ornaments (60%)."""
    handles: List[SceneHandle] = []
    for _ in range(count):
        roll = rng.random()
        if roll < 0.1:
            handle = SceneHandle(Shape.CANE, CANE_RED, 1.25)
        elif roll < 0.4:
            color = GOLD if rng.random() > 0.5 else GREEN
            handle = SceneHandle(Shape.GIFT, color, 0.5)
            handle.scale[:] = 0.8 + rng.random() * 0.5
        else:
            color = RED if rng.random() > 0.5 else GOLD
            handle = SceneHandle(Shape.ORNAMENT, color, 0.6)
        handles.append(handle)
    return handles


def make_photo(image: np.ndarray) -> SceneHandle:
    """A square gold frame showing ``image``."""
    return SceneHandle(Shape.PHOTO, GOLD, 1.1, image=image)


class SceneRenderer:
    """
    Perspective camera looking down -Z from ``camera``.

    Parameters
    ----------
    width, height : int
        Canvas size in pixels.
    fov : float
        Vertical field of view in degrees.
    dust_count : int
        Background dust points; they spin on their own, outside the
        rotated composition.
    """

    def __init__(
        self,
        width: int = 1280,
        height: int = 720,
        fov: float = 75.0,
        camera: Sequence[float] = CAMERA_POSITION,
        dust_count: int = 2500,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        rng = rng if rng is not None else np.random.default_rng()
        self.width  = width
        self.height = height
        self._camera = np.array(camera, dtype=float)
        self._focal  = (height / 2) / math.tan(math.radians(fov) / 2)
        self._dust   = (rng.random((dust_count, 3)) - 0.5) * DUST_EXTENT

    # ------------------------------------------------------------------
    def project(self, points: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """
        World points (N, 3) → pixel coordinates (N, 2) and depth (N,).
        Points behind the near plane get depth <= NEAR_PLANE; callers skip them.
        """
        rel = np.atleast_2d(points) - self._camera
        depth = -rel[:, 2]
        safe = np.where(depth > NEAR_PLANE, depth, np.inf)
        xs = self.width / 2 + self._focal * rel[:, 0] / safe
        ys = self.height / 2 - self._focal * rel[:, 1] / safe
        return np.stack([xs, ys], axis=-1), depth

    def render(
        self,
        handles: Sequence[SceneHandle],
        group_rotation: Sequence[float],
        elapsed: float,
    ) -> np.ndarray:
        canvas = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        self._draw_dust(canvas, elapsed)

        if not handles:
            return canvas

        local = np.array([h.position for h in handles])
        world = local @ euler_matrix(group_rotation).T
        pixels, depth = self.project(world)

        for i in np.argsort(-depth):            # far to near
            if depth[i] <= NEAR_PLANE:
                continue
            handle = handles[i]
            radius = self._focal * handle.size * float(np.mean(handle.scale)) / depth[i]
            self._draw(canvas, handle, pixels[i], radius)
        return canvas

    # ------------------------------------------------------------------
    def _draw_dust(self, canvas: np.ndarray, elapsed: float) -> None:
        if not len(self._dust):
            return
        points = self._dust @ euler_matrix((0.0, elapsed * DUST_SPIN, 0.0)).T
        pixels, depth = self.project(points)
        xs = pixels[:, 0].astype(int)
        ys = pixels[:, 1].astype(int)
        visible = (depth > NEAR_PLANE) & (xs >= 0) & (xs < self.width) & (ys >= 0) & (ys < self.height)
        canvas[ys[visible], xs[visible]] = (150, 150, 150)

    def _draw(self, canvas: np.ndarray, handle: SceneHandle, center: np.ndarray, radius: float) -> None:
        cx, cy = int(center[0]), int(center[1])
        r = max(1, int(radius))
        if cx + r < 0 or cy + r < 0 or cx - r >= self.width or cy - r >= self.height:
            return

        if handle.shape is Shape.ORNAMENT:
            cv2.circle(canvas, (cx, cy), r, handle.color, -1, cv2.LINE_AA)
            cv2.circle(canvas, (cx - r // 3, cy - r // 3), max(1, r // 4), CREAM, -1, cv2.LINE_AA)

        elif handle.shape is Shape.GIFT:
            angle = math.degrees(handle.rotation[1] + handle.rotation[2])
            box = cv2.boxPoints(((cx, cy), (2 * r, 2 * r), angle)).astype(np.int32)
            cv2.fillConvexPoly(canvas, box, handle.color, cv2.LINE_AA)

        elif handle.shape is Shape.CANE:
            self._draw_cane(canvas, handle, (cx, cy), r)

        else:
            self._draw_photo(canvas, handle, (cx, cy), r)

    def _draw_cane(self, canvas: np.ndarray, handle: SceneHandle, center: Tuple[int, int], r: int) -> None:
        a = handle.rotation[0]
        dx, dy = math.sin(a) * r, -math.cos(a) * r
        thickness = max(1, r // 6)
        segments = 6
        for k in range(segments):
            t0 = -1 + 2 * k / segments
            t1 = -1 + 2 * (k + 1) / segments
            p0 = (int(center[0] + dx * t0), int(center[1] + dy * t0))
            p1 = (int(center[0] + dx * t1), int(center[1] + dy * t1))
            color = WHITE if k % 2 == 0 else handle.color
            cv2.line(canvas, p0, p1, color, thickness, cv2.LINE_AA)
        top = (int(center[0] + dx), int(center[1] + dy))
        cv2.ellipse(canvas, (top[0] + r // 4, top[1]), (r // 4, r // 4), 0, 180, 360,
                    WHITE, thickness, cv2.LINE_AA)

    def _draw_photo(self, canvas: np.ndarray, handle: SceneHandle, center: Tuple[int, int], r: int) -> None:
        half_w = max(1, int(r * abs(math.cos(handle.rotation[1]))))
        x0, y0 = center[0] - half_w, center[1] - r
        x1, y1 = center[0] + half_w, center[1] + r
        cv2.rectangle(canvas, (x0, y0), (x1, y1), handle.color, -1)

        if handle.image is None:
            return
        border = max(1, r // 11)
        w, h = x1 - x0 - 2 * border, y1 - y0 - 2 * border
        if w < 2 or h < 2:
            return
        _blit_scaled(canvas, handle.image, x0 + border, y0 + border, w, h)


def _blit_scaled(canvas: np.ndarray, image: np.ndarray, x: int, y: int, w: int, h: int) -> None:
    """
    Draw ``image`` stretched to the ``w`` x ``h`` box at (x, y), clipped
    to the canvas. Only the visible part of the source is resized.
    """
    ch, cw = canvas.shape[:2]
    ih, iw = image.shape[:2]
    cx0, cy0 = max(x, 0), max(y, 0)
    cx1, cy1 = min(x + w, cw), min(y + h, ch)
    if cx0 >= cx1 or cy0 >= cy1:
        return

    sx0 = min(iw - 1, (cx0 - x) * iw // w)
    sy0 = min(ih - 1, (cy0 - y) * ih // h)
    sx1 = max(sx0 + 1, min(iw, -(-(cx1 - x) * iw // w)))
    sy1 = max(sy0 + 1, min(ih, -(-(cy1 - y) * ih // h)))
    crop = image[sy0:sy1, sx0:sx1]
    canvas[cy0:cy1, cx0:cx1] = cv2.resize(crop, (cx1 - cx0, cy1 - cy0), interpolation=cv2.INTER_AREA)
