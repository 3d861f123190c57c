from __future__ import annotations

import numpy as np

from shapedoc.color import RGBA


def new_canvas(width: int, height: int, color: RGBA = (255, 255, 255, 255)) -> np.ndarray:
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    canvas[:, :, 0] = color[0]
    canvas[:, :, 1] = color[1]
    canvas[:, :, 2] = color[2]
    canvas[:, :, 3] = color[3]
    return canvas


def _pixel_centers(dst: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    h, w, _ = dst.shape
    ys = np.arange(h, dtype=np.float32)[:, None] + 0.5
    xs = np.arange(w, dtype=np.float32)[None, :] + 0.5
    return xs, ys


def disc_mask(dst: np.ndarray, cx: float, cy: float, radius: float) -> np.ndarray:
    xs, ys = _pixel_centers(dst)
    return (xs - cx) ** 2 + (ys - cy) ** 2 <= radius * radius


def ring_mask(dst: np.ndarray, cx: float, cy: float, inner: float, outer: float) -> np.ndarray:
    xs, ys = _pixel_centers(dst)
    d2 = (xs - cx) ** 2 + (ys - cy) ** 2
    inner = max(0.0, inner)
    return (d2 >= inner * inner) & (d2 <= outer * outer)


def rect_mask(dst: np.ndarray, x0: float, y0: float, x1: float, y1: float) -> np.ndarray:
    xs, ys = _pixel_centers(dst)
    return (xs >= x0) & (xs <= x1) & (ys >= y0) & (ys <= y1)


def paint_mask(dst: np.ndarray, mask: np.ndarray, color: RGBA) -> None:
    if not mask.any():
        return
    a = color[3] / 255.0
    inv = 1.0 - a
    region = dst[mask]
    region[:, :3] = (np.asarray(color[0:3], dtype=np.float32) * a + region[:, :3].astype(np.float32) * inv).astype(np.uint8)
    region[:, 3] = 255
    dst[mask] = region
