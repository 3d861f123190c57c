from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from PIL import Image

from shapedoc.color import RGBA
from shapedoc.raster.canvas import disc_mask, new_canvas, paint_mask, rect_mask, ring_mask
from shapedoc.shapes import Circle, Rectangle

from .base import RenderTarget
from .svg_target import DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH, check_canvas_size

LOGGER = logging.getLogger(__name__)


class RasterRenderTarget(RenderTarget):
    """Rasterizes shapes into an RGBA pixel canvas.

    Strokes are centered on the outline, like SVG: half the stroke width falls
    inside the fill area and half outside. Later shapes paint over earlier ones.
    """

    def __init__(
        self,
        width: int = DEFAULT_CANVAS_WIDTH,
        height: int = DEFAULT_CANVAS_HEIGHT,
        background: RGBA = (255, 255, 255, 255),
    ) -> None:
        check_canvas_size(width, height, "RasterRenderTarget")
        self._canvas = new_canvas(width, height, background)
        self._shapes_rendered = 0

    @property
    def width(self) -> int:
        return int(self._canvas.shape[1])

    @property
    def height(self) -> int:
        return int(self._canvas.shape[0])

    @property
    def shapes_rendered(self) -> int:
        return self._shapes_rendered

    def render_circle(self, circle: Circle) -> None:
        cx, cy = circle.center
        paint_mask(self._canvas, disc_mask(self._canvas, cx, cy, circle.radius), circle.fill_color.as_rgba())
        half = circle.stroke_width / 2
        if half > 0:
            ring = ring_mask(self._canvas, cx, cy, circle.radius - half, circle.radius + half)
            paint_mask(self._canvas, ring, circle.stroke_color.as_rgba())
        self._shapes_rendered += 1

    def render_rectangle(self, rectangle: Rectangle) -> None:
        x, y = rectangle.origin
        width, height = rectangle.size
        paint_mask(self._canvas, rect_mask(self._canvas, x, y, x + width, y + height), rectangle.fill_color.as_rgba())
        half = rectangle.stroke_width / 2
        if half > 0:
            outer = rect_mask(self._canvas, x - half, y - half, x + width + half, y + height + half)
            inner = rect_mask(self._canvas, x + half, y + half, x + width - half, y + height - half)
            paint_mask(self._canvas, outer & ~inner, rectangle.stroke_color.as_rgba())
        self._shapes_rendered += 1

    def to_array(self) -> np.ndarray:
        return self._canvas.copy()

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.to_array())

    def save_png(self, path: str | Path) -> Path:
        out_path = Path(path)
        self.to_image().save(out_path, format="PNG")
        LOGGER.debug("wrote %dx%d raster with %d shapes to %s", self.width, self.height, self._shapes_rendered, out_path)
        return out_path
