from .base import Drawable, RenderTarget
from .raster_target import RasterRenderTarget
from .svg_target import DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH, SVGRenderTarget

__all__ = [
    "DEFAULT_CANVAS_HEIGHT",
    "DEFAULT_CANVAS_WIDTH",
    "Drawable",
    "RasterRenderTarget",
    "RenderTarget",
    "SVGRenderTarget",
]
