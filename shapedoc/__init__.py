"""Vector shape documents rendered through pluggable render targets."""

from .color import Color, ColorName
from .document import Document
from .exporters import DocumentExportBundle, export_document
from .manifest import ManifestError, color_from_payload, document_from_payload, load_document
from .shapes import Circle, ClosedShape, Rectangle, total_perimeter
from .targets import (
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    Drawable,
    RasterRenderTarget,
    RenderTarget,
    SVGRenderTarget,
)

__all__ = [
    "Circle",
    "ClosedShape",
    "Color",
    "ColorName",
    "DEFAULT_CANVAS_HEIGHT",
    "DEFAULT_CANVAS_WIDTH",
    "Document",
    "DocumentExportBundle",
    "Drawable",
    "ManifestError",
    "RasterRenderTarget",
    "Rectangle",
    "RenderTarget",
    "SVGRenderTarget",
    "color_from_payload",
    "document_from_payload",
    "export_document",
    "load_document",
    "total_perimeter",
]
