from __future__ import annotations

from shapedoc.shapes import Circle, Rectangle

from .base import RenderTarget


DEFAULT_CANVAS_WIDTH = 250
DEFAULT_CANVAS_HEIGHT = 250


def check_canvas_size(width: int, height: int, owner: str) -> None:
    for value in (width, height):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{owner} width/height must be integers, got {value!r}")
    if width <= 0 or height <= 0:
        raise ValueError(f"{owner} width/height must be > 0")


class SVGRenderTarget(RenderTarget):
    """Accumulates one SVG fragment per rendered shape."""

    def __init__(self, width: int = DEFAULT_CANVAS_WIDTH, height: int = DEFAULT_CANVAS_HEIGHT) -> None:
        check_canvas_size(width, height, "SVGRenderTarget")
        self._width = width
        self._height = height
        self._fragments: list[str] = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def fragments(self) -> tuple[str, ...]:
        return tuple(self._fragments)

    def render_circle(self, circle: Circle) -> None:
        cx, cy = circle.center
        self._fragments.append(
            f"<circle cx='{cx}' cy='{cy}' r='{circle.radius}' "
            f"stroke='{circle.stroke_color.describe()}' fill='{circle.fill_color.describe()}' "
            f"stroke-width='{circle.stroke_width}' />"
        )

    def render_rectangle(self, rectangle: Rectangle) -> None:
        x, y = rectangle.origin
        width, height = rectangle.size
        self._fragments.append(
            f"<rect x='{x}' y='{y}' width='{width}' height='{height}' "
            f"stroke='{rectangle.stroke_color.describe()}' fill='{rectangle.fill_color.describe()}' "
            f"stroke-width='{rectangle.stroke_width}' />"
        )

    def svg_output(self) -> str:
        return f"<svg width='{self._width}' height='{self._height}'>" + "".join(self._fragments) + "</svg>"

    def html_output(self) -> str:
        return f"<!DOCTYPE html><html><body>{self.svg_output()}</body></html>"
