from __future__ import annotations

from dataclasses import dataclass, field, replace
import math
from typing import TYPE_CHECKING, Iterable, Protocol

from .color import Color, ColorName

if TYPE_CHECKING:
    from .targets.base import RenderTarget


Point = tuple[float, float]
Size = tuple[float, float]


class ClosedShape(Protocol):
    @property
    def area(self) -> float:
        ...

    @property
    def perimeter(self) -> float:
        ...


@dataclass(frozen=True)
class Circle:
    stroke_width: float = 5
    stroke_color: Color = field(default_factory=lambda: Color.named(ColorName.RED))
    fill_color: Color = field(default_factory=lambda: Color.named(ColorName.YELLOW))
    center: Point = (80.0, 160.0)
    radius: float = 60.0

    def __post_init__(self) -> None:
        _check_style(self, "Circle")
        object.__setattr__(self, "center", _coerce_pair(self.center, "Circle.center"))
        object.__setattr__(self, "radius", _coerce_length(self.radius, "Circle.radius"))

    def draw(self, target: RenderTarget) -> None:
        target.render_circle(self)

    @property
    def diameter(self) -> float:
        return self.radius * 2

    def with_diameter(self, diameter: float) -> "Circle":
        return replace(self, radius=diameter / 2)

    @property
    def area(self) -> float:
        return self.radius * self.radius * math.pi

    @property
    def perimeter(self) -> float:
        return 2 * self.radius * math.pi

    def shift(self, dx: float, dy: float) -> "Circle":
        x, y = self.center
        return replace(self, center=(x + dx, y + dy))


@dataclass(frozen=True)
class Rectangle:
    stroke_width: float = 5
    stroke_color: Color = field(default_factory=lambda: Color.named(ColorName.TEAL))
    fill_color: Color = field(default_factory=lambda: Color.named(ColorName.AQUA))
    origin: Point = (110.0, 10.0)
    size: Size = (100.0, 130.0)

    def __post_init__(self) -> None:
        _check_style(self, "Rectangle")
        object.__setattr__(self, "origin", _coerce_pair(self.origin, "Rectangle.origin"))
        width, height = _coerce_pair(self.size, "Rectangle.size")
        object.__setattr__(
            self,
            "size",
            (_coerce_length(width, "Rectangle.size.width"), _coerce_length(height, "Rectangle.size.height")),
        )

    def draw(self, target: RenderTarget) -> None:
        target.render_rectangle(self)

    @property
    def width(self) -> float:
        return self.size[0]

    @property
    def height(self) -> float:
        return self.size[1]

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def perimeter(self) -> float:
        return 2 * (self.width + self.height)

    def shift(self, dx: float, dy: float) -> "Rectangle":
        x, y = self.origin
        return replace(self, origin=(x + dx, y + dy))


def total_perimeter(shapes: Iterable[ClosedShape]) -> float:
    return sum((shape.perimeter for shape in shapes), 0.0)


def _check_style(shape: Circle | Rectangle, type_name: str) -> None:
    width = shape.stroke_width
    if isinstance(width, bool) or not isinstance(width, (int, float)):
        raise ValueError(f"{type_name}.stroke_width must be a number")
    if _finite_float(width, f"{type_name}.stroke_width") < 0:
        raise ValueError(f"{type_name}.stroke_width must be >= 0")
    if not isinstance(shape.stroke_color, Color):
        raise TypeError(f"{type_name}.stroke_color must be a Color")
    if not isinstance(shape.fill_color, Color):
        raise TypeError(f"{type_name}.fill_color must be a Color")


def _coerce_pair(value: tuple[float, float], label: str) -> tuple[float, float]:
    if len(value) != 2:
        raise ValueError(f"{label} must have exactly 2 values")
    return (_finite_float(value[0], label), _finite_float(value[1], label))


def _coerce_length(value: float, label: str) -> float:
    resolved = _finite_float(value, label)
    if resolved < 0:
        raise ValueError(f"{label} must be >= 0")
    return resolved


def _finite_float(value: float, label: str) -> float:
    try:
        resolved = float(value)
    except OverflowError as exc:
        raise ValueError(f"{label} must be finite") from exc
    if not math.isfinite(resolved):
        raise ValueError(f"{label} must be finite")
    return resolved
