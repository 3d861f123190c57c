from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from shapedoc.shapes import Circle, Rectangle


class RenderTarget(ABC):
    """Output format side of shape rendering.

    One method per shape variant; a target missing any of them cannot be
    instantiated. Adding a shape variant means adding a method here and to
    every target.
    """

    @abstractmethod
    def render_circle(self, circle: Circle) -> None:
        raise NotImplementedError

    @abstractmethod
    def render_rectangle(self, rectangle: Rectangle) -> None:
        raise NotImplementedError


@runtime_checkable
class Drawable(Protocol):
    """Anything that can submit itself to a RenderTarget."""

    def draw(self, target: RenderTarget) -> None:
        ...
