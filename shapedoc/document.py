from __future__ import annotations

import copy
import logging
from typing import Iterable, Iterator, TypeVar

from .targets.base import Drawable, RenderTarget
from .targets.svg_target import DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH, SVGRenderTarget, check_canvas_size

LOGGER = logging.getLogger(__name__)

TargetT = TypeVar("TargetT", bound=RenderTarget)


class Document:
    """Ordered collection of drawables rendered in insertion order.

    The document owns copies of appended values, so changing a caller's
    instance after `append` does not change what gets rendered. Not
    thread-safe: callers sharing a document must serialize `append`/`render`.
    """

    def __init__(
        self,
        shapes: Iterable[Drawable] = (),
        *,
        width: int = DEFAULT_CANVAS_WIDTH,
        height: int = DEFAULT_CANVAS_HEIGHT,
    ) -> None:
        check_canvas_size(width, height, "Document")
        self.width = width
        self.height = height
        self._shapes: list[Drawable] = []
        self.extend(shapes)

    def append(self, shape: Drawable) -> None:
        if isinstance(shape, type):
            raise TypeError(f"Document holds drawable instances, got the class {shape.__name__}")
        if not isinstance(shape, Drawable):
            raise TypeError(f"Document can only hold drawables, got {type(shape).__name__}")
        self._shapes.append(copy.deepcopy(shape))

    def extend(self, shapes: Iterable[Drawable]) -> None:
        for shape in shapes:
            self.append(shape)

    @property
    def shapes(self) -> tuple[Drawable, ...]:
        return tuple(self._shapes)

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Drawable]:
        return iter(tuple(self._shapes))

    def render_to(self, target: TargetT) -> TargetT:
        for shape in self._shapes:
            shape.draw(target)
        LOGGER.debug("rendered %d shapes to %s", len(self._shapes), type(target).__name__)
        return target

    def render(self) -> str:
        return self.render_to(SVGRenderTarget(self.width, self.height)).html_output()

    def render_svg(self) -> str:
        return self.render_to(SVGRenderTarget(self.width, self.height)).svg_output()
