from __future__ import annotations

import logging
from pathlib import Path
import tomllib
from typing import Any, Callable, Mapping

from .color import Color
from .document import Document
from .shapes import Circle, Rectangle
from .targets.base import Drawable
from .targets.svg_target import DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH

LOGGER = logging.getLogger(__name__)


class ManifestError(ValueError):
    pass


def load_document(path: str | Path) -> Document:
    """Load a scene manifest (TOML) into a Document.

    Layout: an optional `[canvas]` table with `width`/`height`, and a
    `[[shapes]]` array where each entry has `kind = "circle" | "rectangle"`.
    Omitted shape fields fall back to the shape defaults.
    """

    manifest_path = Path(path)
    if not manifest_path.exists():
        raise FileNotFoundError(f"scene manifest not found: {manifest_path}")
    with manifest_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ManifestError(f"{manifest_path}: invalid TOML: {exc}") from exc
    document = document_from_payload(raw)
    LOGGER.info("loaded %d shapes from %s", len(document), manifest_path)
    return document


def document_from_payload(payload: Mapping[str, Any]) -> Document:
    if not isinstance(payload, Mapping):
        raise ManifestError("scene must be a table")
    canvas = payload.get("canvas") or {}
    if not isinstance(canvas, Mapping):
        raise ManifestError("canvas must be a table")
    width = _positive_int(canvas.get("width", DEFAULT_CANVAS_WIDTH), "canvas.width")
    height = _positive_int(canvas.get("height", DEFAULT_CANVAS_HEIGHT), "canvas.height")

    raw_shapes = payload.get("shapes", [])
    if not isinstance(raw_shapes, list):
        raise ManifestError("shapes must be an array of tables")
    shapes = [shape_from_payload(item, f"shapes[{index}]") for index, item in enumerate(raw_shapes)]
    return Document(shapes, width=width, height=height)


def shape_from_payload(payload: Any, name: str = "shape") -> Drawable:
    if not isinstance(payload, Mapping):
        raise ManifestError(f"{name} must be a table")
    kind = payload.get("kind")
    builder = _SHAPE_BUILDERS.get(kind) if isinstance(kind, str) else None
    if builder is None:
        raise ManifestError(f"{name}.kind must be one of {sorted(_SHAPE_BUILDERS)}, got {kind!r}")
    allowed = _SHAPE_FIELDS[kind]
    unknown = sorted(set(payload) - allowed - {"kind"})
    if unknown:
        raise ManifestError(f"{name}: unknown fields {unknown}")
    try:
        return builder(payload, name)
    except ManifestError:
        raise
    except (TypeError, ValueError) as exc:
        raise ManifestError(f"{name}: {exc}") from exc


def color_from_payload(payload: Any, name: str = "color") -> Color:
    """Build a Color from `{named = ...}`, `{rgb = [r, g, b]}` or `{gray = level}`."""

    if not isinstance(payload, Mapping):
        raise ManifestError(f"{name} must be a table")
    keys = set(payload)
    if len(keys) != 1 or not keys <= {"named", "rgb", "gray"}:
        raise ManifestError(f"{name} must have exactly one of `named`, `rgb` or `gray`")
    try:
        if "named" in payload:
            return Color.named(_require_str(payload["named"], f"{name}.named"))
        if "gray" in payload:
            return Color.from_gray(_require_int(payload["gray"], f"{name}.gray"))
        channels = payload["rgb"]
        if not isinstance(channels, list) or len(channels) != 3:
            raise ManifestError(f"{name}.rgb must be an array of 3 integers")
        red, green, blue = (_require_int(value, f"{name}.rgb") for value in channels)
        return Color.rgb(red, green, blue)
    except ManifestError:
        raise
    except ValueError as exc:
        raise ManifestError(f"{name}: {exc}") from exc


def _circle_from_payload(payload: Mapping[str, Any], name: str) -> Circle:
    kwargs = _style_kwargs(payload, name)
    if "center" in payload:
        kwargs["center"] = _pair(payload["center"], f"{name}.center")
    if "radius" in payload:
        kwargs["radius"] = _number(payload["radius"], f"{name}.radius")
    return Circle(**kwargs)


def _rectangle_from_payload(payload: Mapping[str, Any], name: str) -> Rectangle:
    kwargs = _style_kwargs(payload, name)
    if "origin" in payload:
        kwargs["origin"] = _pair(payload["origin"], f"{name}.origin")
    if "size" in payload:
        kwargs["size"] = _pair(payload["size"], f"{name}.size")
    return Rectangle(**kwargs)


_SHAPE_BUILDERS: dict[str, Callable[[Mapping[str, Any], str], Drawable]] = {
    "circle": _circle_from_payload,
    "rectangle": _rectangle_from_payload,
}

_STYLE_FIELDS = {"stroke_width", "stroke", "fill"}
_SHAPE_FIELDS: dict[str, set[str]] = {
    "circle": _STYLE_FIELDS | {"center", "radius"},
    "rectangle": _STYLE_FIELDS | {"origin", "size"},
}


def _style_kwargs(payload: Mapping[str, Any], name: str) -> dict[str, Any]:
    kwargs: dict[str, Any] = {}
    if "stroke_width" in payload:
        kwargs["stroke_width"] = _number(payload["stroke_width"], f"{name}.stroke_width")
    if "stroke" in payload:
        kwargs["stroke_color"] = color_from_payload(payload["stroke"], f"{name}.stroke")
    if "fill" in payload:
        kwargs["fill_color"] = color_from_payload(payload["fill"], f"{name}.fill")
    return kwargs


def _number(value: object, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ManifestError(f"{field_name} must be a number")
    return value


def _pair(value: object, field_name: str) -> tuple[float, float]:
    if not isinstance(value, list) or len(value) != 2:
        raise ManifestError(f"{field_name} must be an array of 2 numbers")
    return (_number(value[0], field_name), _number(value[1], field_name))


def _require_int(value: object, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ManifestError(f"{field_name} must be an integer")
    return value


def _require_str(value: object, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ManifestError(f"{field_name} must be a non-empty string")
    return value


def _positive_int(value: object, field_name: str) -> int:
    resolved = _require_int(value, field_name)
    if resolved <= 0:
        raise ManifestError(f"{field_name} must be > 0")
    return resolved
