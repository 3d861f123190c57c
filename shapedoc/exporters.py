from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Iterable

from .document import Document
from .targets.raster_target import RasterRenderTarget

LOGGER = logging.getLogger(__name__)

EXPORT_FORMATS: tuple[str, ...] = ("html", "svg", "png")


@dataclass(frozen=True)
class DocumentExportBundle:
    html: Path | None = None
    svg: Path | None = None
    png: Path | None = None

    def as_dict(self) -> dict[str, str]:
        out: dict[str, str] = {}
        for key in EXPORT_FORMATS:
            path = getattr(self, key)
            if path is not None:
                out[key] = str(path)
        return out


def export_document(
    document: Document,
    *,
    out_dir: str | Path,
    prefix: str = "shapedoc",
    formats: Iterable[str] = EXPORT_FORMATS,
) -> DocumentExportBundle:
    requested = tuple(dict.fromkeys(formats))
    if not requested:
        raise ValueError("at least one export format is required")
    unknown = [fmt for fmt in requested if fmt not in EXPORT_FORMATS]
    if unknown:
        raise ValueError(f"Unsupported export format(s): {', '.join(unknown)}")
    if not prefix.strip():
        raise ValueError("export prefix must be non-empty")

    root = Path(out_dir)
    root.mkdir(parents=True, exist_ok=True)

    paths: dict[str, Path] = {}
    if "html" in requested:
        paths["html"] = root / f"{prefix}.html"
        paths["html"].write_text(document.render(), encoding="utf-8")
    if "svg" in requested:
        paths["svg"] = root / f"{prefix}.svg"
        paths["svg"].write_text(document.render_svg(), encoding="utf-8")
    if "png" in requested:
        raster = document.render_to(RasterRenderTarget(document.width, document.height))
        paths["png"] = raster.save_png(root / f"{prefix}.png")

    bundle = DocumentExportBundle(**paths)
    LOGGER.info("exported %d shapes as %s to %s", len(document), ",".join(requested), root)
    return bundle
