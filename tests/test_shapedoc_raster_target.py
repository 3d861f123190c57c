from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from PIL import Image

from shapedoc.color import Color
from shapedoc.document import Document
from shapedoc.shapes import Circle, Rectangle
from shapedoc.targets.raster_target import RasterRenderTarget


class RasterRenderTargetTests(unittest.TestCase):
    def test_canvas_shape_and_background(self) -> None:
        target = RasterRenderTarget(width=40, height=30, background=(1, 2, 3, 255))
        pixels = target.to_array()
        self.assertEqual(pixels.shape, (30, 40, 4))
        self.assertEqual(tuple(int(v) for v in pixels[0, 0]), (1, 2, 3, 255))

    def test_circle_fill_and_stroke(self) -> None:
        target = RasterRenderTarget()
        Circle().draw(target)
        pixels = target.to_array()
        self.assertEqual(tuple(int(v) for v in pixels[160, 80]), (255, 255, 0, 255))
        self.assertEqual(tuple(int(v) for v in pixels[100, 80]), (255, 0, 0, 255))
        self.assertEqual(tuple(int(v) for v in pixels[5, 5]), (255, 255, 255, 255))

    def test_rectangle_fill_and_stroke(self) -> None:
        target = RasterRenderTarget()
        Rectangle(stroke_color=Color.rgb(10, 20, 30), fill_color=Color.from_gray(200)).draw(target)
        pixels = target.to_array()
        self.assertEqual(tuple(int(v) for v in pixels[70, 160]), (200, 200, 200, 255))
        self.assertEqual(tuple(int(v) for v in pixels[10, 160]), (10, 20, 30, 255))

    def test_zero_stroke_width_paints_fill_only(self) -> None:
        target = RasterRenderTarget(width=20, height=20)
        Rectangle(origin=(0, 0), size=(20, 20), stroke_width=0, fill_color=Color.rgb(9, 9, 9)).draw(target)
        pixels = target.to_array()
        self.assertTrue((pixels[:, :, 0] == 9).all())

    def test_later_shapes_paint_over_earlier(self) -> None:
        document = Document([Circle(), Rectangle()])
        pixels = document.render_to(RasterRenderTarget()).to_array()
        # Overlap of the circle's right side with the rectangle fill.
        self.assertEqual(tuple(int(v) for v in pixels[120, 125]), (0, 255, 255, 255))

    def test_shapes_outside_canvas_are_clipped(self) -> None:
        target = RasterRenderTarget(width=10, height=10)
        Circle(center=(-100.0, -100.0), radius=5).draw(target)
        self.assertEqual(target.shapes_rendered, 1)
        self.assertTrue((target.to_array()[:, :, :3] == 255).all())

    def test_to_array_returns_copy(self) -> None:
        target = RasterRenderTarget(width=4, height=4)
        pixels = target.to_array()
        pixels[:] = 0
        self.assertEqual(int(target.to_array()[0, 0, 0]), 255)

    def test_save_png(self) -> None:
        target = RasterRenderTarget(width=32, height=16)
        Circle(center=(8, 8), radius=4).draw(target)
        with tempfile.TemporaryDirectory() as tmp:
            out = target.save_png(Path(tmp) / "scene.png")
            self.assertTrue(out.exists())
            with Image.open(out) as image:
                self.assertEqual(image.size, (32, 16))
                self.assertEqual(image.mode, "RGBA")

    def test_rejects_non_positive_canvas(self) -> None:
        with self.assertRaisesRegex(ValueError, "must be > 0"):
            RasterRenderTarget(width=5, height=0)

    def test_rejects_non_integer_canvas(self) -> None:
        with self.assertRaisesRegex(ValueError, "must be integers"):
            RasterRenderTarget(width=True, height=4)  # type: ignore[arg-type]
        with self.assertRaisesRegex(ValueError, "must be integers"):
            RasterRenderTarget(width=4, height=2.5)  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
