from .canvas import disc_mask, new_canvas, paint_mask, rect_mask, ring_mask

__all__ = [
    "disc_mask",
    "new_canvas",
    "paint_mask",
    "rect_mask",
    "ring_mask",
]
