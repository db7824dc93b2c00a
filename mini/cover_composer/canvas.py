from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, List, Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from .palette import Color


Painter = Callable[[ImageDraw.ImageDraw, Tuple[int, int, int, int]], None]


class Canvas:
    """Fixed-size RGBA raster with a 2D-canvas style global opacity.

    Each draw is recorded in `history` as `(operation, global_alpha)`.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self._image = Image.new("RGBA", (width, height), (0, 0, 0, 255))
        self._draw = ImageDraw.Draw(self._image)
        self._alpha = 1.0
        self.history: List[Tuple[str, float]] = []

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def size(self) -> Tuple[int, int]:
        return self._image.size

    @property
    def global_alpha(self) -> float:
        return self._alpha

    @global_alpha.setter
    def global_alpha(self, value: float) -> None:
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"Opacity out of range: {value}")
        self._alpha = float(value)

    @contextmanager
    def opacity(self, value: float) -> Iterator["Canvas"]:
        """Draw at `value` opacity inside the block, then restore the previous one."""
        previous = self._alpha
        self.global_alpha = value
        try:
            yield self
        finally:
            self._alpha = previous

    def _paint(self, operation: str, color: Color, painter: Painter) -> None:
        self.history.append((operation, self._alpha))
        ink = color.rgba(self._alpha)
        if ink[3] == 255:
            painter(self._draw, ink)
            return
        # ImageDraw overwrites RGBA pixels, so translucent ink goes through a layer
        layer = Image.new("RGBA", self._image.size, (0, 0, 0, 0))
        painter(ImageDraw.Draw(layer), ink)
        self._image.alpha_composite(layer)

    def fill_linear_gradient(self, start: Color, end: Color, x0: float, y0: float, x1: float, y1: float) -> None:
        """Fill the whole surface with a two-stop gradient along (x0, y0) -> (x1, y1)."""
        self.history.append(("fill_linear_gradient", self._alpha))
        w, h = self._image.size
        dx, dy = x1 - x0, y1 - y0
        length_sq = dx * dx + dy * dy
        if length_sq == 0:
            raise ValueError("Gradient axis has zero length")
        xs = np.arange(w, dtype=np.float32)[None, :]
        ys = np.arange(h, dtype=np.float32)[:, None]
        t = np.clip(((xs - x0) * dx + (ys - y0) * dy) / length_sq, 0, 1)[:, :, None]
        a = np.array(start.rgba(self._alpha), dtype=np.float32)
        b = np.array(end.rgba(self._alpha), dtype=np.float32)
        arr = np.clip(np.rint(a * (1 - t) + b * t), 0, 255).astype(np.uint8)
        self._image.alpha_composite(Image.fromarray(arr))

    def stroke_line(self, x0: float, y0: float, x1: float, y1: float, color: Color, width: int = 1) -> None:
        self._paint("stroke_line", color, lambda d, ink: d.line([(x0, y0), (x1, y1)], fill=ink, width=width))

    def stroke_circle(self, cx: float, cy: float, radius: float, color: Color, width: int = 1) -> None:
        # Pillow strokes inward; widen the box so the stroke centres on `radius`
        r = radius + width / 2
        box = [cx - r, cy - r, cx + r, cy + r]
        self._paint("stroke_circle", color, lambda d, ink: d.ellipse(box, outline=ink, width=width))

    def fill_circle(self, cx: float, cy: float, radius: float, color: Color) -> None:
        box = [cx - radius, cy - radius, cx + radius, cy + radius]
        self._paint("fill_circle", color, lambda d, ink: d.ellipse(box, fill=ink))

    def fill_rounded_rect(self, x: float, y: float, width: float, height: float, radius: float, color: Color) -> None:
        box = [x, y, x + width, y + height]
        self._paint("fill_rounded_rect", color, lambda d, ink: d.rounded_rectangle(box, radius=radius, fill=ink))

    def fill_text(self, text: str, x: float, y: float, font: ImageFont.FreeTypeFont, color: Color) -> None:
        """Left-aligned text with its alphabetic baseline at `y`."""
        self._paint("fill_text", color, lambda d, ink: d.text((x, y), text, fill=ink, font=font, anchor="ls"))

    def measure_text(self, text: str, font: ImageFont.FreeTypeFont) -> float:
        return self._draw.textlength(text, font=font)

    def to_image(self) -> Image.Image:
        return self._image.convert("RGB")

    def save_jpeg(self, path, quality: int = 95) -> None:
        self.to_image().save(path, format="JPEG", quality=quality)
