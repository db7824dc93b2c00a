from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Tuple


@dataclass(frozen=True)
class Color:
    """RGB color with an explicit alpha in [0, 1]."""

    r: int
    g: int
    b: int
    alpha: float = 1.0

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"Alpha out of range: {self.alpha}")

    @classmethod
    def from_hex(cls, value: str, alpha: float = 1.0) -> "Color":
        """Parse a `#rrggbb` string."""
        s = value.lstrip("#")
        if len(s) != 6:
            raise ValueError(f"Expected #rrggbb color, got {value!r}")
        try:
            r, g, b = (int(s[i:i+2], 16) for i in (0, 2, 4))
        except ValueError:
            raise ValueError(f"Invalid hex color {value!r}") from None
        return cls(r, g, b, alpha)

    def with_alpha(self, alpha: float) -> "Color":
        return Color(self.r, self.g, self.b, alpha)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def rgba(self, opacity: float = 1.0) -> Tuple[int, int, int, int]:
        """Return an 8-bit RGBA tuple with `opacity` folded into the alpha."""
        return (self.r, self.g, self.b, int(round(self.alpha * opacity * 255)))


# GitHub dark theme
PALETTE = MappingProxyType({
    "bg": Color.from_hex("#0d1117"),
    "bg_gradient": Color.from_hex("#161b22"),
    "accent": Color.from_hex("#238636"),
    "accent_light": Color.from_hex("#3fb950"),
    "text": Color.from_hex("#f0f6fc"),
    "text_muted": Color.from_hex("#8b949e"),
    "border": Color.from_hex("#30363d"),
    "java": Color.from_hex("#f89820"),
    "ai": Color.from_hex("#a855f7"),
})

# 0x20 / 255, the chip background tint
TAG_TINT = 0x20 / 255

TAGS: List[Tuple[str, Color]] = [
    ("Java", PALETTE["java"]),
    ("Spring Boot", PALETTE["accent"]),
    ("LLM", PALETTE["ai"]),
    ("RAG", PALETTE["accent_light"]),
]

Point = Tuple[int, int]

NODES: List[Point] = [
    (950, 180),
    (1050, 150),
    (1100, 250),
    (1000, 300),
    (1080, 350),
    (980, 400),
]
