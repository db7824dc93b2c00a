from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import combinations
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from .canvas import Canvas
from .fonts import font_for
from .palette import NODES, PALETTE, TAG_TINT, TAGS, Color, Point


logger = logging.getLogger(__name__)

WIDTH, HEIGHT = 1200, 630
JPEG_QUALITY = 95
OUTPUT_NAME = "cover.jpg"

GRID_STRIDE = 40
LEFT_MARGIN = 80

TITLE = "LangChain4j"
SUBTITLE = "Java开发者拥抱AI的实战指南"
TAGLINE = "72小时踩坑实录 · 完整可运行代码"
URL = "github.com/YaBoom/langchain4j-zyt"

TAG_Y = 350
TAG_PADDING = 16
TAG_HEIGHT = 48
TAG_GAP = 16
TAG_RADIUS = 8

CONNECT_PROBABILITY = 0.5
NODE_RADIUS = 8
HALO_RADIUS = 20

Edge = Tuple[int, int]


@dataclass(frozen=True)
class Chip:
    label: str
    color: Color
    x: float
    y: float
    width: float
    height: float


@dataclass
class CoverResult:
    canvas: Canvas
    chips: List[Chip] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)


def layout_tags(
    tags: Sequence[Tuple[str, Color]],
    measure: Callable[[str], float],
    x: float = LEFT_MARGIN,
    y: float = TAG_Y,
) -> List[Chip]:
    """Place chips left to right; each advances the cursor by its text width plus 48 px."""
    chips: List[Chip] = []
    for label, color in tags:
        text_w = measure(label)
        chips.append(Chip(label, color, x, y, text_w + 2 * TAG_PADDING, TAG_HEIGHT))
        x += text_w + 2 * TAG_PADDING + TAG_GAP
    return chips


def candidate_edges(nodes: Sequence[Point]) -> List[Edge]:
    return list(combinations(range(len(nodes)), 2))


def draw_background(canvas: Canvas) -> None:
    canvas.fill_linear_gradient(PALETTE["bg"], PALETTE["bg_gradient"], 0, 0, canvas.width, canvas.height)


def draw_grid(canvas: Canvas) -> None:
    with canvas.opacity(0.3):
        for x in range(0, canvas.width, GRID_STRIDE):
            canvas.stroke_line(x, 0, x, canvas.height, PALETTE["border"], width=1)
        for y in range(0, canvas.height, GRID_STRIDE):
            canvas.stroke_line(0, y, canvas.width, y, PALETTE["border"], width=1)


def draw_rings(canvas: Canvas) -> None:
    # Fractional centres so the rings follow the surface size
    w, h = canvas.size
    with canvas.opacity(0.15):
        canvas.stroke_circle(w * 0.85, h * 0.2, 150, PALETTE["accent"], width=3)
        canvas.stroke_circle(w * 0.15, h * 0.8, 100, PALETTE["accent"], width=3)


def draw_headline(canvas: Canvas) -> None:
    canvas.fill_text(TITLE, LEFT_MARGIN, 200, font_for(TITLE, 72, bold=True), PALETTE["text"])
    canvas.fill_text(SUBTITLE, LEFT_MARGIN, 270, font_for(SUBTITLE, 36), PALETTE["text_muted"])


def draw_tags(canvas: Canvas, tags: Sequence[Tuple[str, Color]] = TAGS) -> List[Chip]:
    font = font_for("".join(label for label, _ in tags), 24, bold=True)
    chips = layout_tags(tags, lambda text: canvas.measure_text(text, font))
    for chip in chips:
        canvas.fill_rounded_rect(chip.x, chip.y, chip.width, chip.height, TAG_RADIUS, chip.color.with_alpha(TAG_TINT))
        canvas.fill_text(chip.label, chip.x + TAG_PADDING, chip.y + 33, font, chip.color)
    return chips


def draw_divider(canvas: Canvas) -> None:
    canvas.stroke_line(LEFT_MARGIN, 430, 500, 430, PALETTE["border"], width=2)


def draw_footer(canvas: Canvas) -> None:
    canvas.fill_text(TAGLINE, LEFT_MARGIN, 490, font_for(TAGLINE, 24), PALETTE["text_muted"])
    canvas.fill_text(URL, LEFT_MARGIN, 540, font_for(URL, 20), PALETTE["accent_light"])


def draw_network(canvas: Canvas, rng, nodes: Sequence[Point] = NODES) -> List[Edge]:
    """Draw a random subset of node connectors, then a dot and halo on every node.

    `rng` is anything with a numpy-style `random()` returning a float in [0, 1).
    """
    accent = PALETTE["accent"]
    edges: List[Edge] = []
    with canvas.opacity(0.4):
        for i, j in candidate_edges(nodes):
            if rng.random() > CONNECT_PROBABILITY:
                (x0, y0), (x1, y1) = nodes[i], nodes[j]
                canvas.stroke_line(x0, y0, x1, y1, accent, width=2)
                edges.append((i, j))
    for x, y in nodes:
        with canvas.opacity(0.8):
            canvas.fill_circle(x, y, NODE_RADIUS, accent)
        with canvas.opacity(0.2):
            canvas.fill_circle(x, y, HALO_RADIUS, accent)
    return edges


def compose_cover(seed: Optional[int] = None, rng=None) -> CoverResult:
    """Run every drawing pass in stacking order on a fresh 1200x630 canvas.

    `seed` feeds `np.random.default_rng`; pass `rng` instead to control the
    connector draws directly.
    """
    if rng is None:
        rng = np.random.default_rng(seed)
    canvas = Canvas(WIDTH, HEIGHT)
    logger.debug("Allocated %dx%d canvas", WIDTH, HEIGHT)

    draw_background(canvas)
    draw_grid(canvas)
    draw_rings(canvas)
    draw_headline(canvas)
    chips = draw_tags(canvas)
    logger.debug("Laid out %d tag chips ending at x=%.1f", len(chips), chips[-1].x + chips[-1].width if chips else LEFT_MARGIN)
    draw_divider(canvas)
    draw_footer(canvas)
    edges = draw_network(canvas, rng)
    logger.debug("Drew %d of %d connectors", len(edges), len(candidate_edges(NODES)))

    canvas.global_alpha = 1.0
    return CoverResult(canvas=canvas, chips=chips, edges=edges)


def render_cover(out_path: Path, seed: Optional[int] = None) -> CoverResult:
    """Compose the cover and write it to `out_path` as JPEG, overwriting any existing file."""
    out_path = Path(out_path)
    result = compose_cover(seed=seed)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    result.canvas.save_jpeg(out_path, quality=JPEG_QUALITY)
    logger.debug("Wrote %s (%dx%d, quality %d)", out_path, WIDTH, HEIGHT, JPEG_QUALITY)
    return result
