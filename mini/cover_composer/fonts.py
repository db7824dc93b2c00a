from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import List, Tuple

from PIL import ImageFont


logger = logging.getLogger(__name__)

# Family -> (regular file, bold file)
LATIN_FAMILIES: List[Tuple[str, Tuple[str, str]]] = [
    ("Segoe UI", ("segoeui.ttf", "segoeuib.ttf")),
    ("Arial", ("arial.ttf", "arialbd.ttf")),
]

CJK_FAMILIES: List[Tuple[str, Tuple[str, str]]] = [
    ("Microsoft YaHei", ("msyh.ttc", "msyhbd.ttc")),
    ("PingFang SC", ("PingFang.ttc", "PingFang.ttc")),
    ("Noto Sans CJK SC", ("NotoSansCJK-Regular.ttc", "NotoSansCJK-Bold.ttc")),
    ("WenQuanYi Zen Hei", ("wqy-zenhei.ttc", "wqy-zenhei.ttc")),
    ("Droid Sans Fallback", ("DroidSansFallbackFull.ttf", "DroidSansFallbackFull.ttf")),
]

FALLBACK_FAMILIES: List[Tuple[str, Tuple[str, str]]] = [
    ("DejaVu Sans", ("DejaVuSans.ttf", "DejaVuSans-Bold.ttf")),
]

# CJK ideographs, punctuation and fullwidth forms
_CJK_RE = re.compile("[\u3000-\u303f\u3400-\u4dbf\u4e00-\u9fff\uff00-\uffef]")


def needs_cjk(text: str) -> bool:
    return _CJK_RE.search(text) is not None


def _families(cjk: bool) -> List[Tuple[str, Tuple[str, str]]]:
    # Pillow has no per-glyph fallback, so Chinese strings must get a CJK face up front
    if cjk:
        return CJK_FAMILIES + LATIN_FAMILIES + FALLBACK_FAMILIES
    return LATIN_FAMILIES + CJK_FAMILIES + FALLBACK_FAMILIES


@lru_cache(maxsize=None)
def load_font(size: int, bold: bool = False, cjk: bool = False) -> ImageFont.FreeTypeFont:
    """Return the first installed font at `size` px.

    With `cjk` the Chinese-capable families are tried first. Falls back to
    Pillow's scalable built-in font when no family is installed.
    """
    for family, (regular, heavy) in _families(cjk):
        try:
            font = ImageFont.truetype(heavy if bold else regular, size)
        except OSError:
            continue
        logger.debug("Using %s for %spx%s", family, size, " bold" if bold else "")
        return font
    logger.debug("No preferred family installed, using built-in font for %spx", size)
    return ImageFont.load_default(size)


def font_for(text: str, size: int, bold: bool = False) -> ImageFont.FreeTypeFont:
    """Pick a face able to render `text`."""
    return load_font(size, bold, needs_cjk(text))
