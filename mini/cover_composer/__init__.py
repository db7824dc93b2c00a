"""Cover-Composer package: procedural 1200x630 cover image rendering.

Modules:
- palette: Color value with explicit alpha, palette, tags and nodes
- fonts: prioritized font-family fallback
- canvas: RGBA surface with global opacity and drawing primitives
- composer: ordered drawing passes and JPEG output
- cli: command-line interface
"""

__all__ = [
    "palette",
    "fonts",
    "canvas",
    "composer",
]
