"""Tests for colors and the fixed palette."""

from __future__ import annotations

import pytest

from cover_composer.palette import NODES, PALETTE, TAG_TINT, TAGS, Color


def test_from_hex_parses_channels():
    c = Color.from_hex("#f89820")
    assert c.rgb == (0xF8, 0x98, 0x20)
    assert c.alpha == 1.0


@pytest.mark.parametrize("value", ["#fff", "#12345g", "", "#1234567"])
def test_from_hex_rejects_malformed(value):
    with pytest.raises(ValueError):
        Color.from_hex(value)


def test_alpha_must_be_in_unit_range():
    with pytest.raises(ValueError):
        Color(0, 0, 0, 1.5)
    with pytest.raises(ValueError):
        Color.from_hex("#000000").with_alpha(-0.1)


def test_with_alpha_keeps_rgb():
    base = PALETTE["ai"]
    tinted = base.with_alpha(TAG_TINT)
    assert tinted.rgb == base.rgb
    assert base.alpha == 1.0
    # matches the 0x20 suffix of an #rrggbbaa string
    assert tinted.rgba()[3] == 0x20


def test_rgba_folds_in_opacity():
    assert PALETTE["accent"].rgba(0.4) == (0x23, 0x86, 0x36, 102)
    assert PALETTE["accent"].with_alpha(0.5).rgba(0.5) == (0x23, 0x86, 0x36, 64)


def test_palette_is_read_only():
    with pytest.raises(TypeError):
        PALETTE["bg"] = Color(1, 2, 3)


def test_fixed_tags_and_nodes():
    assert [label for label, _ in TAGS] == ["Java", "Spring Boot", "LLM", "RAG"]
    assert TAGS[0][1] == PALETTE["java"]
    assert len(NODES) == 6
