# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Tests for hex codes, cylindrical models and free-form parsing."""

import pytest

from tinct.schema import CMYK, HSL, RGB
from tinct.spaces import (
    cmyk_to_rgb,
    hex_shorthand,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    hsv_to_rgb,
    hwb_to_rgb,
    normalize_hex,
    parse_color,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_hwb,
    websafe,
)
from tinct.spaces.hexcodes import clamp, round_half_up, to_channel


class TestHexParsing:
    """Six-digit hex codes, with or without ``#``, any case."""

    def test_reference_blue(self):
        assert hex_to_rgb("#3b82f6") == RGB(59, 130, 246)

    def test_without_hash(self):
        assert hex_to_rgb("3b82f6") == RGB(59, 130, 246)

    def test_uppercase(self):
        assert hex_to_rgb("#3B82F6") == RGB(59, 130, 246)

    @pytest.mark.parametrize("text", ["", "#fff", "#12345g", "#1234567", "blue", "rgb(1,2,3)"])
    def test_invalid_is_none(self, text):
        assert hex_to_rgb(text) is None

    def test_normalize(self):
        assert normalize_hex("FFAA00") == "#ffaa00"
        assert normalize_hex("nope") is None


class TestHexFormatting:
    def test_lowercase_padded(self):
        assert rgb_to_hex(1, 2, 255) == "#0102ff"

    def test_clamps_out_of_range(self):
        assert rgb_to_hex(-20, 300, 128) == "#00ff80"

    def test_rounds_half_up(self):
        assert rgb_to_hex(0.5, 1.5, 2.5) == "#010203"

    def test_nan_channel_is_zero(self):
        assert rgb_to_hex(float("nan"), 0, 0) == "#000000"

    def test_roundtrip_every_gray(self):
        for v in range(256):
            code = rgb_to_hex(v, v, v)
            assert rgb_to_hex(*hex_to_rgb(code).as_tuple()) == code

    def test_roundtrip_assorted(self):
        for code in ("#000000", "#ffffff", "#3b82f6", "#ef4444", "#0a0b0c", "#fedcba"):
            assert hex_to_rgb(code).hex == code


class TestRounding:
    def test_half_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(-0.5) == 0

    def test_clamp(self):
        assert clamp(5, 0, 3) == 3
        assert clamp(-1, 0, 3) == 0
        assert clamp(float("nan"), 0, 3) == 0

    def test_to_channel(self):
        assert to_channel(254.6) == 255
        assert to_channel(1e9) == 255
        assert to_channel(-1e9) == 0


class TestHexVariants:
    def test_websafe_snaps_to_51(self):
        assert websafe("#3b82f6") == "#3399ff"

    def test_websafe_invalid_unchanged(self):
        assert websafe("oops") == "oops"

    def test_shorthand(self):
        assert hex_shorthand("#aabbcc") == "#abc"
        assert hex_shorthand("#aabbcd") is None
        assert hex_shorthand("aabbcc") == "#abc"
        assert hex_shorthand("#AabBcC") == "#abc"
        assert hex_shorthand("nope") is None


class TestHSL:
    def test_reference_blue(self):
        assert rgb_to_hsl(59, 130, 246) == HSL(217, 91, 60)

    def test_primaries(self):
        assert rgb_to_hsl(255, 0, 0) == HSL(0, 100, 50)
        assert rgb_to_hsl(0, 255, 0) == HSL(120, 100, 50)
        assert rgb_to_hsl(0, 0, 255) == HSL(240, 100, 50)

    def test_achromatic(self):
        hsl = rgb_to_hsl(128, 128, 128)
        assert hsl.h == 0
        assert hsl.s == 0

    def test_to_rgb_primaries(self):
        assert hsl_to_rgb(0, 100, 50) == RGB(255, 0, 0)
        assert hsl_to_rgb(120, 100, 50) == RGB(0, 255, 0)
        assert hsl_to_rgb(240, 100, 50) == RGB(0, 0, 255)

    def test_hue_is_circular(self):
        assert hsl_to_hex(360, 80, 40) == hsl_to_hex(0, 80, 40)
        assert hsl_to_hex(-120, 80, 40) == hsl_to_hex(240, 80, 40)

    def test_gray_ignores_hue(self):
        assert hsl_to_hex(123, 0, 50) == hsl_to_hex(0, 0, 50)

    def test_roundtrip_close(self):
        for code in ("#3b82f6", "#ef4444", "#10b981", "#f59e0b"):
            rgb = hex_to_rgb(code)
            back = hsl_to_rgb(*_hsl_tuple(rgb_to_hsl(*rgb.as_tuple())))
            for a, b in zip(back.as_tuple(), rgb.as_tuple()):
                assert abs(a - b) <= 3


def _hsl_tuple(hsl):
    return hsl.h, hsl.s, hsl.l


class TestHSV:
    def test_red(self):
        hsv = rgb_to_hsv(255, 0, 0)
        assert (hsv.h, hsv.s, hsv.v) == (0, 100, 100)

    def test_black(self):
        hsv = rgb_to_hsv(0, 0, 0)
        assert (hsv.h, hsv.s, hsv.v) == (0, 0, 0)

    def test_to_rgb(self):
        assert hsv_to_rgb(0, 100, 100) == RGB(255, 0, 0)
        assert hsv_to_rgb(180, 100, 100) == RGB(0, 255, 255)
        assert hsv_to_rgb(0, 0, 100) == RGB(255, 255, 255)


class TestHWB:
    def test_red(self):
        hwb = rgb_to_hwb(255, 0, 0)
        assert (hwb.h, hwb.w, hwb.b) == (0, 0, 0)

    def test_gray(self):
        hwb = rgb_to_hwb(128, 128, 128)
        assert hwb.w == 50
        assert hwb.b == 50

    def test_to_rgb_pure_hue(self):
        assert hwb_to_rgb(120, 0, 0) == RGB(0, 255, 0)

    def test_saturated_whiteness_blackness_is_gray(self):
        assert hwb_to_rgb(200, 60, 60) == RGB(128, 128, 128)
        assert hwb_to_rgb(0, 100, 0) == RGB(255, 255, 255)
        assert hwb_to_rgb(0, 0, 100) == RGB(0, 0, 0)


class TestCMYK:
    def test_black_has_zero_chroma(self):
        assert rgb_to_cmyk(0, 0, 0) == CMYK(0, 0, 0, 100)

    def test_white(self):
        assert rgb_to_cmyk(255, 255, 255) == CMYK(0, 0, 0, 0)

    def test_red(self):
        assert rgb_to_cmyk(255, 0, 0) == CMYK(0, 100, 100, 0)

    def test_to_rgb(self):
        assert cmyk_to_rgb(0, 100, 100, 0) == RGB(255, 0, 0)
        assert cmyk_to_rgb(0, 0, 0, 100) == RGB(0, 0, 0)


class TestParseColor:
    def test_hex(self):
        assert parse_color("#3B82F6") == "#3b82f6"
        assert parse_color("  3b82f6 ") == "#3b82f6"

    def test_rgb(self):
        assert parse_color("rgb(59, 130, 246)") == "#3b82f6"
        assert parse_color("RGB(0,0,0)") == "#000000"

    def test_rgb_clamps(self):
        assert parse_color("rgb(300, 0, 0)") == "#ff0000"

    def test_hsl(self):
        assert parse_color("hsl(0, 100%, 50%)") == "#ff0000"
        assert parse_color("hsl(120, 100, 50)") == "#00ff00"

    @pytest.mark.parametrize("text", ["", "#abc", "rgb(1, 2)", "hsl(", "red", "#3b82f"])
    def test_unrecognized(self, text):
        assert parse_color(text) is None
