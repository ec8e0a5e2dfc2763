# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Tests for tints/shades, harmonies, mixing and blend modes."""

import logging

import pytest

from tinct.schema import BlendMode, MixSpace
from tinct.derive import (
    HARMONY_OFFSETS,
    blend_colors,
    generate_harmonies,
    generate_scale,
    generate_shades,
    generate_tints,
    interpolate_hue,
    mix_colors,
    mix_lab,
    mix_oklch,
    mix_rgb,
)
from tinct.spaces import hex_to_rgb, rgb_to_hsl, rgb_to_oklch


def lightness(hex_color: str) -> int:
    return rgb_to_hsl(*hex_to_rgb(hex_color).as_tuple()).l


class TestTintsShades:
    def test_tints_from_black(self):
        tints = generate_tints("#000000")
        assert len(tints) == 10
        assert tints[0] == "#171717"
        assert "#ffffff" not in tints

    def test_shades_from_white(self):
        shades = generate_shades("#ffffff")
        assert len(shades) == 10
        assert shades[0] == "#e8e8e8"
        assert "#000000" not in shades

    def test_monotonic(self):
        tints = [lightness(c) for c in generate_tints("#3b82f6", 5)]
        shades = [lightness(c) for c in generate_shades("#3b82f6", 5)]
        assert tints == sorted(tints)
        assert shades == sorted(shades, reverse=True)

    def test_count(self):
        assert len(generate_tints("#3b82f6", 3)) == 3
        assert generate_shades("#3b82f6", 0) == []

    def test_invalid(self):
        assert generate_tints("oops") == []
        assert generate_shades("oops") == []


class TestHarmonies:
    def test_complementary_of_red_is_cyan(self):
        assert generate_harmonies("#ff0000")["complementary"] == ["#ff0000", "#00ffff"]

    def test_triadic_of_red(self):
        assert generate_harmonies("#ff0000")["triadic"] == ["#ff0000", "#00ff00", "#0000ff"]

    def test_analogous_keeps_base_in_middle(self):
        analogous = generate_harmonies("#ff0000")["analogous"]
        assert analogous == ["#ff0080", "#ff0000", "#ff8000"]

    def test_keys(self):
        assert set(generate_harmonies("#3b82f6")) == set(HARMONY_OFFSETS) | {"monochromatic"}

    def test_sizes(self):
        h = generate_harmonies("#3b82f6")
        assert len(h["split"]) == 3
        assert len(h["tetradic"]) == 4
        assert len(h["double_split"]) == 4
        assert len(h["monochromatic"]) == 5

    def test_monochromatic_keeps_hue(self):
        mono = generate_harmonies("#3b82f6")["monochromatic"]
        assert mono[2] == "#3b82f6"
        ls = [lightness(c) for c in mono]
        assert ls == sorted(ls)

    def test_base_is_normalized(self):
        assert generate_harmonies("#FF0000")["complementary"][0] == "#ff0000"

    def test_offset_is_circular(self):
        assert generate_harmonies("#3b82f6", 360) == generate_harmonies("#3b82f6", 0)
        assert generate_harmonies("#3b82f6", -90) == generate_harmonies("#3b82f6", 270)

    def test_offset_rotates_non_base(self):
        rotated = generate_harmonies("#ff0000", 180)["complementary"]
        assert rotated == ["#ff0000", "#ff0000"]

    def test_invalid(self):
        assert generate_harmonies("not a color") == {}


class TestInterpolateHue:
    def test_plain(self):
        assert interpolate_hue(0, 90, 0.5) == pytest.approx(45)

    def test_across_seam(self):
        assert interpolate_hue(350, 10, 0.5) == pytest.approx(0)
        assert interpolate_hue(10, 350, 0.5) == pytest.approx(0)
        assert interpolate_hue(340, 20, 0.25) == pytest.approx(350)

    def test_result_in_range(self):
        for t in (0.0, 0.3, 0.7, 1.0):
            h = interpolate_hue(300, 60, t)
            assert 0 <= h < 360


class TestMixing:
    def test_rgb_midpoint(self):
        assert mix_rgb("#000000", "#ffffff") == "#808080"

    @pytest.mark.parametrize("space", list(MixSpace))
    def test_endpoints_exact(self, space):
        assert mix_colors("#3b82f6", "#ef4444", 0.0, space) == "#3b82f6"
        assert mix_colors("#3b82f6", "#ef4444", 1.0, space) == "#ef4444"

    def test_ratio_clamped(self):
        assert mix_colors("#3b82f6", "#ef4444", 1.5) == "#ef4444"
        assert mix_colors("#3b82f6", "#ef4444", -2) == "#3b82f6"

    def test_lab_midpoint_is_neutral(self):
        rgb = hex_to_rgb(mix_lab("#000000", "#ffffff"))
        assert max(rgb.as_tuple()) - min(rgb.as_tuple()) <= 1
        assert 100 < rgb.r < 140

    def test_oklch_keeps_chroma(self):
        mid = mix_oklch("#ff0000", "#0000ff")
        assert rgb_to_oklch(*hex_to_rgb(mid).as_tuple()).c > 0.1
        # RGB mixing desaturates through a muddy purple
        assert mix_rgb("#ff0000", "#0000ff") == "#800080"

    def test_string_space(self):
        assert mix_colors("#000000", "#ffffff", 0.5, "rgb") == "#808080"

    def test_unknown_space_falls_back_to_rgb(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert mix_colors("#000000", "#ffffff", 0.5, "cmyk") == "#808080"
        assert "cmyk" in caplog.text

    def test_invalid_returns_first(self):
        assert mix_colors("bad", "#ffffff") == "bad"
        assert mix_colors("#000000", "bad") == "#000000"


class TestScale:
    @pytest.mark.parametrize("space", list(MixSpace))
    def test_ends(self, space):
        scale = generate_scale("#3b82f6", "#ef4444", 5, space)
        assert len(scale) == 5
        assert scale[0] == "#3b82f6"
        assert scale[-1] == "#ef4444"

    def test_rgb_values(self):
        assert generate_scale("#000000", "#ffffff", 3) == ["#000000", "#808080", "#ffffff"]

    def test_degenerate_steps(self):
        assert generate_scale("#000000", "#ffffff", 1) == ["#000000"]
        assert generate_scale("#000000", "#ffffff", 0) == []


class TestBlend:
    def test_normal_returns_blend(self):
        assert blend_colors("#3b82f6", "#ef4444") == "#ef4444"

    def test_multiply_by_white_is_identity(self):
        assert blend_colors("#ffffff", "#3b82f6", BlendMode.MULTIPLY) == "#3b82f6"

    def test_screen_with_black_is_identity(self):
        assert blend_colors("#000000", "#3b82f6", BlendMode.SCREEN) == "#3b82f6"

    def test_difference_of_same_is_black(self):
        assert blend_colors("#3b82f6", "#3b82f6", BlendMode.DIFFERENCE) == "#000000"

    def test_exclusion_with_white_inverts(self):
        assert blend_colors("#ffffff", "#000000", BlendMode.EXCLUSION) == "#ffffff"
        assert blend_colors("#ffffff", "#ff0000", BlendMode.EXCLUSION) == "#00ffff"

    def test_overlay_black_base(self):
        assert blend_colors("#000000", "#3b82f6", BlendMode.OVERLAY) == "#000000"

    def test_soft_light_string_mode(self):
        # Black blend squares the base channel
        assert blend_colors("#808080", "#000000", "soft-light") == "#404040"

    def test_hard_light(self):
        assert blend_colors("#ffffff", "#000000", BlendMode.HARD_LIGHT) == "#000000"
        assert blend_colors("#808080", "#ffffff", BlendMode.HARD_LIGHT) == "#ffffff"

    def test_unknown_mode_is_normal(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert blend_colors("#3b82f6", "#ef4444", "dodge") == "#ef4444"
        assert "dodge" in caplog.text

    def test_invalid_returns_base(self):
        assert blend_colors("#3b82f6", "nope", BlendMode.MULTIPLY) == "#3b82f6"
