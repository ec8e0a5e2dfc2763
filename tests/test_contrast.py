# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Tests for WCAG / APCA contrast and the accessible-color search."""

import logging
import math

import pytest

from tinct.schema import ApcaLevel, Preference
from tinct.perception import (
    APCA_0_0_98G,
    APCA_THRESHOLDS,
    ApcaConstants,
    apca_contrast,
    apca_level,
    apca_pass,
    compare_foregrounds,
    min_font_size_apca,
    min_font_size_wcag,
    relative_luminance,
    suggest_accessible_color,
    suggest_accessible_variants,
    wcag_contrast_ratio,
)


class TestRelativeLuminance:
    def test_extremes(self):
        assert relative_luminance(0, 0, 0) == 0.0
        assert relative_luminance(255, 255, 255) == pytest.approx(1.0)

    def test_green_dominates(self):
        assert relative_luminance(0, 255, 0) > relative_luminance(255, 0, 0)
        assert relative_luminance(255, 0, 0) > relative_luminance(0, 0, 255)


class TestWCAG:
    def test_black_white_is_21(self):
        assert wcag_contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)

    def test_symmetric(self):
        pairs = [("#3b82f6", "#ffffff"), ("#ef4444", "#0f172a"), ("#777777", "#000000")]
        for a, b in pairs:
            assert wcag_contrast_ratio(a, b) == wcag_contrast_ratio(b, a)

    def test_identity_is_one(self):
        for c in ("#000000", "#3b82f6", "#ffffff"):
            assert wcag_contrast_ratio(c, c) == pytest.approx(1.0)

    def test_range(self):
        ratio = wcag_contrast_ratio("#3b82f6", "#f8fafc")
        assert 1.0 <= ratio <= 21.0

    def test_invalid_is_zero(self):
        assert wcag_contrast_ratio("nope", "#ffffff") == 0.0
        assert wcag_contrast_ratio("#ffffff", "") == 0.0

    def test_min_font_size(self):
        assert min_font_size_wcag(7.0) == 12
        assert min_font_size_wcag(4.5) == 18
        assert min_font_size_wcag(4.5, is_large=True) == 14
        assert min_font_size_wcag(3.2) == 24
        assert min_font_size_wcag(2.0) == 36


class TestAPCA:
    def test_dark_on_light_is_positive(self):
        assert apca_contrast("#000000", "#ffffff") == pytest.approx(108.7, abs=0.2)

    def test_light_on_dark_is_negative(self):
        assert apca_contrast("#ffffff", "#000000") == pytest.approx(-110.6, abs=0.2)

    def test_identity_is_zero(self):
        for c in ("#000000", "#808080", "#ffffff"):
            assert apca_contrast(c, c) == 0.0

    def test_low_contrast_clips_to_zero(self):
        assert apca_contrast("#fefefe", "#ffffff") == 0.0

    def test_one_decimal(self):
        lc = apca_contrast("#3b82f6", "#ffffff")
        assert lc == round(lc, 1)

    def test_invalid_is_zero(self):
        assert apca_contrast("bad", "#ffffff") == 0.0

    def test_custom_constants(self):
        boosted = ApcaConstants(scale_bow=2.28)
        base = apca_contrast("#000000", "#ffffff")
        assert apca_contrast("#000000", "#ffffff", config=boosted) == pytest.approx(base * 2, abs=0.2)

    def test_default_version(self):
        assert APCA_0_0_98G.version == "0.0.98G-4g"


class TestApcaLevels:
    @pytest.mark.parametrize("lc,level,size", [
        (108.7, "Preferred (Fluent)", 12),
        (80, "Preferred", 14),
        (-65, "Minimum (Body)", 16),
        (45, "Minimum (Large)", 24),
        (30, "Non-text Only", 42),
        (15, "Invisible (UI Only)", 0),
        (14.9, "Fail", 0),
    ])
    def test_buckets(self, lc, level, size):
        assert apca_level(lc) == ApcaLevel(level, size)

    def test_thresholds(self):
        assert dict(APCA_THRESHOLDS) == {
            "body_text": 60,
            "large_text": 45,
            "ui_text": 75,
            "decorative": 30,
        }

    def test_pass(self):
        assert apca_pass(60, "body_text")
        assert apca_pass(-75, "ui_text")
        assert not apca_pass(59.9, "body_text")

    def test_unknown_usage_fails(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert not apca_pass(100, "poster")
        assert "poster" in caplog.text

    def test_min_font_size(self):
        assert min_font_size_apca(95) == 12
        assert min_font_size_apca(-76) == 14
        assert min_font_size_apca(60) == 16
        assert min_font_size_apca(50) == 24
        assert min_font_size_apca(30) == 32
        assert math.isinf(min_font_size_apca(29.9))


class TestSuggestAccessibleColor:
    def test_passing_foreground_is_kept(self):
        assert suggest_accessible_color("#ffffff", "#000000") == "#000000"

    def test_darker_search_reaches_target(self):
        result = suggest_accessible_color("#ffffff", "#ffff00", Preference.DARKER)
        assert result != "#ffff00"
        assert wcag_contrast_ratio("#ffffff", result) >= 4.5

    def test_lighter_search_reaches_target(self):
        result = suggest_accessible_color("#000000", "#1e3a8a", "lighter")
        assert wcag_contrast_ratio("#000000", result) >= 4.5

    def test_custom_target(self):
        result = suggest_accessible_color("#ffffff", "#3b82f6", "darker", target_ratio=7.0)
        assert wcag_contrast_ratio("#ffffff", result) >= 7.0

    def test_lighter_fallback_is_white(self):
        assert suggest_accessible_color("#ffffff", "#777777", "lighter") == "#ffffff"

    def test_darker_fallback_is_black(self):
        assert suggest_accessible_color("#000000", "#222222", "darker") == "#000000"

    def test_any_fallback_picks_better_extreme(self):
        # Nothing reaches 21:1 against mid gray; black contrasts more than white
        assert suggest_accessible_color("#777777", "#808080", "any", target_ratio=21) == "#000000"

    def test_unknown_preference_searches_both_ways(self, caplog):
        with caplog.at_level(logging.WARNING):
            result = suggest_accessible_color("#ffffff", "#ffff00", "sideways")
        assert wcag_contrast_ratio("#ffffff", result) >= 4.5
        assert "sideways" in caplog.text

    def test_invalid_foreground_returned(self):
        assert suggest_accessible_color("#ffffff", "nope") == "nope"


class TestVariants:
    def test_all_pass_both_metrics(self):
        variants = suggest_accessible_variants("#ffffff", "#3b82f6")
        assert variants
        for v in variants:
            assert wcag_contrast_ratio("#ffffff", v.hex) >= 4.5
            assert abs(apca_contrast(v.hex, "#ffffff")) >= 60
            assert v.reason == "WCAG AA + APCA Body Text"

    def test_unique_and_limited(self):
        variants = suggest_accessible_variants("#ffffff", "#3b82f6", limit=2)
        assert len(variants) <= 2
        hexes = [v.hex for v in suggest_accessible_variants("#ffffff", "#3b82f6")]
        assert len(hexes) == len(set(hexes))
        assert len(hexes) <= 6

    def test_impossible_is_empty(self):
        assert suggest_accessible_variants("#777777", "#808080", min_ratio=21) == []


class TestCompareForegrounds:
    def test_first_four(self):
        fgs = ["#000000", "#ffffff", "#ef4444", "#3b82f6", "#10b981"]
        rows = compare_foregrounds("#ffffff", fgs)
        assert [r.fg for r in rows] == fgs[:4]
        assert rows[0].wcag == pytest.approx(21.0)
        assert rows[0].apca > 0
        assert rows[1].apca == 0.0

    def test_empty(self):
        assert compare_foregrounds("#ffffff", []) == ()
