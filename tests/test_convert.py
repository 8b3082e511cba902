# -*- coding: utf-8 -*-
# Tint: Weaving the mathematics of colour appearance
# Copyright (c) 2026 opticsWolf
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""Tests for tint_convert."""
from __future__ import annotations

import itertools

import numpy as np
import pytest

from tint_config import ShapeError, UnsupportedConversion
from tint_convert import Space, conversion_path, convert


class TestSpace:
    """Tests for space name lookup."""

    @pytest.mark.parametrize("name", ["rgb", "RGB", " Lab ", "munsell"])
    def test_case_insensitive(self, name: str) -> None:
        """Names are matched case-insensitively."""
        assert Space.parse(name) is Space(name.strip().lower())

    def test_unknown(self) -> None:
        """Unknown names raise UnsupportedConversion."""
        with pytest.raises(UnsupportedConversion):
            Space.parse("hsv")


class TestConversionPath:
    """Tests for route finding."""

    def test_rgb_to_lab(self) -> None:
        """sRGB reaches Lab through linear RGB and XYZ."""
        assert conversion_path("rgb", "lab") == (Space.RGB, Space.LRGB, Space.XYZ, Space.LAB)

    def test_pccs_to_rgb(self) -> None:
        """PCCS reaches sRGB through Munsell."""
        assert conversion_path(Space.PCCS, Space.RGB) == (
            Space.PCCS, Space.MUNSELL, Space.XYZ, Space.LRGB, Space.RGB,
        )

    def test_identity(self) -> None:
        """A space routes to itself without steps."""
        assert conversion_path("xyz", "xyz") == (Space.XYZ,)

    @pytest.mark.parametrize(("src", "dst"), list(itertools.product(Space, Space)))
    def test_all_pairs_reachable(self, src: Space, dst: Space) -> None:
        """Every pair of spaces is connected."""
        path = conversion_path(src, dst)
        assert path[0] is src and path[-1] is dst

    def test_unknown_space(self) -> None:
        """Unknown names raise UnsupportedConversion."""
        with pytest.raises(UnsupportedConversion):
            conversion_path("rgb", "cmyk")


class TestConvert:
    """Tests for the dispatcher."""

    def test_rgb_to_lab(self) -> None:
        """sRGB red converts to its Lab coordinates."""
        res = convert([255, 0, 0], "rgb", "lab")
        np.testing.assert_allclose(res.value, [53.24, 80.09, 67.20], atol=0.1)
        assert res.saturated is False

    def test_default_target_is_rgb(self) -> None:
        """Without a target, sRGB is produced."""
        res = convert([0.5, 0.5, 0.5], "lrgb")
        np.testing.assert_array_equal(res.value, [187, 187, 187])

    def test_same_space(self) -> None:
        """Converting a space to itself copies the input."""
        value = np.array([0.1, 0.2, 0.3])
        res = convert(value, "xyz", "xyz")
        np.testing.assert_array_equal(res.value, value)
        assert res.value is not value
        assert res.saturated is False

    def test_clamping_is_reported(self) -> None:
        """A clamp anywhere on the route sets the flag."""
        assert convert([2.0, 2.0, 2.0], "lrgb", "rgb").saturated is True
        assert convert([50.0, 120.0, 0.0], "lab", "rgb").saturated is True

    def test_munsell_range_is_reported(self) -> None:
        """Leaving the renotation table sets the flag downstream."""
        assert convert([25.0, 9.5, 4.0], "munsell", "xyz").saturated is True

    @pytest.mark.parametrize("target", ["munsell", "pccs"])
    def test_outside_renotation_table_is_reported(self, target: str) -> None:
        """Colours outside the Munsell table are flagged, also through to PCCS."""
        assert convert([255, 0, 0], "rgb", target).saturated is True
        assert convert([200, 80, 40], "rgb", target).saturated is False

    def test_batch(self, rgb_samples: np.ndarray) -> None:
        """Batches convert with per-colour flags."""
        res = convert(rgb_samples, "rgb", "munsell")
        assert res.value.shape == rgb_samples.shape
        assert res.saturated.shape == (len(rgb_samples),)

    def test_round_trip_through_pccs(self, orange_xyz: np.ndarray) -> None:
        """XYZ survives a trip through Munsell and PCCS."""
        pccs = convert(orange_xyz, "xyz", "pccs").value
        back = convert(pccs, "pccs", "xyz")
        np.testing.assert_allclose(back.value, orange_xyz, atol=0.02)

    def test_unknown_space(self) -> None:
        """Unknown names raise UnsupportedConversion."""
        with pytest.raises(UnsupportedConversion):
            convert([0.0, 0.0, 0.0], "rgb", "hsl")

    def test_bad_shape(self) -> None:
        """Non-triples raise ShapeError."""
        with pytest.raises(ShapeError):
            convert([1.0, 2.0], "rgb", "lab")
