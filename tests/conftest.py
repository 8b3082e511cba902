# -*- coding: utf-8 -*-
# Tint: Weaving the mathematics of colour appearance
# Copyright (c) 2026 opticsWolf
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""Pytest fixtures for Tint tests."""
from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

import tint_colorspace
import tint_pccs
from tint_colorspace import LMSBasis, RGB
from tint_pccs import PCCSMethod


@pytest.fixture(autouse=True)
def restore_global_settings() -> Iterator[None]:
    """Reset the process-wide switches after every test."""
    yield
    tint_colorspace.set_strict_ieee(False)
    tint_colorspace.set_lms_basis(LMSBasis.SMITH_POKORNY)
    tint_pccs.set_conversion_method(PCCSMethod.ACCURATE)


@pytest.fixture
def rgb_samples() -> np.ndarray:
    """A spread of sRGB colours covering primaries, greys and mid tones."""
    return np.array([
        [0, 0, 0],
        [255, 255, 255],
        [255, 0, 0],
        [0, 255, 0],
        [0, 0, 255],
        [128, 128, 128],
        [200, 80, 40],
        [12, 200, 180],
        [90, 30, 160],
        [250, 240, 10],
    ], dtype=np.float64)


@pytest.fixture
def orange_xyz() -> np.ndarray:
    """XYZ (D65) of the mid-gamut orange sRGB (200, 80, 40)."""
    return RGB.to_xyz(np.array([200, 80, 40], dtype=np.float64))
