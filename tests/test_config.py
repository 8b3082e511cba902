# -*- coding: utf-8 -*-
# Tint: Weaving the mathematics of colour appearance
# Copyright (c) 2026 opticsWolf
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""Tests for tint_config and project metadata."""
from __future__ import annotations

import logging

import pytest

import __about__
from tint_config import (
    SOLVER_LIMITS,
    ConvergenceWarning,
    InvalidNotation,
    ShapeError,
    SolverLimits,
    TintError,
    UnsupportedConversion,
    logger,
    newton_root,
)


class TestSolverLimits:
    """Tests for the SolverLimits dataclass."""

    def test_default_values(self) -> None:
        """Defaults should match the documented stopping rules."""
        assert SOLVER_LIMITS.max_iterations == 50
        assert SOLVER_LIMITS.value_tolerance == 0.01
        assert SOLVER_LIMITS.saturation_tolerance == 0.001

    def test_frozen(self) -> None:
        """Limits cannot be mutated after construction."""
        with pytest.raises(AttributeError):
            SOLVER_LIMITS.max_iterations = 5  # type: ignore[misc]

    def test_rejects_zero_iterations(self) -> None:
        """An iteration cap below one is invalid."""
        with pytest.raises(ValueError):
            SolverLimits(max_iterations=0)

    def test_rejects_negative_tolerance(self) -> None:
        """Tolerances must be positive."""
        with pytest.raises(ValueError):
            SolverLimits(value_tolerance=-1.0)


class TestErrors:
    """Tests for the error hierarchy."""

    @pytest.mark.parametrize("cls", [ShapeError, UnsupportedConversion, InvalidNotation])
    def test_subclasses(self, cls: type) -> None:
        """Every error is a TintError and a ValueError."""
        assert issubclass(cls, TintError)
        assert issubclass(cls, ValueError)

    def test_convergence_warning_is_runtime_warning(self) -> None:
        """Non-convergence is a warning, not an error."""
        assert issubclass(ConvergenceWarning, RuntimeWarning)


class TestNewtonRoot:
    """Tests for the capped Newton helper."""

    def test_square_root(self) -> None:
        """Should find sqrt(2) from a nearby start."""
        root = newton_root(lambda x: x * x - 2.0, 1.0, lambda x: 2.0 * x, tol=1e-10)
        assert root == pytest.approx(2.0 ** 0.5, abs=1e-9)

    def test_cap_warns_and_returns_estimate(self) -> None:
        """Hitting the cap should warn and still return a float."""
        with pytest.warns(ConvergenceWarning):
            root = newton_root(
                lambda x: x * x - 2.0, 100.0, lambda x: 2.0 * x,
                tol=1e-12, limits=SolverLimits(max_iterations=1),
            )
        assert isinstance(root, float)
        assert root < 100.0


class TestLoggingAndMetadata:
    """Tests for the package logger and __about__."""

    def test_logger_name(self) -> None:
        """Package logger is named 'tint'."""
        assert logger.name == "tint"

    def test_null_handler(self) -> None:
        """Logger is silent unless configured."""
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_metadata_summary(self) -> None:
        """Metadata should describe the Tint project."""
        meta = __about__.metadata_summary()
        assert meta["title"] == "Tint"
        assert meta["version"] == __about__.__version__
        assert meta["license"] == "LGPL-3.0-or-later"
