# -*- coding: utf-8 -*-
"""
Tint: Weaving the mathematics of colour appearance
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Shared configuration, logging and error types for the Tint modules.

For debug logging, enable with:

    import logging
    logging.getLogger("tint").setLevel(logging.DEBUG)
    logging.basicConfig(level=logging.DEBUG)
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import Callable, Final

from scipy import optimize

__all__ = [
    "logger",
    "TintError",
    "ShapeError",
    "UnsupportedConversion",
    "InvalidNotation",
    "ConvergenceWarning",
    "SolverLimits",
    "SOLVER_LIMITS",
    "newton_root",
]

# Package logger - silent by default
logger = logging.getLogger("tint")
logger.addHandler(logging.NullHandler())


class TintError(Exception):
    """Base exception for Tint errors."""

    pass


class ShapeError(TintError, ValueError):
    """Raised when an input array does not end in a dimension of size 3."""

    pass


class UnsupportedConversion(TintError, ValueError):
    """Raised for an unknown colour space or a pair without a conversion path."""

    pass


class InvalidNotation(TintError, ValueError):
    """Raised when a Munsell notation string or hue name cannot be parsed."""

    pass


class ConvergenceWarning(RuntimeWarning):
    """Issued when a Newton iteration stops at its iteration cap."""

    pass


@dataclass(slots=True, frozen=True)
class SolverLimits:
    """Stopping rules for the Newton iterations.

    Attributes:
        max_iterations: Hard cap on iterations for every solve.
        value_tolerance: Step size at which the Munsell value inversion stops.
        saturation_tolerance: Step size at which the PCCS saturation solve stops.
    """

    max_iterations: int = 50
    value_tolerance: float = 0.01
    saturation_tolerance: float = 0.001

    def __post_init__(self) -> None:
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be positive, got {self.max_iterations}")
        if self.value_tolerance <= 0.0 or self.saturation_tolerance <= 0.0:
            raise ValueError("Solver tolerances must be positive")


SOLVER_LIMITS: Final[SolverLimits] = SolverLimits()


def newton_root(
    func: Callable[[float], float],
    x0: float,
    fprime: Callable[[float], float],
    tol: float,
    limits: SolverLimits = SOLVER_LIMITS,
    label: str = "newton",
) -> float:
    """
    Newton-Raphson root with a hard iteration cap.

    Non-convergence is not fatal: a ``ConvergenceWarning`` is issued and the
    last estimate is returned.

    Args:
        func: Function whose root is sought.
        x0: Starting estimate.
        fprime: Derivative of ``func``.
        tol: Absolute step size at which the iteration stops.
        limits: Iteration cap.
        label: Name used in the warning and the debug record.

    Returns:
        The root estimate as a Python float.  This is the iterate after the
        final step, so it can differ from the estimate the stopping test was
        applied to by up to ``tol``.
    """
    root, info = optimize.newton(
        func, x0, fprime=fprime, tol=tol,
        maxiter=limits.max_iterations, full_output=True, disp=False,
    )
    if not info.converged:
        logger.debug("%s: no convergence after %d iterations (x=%r)", label, info.iterations, root)
        warnings.warn(
            f"{label} did not converge within {limits.max_iterations} iterations",
            ConvergenceWarning,
            stacklevel=3,
        )
    return float(root)
