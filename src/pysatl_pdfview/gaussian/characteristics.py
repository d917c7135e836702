"""
Characteristics of the normal distribution.

Vectorised probability density and cumulative distribution functions
evaluated for any object carrying ``mean`` and ``std_dev``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import erf

if TYPE_CHECKING:
    from pysatl_pdfview.types import GaussianLike, Number, NumericArray


def pdf(parameters: GaussianLike, x: NumericArray | Number) -> NumericArray:
    """
    Probability density function of the normal distribution.

        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

    Parameters
    ----------
    parameters : GaussianLike
        Object with fields:
            - mean: float
            - std_dev: float
    x : NumericArray or Number
        Points at which to evaluate the probability density function

    Returns
    -------
    NumericArray
        Probability density values at points x
    """
    sigma = parameters.std_dev
    mu = parameters.mean
    x = np.asarray(x, dtype=float)

    coefficient = 1.0 / (sigma * np.sqrt(2 * np.pi))
    exponent = -((x - mu) ** 2) / (2 * sigma**2)

    return cast("NumericArray", coefficient * np.exp(exponent))


def cdf(parameters: GaussianLike, x: NumericArray | Number) -> NumericArray:
    """
    Cumulative distribution function of the normal distribution.

    Parameters
    ----------
    parameters : GaussianLike
        Object with fields:
            - mean: float
            - std_dev: float
    x : NumericArray or Number
        Points at which to evaluate the cumulative distribution function

    Returns
    -------
    NumericArray
        Probabilities P(X ≤ x) for each point x
    """
    x = np.asarray(x, dtype=float)
    z = (x - parameters.mean) / (parameters.std_dev * np.sqrt(2))
    return cast("NumericArray", 0.5 * (1 + erf(z)))


def pdf_peak(std_dev: float) -> float:
    """Height of the density at its mean for a given standard deviation."""
    return float(1.0 / (std_dev * np.sqrt(2 * np.pi)))
