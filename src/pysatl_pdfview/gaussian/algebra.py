"""
Gaussian Algebra
================

Closed-form product of normal densities.

The product of densities N(μ₁, σ₁²) · N(μ₂, σ₂²) · ... is proportional to a
normal density whose precision is the sum of the factor precisions and whose
mean is the precision-weighted mean of the factor means:

    τ = Σ 1/σᵢ²
    μ = (Σ μᵢ/σᵢ²) / τ
    σ² = 1/τ
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from pysatl_pdfview.errors import InvalidParameterError
from pysatl_pdfview.gaussian.parametrizations import MeanPrecision, MeanStd

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pysatl_pdfview.types import GaussianLike

EMPTY_PRODUCT: tuple[float, float] = (0.0, 1.0)
"""``(mean, variance)`` returned for a product of no factors."""


def multiply(parents: Sequence[GaussianLike]) -> tuple[float, float]:
    """
    Parameters of the product of normal densities.

    Parameters
    ----------
    parents : Sequence[GaussianLike]
        Factors of the product. May be empty.

    Returns
    -------
    tuple[float, float]
        ``(mean, variance)`` of the resulting normal distribution.

    Notes
    -----
    - No factors give :data:`EMPTY_PRODUCT`; callers that need at least two
      factors must check the length themselves.
    - A single factor is returned unchanged as ``(mean, std_dev ** 2)``.
    """
    if not parents:
        return EMPTY_PRODUCT

    if len(parents) == 1:
        (parent,) = parents
        return parent.mean, parent.std_dev**2

    precision_sum = 0.0
    weighted_mean_sum = 0.0

    for parent in parents:
        precision = 1.0 / (parent.std_dev * parent.std_dev)
        precision_sum += precision
        weighted_mean_sum += parent.mean * precision

    return weighted_mean_sum / precision_sum, 1.0 / precision_sum


def multiply_parameters(parents: Sequence[GaussianLike]) -> MeanStd:
    """
    Product of normal densities as a validated :class:`MeanStd`.

    Parameters
    ----------
    parents : Sequence[GaussianLike]
        Factors of the product.

    Returns
    -------
    MeanStd
        Mean and standard deviation of the product.

    Raises
    ------
    InvalidParameterError
        If the product is degenerate: the precisions sum to infinity, so the
        variance is zero and the mean undefined.
    """
    mean, variance = multiply(parents)
    if not (variance > 0 and math.isfinite(variance) and math.isfinite(mean)):
        raise InvalidParameterError(
            f"Product of {len(parents)} distributions is degenerate: "
            f"mean={mean}, variance={variance}"
        )
    return MeanPrecision(mean=mean, precision=1.0 / variance).transform_to_base_parametrization()
