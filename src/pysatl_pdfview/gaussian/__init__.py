"""
Gaussian module: parametrizations, characteristics and the product algebra
of normal distributions.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .algebra import EMPTY_PRODUCT, multiply, multiply_parameters
from .characteristics import cdf, pdf, pdf_peak
from .parametrizations import (
    MeanPrecision,
    MeanStd,
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)

__all__ = [
    "EMPTY_PRODUCT",
    "multiply",
    "multiply_parameters",
    "pdf",
    "cdf",
    "pdf_peak",
    "MeanStd",
    "MeanPrecision",
    "Parametrization",
    "ParametrizationConstraint",
    "constraint",
    "parametrization",
]
