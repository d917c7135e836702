"""
Common fixtures and utilities for normal distribution tests.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math
from typing import Any

import numpy as np

from pysatl_pdfview.gaussian import MeanStd


class BaseGaussianTest:
    """Base class for tests working with normal distributions"""

    # Precision for floating point comparisons
    CALCULATION_PRECISION = 1e-10

    @staticmethod
    def normal(mean: float, std_dev: float) -> MeanStd:
        return MeanStd(mean=mean, std_dev=std_dev)

    @staticmethod
    def assert_arrays_almost_equal(
        actual: np.ndarray[Any, Any], expected: np.ndarray[Any, Any], precision: float | None = None
    ) -> None:
        """Helper method to assert arrays are almost equal."""
        if precision is None:
            precision = BaseGaussianTest.CALCULATION_PRECISION

        np.testing.assert_array_almost_equal(actual, expected, decimal=int(-math.log10(precision)))
