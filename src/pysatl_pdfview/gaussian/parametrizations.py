"""
Parametrizations of the normal distribution.

This module provides the parameter containers used throughout the package,
including constraint validation and conversion between the mean/standard
deviation and mean/precision forms.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec

from pysatl_pdfview.errors import InvalidParameterError

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values for a parametrization.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], bool]
        Validation function that returns True if constraint is satisfied.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Abstract base class for normal distribution parametrizations.

    Instances are validated on construction, so an existing parametrization
    object always satisfies its constraints.
    """

    # Set by the @parametrization decorator
    __param_name__: ClassVar[str]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    def __post_init__(self) -> None:
        self.validate()

    @property
    def name(self) -> str:
        """Get the name of this parametrization."""
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Get parameters as a dictionary."""
        fields = getattr(self, "__dataclass_fields__", {})
        return {f: getattr(self, f) for f in fields}

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        """Get constraints for this parametrization."""
        return self._constraints

    def validate(self) -> None:
        """
        Validate all constraints for this parametrization.

        Raises
        ------
        InvalidParameterError
            If any constraint is not satisfied.
        """
        for constraint in self._constraints:
            if not constraint.check(self):
                raise InvalidParameterError(
                    f'Constraint "{constraint.description}" does not hold for {self.parameters}'
                )

    @abstractmethod
    def transform_to_base_parametrization(self) -> MeanStd:
        """
        Convert this parametrization to the mean/standard deviation form.

        Returns
        -------
        MeanStd
            Equivalent parameters in the base parametrization.
        """


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.

    Returns
    -------
    Callable[[Callable[P, bool]], Callable[P, bool]]
        Decorator that marks the function as a constraint.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def parametrization(*, name: str) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Decorator to declare a class as a named parametrization.

    Parameters
    ----------
    name : str
        Name of the parametrization.

    Returns
    -------
    Callable[[type[Parametrization]], type[Parametrization]]
        Class decorator that turns the class into a frozen dataclass and
        collects its constraint methods.
    """

    def _collect_constraints(
        cls: type[Parametrization],
    ) -> list[ParametrizationConstraint]:
        """Collect constraint methods from the class."""
        constraints: list[ParametrizationConstraint] = []
        for attr_name, attr in cls.__dict__.items():
            if isinstance(attr, staticmethod | classmethod):
                if getattr(attr.__func__, "__is_constraint", False):
                    raise TypeError(f"@constraint '{attr_name}' must be an instance method")
                continue

            func = attr if callable(attr) and isfunction(attr) else None
            if not func:
                continue
            if getattr(func, "__is_constraint", False):
                desc = getattr(func, "__constraint_description", func.__name__)
                constraints.append(ParametrizationConstraint(description=desc, check=func))
        return constraints

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)
        return cls

    return decorator


@parametrization(name="meanStd")
class MeanStd(Parametrization):
    """
    Standard parametrization of the normal distribution.

    Parameters
    ----------
    mean : float
        Mean of the distribution.
    std_dev : float
        Standard deviation of the distribution.
    """

    mean: float
    std_dev: float

    @constraint(description="mean is finite")
    def check_mean_finite(self) -> bool:
        """Check that the mean is a finite number."""
        return math.isfinite(self.mean)

    @constraint(description="std_dev > 0")
    def check_std_dev_positive(self) -> bool:
        """Check that standard deviation is positive and finite."""
        return math.isfinite(self.std_dev) and self.std_dev > 0

    @constraint(description="0 < std_dev**2 < inf and 0 < 1/std_dev**2 < inf")
    def check_precision_representable(self) -> bool:
        """Check that both the variance and the precision are finite and positive."""
        variance = self.std_dev * self.std_dev
        return math.isfinite(variance) and variance > 0 and math.isfinite(1.0 / variance)

    @property
    def variance(self) -> float:
        return self.std_dev**2

    def transform_to_base_parametrization(self) -> MeanStd:
        return self


@parametrization(name="meanPrec")
class MeanPrecision(Parametrization):
    """
    Mean-precision parametrization of the normal distribution.

    Parameters
    ----------
    mean : float
        Mean of the distribution.
    precision : float
        Inverse variance.
    """

    mean: float
    precision: float

    @constraint(description="mean is finite")
    def check_mean_finite(self) -> bool:
        """Check that the mean is a finite number."""
        return math.isfinite(self.mean)

    @constraint(description="precision > 0")
    def check_precision_positive(self) -> bool:
        """Check that precision is positive and finite."""
        return math.isfinite(self.precision) and self.precision > 0

    def transform_to_base_parametrization(self) -> MeanStd:
        """
        Transform to the mean/standard deviation parametrization.

        Returns
        -------
        MeanStd
            Standard parametrization instance.
        """
        return MeanStd(mean=self.mean, std_dev=math.sqrt(1 / self.precision))
