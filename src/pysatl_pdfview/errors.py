"""
Error kinds raised by the distribution store, propagator and session codec.

Every error also derives from the builtin exception a caller would naturally
catch (``ValueError``, ``KeyError``, ``RuntimeError``).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pysatl_pdfview.types import DistributionId


class PdfViewError(Exception):
    """Base class for all errors raised by this package."""


class InsufficientParentsError(PdfViewError, ValueError):
    """
    Raised when a product is requested with fewer than two resolvable parents.

    Parameters
    ----------
    resolved : Sequence[DistributionId]
        Parent ids that were found in the store.
    """

    def __init__(self, resolved: Sequence[DistributionId]) -> None:
        self.resolved = tuple(resolved)
        super().__init__(
            f"A product needs at least two existing parents, got {len(self.resolved)}"
        )


class UnknownIdError(PdfViewError, KeyError):
    """
    Raised when an operation references an id that is not in the store.

    Parameters
    ----------
    distribution_id : DistributionId
        The missing id.
    """

    def __init__(self, distribution_id: DistributionId) -> None:
        self.distribution_id = distribution_id
        super().__init__(distribution_id)

    def __str__(self) -> str:
        return f"No distribution with id {self.distribution_id} in store"


class InvalidParameterError(PdfViewError, ValueError):
    """Raised when a parameter value violates its constraint (e.g. ``std_dev <= 0``)."""


class ProductParametersError(InvalidParameterError):
    """Raised on an attempt to set the parameters of a product distribution directly."""


class DecodeError(PdfViewError, ValueError):
    """Raised when session text cannot be parsed into a store and display settings."""


class DependencyCycleError(PdfViewError, RuntimeError):
    """
    Raised when product records reference each other in a cycle.

    Parameters
    ----------
    members : Sequence[DistributionId]
        Ids of the products that could not be ordered.
    """

    def __init__(self, members: Sequence[DistributionId]) -> None:
        self.members = tuple(sorted(members))
        super().__init__(f"Product dependencies form a cycle among ids {list(self.members)}")


__all__ = [
    "PdfViewError",
    "InsufficientParentsError",
    "UnknownIdError",
    "InvalidParameterError",
    "ProductParametersError",
    "DecodeError",
    "DependencyCycleError",
]
