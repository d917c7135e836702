"""
Distribution records kept by :class:`~pysatl_pdfview.store.store.DistributionStore`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, replace

from pysatl_pdfview.gaussian.parametrizations import MeanStd
from pysatl_pdfview.types import DistributionId, DistributionKind


@dataclass(slots=True)
class DistributionRecord:
    """
    One normal distribution in a store.

    Parameters
    ----------
    id : DistributionId
        Handle assigned by the store.
    name : str
        Display label, not required to be unique.
    mean : float
        Mean of the distribution.
    std_dev : float
        Standard deviation, strictly positive.
    parent_ids : tuple[DistributionId, ...]
        Ordered ids of the distributions multiplied to produce this one.
        Empty for leaves and never changed after creation.
    kind : DistributionKind
        Whether the parameters are set directly or derived from parents.

    Notes
    -----
    For products ``mean`` and ``std_dev`` are derived state, rewritten by
    :func:`~pysatl_pdfview.store.propagation.propagate`.
    """

    id: DistributionId
    name: str
    mean: float
    std_dev: float
    parent_ids: tuple[DistributionId, ...] = ()
    kind: DistributionKind = DistributionKind.LEAF

    @property
    def is_product(self) -> bool:
        return self.kind is DistributionKind.PRODUCT

    @property
    def variance(self) -> float:
        return self.std_dev**2

    @property
    def precision(self) -> float:
        return 1.0 / self.variance

    @property
    def parameters(self) -> MeanStd:
        """Current parameters as a validated :class:`MeanStd`."""
        return MeanStd(mean=self.mean, std_dev=self.std_dev)

    def snapshot(self) -> DistributionRecord:
        """Detached copy of this record."""
        return replace(self)
