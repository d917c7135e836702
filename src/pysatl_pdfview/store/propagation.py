"""
Update propagation from parents to product distributions.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_pdfview.gaussian.algebra import multiply_parameters

if TYPE_CHECKING:
    from pysatl_pdfview.gaussian.parametrizations import MeanStd
    from pysatl_pdfview.store.store import DistributionStore
    from pysatl_pdfview.types import DistributionId

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PropagationReport:
    """
    Outcome of one propagation pass.

    Parameters
    ----------
    updated : tuple[DistributionId, ...]
        Products whose parameters changed.
    stale : tuple[DistributionId, ...]
        Products left at their last values because a parent is missing.
    """

    updated: tuple[DistributionId, ...] = ()
    stale: tuple[DistributionId, ...] = ()

    @property
    def changed(self) -> bool:
        return bool(self.updated)


def propagate(store: DistributionStore) -> PropagationReport:
    """
    Recompute every product distribution from its current parents.

    Products are visited in topological order, so a product of products sees
    the fresh values of its parents within the same pass. A product with any
    missing parent keeps its last computed values. Running the pass twice
    without an intervening edit changes nothing the second time.

    Parameters
    ----------
    store : DistributionStore
        Store to update in place.

    Returns
    -------
    PropagationReport
        Which products changed and which were left stale.

    Raises
    ------
    DependencyCycleError
        If products reference each other in a cycle. Nothing is written.
    InvalidParameterError
        If some product is degenerate. Nothing is written.
    """
    graph = store.graph()
    order = graph.topological_order()

    # new values of changed products, written only once the whole pass succeeds
    pending: dict[DistributionId, MeanStd] = {}
    stale: list[DistributionId] = []

    for product_id in order:
        if not graph.is_resolved(product_id):
            stale.append(product_id)
            continue

        record = store.get(product_id)
        parents = [pending[p] if p in pending else store.get(p) for p in record.parent_ids]
        params = multiply_parameters(parents)
        if (params.mean, params.std_dev) != (record.mean, record.std_dev):
            pending[product_id] = params

    for product_id, params in pending.items():
        store.assign_derived(product_id, params)

    report = PropagationReport(updated=tuple(pending), stale=tuple(stale))
    logger.debug(
        "Propagation over %d products: %d updated, %d stale",
        len(order),
        len(report.updated),
        len(report.stale),
    )
    return report
