"""
Dependency Graph
================

Directed graph over distribution ids: an edge ``parent -> product`` exists for
every id listed in a product's ``parent_ids``.

Design notes
------------
* The graph is a throwaway view built from the records at call time; it holds
  no reference to the store it was built from.
* Parent ids missing from the records are kept as **dangling** references.
  They are not nodes, so they never take part in ordering.
* Only products have incoming edges. Leaves are sources.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from pysatl_pdfview.errors import DependencyCycleError, UnknownIdError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pysatl_pdfview.store.record import DistributionRecord
    from pysatl_pdfview.types import DistributionId


class DependencyGraph:
    """
    Parent/child adjacency of a collection of distribution records.

    Parameters
    ----------
    records : Iterable[DistributionRecord]
        Records to index. Their ids must be unique.
    """

    def __init__(self, records: Iterable[DistributionRecord]) -> None:
        # child -> ordered parents (existing ones only)
        self._parents: dict[DistributionId, tuple[DistributionId, ...]] = {}
        # parent -> children
        self._children: dict[DistributionId, set[DistributionId]] = {}
        # product -> parent ids that do not resolve
        self._dangling: dict[DistributionId, tuple[DistributionId, ...]] = {}
        self._products: list[DistributionId] = []

        records = list(records)
        for record in records:
            self._children.setdefault(record.id, set())

        for record in records:
            if not record.is_product:
                self._parents[record.id] = ()
                continue
            self._products.append(record.id)
            present = tuple(p for p in record.parent_ids if p in self._children)
            missing = tuple(p for p in record.parent_ids if p not in self._children)
            self._parents[record.id] = present
            if missing or not record.parent_ids:
                self._dangling[record.id] = missing
            for parent in present:
                self._children[parent].add(record.id)

    # ---------------- public convenience ----------------

    def __contains__(self, distribution_id: object) -> bool:
        return distribution_id in self._children

    @property
    def products(self) -> tuple[DistributionId, ...]:
        """Ids of product records, in insertion order."""
        return tuple(self._products)

    def parents(self, distribution_id: DistributionId) -> tuple[DistributionId, ...]:
        """
        Existing parents of a record, in ``parent_ids`` order.

        Raises
        ------
        UnknownIdError
            If the id is not a node of the graph.
        """
        self._require(distribution_id)
        return self._parents[distribution_id]

    def children(self, distribution_id: DistributionId) -> set[DistributionId]:
        """
        Products that list ``distribution_id`` among their parents.

        Raises
        ------
        UnknownIdError
            If the id is not a node of the graph.
        """
        self._require(distribution_id)
        return set(self._children[distribution_id])

    def dependents(self, distribution_id: DistributionId) -> set[DistributionId]:
        """
        Every product whose value depends on ``distribution_id``, directly or
        through other products.

        Raises
        ------
        UnknownIdError
            If the id is not a node of the graph.
        """
        self._require(distribution_id)
        return self._reachable_from(distribution_id)

    def is_resolved(self, distribution_id: DistributionId) -> bool:
        """Whether every parent of the record exists (always true for leaves)."""
        self._require(distribution_id)
        return distribution_id not in self._dangling

    @property
    def unresolved(self) -> dict[DistributionId, tuple[DistributionId, ...]]:
        """Products with missing parents, mapped to the ids that are missing."""
        return dict(self._dangling)

    # ---------------- ordering ----------------

    def topological_order(self) -> list[DistributionId]:
        """
        Products ordered so that every product comes after all of its parents.

        Returns
        -------
        list[DistributionId]
            Product ids. Ties are broken by ascending id so the order is
            deterministic.

        Raises
        ------
        DependencyCycleError
            If some products depend on each other in a cycle.
        """
        products = set(self._products)
        indegree: dict[DistributionId, int] = {
            p: sum(1 for parent in self._parents[p] if parent in products) for p in self._products
        }
        ready = sorted(p for p, deg in indegree.items() if deg == 0)
        order: list[DistributionId] = []

        while ready:
            v = ready.pop(0)
            order.append(v)
            released: list[DistributionId] = []
            for w in self._children[v]:
                indegree[w] -= self._parents[w].count(v)
                if indegree[w] == 0:
                    released.append(w)
            if released:
                ready = sorted(ready + released)

        if len(order) != len(self._products):
            raise DependencyCycleError([p for p, deg in indegree.items() if deg > 0])
        return order

    # ---------------- helpers ----------------

    def _require(self, distribution_id: DistributionId) -> None:
        if distribution_id not in self._children:
            raise UnknownIdError(distribution_id)

    def _reachable_from(self, src: DistributionId) -> set[DistributionId]:
        """Forward reachability from ``src``, excluding ``src`` itself unless on a cycle."""
        visited: set[DistributionId] = set()
        stack = list(self._children[src])
        while stack:
            v = stack.pop()
            if v in visited:
                continue
            visited.add(v)
            stack.extend(w for w in self._children[v] if w not in visited)
        return visited
