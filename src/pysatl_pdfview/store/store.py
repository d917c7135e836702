"""
Distribution Store
==================

Owned, keyed collection of distribution records plus a monotonically
increasing id allocator. It is the single source of truth for every
distribution of a session.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_pdfview.errors import (
    InsufficientParentsError,
    ProductParametersError,
    UnknownIdError,
)
from pysatl_pdfview.gaussian.algebra import multiply_parameters
from pysatl_pdfview.gaussian.parametrizations import MeanStd
from pysatl_pdfview.store.graph import DependencyGraph
from pysatl_pdfview.store.record import DistributionRecord
from pysatl_pdfview.types import DistributionId, DistributionKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class IdAllocator:
    """
    Issues distribution ids in increasing order and never reissues one.

    Parameters
    ----------
    next_id : int, default=0
        Value that the next call to :meth:`allocate` returns.
    """

    next_id: int = 0

    def __post_init__(self) -> None:
        if self.next_id < 0:
            raise ValueError(f"next_id must be non-negative, got {self.next_id}")

    def allocate(self) -> DistributionId:
        issued = DistributionId(self.next_id)
        self.next_id += 1
        logger.debug("Allocated distribution id %d", issued)
        return issued


class DistributionStore:
    """
    Arena of distribution records indexed by :data:`DistributionId`.

    Public API
    ----------
    create_leaf(name, mean, std_dev)
        Add a leaf with explicit parameters.
    create_product(name, parent_ids)
        Add a product of at least two existing distributions.
    delete(distribution_id)
        Remove one record. Dependents are left untouched.
    set_parameters(distribution_id, mean, std_dev)
        Edit a leaf.
    get(distribution_id)
        Look a record up.

    Notes
    -----
    * Products are never edited through :meth:`set_parameters`; their
      parameters are rewritten by the propagator through :meth:`assign_derived`.
    * Every failing call leaves the store unchanged.
    """

    def __init__(self) -> None:
        self._records: dict[DistributionId, DistributionRecord] = {}
        self._allocator = IdAllocator()

    @classmethod
    def from_records(
        cls, records: Iterable[DistributionRecord], next_id: int
    ) -> DistributionStore:
        """
        Rebuild a store from previously saved records.

        Parameters
        ----------
        records : Iterable[DistributionRecord]
            Records to adopt as they are; derived values are not recomputed.
        next_id : int
            Allocator state; must exceed every id in ``records``.

        Returns
        -------
        DistributionStore
            A new store owning the records.

        Raises
        ------
        ValueError
            If ids repeat, ``next_id`` would reissue an id, a leaf lists
            parents, or a record carries invalid parameters.
        """
        store = cls()
        for record in records:
            if record.id in store._records:
                raise ValueError(f"Duplicate distribution id {record.id}")
            if record.kind is DistributionKind.LEAF and record.parent_ids:
                raise ValueError(f"Leaf distribution {record.id} must not have parents")
            record.parameters.validate()
            store._records[record.id] = record

        if store._records and next_id <= max(store._records):
            raise ValueError(
                f"next_id {next_id} would reissue an id in use (max id {max(store._records)})"
            )
        store._allocator = IdAllocator(next_id)
        return store

    # --------------------------------------------------------------------- #
    # Lookup
    # --------------------------------------------------------------------- #

    def __contains__(self, distribution_id: object) -> bool:
        return distribution_id in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[DistributionRecord]:
        """Iterate over records in ascending id order."""
        yield from self.records()

    @property
    def next_id(self) -> int:
        """Id the next created distribution will receive."""
        return self._allocator.next_id

    def ids(self) -> list[DistributionId]:
        return sorted(self._records)

    def records(self) -> list[DistributionRecord]:
        """All records ordered by id."""
        return [self._records[i] for i in sorted(self._records)]

    def get(self, distribution_id: DistributionId) -> DistributionRecord:
        """
        Retrieve a record by id.

        Raises
        ------
        UnknownIdError
            If no record has this id.
        """
        try:
            return self._records[distribution_id]
        except KeyError:
            raise UnknownIdError(distribution_id) from None

    def dependents_of(self, distribution_id: DistributionId) -> list[DistributionId]:
        """
        Products that list ``distribution_id`` among their parents.

        Raises
        ------
        UnknownIdError
            If no record has this id.
        """
        return sorted(DependencyGraph(self._records.values()).children(distribution_id))

    def graph(self) -> DependencyGraph:
        """Dependency graph of the current records."""
        return DependencyGraph(self._records.values())

    # --------------------------------------------------------------------- #
    # Mutation
    # --------------------------------------------------------------------- #

    def create_leaf(
        self, name: str | None = None, mean: float = 0.0, std_dev: float = 1.0
    ) -> DistributionId:
        """
        Add a leaf distribution.

        Parameters
        ----------
        name : str or None
            Display label. ``None`` gives ``"Gaussian {id + 1}"``.
        mean : float, default=0.0
        std_dev : float, default=1.0
            Must be positive.

        Returns
        -------
        DistributionId
            Id of the new record.

        Raises
        ------
        InvalidParameterError
            If the parameters violate their constraints.
        """
        params = MeanStd(mean=float(mean), std_dev=float(std_dev))
        distribution_id = self._allocator.allocate()
        record = DistributionRecord(
            id=distribution_id,
            name=name if name is not None else f"Gaussian {distribution_id + 1}",
            mean=params.mean,
            std_dev=params.std_dev,
        )
        self._records[distribution_id] = record
        logger.info(
            "Created leaf %d %r ~ N(%g, %g²)", record.id, record.name, record.mean, record.std_dev
        )
        return distribution_id

    def create_product(
        self, name: str | None, parent_ids: Sequence[DistributionId]
    ) -> DistributionId:
        """
        Add a product of existing distributions.

        Parameters
        ----------
        name : str or None
            Display label. ``None`` gives ``"Product {id + 1}"``.
        parent_ids : Sequence[DistributionId]
            Factors of the product. Repeated ids count once.

        Returns
        -------
        DistributionId
            Id of the new record.

        Raises
        ------
        InsufficientParentsError
            If fewer than two distinct ids resolve to existing records.
        UnknownIdError
            If enough ids resolve but some other id does not.
        InvalidParameterError
            If the product is degenerate.
        """
        distinct = list(dict.fromkeys(parent_ids))
        resolved = [p for p in distinct if p in self._records]
        if len(resolved) < 2:
            raise InsufficientParentsError(resolved)
        for parent_id in distinct:
            if parent_id not in self._records:
                raise UnknownIdError(parent_id)

        params = multiply_parameters([self._records[p] for p in resolved])
        distribution_id = self._allocator.allocate()
        record = DistributionRecord(
            id=distribution_id,
            name=name if name is not None else f"Product {distribution_id + 1}",
            mean=params.mean,
            std_dev=params.std_dev,
            parent_ids=tuple(resolved),
            kind=DistributionKind.PRODUCT,
        )
        self._records[distribution_id] = record
        logger.info("Created product %d %r of %s", record.id, record.name, list(resolved))
        return distribution_id

    def delete(self, distribution_id: DistributionId) -> DistributionRecord:
        """
        Remove a record. Products that reference it keep their last values.

        Returns
        -------
        DistributionRecord
            The removed record.

        Raises
        ------
        UnknownIdError
            If no record has this id.
        """
        dependents = self.dependents_of(distribution_id)
        record = self._records.pop(distribution_id)
        if dependents:
            logger.warning(
                "Deleted distribution %d is a parent of %s; they keep their last values",
                distribution_id,
                dependents,
            )
        else:
            logger.info("Deleted distribution %d %r", distribution_id, record.name)
        return record

    def set_parameters(self, distribution_id: DistributionId, mean: float, std_dev: float) -> None:
        """
        Edit the parameters of a leaf distribution.

        Raises
        ------
        UnknownIdError
            If no record has this id.
        ProductParametersError
            If the record is a product.
        InvalidParameterError
            If the parameters violate their constraints.
        """
        record = self.get(distribution_id)
        if record.is_product:
            raise ProductParametersError(
                f"Distribution {distribution_id} is a product; its parameters are derived"
            )
        params = MeanStd(mean=float(mean), std_dev=float(std_dev))
        record.mean = params.mean
        record.std_dev = params.std_dev

    def assign_derived(self, distribution_id: DistributionId, params: MeanStd) -> None:
        """
        Overwrite the derived parameters of a product.

        Raises
        ------
        UnknownIdError
            If no record has this id.
        TypeError
            If the record is a leaf.
        """
        record = self.get(distribution_id)
        if not record.is_product:
            raise TypeError(f"Distribution {distribution_id} is a leaf")
        record.mean = params.mean
        record.std_dev = params.std_dev

    def copy(self) -> DistributionStore:
        """Independent deep copy of the store."""
        return DistributionStore.from_records(
            (r.snapshot() for r in self._records.values()), self.next_id
        )
