"""
Explorer
========

Facade between the interactive front end and the core: it owns the
distribution store, the display settings and the transient selection, and
turns user events into store mutations followed by propagation.

Inbound events
--------------
create_leaf, create_product, set_leaf_parameters, delete,
save_session, load_session, select / deselect / clear_selection,
update_settings

Outbound data
-------------
listing, curve, fill_polygon, markers, visible_markers, auto_fit

Notes
-----
* Every edit is fully propagated before the method returns, so sampling in
  the same frame never sees stale derived values.
* Edits and their propagation are applied to a copy of the store, which
  replaces the current one only when both succeed.
* The selection is never persisted and is cleared by a successful load.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, TypeVar

from pysatl_pdfview.config import configure
from pysatl_pdfview.sampling.curve import (
    marker_positions,
    sample_curve,
    sample_fill_polygon,
)
from pysatl_pdfview.sampling.view import auto_fit_view
from pysatl_pdfview.session import codec
from pysatl_pdfview.store.propagation import propagate
from pysatl_pdfview.store.store import DistributionStore

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence
    from typing import Any

    from pysatl_pdfview.config import PdfViewConfig
    from pysatl_pdfview.sampling.points import PointArray
    from pysatl_pdfview.sampling.view import PlotBounds
    from pysatl_pdfview.session.settings import DisplaySettings
    from pysatl_pdfview.store.propagation import PropagationReport
    from pysatl_pdfview.store.record import DistributionRecord
    from pysatl_pdfview.types import DistributionId, ViewRange

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Selection:
    """Ordered set of distribution ids picked for multiplication."""

    def __init__(self) -> None:
        self._ids: list[DistributionId] = []

    def __contains__(self, distribution_id: object) -> bool:
        return distribution_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[DistributionId]:
        return iter(tuple(self._ids))

    @property
    def ids(self) -> tuple[DistributionId, ...]:
        return tuple(self._ids)

    def add(self, distribution_id: DistributionId) -> None:
        if distribution_id not in self._ids:
            self._ids.append(distribution_id)

    def discard(self, distribution_id: DistributionId) -> None:
        if distribution_id in self._ids:
            self._ids.remove(distribution_id)

    def clear(self) -> None:
        self._ids.clear()


class Explorer:
    """
    Single entry point of the explorer core.

    Parameters
    ----------
    config : PdfViewConfig, optional
        Configuration; the cached default when omitted.

    Attributes
    ----------
    store : DistributionStore
        Every distribution of the session.
    settings : DisplaySettings
        Persisted display settings.
    selection : Selection
        Ids picked for the next product; never persisted.
    """

    def __init__(self, config: PdfViewConfig | None = None) -> None:
        self.config = config or configure()
        self.store = DistributionStore()
        self.settings: DisplaySettings = self.config.default_settings
        self.selection = Selection()

    # --------------------------------------------------------------------- #
    # Distribution events
    # --------------------------------------------------------------------- #

    def ensure_initial_distribution(self) -> DistributionId | None:
        """Add a standard normal leaf if the store is empty."""
        if len(self.store):
            return None
        return self.store.create_leaf()

    def create_leaf(
        self, name: str | None = None, mean: float = 0.0, std_dev: float = 1.0
    ) -> DistributionId:
        return self.store.create_leaf(name, mean, std_dev)

    def create_product(
        self, name: str | None = None, parent_ids: Sequence[DistributionId] | None = None
    ) -> DistributionId:
        """
        Multiply distributions into a new product.

        Parameters
        ----------
        name : str, optional
            Display label; a default is generated when omitted.
        parent_ids : Sequence[DistributionId], optional
            Factors. The current selection is used, and cleared on success,
            when omitted.

        Raises
        ------
        InsufficientParentsError
            If fewer than two factors exist.
        UnknownIdError
            If a factor id does not exist.
        """
        from_selection = parent_ids is None
        ids = self.selection.ids if parent_ids is None else tuple(parent_ids)
        product_id = self.store.create_product(name, ids)
        if from_selection:
            self.selection.clear()
        return product_id

    def set_leaf_parameters(
        self, distribution_id: DistributionId, mean: float, std_dev: float
    ) -> PropagationReport:
        """
        Edit a leaf and bring every product up to date.

        Raises
        ------
        UnknownIdError
            If the id does not exist.
        InvalidParameterError
            If the parameters are invalid, the record is a product, or the
            edit would make some product degenerate. The session is unchanged.
        """
        _, report = self._commit(
            lambda store: store.set_parameters(distribution_id, mean, std_dev)
        )
        return report

    def delete(self, distribution_id: DistributionId) -> DistributionRecord:
        """
        Delete a distribution. Products that reference it keep their last values.

        Raises
        ------
        UnknownIdError
            If the id does not exist.
        """
        record, _ = self._commit(lambda store: store.delete(distribution_id))
        self.selection.discard(distribution_id)
        return record

    def _commit(self, edit: Callable[[DistributionStore], T]) -> tuple[T, PropagationReport]:
        """Apply ``edit`` and propagate on a copy; adopt the copy only if both succeed."""
        store = self.store.copy()
        result = edit(store)
        report = propagate(store)
        self.store = store
        return result, report

    def dependents_of(self, distribution_id: DistributionId) -> list[DistributionId]:
        """Products that would freeze if ``distribution_id`` were deleted."""
        return self.store.dependents_of(distribution_id)

    # --------------------------------------------------------------------- #
    # Selection and settings
    # --------------------------------------------------------------------- #

    def select(self, distribution_id: DistributionId) -> None:
        """
        Add a distribution to the selection.

        Raises
        ------
        UnknownIdError
            If the id does not exist.
        """
        self.store.get(distribution_id)
        self.selection.add(distribution_id)

    def deselect(self, distribution_id: DistributionId) -> None:
        self.selection.discard(distribution_id)

    def clear_selection(self) -> None:
        self.selection.clear()

    def update_settings(self, **changes: Any) -> DisplaySettings:
        """Replace some display settings; invalid values leave them unchanged."""
        self.settings = self.settings.replace(**changes)
        return self.settings

    # --------------------------------------------------------------------- #
    # Sessions
    # --------------------------------------------------------------------- #

    def save_session(self) -> str:
        return codec.save(self.store, self.settings)

    def load_session(self, text: str) -> None:
        """
        Replace the session with a saved one.

        Raises
        ------
        DecodeError
            If the text cannot be decoded; the current session is kept.
        """
        store, settings = codec.load(text)
        self.store = store
        self.settings = settings
        self.selection.clear()

    # --------------------------------------------------------------------- #
    # Outbound data
    # --------------------------------------------------------------------- #

    def listing(self) -> list[DistributionRecord]:
        """Snapshots of every record, ordered by id."""
        return [record.snapshot() for record in self.store.records()]

    def curve(self, distribution_id: DistributionId, view: ViewRange | None = None) -> PointArray:
        view = view or self.config.default_view
        return sample_curve(
            self.store.get(distribution_id), view.view_min, view.view_max, self.config.sample_count
        )

    def fill_polygon(
        self, distribution_id: DistributionId, view: ViewRange | None = None
    ) -> PointArray:
        view = view or self.config.default_view
        return sample_fill_polygon(
            self.store.get(distribution_id), view.view_min, view.view_max, self.config.sample_count
        )

    def markers(self, distribution_id: DistributionId) -> tuple[float, ...]:
        return marker_positions(self.store.get(distribution_id))

    def visible_markers(
        self, distribution_id: DistributionId, view: ViewRange | None = None
    ) -> list[tuple[int, float]]:
        """Markers inside the view as ``(index, x)``; index 3 is the mean."""
        view = view or self.config.default_view
        return [(i, x) for i, x in enumerate(self.markers(distribution_id)) if x in view]

    def auto_fit(self) -> PlotBounds | None:
        """Bounds showing every distribution, or ``None`` for an empty session."""
        return auto_fit_view(self.store.records(), self.config)
