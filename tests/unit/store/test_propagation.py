from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from pysatl_pdfview.errors import DependencyCycleError, InvalidParameterError
from pysatl_pdfview.store import (
    DistributionRecord,
    DistributionStore,
    PropagationReport,
    propagate,
)
from pysatl_pdfview.types import DistributionId, DistributionKind


class TestPropagate:
    def setup_method(self) -> None:
        self.store = DistributionStore()
        self.a = self.store.create_leaf("a", 0.0, 1.0)
        self.b = self.store.create_leaf("b", 2.0, 1.0)
        self.p = self.store.create_product("p", [self.a, self.b])

    def test_nothing_to_do_after_creation(self) -> None:
        report = propagate(self.store)
        assert report == PropagationReport()
        assert not report.changed

    def test_leaf_edit_reaches_product(self) -> None:
        self.store.set_parameters(self.b, 4.0, 1.0)

        report = propagate(self.store)

        assert report.updated == (self.p,)
        assert self.store.get(self.p).mean == pytest.approx(2.0)
        assert self.store.get(self.p).std_dev == pytest.approx(math.sqrt(0.5))

    def test_idempotent(self) -> None:
        self.store.set_parameters(self.a, -1.0, 0.5)
        propagate(self.store)
        snapshot = [r.snapshot() for r in self.store]

        report = propagate(self.store)

        assert not report.changed
        assert [r.snapshot() for r in self.store] == snapshot

    def test_leaves_are_never_written(self) -> None:
        before = self.store.get(self.a).snapshot()
        self.store.set_parameters(self.b, 10.0, 3.0)
        propagate(self.store)
        assert self.store.get(self.a) == before

    def test_chain_of_products_updates_in_one_pass(self) -> None:
        c = self.store.create_leaf("c", 6.0, 2.0)
        pc = self.store.create_product("pc", [self.p, c])
        ppc = self.store.create_product("ppc", [pc, self.a])

        self.store.set_parameters(self.b, 3.0, 1.0)
        report = propagate(self.store)

        # p = N(1.5, 0.5); pc = p * N(6, 4)
        assert report.updated == (self.p, pc, ppc)
        pc_record = self.store.get(pc)
        precision = 2.0 + 0.25
        assert pc_record.mean == pytest.approx((1.5 * 2.0 + 6.0 * 0.25) / precision)
        assert pc_record.variance == pytest.approx(1 / precision)

        ppc_record = self.store.get(ppc)
        expected_precision = precision + 1.0
        assert ppc_record.mean == pytest.approx(pc_record.mean * precision / expected_precision)
        assert ppc_record.variance == pytest.approx(1 / expected_precision)

    def test_chain_independent_of_creation_order(self) -> None:
        # product 3 is created before product 4 but depends on it
        records = [
            DistributionRecord(DistributionId(0), "a", 0.0, 1.0),
            DistributionRecord(DistributionId(1), "b", 2.0, 1.0),
            DistributionRecord(
                DistributionId(2),
                "outer",
                0.0,
                1.0,
                parent_ids=(DistributionId(3), DistributionId(0)),
                kind=DistributionKind.PRODUCT,
            ),
            DistributionRecord(
                DistributionId(3),
                "inner",
                0.0,
                1.0,
                parent_ids=(DistributionId(0), DistributionId(1)),
                kind=DistributionKind.PRODUCT,
            ),
        ]
        store = DistributionStore.from_records(records, next_id=4)

        propagate(store)

        assert store.get(DistributionId(3)).mean == pytest.approx(1.0)
        # inner has precision 2, a has precision 1
        assert store.get(DistributionId(2)).mean == pytest.approx(2.0 / 3.0)
        assert store.get(DistributionId(2)).variance == pytest.approx(1 / 3)


class TestStaleProducts:
    def setup_method(self) -> None:
        self.store = DistributionStore()
        self.a = self.store.create_leaf("a", 0.0, 1.0)
        self.b = self.store.create_leaf("b", 2.0, 1.0)
        self.p = self.store.create_product("p", [self.a, self.b])

    def test_deleting_a_parent_freezes_the_product(self) -> None:
        frozen = self.store.get(self.p).snapshot()
        self.store.delete(self.a)

        for _ in range(3):
            self.store.set_parameters(self.b, 7.0, 0.5)
            report = propagate(self.store)
            assert report.stale == (self.p,)
            assert self.store.get(self.p) == frozen

    def test_frozen_product_still_feeds_its_dependents(self) -> None:
        c = self.store.create_leaf("c", 4.0, 1.0)
        q = self.store.create_product("q", [self.p, c])
        self.store.delete(self.a)

        self.store.set_parameters(c, 0.0, 1.0)
        report = propagate(self.store)

        assert report.stale == (self.p,)
        assert report.updated == (q,)
        # p stays N(1, 0.5)
        assert self.store.get(q).mean == pytest.approx(2.0 / 3.0)


class TestDegenerateProduct:
    def setup_method(self) -> None:
        self.store = DistributionStore()
        self.a = self.store.create_leaf("a", 0.0, 1e-154)
        self.x = self.store.create_leaf("x", 0.0, 1.0)
        self.y = self.store.create_leaf("y", 5.0, 1.0)
        self.q = self.store.create_product("q", [self.x, self.y])
        self.r = self.store.create_product("r", [self.a, self.x])

    def test_failed_pass_writes_no_product(self) -> None:
        q_before = self.store.get(self.q).snapshot()
        r_before = self.store.get(self.r).snapshot()
        self.store.set_parameters(self.x, 1.0, 1e-154)

        with pytest.raises(InvalidParameterError, match="degenerate"):
            propagate(self.store)

        assert self.store.get(self.q) == q_before
        assert self.store.get(self.r) == r_before


class TestCyclicStore:
    def test_cycle_raises_and_nothing_is_written(self) -> None:
        records = [
            DistributionRecord(DistributionId(0), "a", 0.0, 1.0),
            DistributionRecord(
                DistributionId(1),
                "x",
                5.0,
                1.0,
                parent_ids=(DistributionId(0), DistributionId(2)),
                kind=DistributionKind.PRODUCT,
            ),
            DistributionRecord(
                DistributionId(2),
                "y",
                -5.0,
                1.0,
                parent_ids=(DistributionId(0), DistributionId(1)),
                kind=DistributionKind.PRODUCT,
            ),
        ]
        store = DistributionStore.from_records(records, next_id=3)
        before = [r.snapshot() for r in store]

        with pytest.raises(DependencyCycleError):
            propagate(store)

        assert [r.snapshot() for r in store] == before
