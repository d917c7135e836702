from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import Any

import pytest

from pysatl_pdfview.errors import InvalidParameterError
from pysatl_pdfview.gaussian import (
    MeanPrecision,
    MeanStd,
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)


class TestParametrizationAPI:
    def test_constraint_is_a_simple_holder(self) -> None:
        def is_positive(obj: object) -> bool:
            return getattr(obj, "value", 0) > 0

        c = ParametrizationConstraint(description="Value must be positive", check=is_positive)
        assert c.description == "Value must be positive"
        assert c.check is is_positive

    def test_constraint_decorator_marks_function(self) -> None:
        @constraint("Value must be positive")
        def check_positive(self: Any) -> bool:
            return getattr(self, "value", 0) > 0

        assert getattr(check_positive, "__is_constraint", False) is True
        assert getattr(check_positive, "__constraint_description", None) == "Value must be positive"

    def test_parametrization_decorator_builds_validated_dataclass(self) -> None:
        @parametrization(name="positive")
        class Positive(Parametrization):
            value: float

            @constraint(description="value > 0")
            def check_value(self) -> bool:
                return self.value > 0

            def transform_to_base_parametrization(self) -> MeanStd:
                return MeanStd(mean=0.0, std_dev=self.value)

        obj = Positive(value=1.25)  # type: ignore[call-arg]
        assert obj.name == "positive"
        assert obj.parameters == {"value": 1.25}
        assert [c.description for c in obj.constraints] == ["value > 0"]
        assert hasattr(Positive, "__dataclass_fields__")

        with pytest.raises(InvalidParameterError, match="value > 0"):
            Positive(value=-1.0)  # type: ignore[call-arg]

        base = Positive(value=2.0).transform_to_base_parametrization()  # type: ignore[call-arg]
        assert base.std_dev == 2.0

    def test_base_conversion_must_be_implemented(self) -> None:
        @parametrization(name="incomplete")
        class Incomplete(Parametrization):
            value: float

        with pytest.raises(TypeError):
            Incomplete(value=1.0)  # type: ignore[call-arg]

    def test_static_constraint_is_rejected(self) -> None:
        with pytest.raises(TypeError, match="instance method"):

            @parametrization(name="broken")
            class Broken(Parametrization):
                value: float

                @staticmethod
                @constraint(description="never")
                def check() -> bool:
                    return False


class TestMeanStd:
    def test_fields_and_name(self) -> None:
        params = MeanStd(mean=2.0, std_dev=1.5)
        assert params.name == "meanStd"
        assert params.parameters == {"mean": 2.0, "std_dev": 1.5}
        assert params.variance == 2.25
        assert params.transform_to_base_parametrization() is params

    @pytest.mark.parametrize("std_dev", [0.0, -1.0, math.nan, math.inf, 1e-200, 1e-160, 1e155])
    def test_invalid_std_dev_is_rejected(self, std_dev: float) -> None:
        with pytest.raises(InvalidParameterError, match="std_dev"):
            MeanStd(mean=0.0, std_dev=std_dev)

    @pytest.mark.parametrize("std_dev", [1e-154, 1e-100, 1e100])
    def test_extreme_but_representable_std_dev(self, std_dev: float) -> None:
        params = MeanStd(mean=0.0, std_dev=std_dev)
        assert math.isfinite(1 / params.variance)

    @pytest.mark.parametrize("mean", [math.nan, math.inf, -math.inf])
    def test_non_finite_mean_is_rejected(self, mean: float) -> None:
        with pytest.raises(InvalidParameterError, match="mean is finite"):
            MeanStd(mean=mean, std_dev=1.0)

    def test_invalid_parameter_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            MeanStd(mean=0.0, std_dev=-2.0)

    def test_frozen(self) -> None:
        params = MeanStd(mean=0.0, std_dev=1.0)
        with pytest.raises(AttributeError):
            params.std_dev = -1.0  # type: ignore[misc]


class TestMeanPrecision:
    def test_conversion_to_base(self) -> None:
        base = MeanPrecision(mean=2.0, precision=0.25).transform_to_base_parametrization()
        assert isinstance(base, MeanStd)
        assert base.mean == 2.0
        assert base.std_dev == pytest.approx(2.0)

    @pytest.mark.parametrize("precision", [0.0, -0.5, math.inf])
    def test_invalid_precision_is_rejected(self, precision: float) -> None:
        with pytest.raises(InvalidParameterError, match="precision > 0"):
            MeanPrecision(mean=0.0, precision=precision)
