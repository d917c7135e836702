__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from pysatl_pdfview.config import PdfViewConfig
from pysatl_pdfview.gaussian import MeanStd
from pysatl_pdfview.sampling import PlotBounds, auto_fit_view, default_view_range
from pysatl_pdfview.types import ViewRange


class TestDefaultView:
    def test_default(self):
        assert default_view_range() == ViewRange(-6.0, 6.0)

    def test_from_config(self):
        config = PdfViewConfig(default_view=ViewRange(-1.0, 2.0))
        assert default_view_range(config) == ViewRange(-1.0, 2.0)


class TestAutoFit:
    def test_nothing_to_fit(self):
        assert auto_fit_view([]) is None

    def test_single_distribution(self):
        bounds = auto_fit_view([MeanStd(mean=1.0, std_dev=0.5)])

        assert isinstance(bounds, PlotBounds)
        assert bounds.x.view_min == pytest.approx(-1.0)
        assert bounds.x.view_max == pytest.approx(3.0)
        assert bounds.y_min == 0.0
        assert bounds.y_max == pytest.approx(1.1 / (0.5 * math.sqrt(2 * math.pi)))

    def test_spread_uses_extreme_means_and_widest_std_dev(self):
        bounds = auto_fit_view(
            [
                MeanStd(mean=-3.0, std_dev=0.2),
                MeanStd(mean=5.0, std_dev=2.0),
                MeanStd(mean=0.0, std_dev=1.0),
            ]
        )
        assert bounds is not None
        assert bounds.x == ViewRange(-11.0, 13.0)

    def test_every_mean_is_visible(self):
        distributions = [MeanStd(mean=m, std_dev=0.1) for m in (-7.5, 0.0, 12.0)]
        bounds = auto_fit_view(distributions)
        assert bounds is not None
        assert all(d.mean in bounds.x for d in distributions)

    def test_margins_from_config(self):
        config = PdfViewConfig(auto_fit_margin_sigmas=1.0, auto_fit_headroom=2.0)
        bounds = auto_fit_view([MeanStd(mean=0.0, std_dev=1.0)], config)
        assert bounds is not None
        assert bounds.x == ViewRange(-1.0, 1.0)
        assert bounds.y_max == pytest.approx(2.0 / math.sqrt(2 * math.pi))

    def test_accepts_generator(self):
        bounds = auto_fit_view(MeanStd(mean=float(m), std_dev=1.0) for m in range(3))
        assert bounds is not None
        assert bounds.x == ViewRange(-4.0, 6.0)
