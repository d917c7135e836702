__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_pdfview import PdfViewConfig, configure, reset_configuration
from pysatl_pdfview.session import DisplaySettings
from pysatl_pdfview.types import ViewRange


class TestConfigure:
    def test_cached(self):
        assert configure() is configure()

    def test_reset_builds_new_instance(self):
        first = configure()
        reset_configuration()
        second = configure()
        assert first is not second
        assert first == second

    def test_defaults(self):
        config = configure()
        assert config.sample_count == 300
        assert config.default_view == ViewRange(-6.0, 6.0)
        assert config.mean_limits == (-10.0, 10.0)
        assert config.std_dev_limits == (0.1, 5.0)
        assert config.default_settings == DisplaySettings()


class TestPdfViewConfig:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"sample_count": 1},
            {"auto_fit_margin_sigmas": -1.0},
            {"auto_fit_headroom": 0.0},
            {"mean_limits": (1.0, -1.0)},
            {"std_dev_limits": (0.0, 5.0)},
            {"std_dev_limits": (2.0, 1.0)},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            PdfViewConfig(**kwargs)

    @pytest.mark.parametrize(
        "mean, std_dev, expected",
        [
            (0.0, 1.0, (0.0, 1.0)),
            (-50.0, 0.01, (-10.0, 0.1)),
            (50.0, 9.0, (10.0, 5.0)),
        ],
    )
    def test_clamp_leaf_parameters(self, mean, std_dev, expected):
        assert configure().clamp_leaf_parameters(mean, std_dev) == expected
