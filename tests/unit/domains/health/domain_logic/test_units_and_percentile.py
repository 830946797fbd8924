"""Unit tests for rounding, formatting, and the percentile estimator."""

from __future__ import annotations

import pytest

from resultpages.domains.health.domain_logic.percentile import (
    erf,
    normal_cdf,
    ordinal,
    percentile,
)
from resultpages.domains.health.domain_logic.units import (
    format_signed,
    format_thousands,
    round_half_up,
    round_int,
    to_cm,
    to_kg,
    to_lb,
)


class TestRounding:
    @pytest.mark.parametrize("value,expected", [(2.5, 3), (3.5, 4), (-2.5, -2), (34.5, 35)])
    def test_round_int_half_up(self, value, expected):
        assert round_int(value) == expected

    def test_round_half_up_digits(self):
        assert round_half_up(1.25, 1) == 1.3
        assert round_half_up(24.73, 1) == 24.7


class TestFormatting:
    def test_signed(self):
        assert format_signed(1.25, 1) == "+1.3"
        assert format_signed(-3.0, 0) == "-3"
        assert format_signed(0, 1) == "0.0"

    def test_never_negative_zero(self):
        assert format_signed(-0.04, 1) == "0.0"
        assert format_signed(-0.4, 0) == "0"

    def test_thousands(self):
        assert format_thousands(2768) == "2,768"
        assert format_thousands(980) == "980"


class TestConversions:
    def test_round_trip(self):
        assert to_lb(to_kg(170)) == pytest.approx(170)
        assert to_cm(68) == pytest.approx(172.72)


class TestPercentile:
    def test_at_mean_is_fiftieth(self):
        assert percentile(27.7, 27.7, 4.6) == 50

    def test_clamped_to_1_and_99(self):
        assert percentile(1000, 0, 1) == 99
        assert percentile(-1000, 0, 1) == 1

    def test_monotonic(self):
        values = [percentile(x, 2200, 300) for x in range(1400, 3201, 200)]
        assert values == sorted(values)

    def test_one_sigma(self):
        assert percentile(1, 0, 1) == 84
        assert percentile(-1, 0, 1) == 16

    def test_non_positive_stddev_rejected(self):
        with pytest.raises(ValueError):
            percentile(1, 0, 0)

    def test_erf_is_odd_and_accurate(self):
        assert erf(-0.5) == pytest.approx(-erf(0.5))
        assert erf(1.0) == pytest.approx(0.8427007929, abs=2e-7)
        assert normal_cdf(0) == pytest.approx(0.5, abs=1e-9)


class TestOrdinal:
    @pytest.mark.parametrize(
        "n,expected",
        [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"), (12, "12th"),
         (13, "13th"), (21, "21st"), (22, "22nd"), (50, "50th"), (99, "99th")],
    )
    def test_suffixes(self, n, expected):
        assert ordinal(n) == expected
