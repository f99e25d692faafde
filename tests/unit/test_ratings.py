"""Unit tests for metric classification bands."""

import pytest

from purchase_analyzer.domain.calculator.ratings import (
    rate_building_age,
    rate_cap_rate,
    rate_down_payment,
    rate_gross_rent_multiplier,
    rate_loan_to_value,
    rate_price_vs_benchmark,
    rate_rent_vs_non_recoverable,
    rate_strata_per_area,
)
from purchase_analyzer.domain.models.metrics import Rating

F, N, U, C = Rating.FAVORABLE, Rating.NEUTRAL, Rating.UNFAVORABLE, Rating.CAUTION


class TestBands:
    """Band edges, including the inclusive/exclusive tie-breaks."""

    @pytest.mark.parametrize("ltv, expected", [(0, F), (80, F), (80.01, C), (95, C), (None, None)])
    def test_loan_to_value(self, ltv, expected):
        assert rate_loan_to_value(ltv) is expected

    @pytest.mark.parametrize(
        "diff, expected",
        [(-20, F), (-5, F), (-4.99, N), (0, N), (14.99, N), (15, U), (40, U), (None, None)],
    )
    def test_price_vs_benchmark(self, diff, expected):
        assert rate_price_vs_benchmark(diff) is expected

    @pytest.mark.parametrize(
        "strata, expected",
        [(0.40, F), (0.65, F), (0.66, N), (0.90, N), (0.92, U), (None, None)],
    )
    def test_strata_per_area(self, strata, expected):
        assert rate_strata_per_area(strata) is expected

    def test_strata_uses_given_benchmark(self):
        assert rate_strata_per_area(0.9, benchmark=1.0) is F

    @pytest.mark.parametrize("grm, expected", [(12, F), (19.99, F), (20, N), (30, N), (30.01, U), (None, None)])
    def test_gross_rent_multiplier(self, grm, expected):
        assert rate_gross_rent_multiplier(grm) is expected

    @pytest.mark.parametrize(
        "cap, expected",
        [(4.0, F), (3.0, F), (2.99, N), (2.1, N), (2.09, U), (0.0, U), (None, None)],
    )
    def test_cap_rate(self, cap, expected):
        assert rate_cap_rate(cap) == expected

    @pytest.mark.parametrize(
        "gap, expected",
        [(-500, F), (0, F), (0.01, N), (1000, N), (1000.01, U), (None, None)],
    )
    def test_rent_vs_non_recoverable(self, gap, expected):
        assert rate_rent_vs_non_recoverable(gap) is expected

    @pytest.mark.parametrize("age, expected", [(0, F), (10, F), (11, None), (39, None), (40, C), (None, None)])
    def test_building_age(self, age, expected):
        assert rate_building_age(age) is expected

    @pytest.mark.parametrize("down, expected", [(5, C), (19.99, C), (20, F), (100, F)])
    def test_down_payment(self, down, expected):
        assert rate_down_payment(down) is expected
