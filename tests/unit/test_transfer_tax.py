"""Unit tests for the progressive transfer tax."""

import pytest

from purchase_analyzer.domain.calculator.transfer_tax import (
    calculate_transfer_tax,
    transfer_tax_breakdown,
)


class TestCalculateTransferTax:
    """Bracket anchors and the first bracket."""

    @pytest.mark.parametrize(
        "price, expected",
        [
            (200_000, 2_000),
            (800_000, 14_000),
            (2_000_000, 38_000),
            (3_000_000, 68_000),
            (3_500_000, 93_000),
        ],
    )
    def test_anchor_values(self, price, expected):
        assert calculate_transfer_tax(price) == pytest.approx(expected)

    @pytest.mark.parametrize("price", [0, 1, 99_999.99, 150_000, 200_000])
    def test_first_bracket_is_one_percent(self, price):
        assert calculate_transfer_tax(price) == pytest.approx(price * 0.01)

    def test_negative_price_is_untaxed(self):
        assert calculate_transfer_tax(-50_000) == 0.0

    @pytest.mark.parametrize(
        "boundary, next_rate",
        [(200_000, 0.02), (2_000_000, 0.03), (3_000_000, 0.05)],
    )
    def test_continuous_at_boundaries(self, boundary, next_rate):
        """Crossing a boundary adds only the marginal rate on the next dollar."""
        below = calculate_transfer_tax(boundary)
        above = calculate_transfer_tax(boundary + 1)
        assert above - below == pytest.approx(next_rate)


class TestTransferTaxBreakdown:
    """Per-bracket contributions."""

    def test_four_brackets_always_reported(self):
        assert len(transfer_tax_breakdown(0)) == 4
        assert len(transfer_tax_breakdown(10_000_000)) == 4

    def test_unreached_brackets_are_zero(self):
        portions = transfer_tax_breakdown(800_000)
        assert [p.amount for p in portions] == pytest.approx([2_000, 12_000, 0, 0])
        assert portions[2].taxable == 0.0
        assert portions[3].taxable == 0.0

    def test_full_brackets_are_width_times_rate(self):
        portions = transfer_tax_breakdown(3_500_000)
        assert portions[0].amount == pytest.approx(200_000 * 0.01)
        assert portions[1].amount == pytest.approx(1_800_000 * 0.02)
        assert portions[2].amount == pytest.approx(1_000_000 * 0.03)
        assert portions[3].amount == pytest.approx(500_000 * 0.05)

    def test_open_ended_top_bracket(self):
        top = transfer_tax_breakdown(4_000_000)[-1]
        assert top.lower == 3_000_000
        assert top.upper is None
        assert top.rate == 0.05

    def test_sum_matches_total(self):
        for price in (0, 123_456, 1_999_999, 2_750_000, 7_000_000):
            portions = transfer_tax_breakdown(price)
            assert sum(p.amount for p in portions) == pytest.approx(calculate_transfer_tax(price))
