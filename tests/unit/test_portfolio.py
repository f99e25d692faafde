"""Unit tests for the property portfolio service."""

import pytest

from purchase_analyzer.core.exceptions import (
    InvalidParameterError,
    LastPropertyError,
    PortfolioError,
)
from purchase_analyzer.domain.models.property import PropertyForm
from purchase_analyzer.services.portfolio import PropertyPortfolio, validate_override


def named(*names):
    return PropertyPortfolio([PropertyForm(name=n) for n in names])


class TestConstruction:

    def test_starts_with_one_property(self):
        portfolio = PropertyPortfolio()
        assert len(portfolio) == 1
        assert portfolio.active.name == "My First Property"
        assert portfolio.active_idx == 0
        assert portfolio.down_pct_override is None

    def test_empty_list_falls_back_to_default(self):
        assert len(PropertyPortfolio([])) == 1

    def test_invalid_initial_index(self):
        with pytest.raises(InvalidParameterError):
            PropertyPortfolio([PropertyForm(), PropertyForm()], active_idx=3)


class TestAdd:

    def test_add_appends_and_activates(self):
        portfolio = PropertyPortfolio()
        idx = portfolio.add()
        assert idx == 1
        assert portfolio.active_idx == 1
        assert portfolio.active.name == "Property 2"

    def test_add_clears_override(self):
        portfolio = PropertyPortfolio()
        portfolio.set_override(50)
        portfolio.add()
        assert portfolio.down_pct_override is None


class TestRemove:

    def test_last_property_rejected(self):
        portfolio = PropertyPortfolio()
        with pytest.raises(LastPropertyError):
            portfolio.remove(0)
        assert len(portfolio) == 1

    def test_last_property_error_is_portfolio_error(self):
        assert issubclass(LastPropertyError, PortfolioError)

    def test_remove_active_moves_left(self):
        portfolio = named("A", "B", "C")
        portfolio.select(1)
        portfolio.remove(1)
        assert [p.name for p in portfolio.properties] == ["A", "C"]
        assert portfolio.active.name == "A"

    def test_remove_first_while_active_stays_at_zero(self):
        portfolio = named("A", "B", "C")
        portfolio.remove(0)
        assert portfolio.active_idx == 0
        assert portfolio.active.name == "B"

    def test_remove_before_active_keeps_same_property(self):
        portfolio = named("A", "B", "C")
        portfolio.select(2)
        portfolio.remove(0)
        assert portfolio.active.name == "C"
        assert portfolio.active_idx == 1

    def test_remove_after_active_keeps_index(self):
        portfolio = named("A", "B", "C")
        portfolio.select(0)
        portfolio.remove(2)
        assert portfolio.active_idx == 0
        assert portfolio.active.name == "A"

    def test_remove_last_tab_while_active(self):
        portfolio = named("A", "B", "C")
        portfolio.select(2)
        portfolio.remove(2)
        assert portfolio.active.name == "B"

    def test_out_of_range(self):
        with pytest.raises(InvalidParameterError):
            named("A", "B").remove(5)

    def test_remove_clears_override(self):
        portfolio = named("A", "B")
        portfolio.set_override(25)
        portfolio.remove(1)
        assert portfolio.down_pct_override is None


class TestSelectAndUpdate:

    def test_select_clears_override(self):
        portfolio = named("A", "B")
        portfolio.set_override(40)
        portfolio.select(1)
        assert portfolio.down_pct_override is None
        assert portfolio.active.name == "B"

    def test_select_out_of_range(self):
        with pytest.raises(InvalidParameterError):
            named("A").select(-1)

    def test_update_edits_active_only(self):
        portfolio = named("A", "B")
        portfolio.select(1)
        portfolio.update("purchase_price", "650000")
        assert portfolio.properties[1].purchase_price == "650000"
        assert portfolio.properties[0].purchase_price == ""

    def test_update_down_payment_clears_override(self):
        portfolio = PropertyPortfolio()
        portfolio.set_override(50)
        portfolio.update("down_payment_pct", "25")
        assert portfolio.down_pct_override is None
        assert portfolio.effective_down_pct == 25.0

    def test_update_other_field_keeps_override(self):
        portfolio = PropertyPortfolio()
        portfolio.set_override(50)
        portfolio.update("strata_fees", "400")
        assert portfolio.down_pct_override == 50.0

    def test_update_unknown_field(self):
        with pytest.raises(InvalidParameterError):
            PropertyPortfolio().update("colour", "blue")

    def test_update_wrong_type(self):
        with pytest.raises(InvalidParameterError):
            PropertyPortfolio().update("purchase_price", ["800000"])


class TestOverride:

    @pytest.mark.parametrize("pct", [5, 10, 20, 55, 100, 35.0])
    def test_valid_grid(self, pct):
        assert validate_override(pct) == float(pct)

    @pytest.mark.parametrize("pct", [0, 4, 7, 22.5, 105, -5, float("nan"), float("inf"), None, "50", True])
    def test_invalid(self, pct):
        with pytest.raises(InvalidParameterError):
            validate_override(pct)

    def test_effective_down_pct(self):
        portfolio = PropertyPortfolio()
        assert portfolio.effective_down_pct == 20.0
        portfolio.set_override(65)
        assert portfolio.effective_down_pct == 65.0
        portfolio.reset_override()
        assert portfolio.effective_down_pct == 20.0

    def test_override_does_not_mutate_stored_value(self):
        portfolio = PropertyPortfolio()
        portfolio.set_override(65)
        assert portfolio.active.down_payment_pct == "20"


class TestDeriveActive:

    def test_uses_override(self, scenario_form):
        portfolio = PropertyPortfolio([scenario_form])
        portfolio.set_override(50)
        m = portfolio.derive_active(as_of_year=2026)
        assert m.down_payment_amount == pytest.approx(400_000)

    def test_follows_active_tab(self, scenario_form):
        portfolio = PropertyPortfolio([scenario_form, PropertyForm(purchase_price="300000")])
        portfolio.select(1)
        assert portfolio.derive_active(as_of_year=2026).purchase_price == 300_000
