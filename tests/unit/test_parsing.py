"""Unit tests for the raw-text parsing boundary."""

import math

import pytest

from purchase_analyzer.core.market_constants import MAX_AMORTIZATION_YEARS
from purchase_analyzer.domain.calculator.derivation import derive
from purchase_analyzer.domain.models.property import PropertyForm, PropertyType
from purchase_analyzer.services.parsing import (
    build_property_input,
    effective_down_payment_pct,
    parse_int,
    parse_number,
)


class TestParseNumber:

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("800000", 800_000.0),
            ("800,000", 800_000.0),
            ("$1,250,000.50", 1_250_000.5),
            ("  5.25 ", 5.25),
            ("20%", 20.0),
            ("-12", -12.0),
            ("1e3", 1000.0),
            (450, 450.0),
            (2.5, 2.5),
        ],
    )
    def test_parses(self, text, expected):
        assert parse_number(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "abc", "12abc", "$", None, "nan", "inf", "-inf"])
    def test_unparsable_takes_default(self, text):
        assert parse_number(text) == 0.0
        assert parse_number(text, 20.0) == 20.0

    def test_explicit_zero_is_not_default(self):
        assert parse_number("0", 20.0) == 0.0


class TestParseInt:

    def test_truncates(self):
        assert parse_int("25.9") == 25
        assert parse_int("1,999") == 1999

    def test_default(self):
        assert parse_int("", 25) == 25
        assert parse_int("twenty", 25) == 25
        assert parse_int("0", 25) == 0


class TestBuildPropertyInput:

    def test_blank_form_takes_named_defaults(self):
        prop = build_property_input(PropertyForm(
            down_payment_pct="", mortgage_rate="", amortization="",
            annual_home_insurance="", maintenance_reserve="",
            legal_fees="", home_inspection="", title_insurance="",
        ))
        assert prop.down_payment_pct == 20.0
        assert prop.mortgage_rate == 5.25
        assert prop.amortization == 25
        assert prop.annual_home_insurance == 1500.0
        assert prop.maintenance_reserve == 200.0
        assert prop.legal_fees == 2000.0
        assert prop.home_inspection == 600.0
        assert prop.title_insurance == 300.0
        assert prop.purchase_price == 0.0
        assert prop.strata_fees == 0.0
        assert prop.square_footage == 0.0
        assert prop.year_built == 0
        assert prop.estimated_rent == 0.0

    def test_fresh_form_matches_defaults(self):
        prop = build_property_input(PropertyForm())
        assert prop.down_payment_pct == 20.0
        assert prop.mortgage_rate == 5.25
        assert prop.purchase_price == 0.0

    def test_scenario(self, scenario_form, scenario_input):
        assert build_property_input(scenario_form) == scenario_input

    def test_garbage_never_raises(self):
        form = PropertyForm(purchase_price="lots", square_footage="big", year_built="old",
                            mortgage_rate="?", amortization="long")
        prop = build_property_input(form)
        assert prop.purchase_price == 0.0
        assert prop.mortgage_rate == 5.25
        assert prop.amortization == 25

    def test_negative_amounts_clamped(self):
        prop = build_property_input(PropertyForm(purchase_price="-500000", strata_fees="-10",
                                                 year_built="-5"))
        assert prop.purchase_price == 0.0
        assert prop.strata_fees == 0.0
        assert prop.year_built == 0

    def test_down_payment_clamped_to_100(self):
        assert build_property_input(PropertyForm(down_payment_pct="150")).down_payment_pct == 100.0

    def test_amortization_clamped(self):
        form = PropertyForm(purchase_price="800000", amortization="100000000000000000000")
        prop = build_property_input(form)
        assert prop.amortization == MAX_AMORTIZATION_YEARS

        m = derive(prop, as_of_year=2026)
        assert math.isfinite(m.mortgage_payment)
        assert m.mortgage_payment > m.mortgage_interest > 0

    def test_identity_and_type_carried_over(self):
        form = PropertyForm(name="Kits TH", listing_url="https://example.com/1",
                            property_type="townhome")
        prop = build_property_input(form)
        assert prop.name == "Kits TH"
        assert prop.listing_url == "https://example.com/1"
        assert prop.property_type is PropertyType.TOWNHOME


class TestEffectiveDownPayment:

    def test_override_wins(self, scenario_input):
        assert effective_down_payment_pct(scenario_input, 35.0) == 35.0

    def test_falls_back_to_stored(self, scenario_input):
        assert effective_down_payment_pct(scenario_input, None) == 20.0
