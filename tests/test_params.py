"""Tests for request parameters and CIK normalization."""

import pytest

from edgar_client.cik import format_cik, is_valid_cik
from edgar_client.errors import InvalidCikError
from edgar_client.params import (
    Annual,
    Duration,
    Instantaneous,
    PerShare,
    Simple,
    Taxonomy,
    parse_period,
    parse_unit,
)


class TestPeriod:
    """Test frame period codes."""

    def test_codes(self):
        assert Instantaneous(2024, 1).code == "CY2024Q1I"
        assert Duration(2024, 1).code == "CY2024Q1"
        assert Annual(2023).code == "CY2023"
        assert str(Duration(2019, 4)) == "CY2019Q4"

    @pytest.mark.parametrize("period", [Instantaneous(2024, 1), Duration(2023, 3), Annual(2022)])
    def test_parse_round_trip(self, period):
        assert parse_period(period.code) == period

    def test_instantaneous_round_trip_keeps_year_and_quarter(self):
        parsed = parse_period(Instantaneous(2024, 1).code)
        assert isinstance(parsed, Instantaneous)
        assert (parsed.year, parsed.quarter) == (2024, 1)

    @pytest.mark.parametrize("code", ["", "2024Q1", "CY24", "CY2024Q5", "CY2024Q1X", "cy2024"])
    def test_invalid_codes(self, code):
        with pytest.raises(ValueError):
            parse_period(code)

    def test_quarter_out_of_range(self):
        with pytest.raises(ValueError):
            Duration(2024, 0)
        with pytest.raises(ValueError):
            Instantaneous(2024, 5)


class TestUnit:
    """Test unit path segments."""

    def test_codes(self):
        assert Simple("USD").code == "USD"
        assert PerShare("USD", "shares").code == "USD-per-shares"

    def test_parse(self):
        assert parse_unit("USD") == Simple("USD")
        assert parse_unit("USD-per-shares") == PerShare("USD", "shares")
        assert parse_unit("pure") == Simple("pure")


class TestTaxonomy:
    def test_values(self):
        assert str(Taxonomy.US_GAAP) == "us-gaap"
        assert f"{Taxonomy.IFRS_FULL}" == "ifrs-full"
        assert Taxonomy("dei") is Taxonomy.DEI


class TestCik:
    """Test CIK normalization."""

    @pytest.mark.parametrize("raw", ["320193", "0000320193", "000320193", "320193-", "CIK320193", 320193])
    def test_format_cik(self, raw):
        assert format_cik(raw) == "0000320193"

    @pytest.mark.parametrize("raw", ["", "abcdef", "12345678901"])
    def test_format_cik_errors(self, raw):
        with pytest.raises(InvalidCikError):
            format_cik(raw)

    def test_is_valid_cik(self):
        assert is_valid_cik("320193")
        assert not is_valid_cik("abcdef")
