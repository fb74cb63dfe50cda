"""Shared fixtures for EDGAR client tests."""

from pathlib import Path

import pytest

from edgar_client.models import (
    CompanyConcept,
    CompanyFacts,
    CompanyTickerDirectory,
    Frame,
    SubmissionData,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def read_fixture(name: str) -> bytes:
    return (FIXTURES_DIR / name).read_bytes()


@pytest.fixture
def submissions_raw():
    """Raw submissions document with two continuation files."""
    return read_fixture("submissions_sample.json")


@pytest.fixture
def submissions(submissions_raw):
    return SubmissionData.model_validate_json(submissions_raw)


@pytest.fixture
def company_facts():
    return CompanyFacts.model_validate_json(read_fixture("company_facts_sample.json"))


@pytest.fixture
def concept():
    return CompanyConcept.model_validate_json(read_fixture("company_concept_sample.json"))


@pytest.fixture
def frame():
    return Frame.model_validate_json(read_fixture("frames_sample.json"))


@pytest.fixture
def ticker_directory():
    return CompanyTickerDirectory.model_validate_json(read_fixture("company_tickers_exchange.json"))
