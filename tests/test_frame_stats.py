"""Tests for frame ranking and statistics."""

from datetime import date

import pytest

from edgar_client.errors import EmptyStatisticsError
from edgar_client.frame_stats import statistics, top_companies, values_for_company
from edgar_client.models import FrameEntry


def _entry(cik: int, val: float, name: str | None = None) -> FrameEntry:
    return FrameEntry(cik=cik, entity_name=name or f"Company {cik}", val=val, end=date(2023, 12, 31))


@pytest.fixture
def entries():
    return [_entry(1, 10), _entry(2, 50), _entry(3, 30), _entry(4, 50)]


class TestTopCompanies:
    """Test top_companies()."""

    def test_descending_with_stable_ties(self, entries):
        top = top_companies(entries, 3, ascending=False)
        assert [e.cik for e in top] == ["0000000002", "0000000004", "0000000003"]
        assert [e.val for e in top] == [50, 50, 30]

    def test_ascending(self, entries):
        top = top_companies(entries, 2, ascending=True)
        assert [e.val for e in top] == [10, 30]

    def test_ascending_ties_keep_input_order(self, entries):
        top = top_companies(entries, 4, ascending=True)
        assert [e.cik for e in top] == ["0000000001", "0000000003", "0000000002", "0000000004"]

    def test_ties_not_broken_by_name(self):
        entries = [_entry(9, 5, "Zeta"), _entry(1, 5, "Alpha")]
        assert [e.entity_name for e in top_companies(entries, 2)] == ["Zeta", "Alpha"]

    def test_zero_returns_empty(self, entries):
        assert top_companies(entries, 0) == []

    def test_n_larger_than_frame_returns_all_sorted(self, entries):
        top = top_companies(entries, 100)
        assert len(top) == 4
        assert [e.val for e in top] == [50, 50, 30, 10]

    def test_negative_n_rejected(self, entries):
        with pytest.raises(ValueError):
            top_companies(entries, -1)

    def test_input_not_modified(self, entries):
        original = list(entries)
        top_companies(entries, 4)
        assert entries == original

    def test_fixture_frame(self, frame):
        top = top_companies(frame.data, 2)
        assert [e.entity_name for e in top] == ["AMAZON.COM, INC.", "Apple Inc."]


class TestStatistics:
    """Test statistics()."""

    def test_basic_statistics(self):
        stats = statistics([_entry(1, 100), _entry(2, 200), _entry(3, 300)])
        assert stats.count == 3
        assert stats.sum == 600.0
        assert stats.mean == 200.0
        assert stats.min == 100.0
        assert stats.max == 300.0
        assert stats.median == 200.0
        assert stats.std_dev == pytest.approx(100.0)

    def test_unsorted_input(self, entries):
        stats = statistics(entries)
        assert stats.min == 10.0
        assert stats.max == 50.0
        assert stats.median == 40.0
        assert stats.mean == 35.0

    def test_single_entry(self):
        stats = statistics([_entry(1, 42.5)])
        assert stats.count == 1
        assert stats.mean == 42.5
        assert stats.std_dev == 0.0

    def test_fractional_values_not_truncated(self):
        stats = statistics([_entry(1, 0.5), _entry(2, 0.25)])
        assert stats.sum == 0.75
        assert stats.mean == 0.375

    def test_empty_frame_raises(self):
        with pytest.raises(EmptyStatisticsError) as exc_info:
            statistics([])
        assert exc_info.value.count == 0
        assert exc_info.value.sum == 0.0

    def test_large_magnitudes(self, frame):
        stats = statistics(frame.data)
        assert stats.count == 4
        assert stats.sum == 169620000000.0
        assert stats.max == 84981000000.0


class TestValuesForCompany:
    """Test values_for_company()."""

    def test_matches_normalized_cik(self, frame):
        assert [e.entity_name for e in values_for_company(frame.data, "320193")] == ["Apple Inc."]
        assert len(values_for_company(frame.data, 789019)) == 1

    def test_unknown_company(self, frame):
        assert values_for_company(frame.data, "1") == []
