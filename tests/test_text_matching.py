import pytest

from search.dates import parse_timestamp
from search.engine import sort_by_date
from search.exceptions import InvalidDateFormat
from search.models import SearchResult
from search.text_matching import contains_folded, fold


class TestFold:

    def test_case_folding(self):
        assert fold("STRASSE") == fold("straße")

    def test_nfc_normalization(self):
        assert fold("cafe\u0301") == fold("Caf\u00e9")

    def test_empty_needle_never_matches(self):
        assert contains_folded("anything", "") is False

    def test_contains(self):
        assert contains_folded("Quarterly MEETING notes", fold("meeting"))


class TestParseTimestamp:

    def test_zulu(self):
        assert parse_timestamp("2024-01-10T00:00:00Z").utcoffset().total_seconds() == 0

    def test_naive_is_utc(self):
        assert parse_timestamp("2024-01-10T00:00:00") == parse_timestamp("2024-01-10T00:00:00Z")

    def test_offset(self):
        assert parse_timestamp("2024-01-10T02:00:00+02:00") == parse_timestamp("2024-01-10T00:00:00Z")

    def test_fractional_seconds(self):
        parsed = parse_timestamp("2024-01-10T00:00:00.5Z")
        assert parsed.microsecond == 500000

    def test_basic_format(self):
        assert parse_timestamp("20240110T000000Z") == parse_timestamp("2024-01-10T00:00:00Z")

    def test_comma_decimal(self):
        assert parse_timestamp("2024-01-10T00:00:00,5").microsecond == 500000

    def test_mixed_forms_sort_together(self):
        results = [
            SearchResult(page_id="a", page_title="A", matched_snippet="", last_updated="2024-01-10T00:00:00.5Z"),
            SearchResult(page_id="b", page_title="B", matched_snippet="", last_updated="20240110T000000Z"),
            SearchResult(page_id="c", page_title="C", matched_snippet="", last_updated="2024-01-10"),
        ]
        assert [r.page_id for r in sort_by_date(results, ascending=True)] == ["b", "c", "a"]

    @pytest.mark.parametrize("value", [None, 20240110, "", "   ", "10/01/2024"])
    def test_invalid(self, value):
        with pytest.raises(InvalidDateFormat):
            parse_timestamp(value, page_id="p")
