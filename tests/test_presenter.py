import logging

import pytest

from config.config_loader import SearchConfig
from search.engine import SearchEngine
from search.exceptions import InvalidDateFormat
from search.models import Page
from search.presenter import SearchPresenter, SearchStatus


@pytest.fixture
def pages():
    return [
        Page(page_id="1", title="Employee Handbook", body="...", last_updated="2024-01-10T00:00:00Z"),
        Page(page_id="2", title="Meeting Notes", body="quarterly meeting", last_updated="2024-03-05T00:00:00Z"),
        Page(page_id="3", title="Board Meeting", body="minutes", last_updated="2023-11-02T00:00:00Z"),
    ]


@pytest.fixture
def presenter():
    return SearchPresenter()


class TestSearchPresenter:
    """Tests for the search screen view-model."""

    @pytest.mark.parametrize("raw", ["", "   ", "\n\t"])
    def test_empty_query_shows_invalid_search(self, presenter, pages, raw):
        state = presenter.submit(raw, pages)
        assert state.status is SearchStatus.INVALID
        assert state.title == "Invalid Search"
        assert state.rows == []

    def test_no_match_shows_no_results(self, presenter, pages):
        state = presenter.submit("nonexistentterm12345", pages)
        assert state.status is SearchStatus.NO_RESULTS
        assert state.title == "No Results Found"
        assert state.message == "Your search did not match any content."

    def test_results_label_and_rows(self, presenter, pages):
        state = presenter.submit("  meeting ", pages)
        assert state.status is SearchStatus.RESULTS
        assert state.query == "meeting"
        assert state.results_label == "Showing 2 results"
        assert [row.title for row in state.rows] == ["Meeting Notes", "Board Meeting"]
        assert state.rows[0].last_updated_label == "Last updated: 2024-03-05T00:00:00Z"

    def test_single_result_label(self, presenter, pages):
        state = presenter.submit("handbook", pages)
        assert state.results_label == "Showing 1 result"

    def test_query_text_is_not_logged(self, presenter, pages, caplog):
        with caplog.at_level(logging.DEBUG, logger="page_search"):
            presenter.submit("employee handbook", pages)
        assert "employee handbook" not in caplog.text
        assert not [r for r in caplog.records if r.levelno >= logging.INFO]

    def test_toggle_sort_flips_direction(self, presenter, pages):
        presenter.submit("meeting", pages)

        first = presenter.toggle_sort()
        assert first.ascending is True
        assert [row.title for row in first.rows] == ["Board Meeting", "Meeting Notes"]

        second = presenter.toggle_sort()
        assert second.ascending is False
        assert [row.title for row in second.rows] == ["Meeting Notes", "Board Meeting"]

    def test_new_query_resets_sort_direction(self, presenter, pages):
        presenter.submit("meeting", pages)
        presenter.toggle_sort()

        presenter.submit("notes", pages)
        state = presenter.toggle_sort()
        assert state.ascending is True

    def test_toggle_sort_surfaces_invalid_dates(self, presenter):
        broken = [
            Page(page_id="a", title="Alpha", last_updated="2024-01-01T00:00:00Z"),
            Page(page_id="b", title="Alpha Two", last_updated="sometime"),
        ]
        presenter.submit("alpha", broken)
        with pytest.raises(InvalidDateFormat):
            presenter.toggle_sort()

    def test_toggle_sort_without_results(self, presenter, pages):
        presenter.submit("nonexistentterm12345", pages)
        state = presenter.toggle_sort()
        assert state.status is SearchStatus.NO_RESULTS

    def test_uses_engine_config(self, pages):
        config = SearchConfig(no_results_title="Nothing here", untitled_page_title="(untitled)")
        presenter = SearchPresenter(SearchEngine(config))
        state = presenter.submit("zzz", pages)
        assert state.title == "Nothing here"
