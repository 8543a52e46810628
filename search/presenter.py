"""
View-model for the search screen.

Holds what the screen shows for a query (an invalid-search notice, a
no-results notice or a list of rows) without rendering anything itself.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional

from config.logging_config import logger
from search.engine import SearchEngine
from search.exceptions import EmptyQuery
from search.models import Page, SearchResult


class SearchStatus(str, Enum):
    INVALID = "invalid"
    NO_RESULTS = "no_results"
    RESULTS = "results"


@dataclass(frozen=True)
class ResultRow:
    title: str
    last_updated_label: str
    result: SearchResult


@dataclass(frozen=True)
class SearchViewState:
    status: SearchStatus
    query: str
    title: Optional[str] = None
    message: Optional[str] = None
    results_label: Optional[str] = None
    rows: List[ResultRow] = field(default_factory=list)
    ascending: Optional[bool] = None


class SearchPresenter:
    """
    Drives the search engine the way the search screen does.

    submit() runs a new query; toggle_sort() flips the date order of the
    current results. Sorting starts out most-recent-first, so the first toggle
    switches to oldest-first.
    """

    def __init__(self, engine: Optional[SearchEngine] = None):
        self.engine = engine or SearchEngine()
        self._query = ""
        self._results: List[SearchResult] = []
        self._ascending = False

    def submit(self, raw_query: str, pages: Iterable[Page]) -> SearchViewState:
        """
        Validates and runs a query typed by the user.

        Args:
            raw_query (str): The text from the search field.
            pages (Iterable[Page]): Current content to search.

        Returns:
            SearchViewState: What the screen should show.
        """
        config = self.engine.config
        self._ascending = False

        try:
            query = self.engine.validate_query(raw_query)
        except EmptyQuery:
            self._query = ""
            self._results = []
            return SearchViewState(
                status=SearchStatus.INVALID,
                query="",
                title=config.invalid_search_title,
                message=config.invalid_search_message,
            )

        self._query = query
        self._results = self.engine.search(query, pages)
        logger.debug(f"Search for {len(query)}-char query returned {len(self._results)} results")

        if not self._results:
            return SearchViewState(
                status=SearchStatus.NO_RESULTS,
                query=query,
                title=config.no_results_title,
                message=config.no_results_message,
            )
        return self._results_state(ascending=None)

    def toggle_sort(self) -> SearchViewState:
        """
        Re-sorts the current results by date in the opposite direction.

        Raises:
            InvalidDateFormat: If a result carries an unparsable date.
        """
        ascending = not self._ascending
        self._results = self.engine.sort_by_date(self._results, ascending=ascending)
        self._ascending = ascending
        return self._results_state(ascending=ascending)

    def _results_state(self, ascending: Optional[bool]) -> SearchViewState:
        config = self.engine.config
        count = len(self._results)
        rows = [
            ResultRow(
                title=r.page_title,
                last_updated_label=f"{config.last_updated_prefix} {r.last_updated}",
                result=r,
            )
            for r in self._results
        ]
        if not rows:
            return SearchViewState(status=SearchStatus.NO_RESULTS, query=self._query,
                                   title=config.no_results_title,
                                   message=config.no_results_message,
                                   ascending=ascending)
        return SearchViewState(
            status=SearchStatus.RESULTS,
            query=self._query,
            results_label=f"Showing {count} result{'' if count == 1 else 's'}",
            rows=rows,
            ascending=ascending,
        )
