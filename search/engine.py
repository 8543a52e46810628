"""
In-app page search: query validation, multi-field matching and date sorting.
"""
from typing import Iterable, List, Optional, Sequence

from config.config_loader import SearchConfig
from config.logging_config import logger
from search.dates import parse_timestamp
from search.exceptions import EmptyQuery, InvalidDateFormat
from search.models import Page, SearchField, SearchResult, SEARCHABLE_FIELDS
from search.text_matching import contains_folded, fold
from utils.timing import timed


class SearchEngine:
    """
    Searches a collection of pages supplied on each call.

    The engine only holds immutable configuration, so a single instance can be
    shared between threads. Nothing is cached between calls: every search scans
    the pages it is given.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        """
        Initializes the SearchEngine.

        Args:
            config (Optional[SearchConfig]): Labels used when building results.
                Defaults to the built-in SearchConfig.
        """
        self.config = config or SearchConfig()

    @staticmethod
    def validate_query(raw: str) -> str:
        """
        Trims the raw user query and rejects it if nothing is left.

        Args:
            raw (str): The query as typed by the user.

        Returns:
            str: The trimmed, non-empty query.

        Raises:
            EmptyQuery: If the query is empty or whitespace only.
        """
        if not isinstance(raw, str):
            logger.warning(f"Rejected non-string search query of type {type(raw).__name__}")
            raise EmptyQuery(raw)

        query = raw.strip()
        if not query:
            logger.warning("Rejected empty search query")
            raise EmptyQuery(raw)
        return query

    @timed("search")
    def search(self, query: str, pages: Iterable[Page]) -> List[SearchResult]:
        """
        Matches a validated query against every page's searchable fields.

        Fields are tested in SEARCHABLE_FIELDS order and the first one that
        contains the query (case-insensitively) produces the page's only
        result. Results keep the order of the input pages.

        Args:
            query (str): A query already accepted by validate_query.
            pages (Iterable[Page]): The pages to scan.

        Returns:
            List[SearchResult]: One result per matching page; empty if nothing matched.
        """
        folded_query = fold(query)
        results = []
        seen_ids = set()
        scanned = 0

        for page in pages:
            scanned += 1
            # One result per page id; a later copy can still match if earlier ones did not
            if page.page_id in seen_ids:
                continue

            result = self._match_page(page, folded_query)
            if result is not None:
                seen_ids.add(page.page_id)
                results.append(result)

        logger.debug(f"Search for {len(query)}-char query matched {len(results)} of {scanned} pages")
        return results

    def _match_page(self, page: Page, folded_query: str) -> Optional[SearchResult]:
        """Returns a result for the first field of the page that contains the query."""
        for search_field in SEARCHABLE_FIELDS:
            for value in page.field_values(search_field):
                if contains_folded(value, folded_query):
                    return self._build_result(page, search_field, value)
        return None

    def _build_result(self, page: Page, search_field: SearchField, value: str) -> SearchResult:
        if search_field is SearchField.TITLE:
            snippet = self.config.title_match_note
        else:
            snippet = value

        return SearchResult(
            page_id=page.page_id,
            page_title=page.title if page.title is not None else self.config.untitled_page_title,
            matched_snippet=snippet,
            last_updated=page.last_updated,
            image_attached=page.image_url or "",
            matched_field=search_field,
        )

    @staticmethod
    @timed("sort_by_date")
    def sort_by_date(results: Sequence[SearchResult], ascending: bool) -> List[SearchResult]:
        """
        Orders results by their last_updated timestamp.

        Every timestamp is parsed before anything is sorted, so a single bad
        value fails the whole call. Results with equal timestamps keep their
        relative order in both directions. The input is left untouched.

        Args:
            results (Sequence[SearchResult]): Results to sort.
            ascending (bool): Oldest first when True, most recent first otherwise.

        Returns:
            List[SearchResult]: A new, sorted list.

        Raises:
            InvalidDateFormat: If any last_updated value is not ISO-8601.
        """
        keyed = []
        for result in results:
            try:
                keyed.append((parse_timestamp(result.last_updated, result.page_id), result))
            except InvalidDateFormat:
                logger.warning(f"Cannot sort results: page '{result.page_id}' has "
                               f"last_updated={result.last_updated!r}")
                raise

        # sorted() stays stable with reverse=True
        keyed = sorted(keyed, key=lambda item: item[0], reverse=not ascending)
        return [result for _, result in keyed]


_default_engine = SearchEngine()


def validate_query(raw: str) -> str:
    """Validates a raw query with the default engine."""
    return _default_engine.validate_query(raw)


def search(query: str, pages: Iterable[Page]) -> List[SearchResult]:
    """Searches pages with the default engine."""
    return _default_engine.search(query, pages)


def sort_by_date(results: Sequence[SearchResult], ascending: bool) -> List[SearchResult]:
    """Sorts results by date with the default engine."""
    return _default_engine.sort_by_date(results, ascending)
