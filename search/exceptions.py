"""
Exceptions raised by the search core and its adapters.
"""
from typing import Optional


class SearchError(Exception):
    """Base class for all search errors."""
    pass


class EmptyQuery(SearchError):
    """The query is empty once surrounding whitespace is removed."""

    def __init__(self, raw=None):
        self.raw = raw
        super().__init__("Search query must not be empty")


class InvalidDateFormat(SearchError):
    """A result's last_updated value is not a valid ISO-8601 timestamp."""

    def __init__(self, value, page_id: Optional[str] = None):
        self.value = value
        self.page_id = page_id
        where = f" for page '{page_id}'" if page_id is not None else ""
        super().__init__(f"Invalid ISO-8601 date{where}: {value!r}")


class ContentLoadError(SearchError):
    """Page content could not be read or validated."""
    pass


class ConfigError(SearchError):
    """Invalid search configuration."""
    pass
