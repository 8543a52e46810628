"""
Data models for the page search core.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class SearchField(str, Enum):
    """Page fields that take part in matching."""
    TITLE = "title"
    BODY = "body"
    IMAGE_CAPTION = "image_caption"
    IMAGE_ACCESSIBILITY_LABEL = "image_accessibility_label"
    EMAIL_MODULE = "email_module"


# Matching priority: the first field that contains the query wins.
SEARCHABLE_FIELDS: Tuple[SearchField, ...] = (
    SearchField.TITLE,
    SearchField.BODY,
    SearchField.IMAGE_CAPTION,
    SearchField.IMAGE_ACCESSIBILITY_LABEL,
    SearchField.EMAIL_MODULE,
)


@dataclass(frozen=True)
class Page:
    """A unit of application content, read-only to the search core."""
    page_id: str
    last_updated: str
    title: Optional[str] = None
    body: Optional[str] = None
    image_caption: Optional[str] = None
    image_accessibility_label: Optional[str] = None
    image_url: Optional[str] = None
    email_module: Tuple[str, ...] = field(default_factory=tuple)

    def field_values(self, search_field: SearchField) -> Tuple[str, ...]:
        """Returns the present values of a searchable field, in order."""
        if search_field is SearchField.EMAIL_MODULE:
            return tuple(v for v in self.email_module if v is not None)
        value = getattr(self, search_field.value)
        return () if value is None else (value,)


@dataclass(frozen=True)
class SearchResult:
    """One matching page, built fresh for each query."""
    page_id: str
    page_title: str
    matched_snippet: str
    last_updated: str
    image_attached: str = ""
    matched_field: Optional[SearchField] = None
