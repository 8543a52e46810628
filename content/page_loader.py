"""
Builds Page records from content exported by the content store.
"""
import json
import os
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import AliasChoices, BaseModel, Field, ValidationError, field_validator

from config.logging_config import logger
from search.exceptions import ContentLoadError
from search.models import Page


class PageRecord(BaseModel):
    """A page as serialized by the content store."""
    identifier: str = Field(validation_alias=AliasChoices("identifier", "id", "page_id"))
    title: Optional[str] = Field(default=None, validation_alias=AliasChoices("name", "title"))
    body: Optional[str] = Field(default=None, validation_alias=AliasChoices("body", "markdown"))
    image_caption: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("imageCaption", "image_caption"))
    image_accessibility_label: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("imageAccessibilityLabel", "image_accessibility_label"))
    image_url: Optional[str] = Field(default=None, validation_alias=AliasChoices("imageUrl", "image_url"))
    email_module: List[str] = Field(
        default_factory=list, validation_alias=AliasChoices("emailModule", "email_module"))
    last_updated: str = Field(validation_alias=AliasChoices("updatedAt", "lastUpdated", "last_updated"))

    @field_validator("identifier", mode="before")
    @classmethod
    def _coerce_identifier(cls, value: Any) -> Any:
        # Numeric ids are common in exports
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("email_module", mode="before")
    @classmethod
    def _coerce_email_module(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    def to_page(self) -> Page:
        return Page(
            page_id=self.identifier,
            title=self.title,
            body=self.body,
            image_caption=self.image_caption,
            image_accessibility_label=self.image_accessibility_label,
            image_url=self.image_url,
            email_module=tuple(self.email_module),
            last_updated=self.last_updated,
        )


def pages_from_records(records: List[Dict[str, Any]]) -> List[Page]:
    """
    Validates raw page dictionaries and converts them to Page records.

    Args:
        records (List[Dict[str, Any]]): Page payloads from the content store.

    Returns:
        List[Page]: Pages in input order.

    Raises:
        ContentLoadError: If a record is not a mapping or fails validation.
    """
    pages = []
    for idx, record in enumerate(records, start=1):
        if not isinstance(record, dict):
            raise ContentLoadError(f"Page #{idx} is not a mapping")
        try:
            pages.append(PageRecord.model_validate(record).to_page())
        except ValidationError as e:
            raise ContentLoadError(f"Page #{idx} is invalid: {e}") from e
    return pages


def load_pages(path: Union[str, os.PathLike]) -> List[Page]:
    """
    Loads pages from a JSON or YAML export.

    The file holds either a list of page records or a mapping with a
    top-level 'pages' list.

    Args:
        path: Location of a .json, .yml or .yaml file.

    Returns:
        List[Page]: The loaded pages.
    """
    path = os.fspath(path)
    if not os.path.exists(path):
        raise FileNotFoundError(f"Content export not found at {path}")

    ext = os.path.splitext(path)[1].lower()
    with open(path, "r", encoding="utf-8") as f:
        try:
            if ext == ".json":
                raw = json.load(f)
            elif ext in (".yml", ".yaml"):
                raw = yaml.safe_load(f)
            else:
                raise ContentLoadError(f"Unsupported content file type '{ext}'")
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ContentLoadError(f"Cannot parse {path}: {e}") from e

    if isinstance(raw, dict):
        raw = raw.get("pages")
    if not isinstance(raw, list):
        raise ContentLoadError(f"Invalid content in {path}: expected a list of pages")

    pages = pages_from_records(raw)
    logger.info(f"Loaded {len(pages)} pages from {path}")
    return pages
