import os
import re
from typing import Optional

import yaml
from pydantic import BaseModel, ValidationError

from config.logging_config import logger
from config.settings import (
    PATH_CONFIG_SEARCH, UNTITLED_PAGE_TITLE, TITLE_MATCH_NOTE,
    INVALID_SEARCH_TITLE, INVALID_SEARCH_MESSAGE, NO_RESULTS_TITLE,
    NO_RESULTS_MESSAGE, LAST_UPDATED_PREFIX,
)
from search.exceptions import ConfigError

ENV_VAR_PATTERN = re.compile(r"\$\{(\w+)\}")


class SearchConfig(BaseModel):
    """Labels and messages used by the search engine and its presenter."""
    untitled_page_title: str = UNTITLED_PAGE_TITLE
    title_match_note: str = TITLE_MATCH_NOTE
    invalid_search_title: str = INVALID_SEARCH_TITLE
    invalid_search_message: str = INVALID_SEARCH_MESSAGE
    no_results_title: str = NO_RESULTS_TITLE
    no_results_message: str = NO_RESULTS_MESSAGE
    last_updated_prefix: str = LAST_UPDATED_PREFIX

    model_config = {"frozen": True, "extra": "forbid"}


def _expand_env(key: str, val):
    """Expand values of the form ${VAR} from the environment."""
    if not isinstance(val, str):
        return val
    match = ENV_VAR_PATTERN.fullmatch(val.strip())
    if not match:
        return val
    env_var = match.group(1)
    env_value = os.getenv(env_var)
    if env_value is None:
        raise ConfigError(f"Missing environment variable: {env_var} (used in {key})")
    return env_value


def load_search_config(config_path: Optional[str] = None) -> SearchConfig:
    """
    Load the search configuration file and validate it.

    The file is optional in the sense that every key has a default, but when a
    path is given (or configured through SEARCH_CONFIG_PATH) it must exist.
    Environment variables in the form ${VAR} are automatically expanded.

    Args:
        config_path (Optional[str]): Path to a YAML file. Defaults to PATH_CONFIG_SEARCH.

    Returns:
        SearchConfig: The validated configuration.
    """
    config_path = config_path or PATH_CONFIG_SEARCH

    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Search config not found at {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError("Invalid config: top level must be a mapping")

    section = raw.get("search", raw)
    if not isinstance(section, dict):
        raise ConfigError("Invalid config: 'search' must be a mapping")

    expanded = {key: _expand_env(key, val) for key, val in section.items()}

    try:
        config = SearchConfig(**expanded)
    except ValidationError as e:
        raise ConfigError(f"Invalid search config in {config_path}: {e}") from e

    logger.info(f"Loaded search config from {config_path}")
    return config
