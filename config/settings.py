import os

# -------------------------
# 1. Logging
# -------------------------
LOG_LEVEL = os.getenv("SEARCH_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# -------------------------
# 2. Search configuration
# -------------------------
PATH_CONFIG_SEARCH = os.getenv("SEARCH_CONFIG_PATH", "/app/config/search_config.yml")

# Labels used when building results
UNTITLED_PAGE_TITLE = "Untitled Page"
TITLE_MATCH_NOTE = "Title matches search term"

# -------------------------
# 3. Presentation messages
# -------------------------
INVALID_SEARCH_TITLE = "Invalid Search"
INVALID_SEARCH_MESSAGE = "Please enter a search term."
NO_RESULTS_TITLE = "No Results Found"
NO_RESULTS_MESSAGE = "Your search did not match any content."
LAST_UPDATED_PREFIX = "Last updated:"
