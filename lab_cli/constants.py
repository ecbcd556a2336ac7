"""Shared constants for lab-cli."""

# Exit codes
EXIT_CODE_OK = 0
EXIT_CODE_ERROR = 1

# Column rendering
COLUMN_DELIMITER = "|"
COLUMN_GLUE = "  "

# Reference markers used when printing
ISSUE_MARKER = "#"
MERGE_REQUEST_MARKER = "!"

# Config
DEFAULT_DOMAIN = "gitlab.com"
CONFIG_DIR_NAME = ".lab-cli"
CONFIG_FILE_NAME = "config.json"
CONFIG_ENV_VAR = "LAB_CONFIG"
TOKEN_ENV_VAR = "GITLAB_TOKEN"

# Listing defaults and allowed values
DEFAULT_LINE = 20
ISSUE_STATES = ["opened", "closed", "all"]
MERGE_REQUEST_STATES = ["opened", "closed", "locked", "merged", "all"]
SCOPES = ["created_by_me", "assigned_to_me", "all"]
ORDER_BY = ["created_at", "updated_at"]
PROJECT_ORDER_BY = ["id", "name", "path", "created_at", "updated_at", "last_activity_at"]
SORT_ORDERS = ["asc", "desc"]

# Browser launchers tried in order on platforms without a fixed launcher
BROWSER_CANDIDATES = [
    "xdg-open",
    "cygstart",
    "x-www-browser",
    "firefox",
    "opera",
    "mozilla",
    "netscape",
]

# Editor template
ISSUE_MESSAGE_TEMPLATE = """<!-- Write a message for this issue. The first block of text is the title -->
{title}

<!-- the rest is the description.  -->
{description}
"""
