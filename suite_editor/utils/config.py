"""Application configuration constants."""

from __future__ import annotations

APP_NAME = "SuiteEditor"
APP_VERSION = "0.1.0"
ORG_NAME = "SuiteEditor"

# History
BASE_URL_HISTORY_SIZE = 20
HISTORY_GROUP = "history"
OPTIONS_GROUP = "options"

# Files
TEST_SUITE_EXTENSIONS = [".suite.json"]
TEST_SUITE_FILTER = "Test Suites ({});;All Files (*)".format(
    " ".join(f"*{ext}" for ext in TEST_SUITE_EXTENSIONS)
)
SUITE_FILE_VERSION = 1

# Default format id
DEFAULT_FORMAT_ID = "json"

# Preference keys (all values are stored as strings)
DEFAULT_OPTIONS: dict[str, str] = {
    "remember_base_url": "true",
    "base_url": "",
    "selected_format": DEFAULT_FORMAT_ID,
    "clipboard_format": DEFAULT_FORMAT_ID,
    "last_saved_test_suite": "",
    "last_saved_test_case": "",
    "disable_format_change_msg": "false",
    "test_case_directory": "",
    "ui_language": "en",
}
