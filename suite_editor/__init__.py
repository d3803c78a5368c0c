"""SuiteEditor — test case / test suite editor core."""

from suite_editor.utils.config import APP_VERSION as __version__

__all__ = ["__version__"]
