"""Settings manager for editor options and history lists."""

from typing import Any

from PySide6.QtCore import QSettings

from suite_editor.utils.config import APP_NAME, DEFAULT_OPTIONS, OPTIONS_GROUP, ORG_NAME


class SettingsManager:
    """Wrapper around QSettings: string options plus persisted lists."""

    def __init__(self):
        self._settings = QSettings(ORG_NAME, APP_NAME)

    # ---------------------------------------------------- Options

    def load(self) -> dict[str, str]:
        """Return a fresh options dict, stored values over defaults."""
        options = {}
        for key, default in DEFAULT_OPTIONS.items():
            value = self._settings.value(f"{OPTIONS_GROUP}/{key}", default)
            options[key] = "" if value is None else str(value)
        return options

    def set_and_save(self, options: dict[str, str], key: str, value: Any) -> None:
        """Update *options* in place and persist the value immediately."""
        value = "" if value is None else str(value)
        options[key] = value
        self._settings.setValue(f"{OPTIONS_GROUP}/{key}", value)
        self._settings.sync()

    # ---------------------------------------------------- Lists

    def get_list(self, key: str) -> list[str]:
        """Get a stored list of strings (empty when unset)."""
        value = self._settings.value(key, [])
        if not value:
            return []
        # QSettings returns a bare string for single-element lists in INI files
        if isinstance(value, str):
            return [value]
        return [str(v) for v in value]

    def set_list(self, key: str, values: list[str]) -> None:
        self._settings.setValue(key, list(values))
        self._settings.sync()

    # ---------------------------------------------------- UI Settings

    def get_ui_language(self) -> str:
        """Get the UI language code (default: en)."""
        return str(self._settings.value(f"{OPTIONS_GROUP}/ui_language", DEFAULT_OPTIONS["ui_language"]))

    def set_ui_language(self, lang: str) -> None:
        """Set the UI language code ('en', 'ko', etc.)."""
        self._settings.setValue(f"{OPTIONS_GROUP}/ui_language", lang)

    # ---------------------------------------------------- General Methods

    def reset_to_defaults(self) -> None:
        """Reset all settings to default values."""
        self._settings.clear()

    def sync(self) -> None:
        """Force synchronization of settings to disk."""
        self._settings.sync()

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value by key."""
        return self._settings.value(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a setting value by key."""
        self._settings.setValue(key, value)
