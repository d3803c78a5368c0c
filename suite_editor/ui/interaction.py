"""User-interaction surface: file pickers, confirmations and alerts."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from PySide6.QtWidgets import QFileDialog, QMessageBox, QWidget

from suite_editor.utils.config import APP_NAME
from suite_editor.utils.i18n import tr


class UserInteraction(Protocol):
    """Blocking dialogs the application controller needs from its host."""

    def pick_file(self, title: str, file_filter: str = "", start_dir: str = "") -> Path | None: ...

    def pick_files(self, title: str, file_filter: str = "", start_dir: str = "") -> list[Path]: ...

    def pick_save_file(self, title: str, file_filter: str = "", start_dir: str = "") -> Path | None: ...

    def confirm(self, message: str) -> bool: ...

    def alert(self, message: str) -> None: ...


class QtInteraction:
    """UserInteraction backed by QFileDialog / QMessageBox."""

    def __init__(self, parent: QWidget | None = None) -> None:
        self._parent = parent

    def pick_file(self, title: str, file_filter: str = "", start_dir: str = "") -> Path | None:
        path, _ = QFileDialog.getOpenFileName(self._parent, tr(title), start_dir, file_filter)
        return Path(path) if path else None

    def pick_files(self, title: str, file_filter: str = "", start_dir: str = "") -> list[Path]:
        paths, _ = QFileDialog.getOpenFileNames(self._parent, tr(title), start_dir, file_filter)
        return [Path(p) for p in paths if p]

    def pick_save_file(self, title: str, file_filter: str = "", start_dir: str = "") -> Path | None:
        path, _ = QFileDialog.getSaveFileName(self._parent, tr(title), start_dir, file_filter)
        return Path(path) if path else None

    def confirm(self, message: str) -> bool:
        answer = QMessageBox.question(
            self._parent, APP_NAME, message,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        return answer == QMessageBox.StandardButton.Yes

    def alert(self, message: str) -> None:
        QMessageBox.warning(self._parent, APP_NAME, message)
