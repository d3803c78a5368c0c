"""ApplicationSignals — Qt signal façade over Application notifications.

Widgets connect to these signals instead of registering observers
directly; every notification is re-emitted synchronously.
"""

from __future__ import annotations

from typing import Any, Callable

from PySide6.QtCore import QObject, Signal

from suite_editor.ui.controllers.application import Application, Events


class ApplicationSignals(QObject):
    """One signal per Application event, with the same name."""

    base_url_changed = Signal()
    options_changed = Signal(object)
    current_format_changing = Signal()
    current_format_changed = Signal(object)
    clipboard_format_changed = Signal(object)
    test_suite_unloaded = Signal(object)
    test_suite_changed = Signal(object)
    test_case_unloaded = Signal(object)
    test_case_changed = Signal(object)

    def __init__(self, app: Application, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._app = app
        self._forwarders: dict[str, Callable[..., Any]] = {}
        for event in Events.ALL:
            forward = getattr(self, event).emit
            self._forwarders[event] = forward
            app.add_observer(event, forward)

    @property
    def app(self) -> Application:
        return self._app

    def detach(self) -> None:
        """Stop forwarding notifications."""
        for event, forward in self._forwarders.items():
            self._app.remove_observer(event, forward)
        self._forwarders.clear()
