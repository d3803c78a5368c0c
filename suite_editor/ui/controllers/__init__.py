"""UI Controllers — editor session state and its Qt bridge.

Views receive the Application instance and subscribe to its notifications,
either directly or through ApplicationSignals.
"""

from suite_editor.ui.controllers.application import Application, Events

__all__ = ["Application", "Events"]
