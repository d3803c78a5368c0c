"""Shared pytest fixtures: in-memory QSettings, scripted dialogs, sample files."""

from __future__ import annotations

from pathlib import Path

import pytest

from suite_editor.models.test_case import Command, TestCase
from suite_editor.models.test_suite import TestSuite
from suite_editor.services.formats import JsonFormat
from suite_editor.services.settings_manager import SettingsManager
from suite_editor.services.suite_io import save_suite
from suite_editor.ui.controllers.application import Application, Events


class FakeQSettings:
    """QSettings stand-in backed by a dict."""

    def __init__(self):
        self._data: dict[str, object] = {}
        self.sync_count = 0

    def value(self, key: str, default=None, type_=None):
        return self._data.get(key, default)

    def setValue(self, key: str, value) -> None:
        self._data[key] = value

    def contains(self, key: str) -> bool:
        return key in self._data

    def clear(self) -> None:
        self._data.clear()

    def sync(self) -> None:
        self.sync_count += 1


def make_settings_manager(fake: FakeQSettings | None = None) -> SettingsManager:
    mgr = SettingsManager.__new__(SettingsManager)
    mgr._settings = fake if fake is not None else FakeQSettings()
    return mgr


class FakeInteraction:
    """Scripted UserInteraction: answers are popped from queues, calls recorded."""

    def __init__(self):
        self.open_paths: list[Path | None] = []
        self.open_many: list[list[Path]] = []
        self.save_paths: list[Path | None] = []
        self.confirm_answers: list[bool] = []
        self.alerts: list[str] = []
        self.confirms: list[str] = []
        self.picks: list[tuple[str, str, str]] = []

    def pick_file(self, title, file_filter="", start_dir=""):
        self.picks.append(("open", title, start_dir))
        return self.open_paths.pop(0) if self.open_paths else None

    def pick_files(self, title, file_filter="", start_dir=""):
        self.picks.append(("open_many", title, start_dir))
        return self.open_many.pop(0) if self.open_many else []

    def pick_save_file(self, title, file_filter="", start_dir=""):
        self.picks.append(("save", title, start_dir))
        return self.save_paths.pop(0) if self.save_paths else None

    def confirm(self, message):
        self.confirms.append(message)
        return self.confirm_answers.pop(0) if self.confirm_answers else False

    def alert(self, message):
        self.alerts.append(message)


class EventRecorder:
    """Subscribes to every Application event and keeps (event, args) in order."""

    def __init__(self, app: Application):
        self.events: list[tuple[str, tuple]] = []
        for event in Events.ALL:
            app.add_observer(event, self._make_listener(event))

    def _make_listener(self, event: str):
        def _listener(*args):
            self.events.append((event, args))
        return _listener

    def names(self) -> list[str]:
        return [name for name, _ in self.events]

    def clear(self) -> None:
        self.events.clear()


@pytest.fixture
def fake_qsettings() -> FakeQSettings:
    return FakeQSettings()


@pytest.fixture
def settings(fake_qsettings) -> SettingsManager:
    return make_settings_manager(fake_qsettings)


@pytest.fixture
def interaction() -> FakeInteraction:
    return FakeInteraction()


@pytest.fixture
def app(settings, interaction) -> Application:
    return Application(settings, interaction)


@pytest.fixture
def recorder(app) -> EventRecorder:
    return EventRecorder(app)


@pytest.fixture
def write_case(tmp_path):
    """Factory writing a JSON test case file and returning its path."""

    def _write(name: str, title: str | None = None, commands: list[Command] | None = None,
               base_url: str = "", directory: Path | None = None) -> Path:
        directory = directory or tmp_path
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{name}.json"
        case = TestCase(
            title=title or name,
            commands=commands if commands is not None else [Command("open", "/")],
            base_url=base_url,
        )
        JsonFormat().save_file(case, path)
        return path

    return _write


@pytest.fixture
def write_suite(tmp_path, write_case):
    """Factory writing a suite file (and its cases) and returning the suite path."""

    def _write(name: str, case_names: list[str], directory: Path | None = None) -> Path:
        directory = directory or tmp_path
        suite = TestSuite(title=name)
        for case_name in case_names:
            case_path = write_case(case_name, directory=directory)
            suite.add_test_case_from_content(JsonFormat().load_file(case_path))
        path = directory / f"{name}.suite.json"
        save_suite(suite, path)
        return path

    return _write
