"""Application — editor state shared by every view.

Holds the current test suite / test case, the selected formats, the base URL
and the recent-file histories. Views subscribe with ``add_observer`` and are
notified synchronously after each change. Dialogs go through the injected
``UserInteraction`` so the controller runs headless in tests.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Protocol

from suite_editor.models.test_case import TestCase
from suite_editor.models.test_suite import SuiteEntry, TestSuite
from suite_editor.services.formats import FormatCollection, TestCaseFormat
from suite_editor.services.history import ListStore, StoredHistory
from suite_editor.services.suite_io import load_suite, save_suite
from suite_editor.utils.config import BASE_URL_HISTORY_SIZE, TEST_SUITE_FILTER
from suite_editor.utils.i18n import tr
from suite_editor.utils.observable import Observable

if TYPE_CHECKING:
    from suite_editor.ui.interaction import UserInteraction


class Events:
    """Names of the notifications sent by :class:`Application`."""

    BASE_URL_CHANGED = "base_url_changed"
    OPTIONS_CHANGED = "options_changed"
    CURRENT_FORMAT_CHANGING = "current_format_changing"
    CURRENT_FORMAT_CHANGED = "current_format_changed"
    CLIPBOARD_FORMAT_CHANGED = "clipboard_format_changed"
    TEST_SUITE_UNLOADED = "test_suite_unloaded"
    TEST_SUITE_CHANGED = "test_suite_changed"
    TEST_CASE_UNLOADED = "test_case_unloaded"
    TEST_CASE_CHANGED = "test_case_changed"

    ALL = (
        BASE_URL_CHANGED,
        OPTIONS_CHANGED,
        CURRENT_FORMAT_CHANGING,
        CURRENT_FORMAT_CHANGED,
        CLIPBOARD_FORMAT_CHANGED,
        TEST_SUITE_UNLOADED,
        TEST_SUITE_CHANGED,
        TEST_CASE_UNLOADED,
        TEST_CASE_CHANGED,
    )


class PreferencesStore(ListStore, Protocol):
    def load(self) -> dict[str, str]: ...

    def set_and_save(self, options: dict[str, str], key: str, value: str) -> None: ...


FORMAT_SWITCH_WARNING = "Changing format may cause loss of unsaved changes. Do you want to continue?"
MISSING_TEST_CASE = (
    "The test case does not exist. You should probably remove it from the suite. The path specified is"
)


class Application(Observable):
    """Model of the editor session state."""

    def __init__(
        self,
        preferences: PreferencesStore,
        interaction: UserInteraction,
        *,
        format_factory: Callable[[dict[str, str]], FormatCollection] = FormatCollection,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__()
        self.log = logger or logging.getLogger(__name__)
        self.preferences = preferences
        self.interaction = interaction
        self._format_factory = format_factory

        self.base_url = ""
        self.options = preferences.load()
        self.base_url_history = StoredHistory("base_url_history", BASE_URL_HISTORY_SIZE, preferences)
        self.recent_test_suites = StoredHistory("recent_test_suites", store=preferences)
        self.recent_test_cases = StoredHistory("recent_test_cases", store=preferences)

        self.test_case: TestCase | None = None
        self.test_suite: TestSuite | None = None
        self.formats = format_factory(self.options)
        self.current_format: TestCaseFormat = self.formats.select_format(self.options.get("selected_format") or None)
        self.clipboard_format: TestCaseFormat = self.formats.select_format(self.options.get("clipboard_format") or None)

    # ---- 상태 저장 / 옵션 ----

    def save_state(self) -> None:
        if self.get_boolean_option("remember_base_url"):
            self.preferences.set_and_save(self.options, "base_url", self.base_url)

    def init_options(self) -> None:
        """Restore the remembered base URL and tell views about the options."""
        if self.get_boolean_option("remember_base_url") and self.options.get("base_url") is not None:
            self.set_base_url(self.options["base_url"])
        self.set_options(self.options)

    def get_boolean_option(self, option: str) -> bool:
        value = self.options.get(option)
        if value:
            return str(value).lower() == "true"
        return False

    def get_options(self) -> dict[str, str]:
        return self.options

    def set_options(self, options: dict[str, str]) -> None:
        self.options = options
        self.formats = self._format_factory(options)
        self.current_format = self.formats.select_format(options.get("selected_format") or None)
        self.clipboard_format = self.formats.select_format(options.get("clipboard_format") or None)
        self.notify(Events.OPTIONS_CHANGED, options)

    # ---- Base URL ----

    def get_base_url(self) -> str:
        """The current test case's base URL, falling back to the application's."""
        if self.test_case is not None and self.test_case.base_url:
            return self.test_case.base_url
        return self.base_url

    def set_base_url(self, base_url: str) -> None:
        self.base_url = base_url
        self.base_url_history.add(base_url)
        if self.test_case is not None:
            self.test_case.set_base_url(base_url)
        self.notify(Events.BASE_URL_CHANGED)

    def get_base_url_history(self) -> list[str]:
        return self.base_url_history.items()

    # ---- 포맷 ----

    def user_set_current_format(self, fmt: TestCaseFormat) -> bool:
        """Switch format on user request, asking first unless the warning is disabled."""
        if fmt is self.current_format:
            return False
        if self.get_boolean_option("disable_format_change_msg") or self.interaction.confirm(tr(FORMAT_SWITCH_WARNING)):
            self.set_current_format(fmt)
            return True
        return False

    def set_current_format(self, fmt: TestCaseFormat) -> None:
        # views flush their edits into the test case on "changing"
        self.notify(Events.CURRENT_FORMAT_CHANGING)
        self.current_format = fmt
        self.preferences.set_and_save(self.options, "selected_format", fmt.id)
        self.notify(Events.CURRENT_FORMAT_CHANGED, fmt)

    def get_current_format(self) -> TestCaseFormat:
        return self.current_format

    def is_playable(self) -> bool:
        return self.current_format.playable

    def set_clipboard_format(self, fmt: TestCaseFormat) -> None:
        self.clipboard_format = fmt
        self.preferences.set_and_save(self.options, "clipboard_format", fmt.id)
        self.notify(Events.CLIPBOARD_FORMAT_CHANGED, fmt)

    def get_clipboard_format(self) -> TestCaseFormat:
        return self.clipboard_format

    def get_formats(self) -> FormatCollection:
        return self.formats

    # ---- 테스트 스위트 ----

    def new_test_suite(self) -> None:
        self.log.debug("new_test_suite")
        test_suite = TestSuite()
        test_case = TestCase()
        test_suite.add_test_case_from_content(test_case)
        self.set_test_suite(test_suite)
        self.set_test_case(test_case)
        self.preferences.set_and_save(self.options, "last_saved_test_suite", "")
        self.preferences.set_and_save(self.options, "last_saved_test_case", "")

    def set_test_suite(self, test_suite: TestSuite) -> None:
        if self.test_suite is not None:
            self.notify(Events.TEST_SUITE_UNLOADED, self.test_suite)
        self.test_suite = test_suite
        self.notify(Events.TEST_SUITE_CHANGED, test_suite)

    def get_test_suite(self) -> TestSuite | None:
        return self.test_suite

    def add_recent_test_suite(self, test_suite: TestSuite) -> None:
        if test_suite.file is None:
            return
        path = str(test_suite.file)
        self.recent_test_suites.add(path)
        self.preferences.set_and_save(self.options, "last_saved_test_suite", path)
        self.preferences.set_and_save(self.options, "last_saved_test_case", "")

    def add_recent_test_case(self, test_case: TestCase, is_new_suite: bool = False) -> None:
        if test_case.file is None:
            return
        path = str(test_case.file)
        self.recent_test_cases.add(path)
        if is_new_suite:
            self.preferences.set_and_save(self.options, "last_saved_test_suite", "")
        if not self.options.get("last_saved_test_suite"):
            self.preferences.set_and_save(self.options, "last_saved_test_case", path)

    def reopen_last_test_case_or_suite(self) -> bool:
        """Reopen the last saved suite, or else the last saved single test case."""
        suite_path = self.options.get("last_saved_test_suite", "")
        case_path = self.options.get("last_saved_test_case", "")
        try:
            if suite_path and Path(suite_path).is_file():
                return self.load_test_suite(suite_path, suppress_errors=True)
            if case_path and Path(case_path).is_file():
                return self.load_test_case_with_new_suite(case_path)
        except Exception as e:
            self.log.error(f"reopen_last_test_case_or_suite: {e}")
            self.interaction.alert(f"{tr('Error reopening test suite / case')}: {e}")
        return False

    # ---- 테스트 케이스 ----

    def set_test_case(self, test_case: TestCase) -> None:
        if self.test_case is not None:
            if test_case is self.test_case:
                return
            self.notify(Events.TEST_CASE_UNLOADED, self.test_case)
        self.test_case = test_case
        if test_case.base_url:
            self.set_base_url(test_case.base_url)
        else:
            test_case.set_base_url(self.base_url)
        self.notify(Events.TEST_CASE_CHANGED, test_case)

    def get_test_case(self) -> TestCase | None:
        return self.test_case

    def new_test_case(self) -> TestCase:
        if self.test_suite is None:
            self.set_test_suite(TestSuite())
        test_case = TestCase(title=self.test_suite.generate_new_test_case_title())
        self.test_suite.add_test_case_from_content(test_case)
        self.set_test_case(test_case)
        return test_case

    def add_test_case(self, path: str | Path | None = None) -> list[TestCase]:
        """Add test cases to the current suite, from *path* or picked by the user.

        Every added case becomes current in turn; files that fail to load are
        reported and skipped.
        """
        if path:
            paths = [Path(path)]
        else:
            paths = self.interaction.pick_files(
                "Select one or more test cases to add",
                self.current_format.file_filter(),
                self._test_case_directory(),
            )
            if paths:
                self._remember_directory(paths[0])

        added = []
        for p in paths:
            test_case = self._load_test_case(p)
            if test_case is None:
                self.log.error(f"add_test_case: could not load {p}")
                continue
            if self.test_suite is None:
                self.set_test_suite(TestSuite())
            self.test_suite.add_test_case_from_content(test_case)
            self.set_test_case(test_case)
            added.append(test_case)
        return added

    def import_test_suite(self, path: str | Path | None = None) -> bool:
        """Append every test of another suite file to the current suite.

        Imported entries remember the name of the directory they came from in
        ``parent``; their contents are loaded when first shown.
        """
        self.log.debug("import_test_suite")
        try:
            suite_path = Path(path) if path else self._pick_file("Open Test Suite", TEST_SUITE_FILTER)
            if suite_path is None:
                return False
            imported = load_suite(suite_path)
        except Exception as e:
            self.log.error(f"import_test_suite: {e}")
            self.interaction.alert(f"{tr('Error loading test suite')}: {e}")
            return False

        if self.test_suite is None:
            self.set_test_suite(TestSuite())
        parent = suite_path.resolve().parent.name
        for entry in imported.tests:
            entry.parent = parent
            self.test_suite.add_entry(entry)
        self.notify(Events.TEST_SUITE_CHANGED, self.test_suite)
        return True

    def load_test_case_with_new_suite(self, path: str | Path | None = None) -> bool:
        """Open a single test case in a throwaway suite.

        If the file is not a test case, it is retried as a test suite before
        the original error is shown.
        """
        if path:
            file = Path(path)
        else:
            file = self._pick_file("Select a File", self.current_format.file_filter())
            if file is None:
                return False

        try:
            test_case = self._load_test_case(file, suppress_errors=True)
        except Exception as case_error:
            try:
                return self.load_test_suite(file, suppress_errors=True)
            except Exception as suite_error:
                self.log.debug(f"{file} is not a test suite either: {suite_error}")
                self.interaction.alert(f"{tr('Error loading test case')}: {case_error}")
                return False

        if test_case is None:
            return False
        self.set_test_case_with_new_suite(test_case)
        return True

    def set_test_case_with_new_suite(self, test_case: TestCase) -> None:
        test_suite = TestSuite()
        test_suite.add_test_case_from_content(test_case)
        self.set_test_suite(test_suite)
        self.set_test_case(test_case)
        self.add_recent_test_case(test_case, True)

    def show_test_case_from_suite(self, entry: SuiteEntry) -> TestCase | None:
        """Make a suite entry's test case current, loading it on first use."""
        if entry.content is not None:
            self.set_test_case(entry.content)
            return entry.content

        file = entry.get_file()

        def _adopt(test_case: TestCase) -> None:
            if entry.title:
                test_case.title = entry.title  # title from suite
            entry.content = test_case

        try:
            if file is None:
                raise FileNotFoundError(f"{entry.get_title()} has no file")
            content = self._load_test_case(file, _adopt, suppress_errors=True)
        except FileNotFoundError:
            self.interaction.alert(f"{tr(MISSING_TEST_CASE)} {file}")
            return None
        except Exception as e:
            self.log.error(f"show_test_case_from_suite: {e}")
            self.interaction.alert(f"{tr('Error loading test case')}: {e}")
            return None

        if content is not None:
            self.set_test_case(content)
        return content

    def _load_test_case(
        self,
        file: Path | None = None,
        handler: Callable[[TestCase], None] | None = None,
        suppress_errors: bool = False,
    ) -> TestCase | None:
        """Load a test case with the current format.

        Errors are alerted and None returned, or re-raised when
        *suppress_errors* is set so the caller can decide what to show.
        """
        self.log.debug("load_test_case")
        try:
            if file is None:
                file = self._pick_file("Open Test Case", self.current_format.file_filter())
                if file is None:
                    return None
            test_case = self.current_format.load_file(file)
            if handler is not None:
                handler(test_case)
            return test_case
        except Exception as e:
            if suppress_errors:
                raise
            self.log.error(f"load_test_case: {e}")
            self.interaction.alert(f"{tr('Error loading test case')}: {e}")
            return None

    def load_test_suite(self, path: str | Path | None = None, suppress_errors: bool = False) -> bool:
        """Open a suite file and show its first test case.

        The current state is left alone when the file cannot be read.
        """
        self.log.debug("load_test_suite")
        try:
            suite_path = Path(path) if path else self._pick_file("Open Test Suite", TEST_SUITE_FILTER)
            if suite_path is None:
                return False
            test_suite = load_suite(suite_path)
        except Exception as e:
            if suppress_errors:
                raise
            self.log.error(f"load_test_suite: {e}")
            self.interaction.alert(f"{tr('Error loading test suite')}: {e}")
            return False

        self.set_test_suite(test_suite)
        self.add_recent_test_suite(test_suite)
        if test_suite.tests:
            self.show_test_case_from_suite(test_suite.tests[0])
        return True

    # ---- 저장 ----

    def save_test_suite(self, suppress_test_case_prompt: bool = False) -> bool:
        return self._save_test_suite_as(
            lambda test_suite: self._write_test_suite(test_suite, as_new=False),
            suppress_test_case_prompt,
        )

    def save_new_test_suite(self, suppress_test_case_prompt: bool = False) -> bool:
        return self._save_test_suite_as(
            lambda test_suite: self._write_test_suite(test_suite, as_new=True),
            suppress_test_case_prompt,
        )

    def _save_test_suite_as(self, handler: Callable[[TestSuite], bool], suppress_test_case_prompt: bool) -> bool:
        """Save unsaved test cases one by one, then the suite itself.

        Declining a prompt or cancelling a save stops the whole sequence.
        """
        self.log.debug("save_test_suite")
        test_suite = self.test_suite
        if test_suite is None:
            return False
        for entry in test_suite.tests:
            if not entry.needs_save:
                continue
            if not suppress_test_case_prompt:
                message = (
                    f"{tr('The test case')} {entry.get_title()} "
                    f"{tr('is modified. Do you want to save this test case?')}"
                )
                if not self.interaction.confirm(message):
                    return False
            if not self._save_test_case(entry.content, as_new=False):
                return False
        if handler(test_suite):
            self.add_recent_test_suite(test_suite)
            return True
        return False

    def _write_test_suite(self, test_suite: TestSuite, as_new: bool) -> bool:
        path = test_suite.file
        if as_new or path is None:
            path = self.interaction.pick_save_file("Save Test Suite", TEST_SUITE_FILTER, self._test_case_directory())
            if path is None:
                return False
        try:
            save_suite(test_suite, path)
        except Exception as e:
            self.log.error(f"save_test_suite: {e}")
            self.interaction.alert(f"{tr('Error saving test suite')}: {e}")
            return False
        test_suite.file = Path(path)
        self._remember_directory(path)
        return True

    def _save_test_case(self, test_case: TestCase, as_new: bool) -> bool:
        fmt = self.current_format
        path = test_case.file
        if as_new or path is None:
            path = self.interaction.pick_save_file("Save Test Case", fmt.file_filter(), self._test_case_directory())
            if path is None:
                return False
        try:
            fmt.save_file(test_case, path)
        except Exception as e:
            self.log.error(f"save_test_case: {e}")
            self.interaction.alert(f"{tr('Error saving test case')}: {e}")
            return False
        test_case.mark_saved(Path(path))
        self._remember_directory(path)
        return True

    def save_test_case(self) -> bool:
        if self.test_case is None:
            return False
        result = self._save_test_case(self.test_case, as_new=False)
        if result:
            self.add_recent_test_case(self.test_case)
        return result

    def save_new_test_case(self) -> bool:
        if self.test_case is None:
            return False
        result = self._save_test_case(self.test_case, as_new=True)
        if result:
            self.add_recent_test_case(self.test_case)
        return result

    # ---- 파일 선택 ----

    def _test_case_directory(self) -> str:
        return self.options.get("test_case_directory", "")

    def _remember_directory(self, path: str | Path) -> None:
        directory = str(Path(path).parent)
        if directory != self._test_case_directory():
            self.preferences.set_and_save(self.options, "test_case_directory", directory)

    def _pick_file(self, title: str, file_filter: str) -> Path | None:
        path = self.interaction.pick_file(title, file_filter, self._test_case_directory())
        if path is not None:
            self._remember_directory(path)
        return path
