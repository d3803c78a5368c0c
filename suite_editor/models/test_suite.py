"""Test suite data models (pure Python, no Qt dependency)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from suite_editor.models.test_case import TestCase

DEFAULT_CASE_TITLE = "Untitled"


@dataclass(slots=True, eq=False)
class SuiteEntry:
    """One test case reference inside a suite.

    ``content`` stays None until the case is opened; ``filename`` is relative
    to ``base_dir`` (the suite file's directory) unless absolute.
    """

    filename: str = ""
    title: str = ""
    content: TestCase | None = None
    base_dir: Path | None = None
    parent: str = ""  # name of the suite this entry was imported from

    def get_title(self) -> str:
        if self.content is not None:
            return self.content.title
        return self.title

    def get_file(self) -> Path | None:
        if self.content is not None and self.content.file is not None:
            return self.content.file
        if not self.filename:
            return None
        path = Path(self.filename)
        if not path.is_absolute() and self.base_dir is not None:
            path = self.base_dir / path
        return path

    @property
    def needs_save(self) -> bool:
        """True for loaded content that is modified or was never written to disk."""
        if self.content is None:
            return False
        return self.content.modified or self.get_file() is None


@dataclass(slots=True, eq=False)
class TestSuite:
    """An ordered collection of test cases."""

    __test__ = False

    tests: list[SuiteEntry] = field(default_factory=list)
    title: str = "Test Suite"
    file: Path | None = None

    def add_test_case_from_content(self, test_case: TestCase) -> SuiteEntry:
        """Append an already loaded case and return its entry."""
        entry = SuiteEntry(title=test_case.title, content=test_case)
        self.tests.append(entry)
        return entry

    def add_entry(self, entry: SuiteEntry) -> None:
        self.tests.append(entry)

    def entry_for(self, test_case: TestCase) -> SuiteEntry | None:
        for entry in self.tests:
            if entry.content is test_case:
                return entry
        return None

    def remove(self, entry: SuiteEntry) -> None:
        if entry in self.tests:
            self.tests.remove(entry)

    def generate_new_test_case_title(self) -> str:
        """Return "Untitled", then "Untitled 2", "Untitled 3", ... skipping used titles."""
        used = {entry.get_title() for entry in self.tests}
        if DEFAULT_CASE_TITLE not in used:
            return DEFAULT_CASE_TITLE
        n = 2
        while f"{DEFAULT_CASE_TITLE} {n}" in used:
            n += 1
        return f"{DEFAULT_CASE_TITLE} {n}"

    @property
    def modified(self) -> bool:
        return any(entry.needs_save for entry in self.tests)

    @property
    def base_dir(self) -> Path | None:
        return self.file.parent if self.file is not None else None

    def __len__(self) -> int:
        return len(self.tests)

    def __iter__(self):
        return iter(self.tests)

    def __getitem__(self, index: int) -> SuiteEntry:
        return self.tests[index]
