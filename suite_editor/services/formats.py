"""Pluggable test case formats and the format registry."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from suite_editor.models.test_case import Command, TestCase
from suite_editor.utils.config import DEFAULT_FORMAT_ID

logger = logging.getLogger(__name__)

CASE_FILE_VERSION = 1


class FormatError(ValueError):
    """Raised when a file cannot be read or written by a format."""


class TestCaseFormat:
    """Base class for test case serializers.

    Subclasses set ``id``/``name``/``extensions`` and implement ``load_file``
    and ``save_file``. A format that cannot parse its own output is not
    ``reversible``; one whose output cannot be replayed is not ``playable``.
    """

    __test__ = False

    id: str = ""
    name: str = ""
    extensions: tuple[str, ...] = ()
    playable: bool = True
    reversible: bool = True

    def load_file(self, path: Path) -> TestCase:
        raise NotImplementedError

    def save_file(self, test_case: TestCase, path: Path) -> None:
        raise NotImplementedError

    def file_filter(self) -> str:
        patterns = " ".join(f"*{ext}" for ext in self.extensions) or "*"
        return f"{self.name} ({patterns});;All Files (*)"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"


class JsonFormat(TestCaseFormat):
    """Native format: one JSON document per test case."""

    id = "json"
    name = "JSON Test Case"
    extensions = (".json",)

    def load_file(self, path: Path) -> TestCase:
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Test case file not found: {path}")
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise FormatError(f"{path.name} is not a valid test case: {e}") from e
        if isinstance(data, dict) and "tests" in data:
            raise FormatError(f"{path.name} is a test suite, not a test case")
        if not isinstance(data, dict) or not isinstance(data.get("commands"), list):
            raise FormatError(f"{path.name} is not a valid test case: missing commands")

        try:
            commands = [Command.from_dict(d) for d in data["commands"]]
        except (KeyError, TypeError, AttributeError) as e:
            raise FormatError(f"{path.name} has an invalid command: {e}") from e

        logger.debug(f"Loaded test case {path} ({len(commands)} commands)")
        return TestCase(
            title=data.get("title") or path.stem,
            commands=commands,
            base_url=data.get("base_url", ""),
            file=path,
        )

    def save_file(self, test_case: TestCase, path: Path) -> None:
        data = {
            "version": CASE_FILE_VERSION,
            "title": test_case.title,
            "base_url": test_case.base_url,
            "commands": [c.to_dict() for c in test_case.commands],
        }
        Path(path).write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")


class TextExportFormat(TestCaseFormat):
    """Write-only, human readable listing of the commands."""

    id = "text"
    name = "Plain Text"
    extensions = (".txt",)
    playable = False
    reversible = False

    def load_file(self, path: Path) -> TestCase:
        raise FormatError(f"{self.name} files cannot be opened: {Path(path).name}")

    def save_file(self, test_case: TestCase, path: Path) -> None:
        lines = [f"# {test_case.title}"]
        if test_case.base_url:
            lines.append(f"# base url: {test_case.base_url}")
        for c in test_case.commands:
            lines.append(" | ".join((c.command, c.target, c.value)))
        Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")


def builtin_formats() -> list[TestCaseFormat]:
    return [JsonFormat(), TextExportFormat()]


class FormatCollection:
    """Registry of the formats available for the current options."""

    def __init__(self, options: dict[str, str] | None = None,
                 formats: Iterable[TestCaseFormat] | None = None) -> None:
        self.options = options if options is not None else {}
        self._formats: list[TestCaseFormat] = list(formats) if formats is not None else builtin_formats()

    @property
    def formats(self) -> list[TestCaseFormat]:
        return list(self._formats)

    def register(self, fmt: TestCaseFormat) -> None:
        """Add *fmt*, replacing a registered format with the same id."""
        self._formats = [f for f in self._formats if f.id != fmt.id]
        self._formats.append(fmt)

    def find_format(self, format_id: str | None) -> TestCaseFormat | None:
        for fmt in self._formats:
            if fmt.id == format_id:
                return fmt
        return None

    def default_format(self) -> TestCaseFormat:
        fmt = self.find_format(DEFAULT_FORMAT_ID)
        if fmt is None:
            if not self._formats:
                raise FormatError("No formats registered")
            fmt = self._formats[0]
        return fmt

    def select_format(self, format_id: str | None) -> TestCaseFormat:
        """Return the format with *format_id*, or the default one."""
        fmt = self.find_format(format_id) if format_id else None
        if fmt is None:
            if format_id:
                logger.warning(f"Unknown format '{format_id}', using default")
            fmt = self.default_format()
        return fmt

    def __len__(self) -> int:
        return len(self._formats)

    def __iter__(self):
        return iter(self._formats)
