"""JSON-based test suite save / load (.suite.json)."""

from __future__ import annotations

import json
import os
from pathlib import Path

from suite_editor.models.test_suite import SuiteEntry, TestSuite
from suite_editor.services.formats import FormatError
from suite_editor.utils.config import SUITE_FILE_VERSION


def _relative_filename(path: Path, base_dir: Path) -> str:
    try:
        return Path(os.path.relpath(path, base_dir)).as_posix()
    except ValueError:
        # different drive on Windows
        return str(path)


def save_suite(suite: TestSuite, path: Path) -> None:
    """Serialize *suite* to *path*. Every entry must already have a file."""
    path = Path(path)
    base_dir = path.parent
    tests_data = []
    for entry in suite.tests:
        file = entry.get_file()
        if file is None:
            raise FormatError(f"Test case '{entry.get_title()}' has not been saved")
        tests_data.append({
            "title": entry.get_title(),
            "file": _relative_filename(file, base_dir),
        })

    data = {
        "version": SUITE_FILE_VERSION,
        "title": suite.title,
        "tests": tests_data,
    }
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")


def load_suite(path: Path) -> TestSuite:
    """Deserialize a suite file. Test case contents are loaded on demand."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Test suite file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise FormatError(f"{path.name} is not a valid test suite: {e}") from e
    if not isinstance(data, dict) or not isinstance(data.get("tests"), list):
        raise FormatError(f"{path.name} is not a valid test suite: missing tests")

    base_dir = path.parent
    suite = TestSuite(title=data.get("title") or path.stem, file=path)
    for d in data["tests"]:
        if not isinstance(d, dict) or not d.get("file"):
            raise FormatError(f"{path.name} has a test entry without a file")
        suite.add_entry(SuiteEntry(
            filename=d["file"],
            title=d.get("title", ""),
            base_dir=base_dir,
        ))
    return suite
