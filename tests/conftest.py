"""
Pytest configuration and shared fixtures.
"""

import json
import stat
import sys
from pathlib import Path

import pytest

# Make the package importable without installing it
sys.path.insert(0, str(Path(__file__).parent.parent))

from week_logs.config import Config  # noqa: E402


class FakeSheetsClient:
    """Stands in for GoogleSheetsClient, returning canned rows."""

    def __init__(self, rows):
        self.rows = rows
        self.selections = []

    def get_rows(self, selection):
        self.selections.append(selection)
        return self.rows


@pytest.fixture
def sample_rows():
    """Rows in sheet order: day, description, particularities, duration."""
    return [
        ["01/01/24", "desc", "note", "9h"],
        ["03/01/24", "d2", "n2", "7h30m"],
        ["09/01/24", "Review", "", "45m"],
    ]


@pytest.fixture
def raw_config(tmp_path):
    return {
        "language": "en",
        "name": "Jane Doe",
        "result": str(tmp_path / "week-%02d.pdf"),
        "company": {"name": "ACME Ltd.", "leader": "John Roe"},
        "sheet": {
            "id": "sheet-123",
            "selection": "Logs!A2:D",
            "columns": ["Day", "Description", "Particularities", "Duration"],
        },
    }


@pytest.fixture
def config(raw_config):
    return Config.model_validate(raw_config)


@pytest.fixture
def config_file(tmp_path, raw_config):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(raw_config), encoding="utf-8")
    return path


@pytest.fixture
def fake_sheets_client(sample_rows):
    return FakeSheetsClient(sample_rows)


def write_script(path: Path, body: str) -> Path:
    path.write_text("#!/bin/sh\n" + body + "\n", encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def copying_converter(tmp_path):
    """Executable that behaves like `wkhtmltopdf - <dest>` by copying stdin to dest."""
    return write_script(tmp_path / "fake-converter", 'cat > "$2"')


@pytest.fixture
def failing_converter(tmp_path):
    return write_script(tmp_path / "broken-converter", "cat > /dev/null\nexit 3")
