from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest


class RecordingViewer:
    def __init__(self):
        self.opened: list[Path] = []

    def open(self, path: Path) -> None:
        self.opened.append(path)


@pytest.fixture
def day():
    return datetime(2024, 3, 4)


@pytest.fixture
def viewer():
    return RecordingViewer()


@pytest.fixture
def settings(tmp_path):
    return SimpleNamespace(
        SOURCE_URL="",
        SOURCE_ACCESS_CODE="",
        REQUEST_TIMEOUT_SECONDS=1.0,
        REPORT_OUTPUT_PATH=str(tmp_path / "report.html"),
        LOW_HOURS_THRESHOLD=100.0,
        NEGATIVE_DURATION_POLICY="signed",
        OPEN_REPORT=False,
        DEBUG=False,
    )
