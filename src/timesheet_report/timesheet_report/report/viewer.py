from __future__ import annotations

import webbrowser
from pathlib import Path
from typing import Protocol


class ReportViewer(Protocol):
    def open(self, path: Path) -> None:
        raise NotImplementedError


class BrowserReportViewer:
    """Open the report in the default browser."""

    def open(self, path: Path) -> None:
        webbrowser.open(path.resolve().as_uri())


class NullReportViewer:
    """Viewer that does nothing (tests, headless runs)."""

    def open(self, path: Path) -> None:
        return None
