from __future__ import annotations

from pathlib import Path
from typing import Union

from ..core.exceptions import ReportWriteError


class ReportWriter:
    """Persist the rendered document under a fixed path."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def write(self, document: str) -> Path:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(document, encoding="utf-8")
        except OSError as e:
            raise ReportWriteError(f"cannot write report to {self._path}: {e.strerror or e}") from e
        return self._path
