from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..core.constants import LOG_PREFIX
from ..core.enums import AcquisitionStatus, PipelineOutcome
from ..entries.service import EntryAcquisitionService
from ..report.renderer import ReportRenderer
from ..report.viewer import ReportViewer
from ..report.writer import ReportWriter
from ..summary.model import EmployeeSummary
from ..summary.service import SummaryService


@dataclass(frozen=True)
class PipelineResult:
    outcome: PipelineOutcome
    acquisition: Optional[AcquisitionStatus] = None
    summaries: list[EmployeeSummary] = field(default_factory=list)
    report_path: Optional[Path] = None


class ReportPipeline:
    """acquire -> summarize -> render -> write -> open."""

    def __init__(
        self,
        acquisition: EntryAcquisitionService,
        summaries: SummaryService,
        renderer: ReportRenderer,
        writer: ReportWriter,
        viewer: ReportViewer,
    ):
        self._acquisition = acquisition
        self._summaries = summaries
        self._renderer = renderer
        self._writer = writer
        self._viewer = viewer

    def run(self) -> PipelineResult:
        acquired = self._acquisition.acquire()
        if not acquired.entries:
            print(f"{LOG_PREFIX} No data to process.")
            return PipelineResult(outcome=PipelineOutcome.NO_DATA, acquisition=acquired.status)

        summaries = self._summaries.summarize(acquired.entries)
        document = self._renderer.render(summaries)
        report_path = self._writer.write(document)
        print(f"{LOG_PREFIX} {report_path} has been created.")

        self._viewer.open(report_path)

        return PipelineResult(
            outcome=PipelineOutcome.SUCCESS,
            acquisition=acquired.status,
            summaries=summaries,
            report_path=report_path,
        )
