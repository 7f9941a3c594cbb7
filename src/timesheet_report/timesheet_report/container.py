from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Optional

from .common.validators import parse_flag_setting, parse_float_setting, require_positive
from .core.constants import DEFAULT_REPORT_PATH, DEFAULT_REQUEST_TIMEOUT_SECONDS, LOW_HOURS_THRESHOLD
from .entries.fallback_entry_source import FallbackEntrySource
from .entries.http_entry_source import HttpEntrySource
from .entries.service import EntryAcquisitionService
from .pipeline.service import ReportPipeline
from .report.renderer import ReportRenderer
from .report.viewer import BrowserReportViewer, NullReportViewer, ReportViewer
from .report.writer import ReportWriter
from .summary.calculator.factory import calculator_for
from .summary.service import SummaryService


@dataclass(frozen=True)
class Container:
    entry_source: HttpEntrySource
    fallback_source: FallbackEntrySource

    acquisition_service: EntryAcquisitionService
    summary_service: SummaryService
    renderer: ReportRenderer
    writer: ReportWriter
    viewer: ReportViewer

    pipeline: ReportPipeline


def build_container(settings: ModuleType, *, viewer: Optional[ReportViewer] = None) -> Container:
    timeout = require_positive(
        parse_float_setting(
            getattr(settings, "REQUEST_TIMEOUT_SECONDS", DEFAULT_REQUEST_TIMEOUT_SECONDS),
            "REQUEST_TIMEOUT_SECONDS",
        ),
        "REQUEST_TIMEOUT_SECONDS",
    )

    entry_source = HttpEntrySource(
        str(getattr(settings, "SOURCE_URL", "") or ""),
        access_code=getattr(settings, "SOURCE_ACCESS_CODE", None) or None,
        timeout=timeout,
    )
    fallback_source = FallbackEntrySource()

    acquisition_service = EntryAcquisitionService(entry_source, fallback=fallback_source)
    summary_service = SummaryService(
        calculator=calculator_for(getattr(settings, "NEGATIVE_DURATION_POLICY", "signed")),
    )
    renderer = ReportRenderer(
        low_hours_threshold=parse_float_setting(
            getattr(settings, "LOW_HOURS_THRESHOLD", LOW_HOURS_THRESHOLD),
            "LOW_HOURS_THRESHOLD",
        ),
    )
    writer = ReportWriter(getattr(settings, "REPORT_OUTPUT_PATH", DEFAULT_REPORT_PATH) or DEFAULT_REPORT_PATH)

    open_report = parse_flag_setting(getattr(settings, "OPEN_REPORT", False), "OPEN_REPORT")
    if viewer is None:
        viewer = BrowserReportViewer() if open_report else NullReportViewer()

    pipeline = ReportPipeline(acquisition_service, summary_service, renderer, writer, viewer)

    return Container(
        entry_source=entry_source,
        fallback_source=fallback_source,
        acquisition_service=acquisition_service,
        summary_service=summary_service,
        renderer=renderer,
        writer=writer,
        viewer=viewer,
        pipeline=pipeline,
    )
