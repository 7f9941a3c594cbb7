from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from ..core.constants import CHART_COLORS, CHART_JS_URL, LOW_HOURS_THRESHOLD
from ..summary.model import EmployeeSummary
from .model import ReportRow

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
REPORT_TEMPLATE = "report.html"


class ReportRenderer:
    """Render employee summaries into a self-contained HTML page.

    Names are treated as untrusted text: the table cells are HTML-escaped and
    the chart labels go through ``tojson``, which also escapes ``<``, ``>``,
    ``&`` and ``'`` so a name cannot close the surrounding ``<script>``.
    Output depends only on the summaries, so equal input gives equal bytes.
    """

    def __init__(
        self,
        *,
        low_hours_threshold: float = LOW_HOURS_THRESHOLD,
        environment: Optional[Environment] = None,
    ):
        self._low_hours_threshold = low_hours_threshold
        self._env = environment or Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )

    def build_rows(self, summaries: Sequence[EmployeeSummary]) -> list[ReportRow]:
        return [ReportRow.from_summary(s, low_hours_threshold=self._low_hours_threshold) for s in summaries]

    def render(self, summaries: Sequence[EmployeeSummary]) -> str:
        rows = self.build_rows(summaries)
        template = self._env.get_template(REPORT_TEMPLATE)
        return template.render(
            rows=rows,
            labels=[r.name for r in rows],
            values=[r.chart_value for r in rows],
            colors=list(CHART_COLORS),
            chart_js_url=CHART_JS_URL,
        )
