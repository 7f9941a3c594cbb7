"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

UNKNOWN_EMPLOYEE_NAME = "Unknown"
LOW_HOURS_THRESHOLD = 100.0
DEFAULT_REPORT_PATH = "report.html"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 10.0

CHART_JS_URL = "https://cdn.jsdelivr.net/npm/chart.js"
CHART_COLORS = (
    "rgba(255, 99, 132, 0.6)",
    "rgba(54, 162, 235, 0.6)",
    "rgba(255, 206, 86, 0.6)",
    "rgba(75, 192, 192, 0.6)",
    "rgba(153, 102, 255, 0.6)",
    "rgba(255, 159, 64, 0.6)",
    "rgba(100, 255, 218, 0.6)",
    "rgba(255, 120, 255, 0.6)",
)

LOG_PREFIX = "[timesheet-report]"
