import os

# No remote endpoint: acquisition always uses the fallback dataset.
SOURCE_URL = ""
SOURCE_ACCESS_CODE = ""
REQUEST_TIMEOUT_SECONDS = 1.0

REPORT_OUTPUT_PATH = os.getenv("REPORT_OUTPUT_PATH", "report.html")
LOW_HOURS_THRESHOLD = 100.0

NEGATIVE_DURATION_POLICY = "signed"

OPEN_REPORT = False

DEBUG = False
TESTING = True
