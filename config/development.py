import os

# Remote time-entry endpoint. The access code is sent as the `code` query parameter.
SOURCE_URL = os.getenv("SOURCE_URL", "https://rc-vault-fap-live-1.azurewebsites.net/api/gettimeentries")
SOURCE_ACCESS_CODE = os.getenv("SOURCE_ACCESS_CODE", "")
# Numeric and flag values stay raw strings here; build_container validates them.
REQUEST_TIMEOUT_SECONDS = os.getenv("REQUEST_TIMEOUT_SECONDS", "10")

REPORT_OUTPUT_PATH = os.getenv("REPORT_OUTPUT_PATH", "report.html")
LOW_HOURS_THRESHOLD = os.getenv("LOW_HOURS_THRESHOLD", "100")

# signed / clamp / overnight
NEGATIVE_DURATION_POLICY = os.getenv("NEGATIVE_DURATION_POLICY", "signed")

OPEN_REPORT = os.getenv("OPEN_REPORT", "1")

DEBUG = True
