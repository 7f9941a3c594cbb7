from __future__ import annotations

import json

import pytest
import requests

from src.timesheet_report.timesheet_report.core.exceptions import AcquisitionError
from src.timesheet_report.timesheet_report.core.enums import AcquisitionStatus
from src.timesheet_report.timesheet_report.entries.fallback_entry_source import FALLBACK_ENTRIES
from src.timesheet_report.timesheet_report.entries.http_entry_source import HttpEntrySource
from src.timesheet_report.timesheet_report.entries.service import EntryAcquisitionService


class FakeResponse:
    def __init__(self, *, status_code: int = 200, body: str = "[]"):
        self.status_code = status_code
        self._body = body

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        return json.loads(self._body)


class FakeSession:
    def __init__(self, *, response: FakeResponse = None, error: Exception = None):
        self._response = response
        self._error = error
        self.calls: list[dict] = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self._error is not None:
            raise self._error
        return self._response


def make_source(session: FakeSession, **kwargs) -> HttpEntrySource:
    kwargs.setdefault("access_code", "secret")
    kwargs.setdefault("timeout", 2.5)
    return HttpEntrySource("https://example.test/api/entries", session_factory=lambda: session, **kwargs)


def test_fetch_sends_code_and_timeout():
    body = json.dumps([{"employee": {"name": "Alice"}, "timeIn": "2024-01-01T09:00:00", "timeOut": "2024-01-01T17:00:00"}])
    session = FakeSession(response=FakeResponse(body=body))

    entries = make_source(session).fetch()

    assert [e.employee_name for e in entries] == ["Alice"]
    assert session.calls == [{"url": "https://example.test/api/entries", "params": {"code": "secret"}, "timeout": 2.5}]
    assert session.closed


def test_fetch_without_code_sends_no_params():
    session = FakeSession(response=FakeResponse(body="[]"))

    make_source(session, access_code=None).fetch()

    assert session.calls[0]["params"] is None


def test_http_error_is_acquisition_error():
    session = FakeSession(response=FakeResponse(status_code=503))

    with pytest.raises(AcquisitionError, match="HTTP 503"):
        make_source(session).fetch()
    assert session.closed


def test_timeout_is_acquisition_error():
    session = FakeSession(error=requests.exceptions.ConnectTimeout("slow"))

    with pytest.raises(AcquisitionError, match="timed out"):
        make_source(session).fetch()


def test_connection_error_is_acquisition_error():
    session = FakeSession(error=requests.exceptions.ConnectionError("down"))

    with pytest.raises(AcquisitionError, match="ConnectionError"):
        make_source(session).fetch()


def test_malformed_json_is_acquisition_error():
    session = FakeSession(response=FakeResponse(body="{not json"))

    with pytest.raises(AcquisitionError, match="not valid JSON"):
        make_source(session).fetch()


def test_missing_url_is_acquisition_error():
    source = HttpEntrySource("", session_factory=lambda: pytest.fail("session must not be created"))

    with pytest.raises(AcquisitionError):
        source.fetch()


def test_error_message_does_not_leak_access_code():
    session = FakeSession(response=FakeResponse(status_code=401))

    with pytest.raises(AcquisitionError) as exc_info:
        make_source(session).fetch()

    assert "secret" not in str(exc_info.value)


def test_year_one_timestamp_with_offset_is_skipped():
    body = json.dumps(
        [
            {"employee": {"name": "A"}, "timeIn": "0001-01-01T00:00:00+01:00", "timeOut": "2024-01-01T10:00:00"},
            {"employee": {"name": "B"}, "timeIn": "2024-01-01T09:00:00", "timeOut": "2024-01-01T10:00:00"},
        ]
    )
    session = FakeSession(response=FakeResponse(body=body))

    entries = make_source(session).fetch()

    assert [e.employee_name for e in entries] == ["B"]


def test_deeply_nested_body_is_acquisition_error():
    session = FakeSession(response=FakeResponse(body="[" * 100000))

    with pytest.raises(AcquisitionError, match="not valid JSON"):
        make_source(session).fetch()
    assert session.closed


def test_unexpected_session_error_is_acquisition_error():
    session = FakeSession(error=RuntimeError("boom"))

    with pytest.raises(AcquisitionError, match="RuntimeError"):
        make_source(session).fetch()


def test_undecodable_body_falls_back(capsys):
    session = FakeSession(response=FakeResponse(body="[" * 100000))

    result = EntryAcquisitionService(make_source(session)).acquire()

    assert result.status == AcquisitionStatus.FALLBACK
    assert result.entries == FALLBACK_ENTRIES
    assert "API failed" in capsys.readouterr().out
