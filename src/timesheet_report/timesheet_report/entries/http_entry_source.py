from __future__ import annotations

from typing import Callable, Optional, Sequence
from urllib.parse import urlsplit

import requests

from ..core.constants import DEFAULT_REQUEST_TIMEOUT_SECONDS, LOG_PREFIX
from ..core.exceptions import AcquisitionError
from .model import TimeEntry
from .parser import parse_entries


class HttpEntrySource:
    """Fetch entries from the remote endpoint in a single bounded GET."""

    def __init__(
        self,
        url: str,
        *,
        access_code: Optional[str] = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ):
        self._url = url
        self._access_code = access_code
        self._timeout = timeout
        self._session_factory = session_factory

    @property
    def host(self) -> str:
        return urlsplit(self._url).netloc or "-"

    def fetch(self) -> Sequence[TimeEntry]:
        if not self._url:
            raise AcquisitionError("no source URL configured")

        params = {"code": self._access_code} if self._access_code else None

        try:
            with self._session_factory() as session:
                response = session.get(self._url, params=params, timeout=self._timeout)
                response.raise_for_status()
                payload = response.json()
                batch = parse_entries(payload)
        except requests.exceptions.Timeout as e:
            raise AcquisitionError(f"request to {self.host} timed out after {self._timeout}s") from e
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else "unknown"
            raise AcquisitionError(f"HTTP {status_code} from {self.host}") from e
        except requests.exceptions.JSONDecodeError as e:
            raise AcquisitionError(f"response from {self.host} is not valid JSON") from e
        except requests.exceptions.RequestException as e:
            raise AcquisitionError(f"request to {self.host} failed: {e.__class__.__name__}") from e
        except AcquisitionError:
            raise
        except (ValueError, RecursionError) as e:
            raise AcquisitionError(f"response from {self.host} is not valid JSON") from e
        except Exception as e:
            raise AcquisitionError(f"reading entries from {self.host} failed: {e.__class__.__name__}") from e

        if batch.skipped:
            print(f"{LOG_PREFIX} skipped {batch.skipped} entries with unreadable timestamps")
        return batch.entries
