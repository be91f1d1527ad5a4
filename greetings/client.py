"""
Greetings -- Python client

Small synchronous client for the greetings HTTP API, for scripts and the
admin editing tools that run outside the browser.

Usage:

    from greetings.client import GreetingsClient

    gc = GreetingsClient("http://localhost:8000")

    if gc.exists("priya"):
        record = gc.find("priya")
        print(record.greeting)

    result = gc.validate({"name": "Priya", "greeting": "", "message": "Hi"})
    if not result.valid:
        print(result.errors)   # ["Greeting is required"]

Requirements: requests
"""

from __future__ import annotations

from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from greetings.models.schemas import SisterRecord, ValidationResult

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 30


# ── Exceptions ────────────────────────────────────────────────────────────


class GreetingsError(Exception):
    """Raised for any HTTP error the client does not map to a result."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


# ── Client ────────────────────────────────────────────────────────────────


class GreetingsClient:
    """
    Client for the greetings API.

    Args:
        base_url: API base URL. Defaults to http://localhost:8000.
        timeout: Request timeout in seconds. Defaults to 30.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: int = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update({"Accept": "application/json"})

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self.base_url}{path}"
        kwargs.setdefault("timeout", self.timeout)
        return self._session.request(method, url, **kwargs)

    @staticmethod
    def _raise_for(resp: requests.Response) -> None:
        if resp.status_code < 400:
            return
        try:
            body = resp.json()
        except ValueError:
            body = resp.text
        raise GreetingsError(
            f"API error {resp.status_code}: {body}",
            status_code=resp.status_code,
            body=body,
        )

    @staticmethod
    def _sister_path(name: str) -> str:
        return f"/v1/sisters/{quote(name, safe='')}"

    # ── Lookup ────────────────────────────────────────────────────────

    def exists(self, name: str) -> bool:
        resp = self._request("GET", f"{self._sister_path(name)}/exists")
        self._raise_for(resp)
        return bool(resp.json()["exists"])

    def find(self, name: str) -> Optional[SisterRecord]:
        """Return the record for name, or None if there is none."""
        resp = self._request("GET", self._sister_path(name))
        if resp.status_code == 404:
            return None
        self._raise_for(resp)
        return SisterRecord.model_validate(resp.json())

    # ── Admin ─────────────────────────────────────────────────────────

    def validate(self, candidate: Dict[str, Any]) -> ValidationResult:
        resp = self._request("POST", "/v1/sisters/validate", json=candidate)
        self._raise_for(resp)
        return ValidationResult.model_validate(resp.json())

    def reload(self) -> Dict[str, Any]:
        """Ask the server to reload its data source. Returns {"ok", "count", "error"}."""
        resp = self._request("POST", "/v1/sisters/reload")
        self._raise_for(resp)
        return resp.json()

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> GreetingsClient:
        return self

    def __exit__(self, *exc) -> None:
        self.close()
