"""HTTP client for the test hub API.

Every call downgrades failures (network errors, unreadable bodies,
``success: false`` envelopes) to an empty default, so callers see
"no data" either way.
"""
from __future__ import annotations

import logging
from typing import Any

import requests

log = logging.getLogger(__name__)


class StorageService:
    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        timeout: float = 10,
    ) -> None:
        self.api_base = base_url.rstrip("/") + "/api"
        self.session = session or requests.Session()
        self.timeout = timeout
        log.info("Storage service API base: %s", self.api_base)

    def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any] | None:
        """Send a request and return the envelope when it reports success."""
        response = self.session.request(
            method, f"{self.api_base}{path}", timeout=self.timeout, **kwargs
        )
        data = response.json()
        if isinstance(data, dict) and data.get("success"):
            return data
        return None

    def get_all_tests(self) -> list[dict[str, Any]]:
        try:
            data = self._request("GET", "/tests")
        except (requests.RequestException, ValueError) as e:
            log.error("Failed to fetch tests: %s", e)
            return []
        tests = data.get("tests") if data else None
        return tests if isinstance(tests, list) else []

    def get_test_by_id(self, test_id: str) -> dict[str, Any] | None:
        try:
            data = self._request("GET", f"/tests/{test_id}")
        except (requests.RequestException, ValueError) as e:
            log.error("Failed to fetch test %s: %s", test_id, e)
            return None
        return data.get("test") if data else None

    def save_test(self, test_data: dict[str, Any]) -> dict[str, Any] | None:
        """Update the test if its id already exists, otherwise create it.

        The lookup and the write are separate requests; another writer can
        create the same id in between, in which case the create fails and
        ``None`` is returned.
        """
        test_id = test_data.get("id")
        existing = self.get_test_by_id(test_id) if test_id else None
        try:
            if existing:
                data = self._request("PUT", f"/tests/{test_id}", json=test_data)
            else:
                data = self._request("POST", "/tests", json=test_data)
        except (requests.RequestException, ValueError) as e:
            log.error("Failed to save test %s: %s", test_id, e)
            return None
        return data.get("test") if data else None

    def delete_test(self, test_id: str) -> bool:
        try:
            data = self._request("DELETE", f"/tests/{test_id}")
        except (requests.RequestException, ValueError) as e:
            log.error("Failed to delete test %s: %s", test_id, e)
            return False
        return data is not None

    def save_attempt(self, attempt_data: dict[str, Any]) -> dict[str, Any] | None:
        try:
            data = self._request("POST", "/results", json=attempt_data)
        except (requests.RequestException, ValueError) as e:
            log.error("Failed to save attempt: %s", e)
            return None
        return data.get("result") if data else None

    def get_results_for_test(self, test_id: str) -> dict[str, Any]:
        """Return ``{"results": [...], "stats": {...}}`` or ``{}``."""
        try:
            data = self._request("GET", f"/results/test/{test_id}")
        except (requests.RequestException, ValueError) as e:
            log.error("Failed to fetch results for test %s: %s", test_id, e)
            return {}
        if not data:
            return {}
        return {"results": data.get("results") or [], "stats": data.get("stats") or {}}

    def get_result(self, attempt_id: str) -> dict[str, Any] | None:
        try:
            data = self._request("GET", f"/results/{attempt_id}")
        except (requests.RequestException, ValueError) as e:
            log.error("Failed to fetch result %s: %s", attempt_id, e)
            return None
        return data.get("result") if data else None

    def get_attempt_history(self) -> dict[str, Any]:
        try:
            data = self._request("GET", "/results/history")
        except (requests.RequestException, ValueError) as e:
            log.error("Failed to fetch history: %s", e)
            return {}
        return (data.get("history") or {}) if data else {}

    def init_data(self, tests: list[dict[str, Any]]) -> str | None:
        """Seed an empty server; returns the server's message."""
        try:
            data = self._request("POST", "/init-data", json={"tests": tests})
        except (requests.RequestException, ValueError) as e:
            log.error("Failed to initialize data: %s", e)
            return None
        return data.get("message") if data else None

    def health(self) -> dict[str, Any] | None:
        try:
            return self._request("GET", "/health")
        except (requests.RequestException, ValueError) as e:
            log.error("Health check failed: %s", e)
            return None
