"""Whisky API client.

A thin wrapper around the REST API served by ``whisky_api.app``.  It
uses the ``requests`` library and exposes one method per operation:

* :meth:`WhiskyAPIClient.list_whiskies` – return every whisky.
* :meth:`WhiskyAPIClient.get_whisky` – fetch a single whisky by id.
* :meth:`WhiskyAPIClient.create_whisky` – store a whisky under its id.
* :meth:`WhiskyAPIClient.update_whisky` – replace name and origin.
* :meth:`WhiskyAPIClient.delete_whisky` – remove a whisky.

Every method returns a tuple ``(result, error)``.  On success ``error``
is ``None``; on failure ``error`` is a dictionary with the keys
``status_code`` and ``message``.  The server sends error responses
without a body, so the status code is usually all there is to go on.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

WHISKIES_PATH = "/api/whiskies"

Error = Dict[str, Any]


class WhiskyAPIClient:
    """Client for interacting with the whisky API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:8080",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` holds the decoded JSON
            body, or ``None`` when the response has no body.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            message = response.text or f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        if response.content:
            return response.json(), None
        return None, None

    # ------------------------------------------------------------------
    # Whisky operations
    # ------------------------------------------------------------------
    def list_whiskies(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all whiskies in the order the server stores them."""
        data, error = self._request("GET", WHISKIES_PATH)
        if error:
            return [], error
        return data or [], None

    def get_whisky(self, whisky_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"{WHISKIES_PATH}/{whisky_id}")

    def create_whisky(
        self, whisky_id: int, name: Optional[str], origin: Optional[str]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a whisky.  An existing whisky with the same id is replaced."""
        payload = {"id": whisky_id, "name": name, "origin": origin}
        return self._request("POST", WHISKIES_PATH, json_body=payload)

    def update_whisky(
        self, whisky_id: Any, name: Optional[str], origin: Optional[str]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace name and origin of a whisky.  ``None`` clears a field."""
        payload = {"name": name, "origin": origin}
        return self._request("PUT", f"{WHISKIES_PATH}/{whisky_id}", json_body=payload)

    def delete_whisky(self, whisky_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a whisky.

        Returns:
            A tuple ``(success, error)``.  Deleting an unknown id succeeds.
        """
        _, error = self._request("DELETE", f"{WHISKIES_PATH}/{whisky_id}")
        return error is None, error
