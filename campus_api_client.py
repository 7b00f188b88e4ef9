"""Campus Resources API client.

This module defines a small client wrapper around the REST API served
by ``campus_api``.  Every resource type exposes the same route family,
so one set of methods covers all of them; the resource is selected by
its route name (``"helprequest"``, ``"menuitemreview"``,
``"recommendationrequest"``, ``"articles"`` or ``"ucsbdiningcommons"``).

* :meth:`CampusApiClient.list_all` - return every record of a resource.
* :meth:`CampusApiClient.get` - fetch a single record by its key.
* :meth:`CampusApiClient.create` - create a record from its fields.
* :meth:`CampusApiClient.update` - replace a record.
* :meth:`CampusApiClient.delete` - delete a record.
* :meth:`CampusApiClient.current_user` - describe the caller.

Each method returns a tuple ``(data, error)``.  On failure ``data`` is
``None`` (or an empty list) and ``error`` is a dictionary with keys
``status_code`` and ``message``.

Authentication is optional: a token passed as ``api_key`` is sent in
the ``Authorization`` header as ``Bearer <api_key>``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

# Resources keyed by something other than ``id``.
_KEY_FIELDS = {"ucsbdiningcommons": "code"}


class CampusApiClient:
    """Client for the Campus Resources API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            api_key: Optional bearer token.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/articles/all``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _key_params(resource: str, key: Any) -> Dict[str, Any]:
        return {_KEY_FIELDS.get(resource, "id"): key}

    @staticmethod
    def _query_value(value: Any) -> Any:
        # Query strings carry booleans as lowercase words and
        # timestamps as ISO-8601.
        if isinstance(value, bool):
            return "true" if value else "false"
        if hasattr(value, "isoformat"):
            return value.isoformat()
        return value

    # ------------------------------------------------------------------
    # Resource operations
    # ------------------------------------------------------------------
    def list_all(self, resource: str) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve every record of ``resource``."""
        data, error = self._request("GET", f"/api/{resource}/all")
        if error:
            return [], error
        return data or [], None

    def get(self, resource: str, key: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve a single record by its key."""
        return self._request("GET", f"/api/{resource}", params=self._key_params(resource, key))

    def create(self, resource: str, fields: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Create a record.

        Args:
            resource: Route name of the resource.
            fields: camelCase field names mapped to values, e.g.
                ``{"title": "...", "dateAdded": datetime(...)}``.
        """
        params = {name: self._query_value(value) for name, value in fields.items()}
        return self._request("POST", f"/api/{resource}/post", params=params)

    def update(
        self, resource: str, key: Any, fields: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Replace every field of the record under ``key``."""
        body = {name: value.isoformat() if hasattr(value, "isoformat") else value for name, value in fields.items()}
        return self._request("PUT", f"/api/{resource}", params=self._key_params(resource, key), json_body=body)

    def delete(self, resource: str, key: Any) -> Tuple[Optional[str], Optional[Dict[str, Any]]]:
        """Delete a record and return the server's confirmation message."""
        data, error = self._request("DELETE", f"/api/{resource}", params=self._key_params(resource, key))
        if error:
            return None, error
        return (data or {}).get("message"), None

    def current_user(self) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Return the caller's e-mail and roles."""
        return self._request("GET", "/api/currentUser")
