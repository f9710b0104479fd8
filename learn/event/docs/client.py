"""Documentation client.

This module defines a small client that reads the documentation a
running Event Manager service exposes: the list of documentation
groups (``<api_docs_path>/swagger-config``) and the OpenAPI document of
each group (``<api_docs_path>/<group>``).  Operations found in a
document can be indexed by tag with :meth:`ApiDocsClient.discover_endpoints`
so that tools and bots can locate endpoints without hard‑coding paths.

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header.  To enable this behaviour,
initialise the client with ``api_key='<your token>'``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests


logger = logging.getLogger(__name__)

HTTP_METHODS = {"get", "put", "post", "delete", "options", "head", "patch", "trace"}


@dataclass
class ApiEndpoint:
    """Represents a discovered API endpoint.

    Attributes:
        path: The URI template, e.g. ``/api/v1/info/``.
        method: The HTTP method in upper case (``GET``, ``POST``, etc.).
        operation_id: Optional identifier for the operation.
        summary: Optional short description of the operation.
    """

    path: str
    method: str
    operation_id: Optional[str] = None
    summary: Optional[str] = None


class ApiDocsError(Exception):
    """Raised when the documentation endpoints cannot be read."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ApiDocsClient:
    """Client for the grouped documentation endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        api_docs_path: str = "/v3/api-docs",
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            api_docs_path: Path under which documents are served.
            api_key: Optional API key sent as ``Bearer <api_key>``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_docs_path = "/" + api_docs_path.strip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    def _get(self, path: str) -> Any:
        """Perform a GET request and return the decoded JSON body.

        Raises:
            ApiDocsError: on HTTP error statuses and transport failures.
                ``status_code`` is ``None`` for transport failures.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending GET request to %s", url)
            response = self.session.get(url, headers=headers, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("Documentation request failed (%s): %s", status, message)
            raise ApiDocsError(message, status_code=status) from exc
        except requests.RequestException as exc:
            logger.error("Documentation request failed: %s", exc)
            raise ApiDocsError(str(exc)) from exc

    def list_groups(self) -> List[Dict[str, str]]:
        """Return the ``{"url", "name"}`` entries of all groups."""
        config = self._get(f"{self.api_docs_path}/swagger-config")
        return list(config.get("urls", []))

    def fetch_group(self, name: str) -> Dict[str, Any]:
        """Return the OpenAPI document of group ``name``."""
        return self._get(f"{self.api_docs_path}/{name}")

    def fetch_all(self) -> Dict[str, Any]:
        """Return the complete OpenAPI document of the service."""
        return self._get(self.api_docs_path)

    @staticmethod
    def discover_endpoints(spec: Dict[str, Any]) -> Dict[str, List[ApiEndpoint]]:
        """Index the operations of an OpenAPI document by tag.

        Tags are lower‑cased.  Operations without tags are listed under
        ``default``; an operation with several tags appears under each.
        """
        endpoints: Dict[str, List[ApiEndpoint]] = {}
        for path, methods in spec.get("paths", {}).items():
            for method_lower, op in methods.items():
                if method_lower.lower() not in HTTP_METHODS or not isinstance(op, dict):
                    continue
                endpoint = ApiEndpoint(
                    path=path,
                    method=method_lower.upper(),
                    operation_id=op.get("operationId"),
                    summary=op.get("summary"),
                )
                for tag in [t.lower() for t in op.get("tags", [])] or ["default"]:
                    endpoints.setdefault(tag, []).append(endpoint)
        return endpoints
