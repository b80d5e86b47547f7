"""
Base API client for the Grafana HTTP API.

Handles HTTP requests, session management, and error handling.
"""

import json
import logging
from typing import Dict, Any, Optional

import requests  # type: ignore
from requests.adapters import HTTPAdapter  # type: ignore
from urllib3.util.retry import Retry  # type: ignore

from ..core import constants
from ..exceptions import EncodingError, ProtocolError, TransportError


class APIClient:
    """Base client for interacting with the Grafana HTTP API."""

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        org_id: Optional[int] = None,
        timeout: int = constants.DEFAULT_TIMEOUT,
        max_retries: int = constants.DEFAULT_MAX_RETRIES,
        verify_ssl: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize API client.

        Args:
            base_url: Base URL of the Grafana instance
            api_key: API key or service account token (Bearer auth)
            username: Username for basic authentication
            password: Password for basic authentication
            org_id: Organization to act in (X-Grafana-Org-Id header)
            timeout: Request timeout in seconds
            max_retries: Retry attempts on transient failures (0 disables retries)
            verify_ssl: Whether to verify SSL certificates
            logger: Logger instance
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)
        self.verify_ssl = verify_ssl
        self.org_id = org_id

        # Disable SSL warnings when verify_ssl is False
        if not verify_ssl:
            import urllib3
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

        self.session = requests.Session()
        if max_retries > 0:
            retry_strategy = Retry(
                total=max_retries,
                backoff_factor=1,
                status_forcelist=constants.RETRY_STATUS_CODES,
                allowed_methods=["GET", "PUT", "DELETE"]
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)

        if api_key:
            self.session.headers.update({"Authorization": f"Bearer {api_key}"})
        elif username and password:
            self.session.auth = (username, password)

        self._update_headers()

    def _update_headers(self) -> None:
        """Update session headers with content type and organization."""
        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json"
        })

        if self.org_id is not None:
            self.session.headers.update({
                constants.ORG_ID_HEADER: str(self.org_id)
            })

    @staticmethod
    def _check_keys(data: Any) -> None:
        """Reject mappings with non-string keys, which json.dumps would coerce."""
        if isinstance(data, dict):
            for key, value in data.items():
                if not isinstance(key, str):
                    raise EncodingError(f"Request payload keys must be strings, got {key!r}")
                APIClient._check_keys(value)
        elif isinstance(data, (list, tuple)):
            for item in data:
                APIClient._check_keys(item)

    @staticmethod
    def _encode(data: Any) -> bytes:
        """Serialize a request payload to UTF-8 JSON."""
        APIClient._check_keys(data)
        try:
            return json.dumps(data, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise EncodingError(f"Request payload is not JSON serializable: {e}") from e

    def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        data: Any = None,
        decode: bool = True
    ) -> Any:
        """
        Execute one HTTP request against the API.

        The payload is encoded before anything is sent, any non-2xx status is
        turned into a TransportError, and the body is decoded only when asked.

        Args:
            method: HTTP method (GET, POST, PUT, etc.)
            endpoint: API endpoint (without base URL)
            params: Query parameters
            data: Request body, serialized as JSON when not None
            decode: Whether to decode the response body as JSON

        Returns:
            Decoded JSON body (None for an empty body or when decode is False)

        Raises:
            EncodingError: If the payload cannot be serialized
            TransportError: On network failure or non-2xx status
            ProtocolError: If the response body is not valid JSON
        """
        body = self._encode(data) if data is not None else None
        url = f"{self.base_url}/{endpoint.lstrip('/')}"

        self.logger.debug(f"{method} {url}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                data=body,
                timeout=self.timeout,
                verify=self.verify_ssl
            )
        except requests.exceptions.RequestException as e:
            self.logger.error(f"API request failed: {method} {url} - {e}")
            raise TransportError(str(e)) from e

        if not 200 <= response.status_code < 300:
            error = TransportError.from_status(response.status_code, response.reason, response.text)
            self.logger.error(f"API request failed: {method} {url} - {error}")
            raise error

        if not decode or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise ProtocolError(f"Invalid JSON in response to {method} {url}: {e}") from e

    def get(self, endpoint: str, params: Optional[Dict] = None) -> Any:
        """Make GET request and return the decoded body."""
        return self.request("GET", endpoint, params=params)

    def post(self, endpoint: str, data: Any) -> Any:
        """Make POST request and return the decoded body."""
        return self.request("POST", endpoint, data=data)

    def put(self, endpoint: str, data: Any) -> None:
        """Make PUT request; the response body is not needed."""
        self.request("PUT", endpoint, data=data, decode=False)

    def patch(self, endpoint: str, data: Any) -> None:
        """Make PATCH request; the response body is not needed."""
        self.request("PATCH", endpoint, data=data, decode=False)

    def delete(self, endpoint: str) -> None:
        """Make DELETE request; the response body is not needed."""
        self.request("DELETE", endpoint, decode=False)

    def close(self) -> None:
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
