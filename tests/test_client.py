"""
Transport tests.

Tests request execution, header setup and error classification of APIClient.
"""

import unittest
from unittest.mock import Mock

import pytest
import requests

from fake_grafana import make_response
from grafana_orgs.api.client import APIClient
from grafana_orgs.exceptions import EncodingError, NotFoundError, ProtocolError, TransportError


@pytest.mark.unit
class TestAPIClientRequest(unittest.TestCase):
    """Test the single request-execution routine."""

    def setUp(self):
        """Set up test fixtures."""
        self.client = APIClient(base_url="http://grafana.local:3000/", api_key="secret", logger=Mock())
        self.client.session.request = Mock(return_value=make_response(200, {"ok": True}))

    def tearDown(self):
        self.client.close()

    def test_builds_url_and_sends_json_body(self):
        """Test that the URL is joined to the base and the body is JSON."""
        result = self.client.request("POST", "/api/orgs", data={"name": "acme"})

        self.assertEqual(result, {"ok": True})
        kwargs = self.client.session.request.call_args.kwargs
        self.assertEqual(kwargs["method"], "POST")
        self.assertEqual(kwargs["url"], "http://grafana.local:3000/api/orgs")
        self.assertEqual(kwargs["data"], b'{"name": "acme"}')
        self.assertEqual(kwargs["timeout"], 30)
        self.assertTrue(kwargs["verify"])

    def test_request_without_body_sends_no_data(self):
        """Test that GET requests carry no body."""
        self.client.request("GET", "/api/orgs/", params={"perpage": 10})

        kwargs = self.client.session.request.call_args.kwargs
        self.assertIsNone(kwargs["data"])
        self.assertEqual(kwargs["params"], {"perpage": 10})

    def test_preserves_payload_key_order(self):
        """Test that mapping order survives encoding."""
        self.client.request("PUT", "/api/org/preferences", data={"theme": "dark", "timezone": "utc", "weekStart": ""})

        body = self.client.session.request.call_args.kwargs["data"]
        self.assertEqual(body, b'{"theme": "dark", "timezone": "utc", "weekStart": ""}')

    def test_unserializable_payload_sends_nothing(self):
        """Test that encoding errors are raised before any request."""
        with self.assertRaises(EncodingError):
            self.client.request("PUT", "/api/org/preferences", data={"when": object()})

        with self.assertRaises(EncodingError):
            self.client.request("PUT", "/api/org/preferences", data={"ratio": float("nan")})

        with self.assertRaises(EncodingError):
            self.client.request("PUT", "/api/org/preferences", data={1: "a", "1": "b"})

        self.client.session.request.assert_not_called()

    def test_non_2xx_raises_with_status_line(self):
        """Test that a failing status becomes a TransportError named by its status line."""
        self.client.session.request.return_value = make_response(
            500, {"message": "boom"}, reason="Internal Server Error"
        )

        with self.assertRaises(TransportError) as ctx:
            self.client.request("GET", "/api/orgs/")

        self.assertEqual(str(ctx.exception), "500 Internal Server Error")
        self.assertEqual(ctx.exception.status_code, 500)
        self.assertEqual(ctx.exception.reason, "Internal Server Error")
        self.assertIn("boom", ctx.exception.body)

    def test_404_raises_not_found(self):
        """Test that 404 is classified as NotFoundError."""
        self.client.session.request.return_value = make_response(404, {"message": "Organization not found"})

        with self.assertRaises(NotFoundError) as ctx:
            self.client.request("GET", "/api/orgs/9")

        self.assertEqual(str(ctx.exception), "404 Not Found")

    def test_other_2xx_statuses_succeed(self):
        """Test that any 2xx status is a success."""
        self.client.session.request.return_value = make_response(204, reason="No Content")

        self.assertIsNone(self.client.request("DELETE", "/api/orgs/3", decode=False))
        self.assertIsNone(self.client.request("GET", "/api/orgs/3"))

    def test_network_failure_is_wrapped(self):
        """Test that requests exceptions surface as TransportError."""
        cause = requests.exceptions.ConnectionError("connection refused")
        self.client.session.request.side_effect = cause

        with self.assertRaises(TransportError) as ctx:
            self.client.request("GET", "/api/orgs/")

        self.assertIs(ctx.exception.__cause__, cause)
        self.assertIsNone(ctx.exception.status_code)
        self.assertIn("connection refused", str(ctx.exception))

    def test_invalid_json_raises_protocol_error(self):
        """Test that an undecodable body is a ProtocolError."""
        self.client.session.request.return_value = make_response(200, raw=b"<html>login</html>")

        with self.assertRaises(ProtocolError):
            self.client.request("GET", "/api/orgs/")

    def test_body_ignored_when_not_decoding(self):
        """Test that decode=False skips body parsing."""
        self.client.session.request.return_value = make_response(200, raw=b"not json")

        self.assertIsNone(self.client.request("PUT", "/api/orgs/1", data={"name": "x"}, decode=False))


@pytest.mark.unit
class TestAPIClientSession(unittest.TestCase):
    """Test session configuration."""

    def test_api_key_sets_bearer_header(self):
        client = APIClient(base_url="http://grafana.local", api_key="abc")

        self.assertEqual(client.session.headers["Authorization"], "Bearer abc")
        self.assertEqual(client.session.headers["Content-Type"], "application/json")
        self.assertIsNone(client.session.auth)

    def test_basic_auth(self):
        client = APIClient(base_url="http://grafana.local", username="admin", password="admin")

        self.assertEqual(client.session.auth, ("admin", "admin"))
        self.assertNotIn("Authorization", client.session.headers)

    def test_org_id_header(self):
        client = APIClient(base_url="http://grafana.local", api_key="abc", org_id=4)

        self.assertEqual(client.session.headers["X-Grafana-Org-Id"], "4")

    def test_no_retry_adapter_by_default(self):
        client = APIClient(base_url="http://grafana.local", api_key="abc")

        adapter = client.session.get_adapter("http://grafana.local")
        self.assertEqual(adapter.max_retries.total, 0)

    def test_retry_adapter_when_enabled(self):
        client = APIClient(base_url="http://grafana.local", api_key="abc", max_retries=3)

        adapter = client.session.get_adapter("https://grafana.local")
        self.assertEqual(adapter.max_retries.total, 3)

    def test_context_manager_closes_session(self):
        client = APIClient(base_url="http://grafana.local", api_key="abc")
        client.session.close = Mock()

        with client as entered:
            self.assertIs(entered, client)

        client.session.close.assert_called_once()
