"""
Grafana organization management client

This package provides a typed client for Grafana's organization endpoints:
listing, lookup, creation, update, deletion and preferences.
"""

__version__ = "0.1.0"
__description__ = "Client for the Grafana organization management API"

from .api import GrafanaAPI
from .exceptions import (
    GrafanaError,
    EncodingError,
    TransportError,
    NotFoundError,
    ProtocolError,
)
from .models import Organization, OrgUser

__all__ = [
    "GrafanaAPI",
    "GrafanaError",
    "EncodingError",
    "TransportError",
    "NotFoundError",
    "ProtocolError",
    "Organization",
    "OrgUser",
]
