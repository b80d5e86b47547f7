"""
Data models for the Grafana organization client.
"""

from .organization import Organization, OrgUser, Preferences, JSONValue

__all__ = [
    "Organization",
    "OrgUser",
    "Preferences",
    "JSONValue",
]
