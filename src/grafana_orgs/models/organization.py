"""
Organization data models.

Contains DTOs for organization-related data structures.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Union

from ..exceptions import ProtocolError

# Any value a JSON document can hold
JSONValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]

# Free-form preferences of the current organization (key order is kept)
Preferences = Dict[str, JSONValue]


def _require(data: Any, key: str, kind: str) -> Any:
    if not isinstance(data, dict):
        raise ProtocolError(f"Expected a JSON object for {kind}, got {type(data).__name__}")
    if key not in data:
        raise ProtocolError(f"Missing '{key}' in {kind} response")
    return data[key]


def json_int(value: Any, key: str) -> int:
    """Return an integer JSON value, rejecting booleans and fractional numbers."""
    if isinstance(value, bool):
        raise ProtocolError(f"Expected an integer for '{key}', got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ProtocolError(f"Expected an integer for '{key}', got {value!r}")


def json_str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise ProtocolError(f"Expected a string for '{key}', got {value!r}")
    return value


@dataclass
class Organization:
    """Organization (tenant) in a Grafana instance."""

    id: int
    name: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Organization":
        """
        Build an organization from an API response object.

        Args:
            data: JSON object with at least "id" and "name"

        Returns:
            Organization instance

        Raises:
            ProtocolError: If "id" or "name" is missing or has the wrong type
        """
        return cls(
            id=json_int(_require(data, "id", "organization"), "id"),
            name=json_str(_require(data, "name", "organization"), "name")
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass
class OrgUser:
    """Membership of a user in an organization."""

    org_id: int
    user_id: int
    login: str
    email: str
    role: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrgUser":
        return cls(
            org_id=json_int(_require(data, "orgId", "organization user"), "orgId"),
            user_id=json_int(_require(data, "userId", "organization user"), "userId"),
            login=json_str(data.get("login", ""), "login"),
            email=json_str(data.get("email", ""), "email"),
            role=json_str(_require(data, "role", "organization user"), "role")
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "orgId": self.org_id,
            "userId": self.user_id,
            "login": self.login,
            "email": self.email,
            "role": self.role,
        }
