"""
Organization operations for the Grafana HTTP API.

Handles listing, lookup, creation, update and deletion of organizations,
plus the current organization and its preferences.
"""

import logging
from typing import Any, Dict, List, Mapping
from urllib.parse import quote

from ..core import constants
from ..exceptions import EncodingError, ProtocolError
from ..models import Organization, Preferences
from ..models.organization import json_int


class OrganizationsAPI:
    """Mixin for organization-related API operations."""

    logger: logging.Logger

    def get(self, endpoint: str, params: Any = None) -> Any:
        """Method provided by APIClient base class."""
        ...

    def post(self, endpoint: str, data: Any) -> Any:
        """Method provided by APIClient base class."""
        ...

    def put(self, endpoint: str, data: Any) -> None:
        """Method provided by APIClient base class."""
        ...

    def delete(self, endpoint: str) -> None:
        """Method provided by APIClient base class."""
        ...

    def list_organizations(self) -> List[Organization]:
        """
        Get list of all organizations.

        Returns:
            List of organizations (empty when there are none)
        """
        self.logger.info("Fetching organizations")
        result = self.get(constants.ORGS_LIST_ENDPOINT)

        if result is None:
            return []
        if not isinstance(result, list):
            raise ProtocolError(f"Expected a list of organizations, got {type(result).__name__}")
        return [Organization.from_dict(item) for item in result]

    def get_organization_by_name(self, name: str) -> Organization:
        """
        Get the organization with the given name.

        Args:
            name: Organization name

        Returns:
            Matching organization

        Raises:
            NotFoundError: If no organization has this name
        """
        self.logger.info(f"Fetching organization by name {name!r}")
        endpoint = constants.ORG_BY_NAME_ENDPOINT.format(name=quote(name, safe=""))
        return Organization.from_dict(self.get(endpoint))

    def get_organization(self, org_id: int) -> Organization:
        """
        Get the organization with the given ID.

        Args:
            org_id: Organization ID

        Returns:
            Matching organization

        Raises:
            NotFoundError: If no organization has this ID
        """
        self.logger.info(f"Fetching organization {org_id}")
        endpoint = constants.ORG_BY_ID_ENDPOINT.format(org_id=int(org_id))
        return Organization.from_dict(self.get(endpoint))

    def create_organization(self, name: str) -> int:
        """
        Create a new organization.

        Args:
            name: Name of the new organization

        Returns:
            ID assigned to the new organization
        """
        self.logger.info(f"Creating organization {name!r}")
        result = self.post(constants.ORGS_ENDPOINT, {"name": name})

        if not isinstance(result, dict) or "orgId" not in result:
            raise ProtocolError("Missing 'orgId' in create organization response")
        org_id = json_int(result["orgId"], "orgId")

        self.logger.info(f"Created organization {name!r} with ID {org_id}")
        return org_id

    def update_organization(self, org_id: int, name: str) -> None:
        """
        Rename an organization.

        Args:
            org_id: Organization ID
            name: New organization name
        """
        self.logger.info(f"Renaming organization {org_id} to {name!r}")
        endpoint = constants.ORG_BY_ID_ENDPOINT.format(org_id=int(org_id))
        self.put(endpoint, {"name": name})

    def delete_organization(self, org_id: int) -> None:
        """
        Delete an organization.

        Args:
            org_id: Organization ID
        """
        self.logger.info(f"Deleting organization {org_id}")
        endpoint = constants.ORG_BY_ID_ENDPOINT.format(org_id=int(org_id))
        self.delete(endpoint)

    def get_current_organization(self) -> Organization:
        """Get the organization the session is currently acting in."""
        self.logger.info("Fetching current organization")
        return Organization.from_dict(self.get(constants.CURRENT_ORG_ENDPOINT))

    def update_current_organization(self, name: str) -> None:
        """Rename the organization the session is currently acting in."""
        self.logger.info(f"Renaming current organization to {name!r}")
        self.put(constants.CURRENT_ORG_ENDPOINT, {"name": name})

    def get_current_org_preferences(self) -> Preferences:
        """
        Get the preferences of the current organization.

        Returns:
            Preferences mapping as returned by the server
        """
        self.logger.info("Fetching current organization preferences")
        result = self.get(constants.CURRENT_ORG_PREFERENCES_ENDPOINT)

        if result is None:
            return {}
        if not isinstance(result, dict):
            raise ProtocolError(f"Expected a preferences object, got {type(result).__name__}")
        return result

    def update_current_org_preferences(self, prefs: Mapping[str, Any]) -> None:
        """
        Replace the preferences of the current organization.

        Args:
            prefs: Preferences (theme, homeDashboardUID, timezone, ...)

        Raises:
            EncodingError: If prefs is not a JSON-serializable mapping
        """
        if not isinstance(prefs, Mapping):
            raise EncodingError(f"Preferences must be a mapping, got {type(prefs).__name__}")

        self.logger.info(f"Updating current organization preferences: {', '.join(map(str, prefs))}")
        payload: Dict[str, Any] = dict(prefs)
        self.put(constants.CURRENT_ORG_PREFERENCES_ENDPOINT, payload)
