"""
Organization membership operations for the Grafana HTTP API.

Handles listing, adding, updating and removing users of an organization.
"""

import logging
from typing import Any, List

from ..core import constants
from ..exceptions import ProtocolError
from ..models import OrgUser


def _check_role(role: str) -> str:
    if role not in constants.ORG_ROLES:
        raise ValueError(f"Invalid organization role {role!r}. Expected one of: {', '.join(constants.ORG_ROLES)}")
    return role


class OrgUsersAPI:
    """Mixin for organization membership API operations."""

    logger: logging.Logger

    def get(self, endpoint: str, params: Any = None) -> Any:
        """Method provided by APIClient base class."""
        ...

    def post(self, endpoint: str, data: Any) -> Any:
        """Method provided by APIClient base class."""
        ...

    def patch(self, endpoint: str, data: Any) -> None:
        """Method provided by APIClient base class."""
        ...

    def delete(self, endpoint: str) -> None:
        """Method provided by APIClient base class."""
        ...

    def list_org_users(self, org_id: int) -> List[OrgUser]:
        """
        Get the users of an organization.

        Args:
            org_id: Organization ID

        Returns:
            List of organization users
        """
        self.logger.info(f"Fetching users of organization {org_id}")
        result = self.get(constants.ORG_USERS_ENDPOINT.format(org_id=int(org_id)))

        if result is None:
            return []
        if not isinstance(result, list):
            raise ProtocolError(f"Expected a list of organization users, got {type(result).__name__}")
        return [OrgUser.from_dict(item) for item in result]

    def add_org_user(self, org_id: int, login_or_email: str, role: str = "Viewer") -> None:
        """
        Add an existing user to an organization.

        Args:
            org_id: Organization ID
            login_or_email: Login or email of the user
            role: Viewer, Editor or Admin
        """
        data = {"loginOrEmail": login_or_email, "role": _check_role(role)}
        self.logger.info(f"Adding {login_or_email!r} to organization {org_id} as {role}")
        self.post(constants.ORG_USERS_ENDPOINT.format(org_id=int(org_id)), data)

    def update_org_user(self, org_id: int, user_id: int, role: str) -> None:
        """Change the role of a user in an organization."""
        data = {"role": _check_role(role)}
        self.logger.info(f"Setting role of user {user_id} in organization {org_id} to {role}")
        self.patch(constants.ORG_USER_ENDPOINT.format(org_id=int(org_id), user_id=int(user_id)), data)

    def remove_org_user(self, org_id: int, user_id: int) -> None:
        """Remove a user from an organization."""
        self.logger.info(f"Removing user {user_id} from organization {org_id}")
        self.delete(constants.ORG_USER_ENDPOINT.format(org_id=int(org_id), user_id=int(user_id)))
