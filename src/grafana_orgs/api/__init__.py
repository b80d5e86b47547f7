"""
API layer for Grafana organization management.

Provides a low-level API client plus organization and membership operations.
"""

import logging
from typing import Optional

from .client import APIClient
from .organizations import OrganizationsAPI
from .org_users import OrgUsersAPI
from ..core import constants


class GrafanaAPI(APIClient, OrganizationsAPI, OrgUsersAPI):
    """
    Unified API client for Grafana organization management.

    Combines the transport with organization and membership operations.
    """

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
        Initialize unified API client.

        Args:
            base_url: Base URL of the Grafana instance
            api_key: API key or service account token
            username: Username for basic authentication
            password: Password for basic authentication
            org_id: Organization to act in
            timeout: Request timeout in seconds
            max_retries: Retry attempts on transient failures
            verify_ssl: Whether to verify SSL certificates
            logger: Logger instance
        """
        super().__init__(
            base_url=base_url,
            api_key=api_key,
            username=username,
            password=password,
            org_id=org_id,
            timeout=timeout,
            max_retries=max_retries,
            verify_ssl=verify_ssl,
            logger=logger
        )

    @classmethod
    def from_config(cls, config, logger: Optional[logging.Logger] = None) -> "GrafanaAPI":
        """Build a client from a Config instance."""
        return cls(
            base_url=config.api_base_url,
            api_key=config.auth_api_key,
            username=config.auth_username,
            password=config.auth_password,
            org_id=config.api_org_id,
            timeout=config.api_timeout,
            max_retries=config.api_max_retries,
            verify_ssl=config.api_verify_ssl,
            logger=logger
        )


__all__ = [
    "GrafanaAPI",
    "APIClient",
    "OrganizationsAPI",
    "OrgUsersAPI",
]
