"""
Configuration module for the Grafana organization client.

Loads configuration from JSON file and environment variables.
"""

import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

from . import constants


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json'
        """
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self.config: Dict[str, Any] = {}
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        with open(config_path, "r", encoding="utf-8") as f:
            try:
                self.config = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid configuration file {self.config_file}: {e}") from e

        if not isinstance(self.config, dict):
            raise ValueError(f"Configuration file {self.config_file} must contain a JSON object")

    def _set(self, section: str, key: str, value: Any) -> None:
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        # API configuration
        if os.getenv("GRAFANA_URL"):
            self._set("api", "base_url", os.getenv("GRAFANA_URL"))

        if os.getenv("GRAFANA_ORG_ID"):
            try:
                self._set("api", "org_id", int(os.getenv("GRAFANA_ORG_ID", "")))
            except ValueError as e:
                raise ValueError(f"GRAFANA_ORG_ID must be an integer: {e}") from e

        # Authentication
        if os.getenv("GRAFANA_API_KEY"):
            self._set("authentication", "api_key", os.getenv("GRAFANA_API_KEY"))

        if os.getenv("GRAFANA_USERNAME"):
            self._set("authentication", "username", os.getenv("GRAFANA_USERNAME"))

        if os.getenv("GRAFANA_PASSWORD"):
            self._set("authentication", "password", os.getenv("GRAFANA_PASSWORD"))

    def _validate_config(self) -> None:
        """Validate that required configuration keys are present."""
        if not self.get("api.base_url"):
            raise ValueError("Missing required configuration key: api.base_url")

        # Either an API key or a username/password pair is required
        auth = self.config.get("authentication") or {}
        if auth.get("api_key"):
            return

        if not auth.get("username") or not auth.get("password"):
            raise ValueError(
                "Authentication configuration must include either 'api_key' "
                "or both 'username' and 'password'"
            )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'api.base_url')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def api_base_url(self) -> str:
        """Get Grafana base URL."""
        return self.get("api.base_url", "")

    @property
    def api_org_id(self) -> Optional[int]:
        """Get the organization selected for requests, if any."""
        return self.get("api.org_id")

    @property
    def api_timeout(self) -> int:
        """Get API timeout in seconds."""
        return self.get("api.timeout", constants.DEFAULT_TIMEOUT)

    @property
    def api_max_retries(self) -> int:
        """Get maximum API retry attempts."""
        return self.get("api.max_retries", constants.DEFAULT_MAX_RETRIES)

    @property
    def api_verify_ssl(self) -> bool:
        """Get API SSL verification setting."""
        return self.get("api.verify_ssl", True)

    @property
    def auth_api_key(self) -> Optional[str]:
        """Get API key (service account token)."""
        return self.get("authentication.api_key")

    @property
    def auth_username(self) -> Optional[str]:
        """Get basic authentication username."""
        return self.get("authentication.username")

    @property
    def auth_password(self) -> Optional[str]:
        """Get basic authentication password."""
        return self.get("authentication.password")

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, url={self.api_base_url})"
