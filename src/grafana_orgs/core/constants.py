"""
Application-wide constants for the Grafana organization client.

Endpoint paths are relative to the Grafana base URL.
"""

# Organization endpoints (admin scope)
ORGS_ENDPOINT = "/api/orgs"
ORGS_LIST_ENDPOINT = "/api/orgs/"
ORG_BY_ID_ENDPOINT = "/api/orgs/{org_id}"
ORG_BY_NAME_ENDPOINT = "/api/orgs/name/{name}"
ORG_USERS_ENDPOINT = "/api/orgs/{org_id}/users"
ORG_USER_ENDPOINT = "/api/orgs/{org_id}/users/{user_id}"

# Current organization endpoints (scoped by the session's active org)
CURRENT_ORG_ENDPOINT = "/api/org/"
CURRENT_ORG_PREFERENCES_ENDPOINT = "/api/org/preferences"

# Header selecting the active organization for a request
ORG_ID_HEADER = "X-Grafana-Org-Id"

# Organization roles accepted by Grafana
ORG_ROLES = ("Viewer", "Editor", "Admin")

# Transport defaults
DEFAULT_TIMEOUT = 30  # seconds
DEFAULT_MAX_RETRIES = 0  # one round trip per call
RETRY_STATUS_CODES = [429, 500, 502, 503, 504]
