"""
Command-line entry point for Grafana organization management.

Prints command results as JSON on stdout.
"""

import argparse
import json
import sys
from typing import Any, List, Optional

from .core import Config, setup_logger, LoggerContext
from .api import GrafanaAPI
from .exceptions import GrafanaError


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all commands."""
    parser = argparse.ArgumentParser(
        prog="grafana-orgs",
        description="Manage Grafana organizations"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write DEBUG logs to this file (default: LOG_FILE env var, if set)"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="List all organizations")

    get_parser = commands.add_parser("get", help="Get an organization by ID or name")
    selector = get_parser.add_mutually_exclusive_group(required=True)
    selector.add_argument("--id", type=int, dest="org_id", help="Organization ID")
    selector.add_argument("--name", type=str, help="Organization name")

    create_parser = commands.add_parser("create", help="Create an organization")
    create_parser.add_argument("name", type=str)

    update_parser = commands.add_parser("update", help="Rename an organization")
    update_parser.add_argument("org_id", type=int)
    update_parser.add_argument("name", type=str)

    delete_parser = commands.add_parser("delete", help="Delete an organization")
    delete_parser.add_argument("org_id", type=int)

    commands.add_parser("get-preferences", help="Show preferences of the current organization")

    prefs_parser = commands.add_parser("set-preferences", help="Replace preferences of the current organization")
    prefs_parser.add_argument("preferences", type=str, help='JSON object, e.g. \'{"theme": "dark"}\'')

    return parser


def run_command(api: GrafanaAPI, args: argparse.Namespace) -> Any:
    """
    Dispatch a parsed command to the API client.

    Returns:
        JSON-serializable result of the command
    """
    if args.command == "list":
        return [org.to_dict() for org in api.list_organizations()]

    if args.command == "get":
        if args.name is not None:
            return api.get_organization_by_name(args.name).to_dict()
        return api.get_organization(args.org_id).to_dict()

    if args.command == "create":
        return {"orgId": api.create_organization(args.name)}

    if args.command == "update":
        api.update_organization(args.org_id, args.name)
        return {"message": "Organization updated"}

    if args.command == "delete":
        api.delete_organization(args.org_id)
        return {"message": "Organization deleted"}

    if args.command == "get-preferences":
        return api.get_current_org_preferences()

    if args.command == "set-preferences":
        try:
            prefs = json.loads(args.preferences)
        except json.JSONDecodeError as e:
            raise ValueError(f"Preferences must be a JSON object: {e}") from e
        api.update_current_org_preferences(prefs)
        return {"message": "Preferences updated"}

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = Config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    try:
        logger = setup_logger(log_level=args.log_level, log_file=args.log_file)
    except ValueError as e:
        print(f"Logging error: {e}", file=sys.stderr)
        return 1
    logger.debug(f"Configuration: {config}")

    try:
        with GrafanaAPI.from_config(config, logger=logger) as api:
            with LoggerContext(logger, args.command):
                result = run_command(api, args)
    except (GrafanaError, ValueError) as e:
        print(f"Command failed: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
