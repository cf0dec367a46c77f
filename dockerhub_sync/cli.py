"""CLI entry point: validate, metadata, sync."""

import argparse
import dataclasses
import json
import logging
import sys
from typing import Any

from dockerhub_sync.config import ConnectorConfig, load_config
from dockerhub_sync.connector import DockerHubConnector, SyncDriver
from dockerhub_sync.connector.connector import connector_metadata
from dockerhub_sync.exceptions import DockerHubError
from dockerhub_sync.logging import configure_logging, get_logger

logger = get_logger("cli")


def _config_from_args(args: argparse.Namespace) -> ConnectorConfig:
    config = load_config()
    overrides: dict[str, Any] = {}
    if args.username:
        overrides["username"] = args.username
    if args.password:
        overrides["password"] = args.password
        overrides["access_token"] = None
    if args.access_token:
        overrides["access_token"] = args.access_token
        if not args.password:
            overrides["password"] = None
    if args.org:
        overrides["orgs"] = list(args.org)
    return dataclasses.replace(config, **overrides)


def _emit(kind: str, value: Any) -> None:
    print(json.dumps({"kind": kind, **dataclasses.asdict(value)}, sort_keys=True))


def cmd_validate(args: argparse.Namespace) -> None:
    """Log in and check the credentials."""
    connector = DockerHubConnector.new(_config_from_args(args))
    connector.close()
    print("ok")


def cmd_metadata(args: argparse.Namespace) -> None:
    """Print connector metadata; needs no credentials."""
    _emit("metadata", connector_metadata())


def cmd_sync(args: argparse.Namespace) -> None:
    """Run a full pass and print every resource, entitlement and grant as JSON lines."""
    connector = DockerHubConnector.new(_config_from_args(args))
    try:
        result = SyncDriver(connector).run()
    finally:
        connector.close()

    for resource in result.resources:
        _emit("resource", resource)
    for entitlement in result.entitlements:
        _emit("entitlement", entitlement)
    for grant in result.grants:
        _emit("grant", grant)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dockerhub-sync",
        description="Sync DockerHub organizations, teams and repository access",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: INFO)",
    )
    parser.add_argument("--username", help="DockerHub username (DOCKERHUB_USERNAME)")
    secret = parser.add_mutually_exclusive_group()
    secret.add_argument("--password", help="DockerHub password (DOCKERHUB_PASSWORD)")
    secret.add_argument(
        "--access-token",
        help="DockerHub personal access token (DOCKERHUB_ACCESS_TOKEN)",
    )
    parser.add_argument(
        "--org",
        action="append",
        help="Limit syncing to this organization; repeatable (DOCKERHUB_ORGS)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser("validate", help="Check credentials")
    validate_parser.set_defaults(func=cmd_validate)

    metadata_parser = subparsers.add_parser("metadata", help="Show connector metadata")
    metadata_parser.set_defaults(func=cmd_metadata)

    sync_parser = subparsers.add_parser("sync", help="Run one full sync pass")
    sync_parser.set_defaults(func=cmd_sync)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=getattr(logging, args.log_level))

    try:
        args.func(args)
    except DockerHubError as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
