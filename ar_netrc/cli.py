"""Command line entry points: ``ar-netrc`` and ``ar-goauth``."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .services import auth, constants, goauth, reconcile
from .services.errors import (
    CredentialResolutionError,
    InvalidLocationError,
    KeyFileUnreadableError,
    NetrcError,
)
from .services.models import HostPattern, parse_locations
from .services.netrc_store import NetrcStore

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

HELP = """
Update your .netrc file to work with Google Cloud Artifact Registry Go Repositories.

Commands:

* refresh, to refresh oauth tokens for Artifact Registry Go endpoints.
* add-locations, to add new regional Artifact Registry Go endpoints to the netrc file."""

GOAUTH_HELP = """
Handle Go authentication with Google Cloud Artifact Registry Go Repositories.

Add to your GOAUTH environment variable:

  export GOAUTH="ar-goauth <location>"

To support multiple locations, add the command multiple times to the GOAUTH variable (semicolon-separated).

For more details, see https://pkg.go.dev/cmd/go#hdr-GOAUTH_environment_variable"""


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)


def _add_key_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json_key",
        "--json-key",
        dest="json_key",
        default="",
        help="path to the json key of the service account used for this location. "
        "Leave empty to use the oauth token instead.",
    )
    parser.add_argument(
        "--host_pattern",
        "--host-pattern",
        dest="host_pattern",
        default=constants.DEFAULT_HOST_PATTERN,
        help="Artifact Registry server host pattern, where %%s will be replaced by a location string.",
    )


def _common_options() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    common.add_argument(
        "--timeout",
        type=float,
        default=constants.DEFAULT_TIMEOUT,
        help="seconds allowed for obtaining an oauth token",
    )
    return common


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ar-netrc",
        description=HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    common = _common_options()
    commands = parser.add_subparsers(dest="command")
    commands.add_parser(
        "refresh",
        parents=[common],
        help="refresh oauth tokens for Artifact Registry Go endpoints",
    )
    add = commands.add_parser(
        "add-locations",
        parents=[common],
        help="add new regional Artifact Registry Go endpoints to the netrc file",
    )
    add.add_argument(
        "--locations",
        default="",
        help="Required. A list of comma-separated location strings to regional "
        "Artifact Registry Go endpoints to the netrc file.",
    )
    _add_key_options(add)
    commands.add_parser("help", help="show this help")
    return parser


def refresh(store: NetrcStore, timeout: float = constants.DEFAULT_TIMEOUT) -> None:
    content = store.load()
    token = auth.token(timeout)
    updated = reconcile.refresh(content, token)
    _save(store, content, updated)
    logger.info("Refresh completed.")


def add_locations(
    store: NetrcStore,
    locations: str,
    json_key_path: str = "",
    host_pattern: str = constants.DEFAULT_HOST_PATTERN,
) -> None:
    HostPattern.parse(host_pattern)
    wanted = parse_locations(locations)
    content = store.load()
    updated = reconcile.add_configs(content, wanted, host_pattern, json_key_path or None)
    _save(store, content, updated)
    logger.info("Add locations completed.")


def _save(store: NetrcStore, original: str, updated: str) -> None:
    if updated == original:
        logger.info("%s is already up to date", store.path)
        return
    store.persist(updated)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command in (None, "help"):
        print(HELP)
        return 0

    configure_logging(args.verbose)
    try:
        store = NetrcStore.locate()
        if args.command == "refresh":
            refresh(store, args.timeout)
        else:
            add_locations(store, args.locations, args.json_key, args.host_pattern)
    except NetrcError as exc:
        logger.error("%s", exc)
        return 1
    return 0


def build_goauth_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ar-goauth",
        description=GOAUTH_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    _add_key_options(parser)
    parser.add_argument("location", nargs="?", default="", help="Google Cloud region, e.g. us-central1")
    # Go appends the failing URL when it retries after a 4xx response.
    parser.add_argument("url", nargs="?", default="", help=argparse.SUPPRESS)
    return parser


def goauth_main(argv: Optional[List[str]] = None) -> int:
    args = build_goauth_parser().parse_args(argv)
    if not args.location:
        print(GOAUTH_HELP, file=sys.stderr)
        return 0

    configure_logging()
    try:
        response = goauth.goauth_response(args.location, args.host_pattern, args.json_key or None)
    except InvalidLocationError as exc:
        logger.error("%s", exc)
        return 2
    except (CredentialResolutionError, KeyFileUnreadableError) as exc:
        logger.error("%s", exc)
        return 3
    except NetrcError as exc:
        logger.error("%s", exc)
        return 1
    sys.stdout.write(response)
    return 0
