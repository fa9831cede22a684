"""
Command line entry point

Allows running `python -m auth_server_jwt credentials` or
`python -m auth_server_jwt token --issuer svc --scope read`.
Logs go to stderr so stdout only carries the issued artifact.
"""

import argparse
import json
import logging
import os
import sys

from .core.config import ServiceConfig
from .core.constants import ENV_AUDIENCE, ENV_SECRET, LOG_FORMAT, SERVICE_NAME
from .core.exceptions import AuthServerError
from .core.oauth_service import OAuthService


def setup_logging(verbose: bool = False):
    """Configure logging to stderr"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=SERVICE_NAME,
        description="Issue OAuth client credentials and HS256 access tokens",
    )
    parser.add_argument("--audience", help="Override AUTHSRV_AUDIENCE")
    parser.add_argument("--secret", help="Override AUTHSRV_SECRET")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("credentials", help="Print a new client credential as JSON")

    token = commands.add_parser("token", help="Print a signed access token")
    token.add_argument("--issuer", required=True, help="Token issuer (iss)")
    token.add_argument("--ttl", type=int, default=None, help="Lifetime in seconds")
    token.add_argument(
        "--scope", action="append", default=[], help="Scope entry (repeatable, order kept)"
    )
    return parser


def main(argv=None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    logger = logging.getLogger("main")

    try:
        config = ServiceConfig.from_env(_with_overrides(dict(os.environ), args))
        service = OAuthService.from_config(config)

        if args.command == "credentials":
            print(json.dumps(service.generate().to_dict(), indent=2))
        else:
            print(service.sign(args.issuer, args.ttl, args.scope))
    except AuthServerError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    return 0


def _with_overrides(env: dict, args: argparse.Namespace) -> dict:
    if args.audience:
        env[ENV_AUDIENCE] = args.audience
    if args.secret:
        env[ENV_SECRET] = args.secret
    return env


if __name__ == "__main__":
    sys.exit(main())
