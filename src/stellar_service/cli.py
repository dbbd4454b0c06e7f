"""
Command-line interface for the Stellar transaction service.

Provides commands for running the API server and generating keypairs.
"""

import argparse
import json
import sys
from typing import Optional, Sequence

import structlog
import uvicorn

from stellar_service import __version__
from stellar_service.config import NetworkType, ServiceConfig, set_config
from stellar_service.log import setup_logging
from stellar_service.tx.signer import generate_keypair

logger = structlog.get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="stellar-service",
        description="HTTP facade for building and submitting Stellar transactions",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument(
        "--host",
        help="Interface to bind (default: from config, 0.0.0.0)",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        help="Port to listen on (default: $PORT or 3002)",
    )
    serve_parser.add_argument(
        "--network",
        choices=[n.value for n in NetworkType],
        help="Stellar network (default: public)",
    )
    serve_parser.add_argument(
        "--horizon-url",
        help="Custom Horizon URL",
    )
    serve_parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    serve_parser.add_argument(
        "--log-json",
        action="store_true",
        help="Output logs in JSON format",
    )

    # Keypair command
    keypair_parser = subparsers.add_parser("keypair", help="Generate a random keypair")
    keypair_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the keypair as JSON",
    )

    return parser


def build_config(args: argparse.Namespace) -> ServiceConfig:
    """Overlay command-line flags on the environment configuration."""
    overrides = {}
    if args.host:
        overrides["host"] = args.host
    if args.port:
        overrides["port"] = args.port
    if args.network:
        overrides["network"] = NetworkType(args.network)
    if args.horizon_url:
        overrides["horizon_url"] = args.horizon_url
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.log_json:
        overrides["log_json"] = True
    return ServiceConfig(**overrides)


def serve(args: argparse.Namespace) -> None:
    """Run the API server."""
    from stellar_service.api.app import create_app

    config = build_config(args)
    set_config(config)
    setup_logging(config.log_level, config.log_json)

    logger.info(
        "service_starting",
        version=__version__,
        network=config.network.value,
        horizon_url=config.horizon_url,
        port=config.port,
    )

    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


def keypair(args: argparse.Namespace) -> None:
    """Print a freshly generated keypair."""
    generated = generate_keypair()

    if args.json:
        print(json.dumps({
            "publicKey": generated.public_key,
            "secretKey": generated.secret_key,
        }, indent=2))
        return

    print(f"Public key: {generated.public_key}")
    print(f"Secret key: {generated.secret_key}")
    print()
    print("Keep the secret key safe. It is not stored anywhere.")


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "serve":
        serve(args)
    elif args.command == "keypair":
        setup_logging("WARNING")
        keypair(args)


if __name__ == "__main__":
    main()
