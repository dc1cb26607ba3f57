# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the Dodo Payments command-line interface."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from dodopayments import setup_logging, types
from dodopayments.client import DodoPayments
from dodopayments.config import ClientConfig, load_client_config
from dodopayments.core.conversion import coerce, dumps
from dodopayments.errors import APIError, ConfigError

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the Dodo Payments CLI."""
    parser = argparse.ArgumentParser(
        prog="dodopayments",
        description="Dodo Payments API client",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level of the SDK (default: DODO_PAYMENTS_LOG or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # decode subcommand
    decode_parser = subparsers.add_parser(
        "decode",
        help="Decode a JSON payload into an API model",
        description="Read a JSON document, decode it as the named model and print it back in wire form.",
    )
    decode_parser.add_argument("model", help="Name of a model in dodopayments.types, e.g. Payment")
    decode_parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="JSON file to decode (default: standard input)",
    )

    # config subcommand
    config_parser = subparsers.add_parser(
        "config",
        help="Show the resolved client configuration",
        description="Print the client configuration from the config file and environment, API key masked.",
    )
    config_parser.add_argument("--config", type=Path, default=None, help="Path to a YAML config file")

    # get subcommand
    get_parser = subparsers.add_parser(
        "get",
        help="Send an authenticated GET request",
        description="Send a GET request to an API path and print the JSON response.",
    )
    get_parser.add_argument("path", help="API path, e.g. payments/pay_123")
    get_parser.add_argument(
        "--query",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Query parameter; may be given several times",
    )
    get_parser.add_argument("--config", type=Path, default=None, help="Path to a YAML config file")

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.log_level:
        try:
            setup_logging(args.log_level)
        except ValueError:
            print(f"Error: unknown log level '{args.log_level}'.", file=sys.stderr)
            return 1
    if args.command == "decode":
        return _cmd_decode(args)
    if args.command == "config":
        return _cmd_config(args)
    if args.command == "get":
        return _cmd_get(args)
    return 0


def _cmd_decode(args: argparse.Namespace) -> int:
    """Handle the decode subcommand."""
    model = getattr(types, args.model, None)
    if args.model not in types.__all__ or not callable(getattr(model, "converter", None)):
        print(f"Error: unknown model '{args.model}'.", file=sys.stderr)
        return 1

    if args.file is None:
        text = sys.stdin.read()
    else:
        try:
            text = Path(args.file).read_text(encoding="utf-8")
        except OSError as exc:
            print(f"Error: cannot read '{args.file}': {exc}", file=sys.stderr)
            return 1

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        print(f"Error: invalid JSON: {exc}", file=sys.stderr)
        return 1

    print(dumps(model, coerce(model, data), indent=2))
    return 0


def _cmd_config(args: argparse.Namespace) -> int:
    """Handle the config subcommand."""
    try:
        config = load_client_config(args.config)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for key, value in _describe_config(config).items():
        print(f"{key}: {value}")
    return 0


def _cmd_get(args: argparse.Namespace) -> int:
    """Handle the get subcommand."""
    query: dict[str, str] = {}
    for item in args.query:
        key, sep, value = item.partition("=")
        if not sep or not key:
            print(f"Error: query parameter '{item}' must look like KEY=VALUE.", file=sys.stderr)
            return 1
        query[key] = value

    try:
        config = load_client_config(args.config)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if config.log_level and not args.log_level:
        try:
            setup_logging(config.log_level)
        except ValueError:
            print(f"Error: unknown log level '{config.log_level}'.", file=sys.stderr)
            return 1

    try:
        with DodoPayments(config=config) as client:
            result = client.get(args.path, query=query)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except APIError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


def _describe_config(config: ClientConfig) -> dict[str, Any]:
    return {
        "api-key": _mask(config.api_key),
        "base-url": config.resolved_base_url,
        "environment": config.environment,
        "timeout": config.timeout,
        "max-retries": config.max_retries,
        "log-level": config.log_level or "(default)",
    }


def _mask(secret: str | None) -> str:
    if not secret:
        return "(not set)"
    if len(secret) <= 4:
        return "****"
    return f"****{secret[-4:]}"
