"""Serve command wiring for epicurve CLI."""

from __future__ import annotations

import argparse
from typing import Any

from serve.http_app import run_server
from serve.report_sdk import EpicurveClient


def run_serve_command(client: EpicurveClient, args: argparse.Namespace) -> int:
    """Handle serve command invocation."""
    host = args.host or client.config.host
    port = args.port or client.config.port
    run_server(client, host, port)
    return 0


def add_serve_command(subparsers: Any) -> None:
    """Register serve subcommand."""
    parser = subparsers.add_parser("serve", help="Serve rendered charts over HTTP")
    parser.add_argument("--host", help="Bind host; defaults to EPICURVE_HOST")
    parser.add_argument("--port", type=int, help="Bind port; defaults to EPICURVE_PORT")
