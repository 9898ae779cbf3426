"""Epicurve CLI entry points.

This module exposes commands to render, inspect, and serve charts.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from cli.serve_command import add_serve_command, run_serve_command
from cli.show_command import add_show_command, run_show_command
from core.config import EpicurveConfig
from core.errors import EpicurveConfigError, EpicurveError
from serve.report_sdk import EpicurveClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="epicurve", description="Epidemic curve reports")
    parser.add_argument("--profile", help="YAML report profile; defaults to the built-in one")
    parser.add_argument("--output-dir", help="Override EPICURVE_OUTPUT_DIR for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_render_command(subparsers)
    add_show_command(subparsers)
    add_serve_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the epicurve CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = _build_client(args.profile, args.output_dir)
        if args.command == "render":
            return _run_render_command(client, args)
        if args.command == "show":
            return run_show_command(client, args)
        if args.command == "serve":
            return run_serve_command(client, args)
    except EpicurveError as error:
        print(f"epicurve: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(profile_path: str | None, output_dir: str | None) -> EpicurveClient:
    """Build SDK client with optional profile and output overrides.

    Args:
        profile_path: Optional YAML profile path.
        output_dir: Optional override path.

    Returns:
        Configured SDK client.
    """
    config = EpicurveConfig.from_env()
    if output_dir:
        config = replace(config, output_dir=Path(output_dir).expanduser().resolve())
    if profile_path:
        return EpicurveClient.from_profile_file(profile_path, config)
    return EpicurveClient(config)


def _run_render_command(client: EpicurveClient, args: argparse.Namespace) -> int:
    """Handle render command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    metrics = [args.metric] if args.metric else list(client.metrics())
    if args.output and len(metrics) > 1:
        raise EpicurveConfigError("--output requires a single --metric.")
    for metric in metrics:
        print(client.render_to_file(metric, args.output))
    return 0


def _add_render_command(subparsers: Any) -> None:
    """Register render subcommand."""
    parser = subparsers.add_parser("render", help="Fetch data and write chart PNG files")
    parser.add_argument("--metric", help="Metric to render; defaults to every profile metric")
    parser.add_argument("--output", help="Destination PNG path for a single metric")
