"""Shared helpers for the CLI entry points."""

from __future__ import annotations

import argparse
import sys

from ..core.config import PRBConfig, default_config, load_config, merge_config


def add_config_args(parser: argparse.ArgumentParser) -> None:
    """Register options shared by every command."""
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument("--material", type=str, default=None, help="Material preset (overrides E)")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARN", "ERROR"],
        help="Minimum log level (logs go to stderr)",
    )


def resolve_config(args: argparse.Namespace) -> PRBConfig:
    """Load the config file (or defaults) and apply CLI overrides."""
    config = load_config(args.config) if args.config else default_config()
    if args.material is not None:
        config = merge_config(config, {"mechanism": {"material": args.material}})
    return config


def fail(message: str) -> int:
    """Report invalid input on stderr and return the usage-error exit code."""
    print(f"error: {message}", file=sys.stderr)
    return 2
