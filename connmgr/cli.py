"""Command-line entry point for connmgr."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from connmgr import __version__
from connmgr.shared.app import RuntimeConfig, build_app_services
from connmgr.shared.core.store import ConfigError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="connmgr",
        description="Browse saved connections by module, project and environment.",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help=(
            "Path to a JSON config file; config.yaml is not read "
            "(default: ./config.json, then ~/.connectionmanager/config.json)"
        ),
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Record debug events to the debug log",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def runtime_from_args(args: argparse.Namespace) -> RuntimeConfig:
    """Environment settings with command-line flags layered on top."""
    runtime = RuntimeConfig.from_env()
    if args.config:
        runtime = replace(runtime, config_path=Path(args.config).expanduser())
    if args.debug:
        runtime = replace(runtime, debug_mode=True)
    return runtime


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    runtime = runtime_from_args(args)

    try:
        services = build_app_services(runtime)
    except ConfigError as exc:
        print(f"Error reading config file: {exc}", file=sys.stderr)
        return 1

    from connmgr.domains.shell.app.main import ConnectionManagerApp

    app = ConnectionManagerApp(services=services)
    app.run()
    return app.return_code or 0


if __name__ == "__main__":
    sys.exit(main())
