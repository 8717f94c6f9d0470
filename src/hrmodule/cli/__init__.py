"""hrmodule CLI — inspect what the module contributes to a host.

Entry point registered as ``hrmodule`` in ``pyproject.toml``::

    [project.scripts]
    hrmodule = "hrmodule.cli:main"
"""

import argparse
import logging
import sys

from hrmodule.config import LOG_LEVELS, ModuleConfig


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``hrmodule`` command."""
    parser = argparse.ArgumentParser(
        prog="hrmodule",
        description="hrmodule — HR leave management module for the admin shell.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.lower,
        choices=LOG_LEVELS,
        help="Logging level. Defaults to HRMODULE_LOG_LEVEL.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- hrmodule routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the routes the module registers")
    routes_parser.add_argument(
        "--strict",
        action="store_true",
        help="Register in strict mode (fail on path conflicts)",
    )

    # -- hrmodule locales -------------------------------------------------
    locales_parser = subparsers.add_parser("locales", help="List merged translation keys")
    locales_parser.add_argument(
        "--locale",
        default=None,
        help="Locale tag to show (default: every bundled locale)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    config = ModuleConfig.from_env()
    level = args.log_level or config.log_level
    logging.basicConfig(level=logging.getLevelNamesMapping()[level.upper()])

    if args.command == "routes":
        from hrmodule.cli._routes import run_routes

        run_routes(args, config)
    elif args.command == "locales":
        from hrmodule.cli._locales import run_locales

        run_locales(args, config)
