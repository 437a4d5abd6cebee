"""remixroute CLI — scaffold Remix route files.

Entry point registered as ``remixroute`` in ``pyproject.toml``::

    [project.scripts]
    remixroute = "remixroute.cli:main"
"""

import argparse
import logging
import sys

from remixroute.templates import RouteKind

_HANDLER_NAME = "remixroute.cli"


def _configure_logging(verbose: bool) -> None:
    """Send ``remixroute`` debug records to stderr when *verbose*.

    Repeated calls reuse the handler attached by the first one.
    """
    if not verbose:
        return
    logger = logging.getLogger("remixroute")
    logger.setLevel(logging.DEBUG)
    for handler in logger.handlers:
        if handler.get_name() == _HANDLER_NAME and isinstance(handler, logging.StreamHandler):
            handler.setStream(sys.stderr)
            return

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``remixroute`` command."""
    parser = argparse.ArgumentParser(
        prog="remixroute",
        description="remixroute — scaffold route files for Remix projects.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- remixroute create -------------------------------------------------
    create_parser = subparsers.add_parser("create", help="Create a new route file")
    create_parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Routes directory to create the file in (default: current directory)",
    )
    create_parser.add_argument(
        "--kind",
        choices=[kind.value for kind in RouteKind],
        default=None,
        help="Route kind (skips the kind prompt)",
    )
    create_parser.add_argument(
        "--name",
        default=None,
        help="Route name, e.g. items.new (skips the name prompt)",
    )
    create_parser.add_argument(
        "--strict",
        action="store_true",
        help="Only allow letters, numbers, dots, hyphens and underscores in names",
    )
    create_parser.add_argument(
        "--require-letters",
        action="store_true",
        help="Reject names that contain no letters",
    )
    create_parser.add_argument("--ext", default=".tsx", help="File extension (default: .tsx)")
    create_parser.add_argument(
        "--editor",
        default=None,
        help="Command to open the new file with (default: $REMIXROUTE_EDITOR, $VISUAL, $EDITOR)",
    )
    create_parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    create_parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")

    # -- remixroute kinds --------------------------------------------------
    subparsers.add_parser("kinds", help="List available route kinds")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "create":
        from remixroute.cli._create import run_create

        _configure_logging(args.verbose)
        run_create(args)
    elif args.command == "kinds":
        from remixroute.cli._kinds import run_kinds

        run_kinds(args)
