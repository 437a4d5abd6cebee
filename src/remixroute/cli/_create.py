"""``remixroute create`` — scaffold one route file.

Builds a ``ScaffoldConfig`` from the flags, wires a ``TerminalHost`` to
the process streams, and runs the create-route flow.  Exits with code 1
if the flow reported an error; cancelling a prompt exits 0.
"""

import argparse
from pathlib import Path

from remixroute.cli._terminal import TerminalHost, default_editor
from remixroute.config import ScaffoldConfig
from remixroute.scaffold import create_route
from remixroute.templates import RouteKind


def run_create(args: argparse.Namespace) -> None:
    """Create a route file under ``args.directory`` (or the cwd)."""
    config = ScaffoldConfig(
        extension=args.ext,
        strict_characters=args.strict,
        require_letters=args.require_letters,
    )
    host = TerminalHost(
        color=False if args.no_color else None,
        editor=args.editor or default_editor(),
    )
    directory = Path(args.directory).absolute() if args.directory else Path.cwd()
    kind = RouteKind(args.kind) if args.kind else None

    path = create_route(directory, host, config, kind=kind, name=args.name)
    if path is None and host.error_count:
        raise SystemExit(1)
