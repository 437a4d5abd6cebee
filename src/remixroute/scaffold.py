"""Route scaffolding — check, plan, write, report.

Two layers:

- ``plan_route()`` / ``write_route()`` do the work and raise the typed
  errors from ``remixroute.errors``.  Use them directly from scripts.
- ``create_route()`` drives a ``Host`` through the interactive flow and
  turns every error into a notification.  Dismissing a prompt stops the
  flow without one.

Nothing touches disk before ``write_route()``, so cancelling at any
prompt needs no rollback.
"""

import logging
from dataclasses import dataclass
from pathlib import Path, PurePath

from remixroute.config import ScaffoldConfig
from remixroute.errors import (
    RemixRouteError,
    RouteConflictError,
    RouteNameError,
    RouteWriteError,
    UsageError,
)
from remixroute.host import Choice, Host, Level
from remixroute.templates import TEMPLATES, RouteKind, render
from remixroute.validation import route_name_validator

logger = logging.getLogger("remixroute.scaffold")

_DEFAULT_CONFIG = ScaffoldConfig()


@dataclass(frozen=True, slots=True)
class RoutePlan:
    """Everything needed to write one route file."""

    kind: RouteKind
    name: str
    path: Path


def check_directory(directory: Path | None, config: ScaffoldConfig = _DEFAULT_CONFIG) -> Path:
    """Ensure *directory* is given and sits under a routes directory.

    The check is a plain substring match on the path, so ``app/routes``
    and ``app/routes/admin`` both qualify.

    Raises:
        UsageError: If *directory* is ``None`` or lacks the routes marker.
    """
    if directory is None:
        raise UsageError("Please choose a folder in the routes directory.")
    if config.routes_marker not in str(directory):
        raise UsageError("This command can only be used within a Remix routes directory.")
    return directory


def _destination(directory: Path, file_name: str) -> Path:
    """Join *file_name* under *directory*, dropping any root or drive.

    ``/admin/users.tsx`` lands at ``<directory>/admin/users.tsx``.
    """
    relative = PurePath(file_name)
    parts = relative.parts[1:] if relative.anchor else relative.parts
    return directory.joinpath(*parts)


def plan_route(
    directory: Path,
    kind: RouteKind,
    name: str,
    config: ScaffoldConfig = _DEFAULT_CONFIG,
) -> RoutePlan:
    """Validate *name* and compute where the route file goes.

    Raises:
        RouteNameError: If *name* fails a validation rule.
        RouteConflictError: If something already exists at the destination.
    """
    error = route_name_validator(config)(name)
    if error is not None:
        raise RouteNameError(name, error)

    path = _destination(directory, f"{name}{config.extension}")
    if path.exists():
        raise RouteConflictError(name, path)

    logger.debug("Planned %s route %r at %s", kind.value, name, path)
    return RoutePlan(kind=kind, name=name, path=path)


def write_route(plan: RoutePlan) -> Path:
    """Render the template for *plan* and write it to ``plan.path``.

    Missing parent directories are created.  The file is opened in
    exclusive mode, so a file appearing after planning is never
    overwritten.

    Raises:
        RouteConflictError: If the file appeared after planning.
        RouteWriteError: On any other filesystem failure.
    """
    content = render(plan.kind, plan.name)
    try:
        plan.path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise RouteWriteError(plan.path, exc.strerror or str(exc)) from exc

    try:
        with plan.path.open("x", encoding="utf-8") as fh:
            fh.write(content)
    except FileExistsError as exc:
        raise RouteConflictError(plan.name, plan.path) from exc
    except OSError as exc:
        raise RouteWriteError(plan.path, exc.strerror or str(exc)) from exc

    logger.debug("Wrote %d bytes to %s", len(content.encode("utf-8")), plan.path)
    return plan.path


def _select_kind(host: Host) -> RouteKind | None:
    choices = [
        Choice(label=template.label, detail=template.description, value=kind)
        for kind, template in TEMPLATES.items()
    ]
    return host.prompt_choice(choices, placeholder="Select the type of route to create")


def create_route(
    directory: Path | None,
    host: Host,
    config: ScaffoldConfig | None = None,
    *,
    kind: RouteKind | None = None,
    name: str | None = None,
) -> Path | None:
    """Run the interactive create-route flow against *host*.

    *kind* and *name*, when given, answer the corresponding prompt
    without asking.  A preset *name* is validated like typed input.

    Returns:
        The path of the new route file, or ``None`` if the user
        cancelled or an error was reported through ``host.notify``.
    """
    config = config or _DEFAULT_CONFIG

    try:
        routes_dir = check_directory(directory, config)
    except UsageError as exc:
        host.notify(Level.ERROR, str(exc))
        return None

    if kind is None:
        kind = _select_kind(host)
        if kind is None:
            logger.debug("Route kind prompt dismissed")
            return None

    if name is None:
        name = host.prompt_text(
            prompt="Enter the route name (e.g., 'items.new' or 'edit')",
            placeholder="route.name",
            validate=route_name_validator(config),
        )
        if not name:
            logger.debug("Route name prompt dismissed")
            return None

    try:
        plan = plan_route(routes_dir, kind, name, config)
        path = write_route(plan)
        try:
            host.open_for_editing(path)
        except OSError as exc:
            raise RouteWriteError(path, exc.strerror or str(exc)) from exc
    except RemixRouteError as exc:
        host.notify(Level.ERROR, str(exc))
        return None

    host.notify(Level.INFO, f"Route {name} created successfully!")
    return path
