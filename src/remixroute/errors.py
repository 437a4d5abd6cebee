"""remixroute exception hierarchy.

Shared across validation, scaffolding, and the CLI so every module
raises and catches the same types.  User cancellation is not an error:
prompts return ``None`` and the command stops quietly.
"""

from pathlib import Path


class RemixRouteError(Exception):
    """Base for all remixroute-specific errors."""


class UsageError(RemixRouteError):
    """Raised when the command runs outside a routes directory.

    Surfaced before any prompt is shown.
    """


class RouteNameError(RemixRouteError):
    """A route name failed one of the validation rules."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        self.message = message
        super().__init__(message)


class RouteConflictError(RemixRouteError):
    """The destination file already exists.  Nothing is overwritten."""

    def __init__(self, name: str, path: Path) -> None:
        self.name = name
        self.path = path
        super().__init__(f"Route {name} already exists!")


class RouteWriteError(RemixRouteError):
    """Creating directories or writing the route file failed.

    Always chained to the underlying ``OSError``.  Directories created
    before the failure are left in place.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to create route: {reason}")
