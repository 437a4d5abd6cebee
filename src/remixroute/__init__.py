"""remixroute — scaffold route files for Remix's file-based routing.

Picks one of four fixed templates (page, resource, layout, error
boundary), fills in a component name derived from the dotted route
name, and writes ``<routes-dir>/<name>.tsx``.

Basic usage::

    from pathlib import Path

    from remixroute import RouteKind, plan_route, write_route

    plan = plan_route(Path("app/routes"), RouteKind.PAGE, "items.new")
    write_route(plan)  # app/routes/items.new.tsx

Interactive usage goes through ``create_route()`` with any object that
satisfies the ``Host`` protocol, or the ``remixroute create`` command.
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "Choice",
    "Host",
    "Level",
    "RemixRouteError",
    "RouteConflictError",
    "RouteKind",
    "RouteNameError",
    "RoutePlan",
    "RouteTemplate",
    "RouteWriteError",
    "ScaffoldConfig",
    "TEMPLATES",
    "UsageError",
    "component_name",
    "create_route",
    "plan_route",
    "render",
    "validate_route_name",
    "write_route",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "Choice": "remixroute.host",
    "Host": "remixroute.host",
    "Level": "remixroute.host",
    "RemixRouteError": "remixroute.errors",
    "RouteConflictError": "remixroute.errors",
    "RouteNameError": "remixroute.errors",
    "RouteWriteError": "remixroute.errors",
    "UsageError": "remixroute.errors",
    "RouteKind": "remixroute.templates",
    "RouteTemplate": "remixroute.templates",
    "TEMPLATES": "remixroute.templates",
    "render": "remixroute.templates",
    "RoutePlan": "remixroute.scaffold",
    "create_route": "remixroute.scaffold",
    "plan_route": "remixroute.scaffold",
    "write_route": "remixroute.scaffold",
    "ScaffoldConfig": "remixroute.config",
    "component_name": "remixroute.naming",
    "validate_route_name": "remixroute.validation",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import remixroute`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_path), name)
