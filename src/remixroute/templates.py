"""Route template registry.

A closed set of four route kinds, each mapped to a ``RouteTemplate``
carrying its picker label, a one-line description, and a pure render
function::

    from remixroute.templates import RouteKind, render

    source = render(RouteKind.PAGE, "items.new")
    # ... export default function ItemsNew() { ...

The registry is built once at import and exposed read-only.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from remixroute._sources import ERROR_TSX, LAYOUT_TSX, PAGE_TSX, RESOURCE_TSX
from remixroute.naming import component_name


class RouteKind(Enum):
    """Kind of route file to generate.  Order is the picker order."""

    PAGE = "page"
    RESOURCE = "resource"
    LAYOUT = "layout"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class RouteTemplate:
    """Display metadata plus the render function for one route kind."""

    label: str
    description: str
    render: Callable[[str], str]


def _render_page(route_name: str) -> str:
    return PAGE_TSX.format(component_name=component_name(route_name))


def _render_resource(route_name: str) -> str:
    # The greeting carries the raw name, not the derived identifier
    return RESOURCE_TSX.format(route_name=route_name)


def _render_layout(route_name: str) -> str:
    return LAYOUT_TSX.format(component_name=component_name(route_name))


def _render_error(route_name: str) -> str:
    return ERROR_TSX.format(component_name=component_name(route_name))


TEMPLATES: Mapping[RouteKind, RouteTemplate] = MappingProxyType(
    {
        RouteKind.PAGE: RouteTemplate(
            label="Page Route",
            description="A standard page route with meta and default export",
            render=_render_page,
        ),
        RouteKind.RESOURCE: RouteTemplate(
            label="Resource Route",
            description="An API route with loader and action functions",
            render=_render_resource,
        ),
        RouteKind.LAYOUT: RouteTemplate(
            label="Layout Route",
            description="A route that provides layout for child routes",
            render=_render_layout,
        ),
        RouteKind.ERROR: RouteTemplate(
            label="Error Boundary",
            description="A route with error handling",
            render=_render_error,
        ),
    }
)


def render(kind: RouteKind, route_name: str) -> str:
    """Render the file content for *kind* with *route_name* substituted.

    Deterministic: the same arguments always produce identical text.
    """
    return TEMPLATES[kind].render(route_name)
