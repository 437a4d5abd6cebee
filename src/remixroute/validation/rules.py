"""Built-in route name rules.

Each rule is a callable with the signature::

    def rule(value: str) -> str | None:
        '''Return error message, or None if valid.'''

The three default rules mirror Remix's flat-route naming: the name is a
dot-delimited path, so empty segments are rejected wherever they could
appear.  The two optional rules are stricter and stay off unless
enabled through ``ScaffoldConfig``.

Custom rules follow the same protocol — any callable matching
``(str) -> str | None`` works with ``validate_route_name()``.
"""

import re
from collections.abc import Callable

from remixroute.naming import component_name

# Type alias for a validator function
Validator = Callable[[str], str | None]


# ---------------------------------------------------------------------------
# Default rules
# ---------------------------------------------------------------------------


def not_empty(value: str) -> str | None:
    """Name must be present."""
    if not value:
        return "Route name cannot be empty"
    return None


def no_edge_dots(value: str) -> str | None:
    """Name must not start or end with a segment separator."""
    if value.startswith(".") or value.endswith("."):
        return "Route name cannot start or end with a dot"
    return None


def no_consecutive_dots(value: str) -> str | None:
    if ".." in value:
        return "Route name cannot contain consecutive dots"
    return None


# ---------------------------------------------------------------------------
# Optional rules
# ---------------------------------------------------------------------------

_ALLOWED_RE = re.compile(r"^[a-zA-Z0-9._-]+$")


def allowed_characters(value: str) -> str | None:
    """Name may only use letters, digits, dots, hyphens and underscores.

    Rejects Remix's ``$param`` and ``($optional)`` segments, which is why
    it is opt-in.
    """
    if not _ALLOWED_RE.match(value):
        return "Route name can only contain letters, numbers, dots, hyphens and underscores"
    return None


def has_letters(value: str) -> str | None:
    """Name must produce a non-empty component identifier."""
    if not component_name(value):
        return "Route name must contain at least one letter"
    return None
