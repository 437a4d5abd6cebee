"""Route name to component identifier.

Remix route file names are dot-delimited (``items.new``, ``$id.edit``).
Generated components need a PascalCase-like function name, so each
dot segment keeps only its ASCII letters and gets an upper-cased first
character::

    component_name("items.new")  # "ItemsNew"
    component_name("$id.edit")   # "IdEdit"
    component_name("a1.b2")      # "AB"
"""

import re

_NON_LETTER_RE = re.compile(r"[^a-zA-Z]")


def component_name(route_name: str) -> str:
    """Derive the component identifier for *route_name*.

    Segments left empty after filtering contribute nothing, so a name
    without any ASCII letter (``"123"``) yields ``""``.
    """
    parts: list[str] = []
    for segment in route_name.split("."):
        letters = _NON_LETTER_RE.sub("", segment)
        if letters:
            parts.append(letters[0].upper() + letters[1:])
    return "".join(parts)
