"""Scaffolding configuration.

ScaffoldConfig is a frozen dataclass — immutable after creation, no
string-key dict lookups.  There is no config file; the CLI maps its
flags onto these fields.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScaffoldConfig:
    """Scaffolding configuration. Immutable after creation.

    All fields have defaults matching the Remix conventions::

        config = ScaffoldConfig(strict_characters=True)
    """

    # Target directory must contain this substring (e.g. app/routes)
    routes_marker: str = "routes"

    # Suffix appended to the route name to build the file name
    extension: str = ".tsx"

    # Opt-in name rules (both off to match the default Remix naming freedom)
    strict_characters: bool = False  # only letters, digits, dots, hyphens, underscores
    require_letters: bool = False  # reject names whose component name would be empty
