"""Host capability protocol.

The scaffolder never talks to a terminal or editor directly.  Whatever
drives it (the CLI's terminal host, a test double, an editor plugin)
provides four capabilities::

    class MyHost:
        def prompt_choice(self, choices, *, placeholder): ...
        def prompt_text(self, *, prompt, placeholder, validate): ...
        def notify(self, level, message): ...
        def open_for_editing(self, path): ...

No base class required.  The protocol checks the shape, not the lineage.
Prompts return ``None`` when the user dismisses them.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Generic, Protocol, TypeVar

from remixroute.validation.rules import Validator

T = TypeVar("T")


class Level(Enum):
    """Severity of a user notification."""

    INFO = "info"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Choice(Generic[T]):
    """One entry in a pick list."""

    label: str
    detail: str
    value: T


class Host(Protocol):
    """Protocol for user-interaction hosts."""

    def prompt_choice(self, choices: Sequence[Choice[T]], *, placeholder: str) -> T | None: ...

    def prompt_text(self, *, prompt: str, placeholder: str, validate: Validator) -> str | None: ...

    def notify(self, level: Level, message: str) -> None: ...

    def open_for_editing(self, path: Path) -> None: ...
