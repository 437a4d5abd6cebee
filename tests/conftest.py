"""Shared fixtures — a recording host for the create-route flow."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest

from remixroute.host import Choice, Level
from remixroute.validation import Validator


@dataclass
class FakeHost:
    """Host double answering prompts from canned values.

    ``kind_answer`` is matched against choice values; ``name_answers``
    are fed to the text prompt one by one, re-prompting on validation
    errors the way a real input box does.  ``None`` means "dismissed".
    """

    kind_answer: Any = None
    name_answers: list[str | None] = field(default_factory=list)
    fail_open: OSError | None = None

    choices_seen: list[Choice[Any]] = field(default_factory=list)
    validation_errors: list[str] = field(default_factory=list)
    notifications: list[tuple[Level, str]] = field(default_factory=list)
    opened: list[Path] = field(default_factory=list)
    prompts: int = 0

    def prompt_choice(self, choices: Sequence[Choice[Any]], *, placeholder: str) -> Any:
        self.prompts += 1
        self.choices_seen.extend(choices)
        for choice in choices:
            if choice.value == self.kind_answer:
                return choice.value
        return None

    def prompt_text(self, *, prompt: str, placeholder: str, validate: Validator) -> str | None:
        self.prompts += 1
        for answer in self.name_answers:
            if answer is None:
                return None
            error = validate(answer)
            if error is None:
                return answer
            self.validation_errors.append(error)
        return None

    def notify(self, level: Level, message: str) -> None:
        self.notifications.append((level, message))

    def open_for_editing(self, path: Path) -> None:
        if self.fail_open is not None:
            raise self.fail_open
        self.opened.append(path)

    @property
    def errors(self) -> list[str]:
        return [msg for level, msg in self.notifications if level is Level.ERROR]

    @property
    def infos(self) -> list[str]:
        return [msg for level, msg in self.notifications if level is Level.INFO]


@pytest.fixture
def routes_dir(tmp_path: Path) -> Path:
    """An existing ``app/routes`` directory under tmp_path."""
    path = tmp_path / "app" / "routes"
    path.mkdir(parents=True)
    return path
