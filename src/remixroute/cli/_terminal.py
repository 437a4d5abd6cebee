"""Terminal host — stdin/stdout implementation of the ``Host`` protocol.

Prompts read one line at a time, so the host works the same with a
keyboard or a pipe.  A blank line or end of input dismisses a prompt.
Colors are used only when the output stream is a TTY.

Example session::

    Select the type of route to create
      1  Page Route      A standard page route with meta and default export
      2  Resource Route  An API route with loader and action functions
      3  Layout Route    A route that provides layout for child routes
      4  Error Boundary  A route with error handling
    Choose [1-4]: 1
    Enter the route name (e.g., 'items.new' or 'edit') [route.name]: items.new
      ✓  Route items.new created successfully!
"""

from __future__ import annotations

import os
import shlex
import subprocess
import sys
from typing import TYPE_CHECKING, TextIO, TypeVar

from remixroute.host import Level

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from remixroute.host import Choice
    from remixroute.validation import Validator

T = TypeVar("T")


def _use_color(stream: object) -> bool:
    """True if the output stream supports ANSI color."""
    try:
        return stream.isatty()  # type: ignore[attr-defined]
    except (AttributeError, ValueError):
        return False


class _Palette:
    """ANSI escape sequences — empty strings when color is disabled."""

    __slots__ = ("bold", "dim", "green", "red", "reset")

    def __init__(self, *, enabled: bool) -> None:
        if enabled:
            self.reset = "\033[0m"
            self.bold = "\033[1m"
            self.dim = "\033[2m"
            self.red = "\033[31m"
            self.green = "\033[32m"
        else:
            self.reset = ""
            self.bold = ""
            self.dim = ""
            self.red = ""
            self.green = ""


def default_editor() -> str | None:
    """Editor command from ``REMIXROUTE_EDITOR``, ``VISUAL`` or ``EDITOR``.

    Returns ``None`` when none of them is set.
    """
    for var in ("REMIXROUTE_EDITOR", "VISUAL", "EDITOR"):
        value = os.environ.get(var, "").strip()
        if value:
            return value
    return None


class TerminalHost:
    """Line-oriented terminal host.

    ``error_count`` tracks error notifications so the CLI can pick an
    exit status after a flow that returned ``None``.
    """

    def __init__(
        self,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        color: bool | None = None,
        editor: str | None = None,
    ) -> None:
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.editor = editor
        self.error_count = 0
        use = color if color is not None else _use_color(self.stdout)
        self._c = _Palette(enabled=use)

    def _readline(self, prompt: str) -> str | None:
        """Read one answer without its line ending; ``None`` at EOF."""
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def prompt_choice(self, choices: Sequence[Choice[T]], *, placeholder: str) -> T | None:
        c = self._c
        width = max((len(choice.label) for choice in choices), default=0)
        self.stdout.write(f"{c.bold}{placeholder}{c.reset}\n")
        for index, choice in enumerate(choices, start=1):
            self.stdout.write(
                f"  {index}  {c.bold}{choice.label:<{width}}{c.reset}  "
                f"{c.dim}{choice.detail}{c.reset}\n"
            )

        while True:
            line = self._readline(f"Choose [1-{len(choices)}]: ")
            # Only the menu number matters; spaces around it are ignored
            if line is None or not line.strip():
                return None
            answer = line.strip()
            if answer.isdigit() and 1 <= int(answer) <= len(choices):
                return choices[int(answer) - 1].value
            self.stderr.write(f"Enter a number between 1 and {len(choices)}\n")

    def prompt_text(self, *, prompt: str, placeholder: str, validate: Validator) -> str | None:
        c = self._c
        while True:
            line = self._readline(f"{prompt} {c.dim}[{placeholder}]{c.reset}: ")
            if line is None:
                return None
            # Surrounding whitespace is dropped; a blank answer dismisses the prompt
            answer = line.strip()
            if not answer:
                return None
            error = validate(answer)
            if error is None:
                return answer
            self.stderr.write(f"  {c.red}{error}{c.reset}\n")

    def notify(self, level: Level, message: str) -> None:
        c = self._c
        if level is Level.ERROR:
            self.error_count += 1
            self.stderr.write(f"  {c.red}{c.bold}✗{c.reset}  {message}\n")
        else:
            self.stdout.write(f"  {c.green}✓{c.reset}  {message}\n")

    def open_for_editing(self, path: Path) -> None:
        """Launch the configured editor on *path*, or print the path.

        Raises:
            OSError: If the editor command cannot be started.
        """
        if not self.editor:
            self.stdout.write(f"  {self._c.dim}->{self._c.reset} {path}\n")
            return
        subprocess.run([*shlex.split(self.editor), str(path)], check=False)
