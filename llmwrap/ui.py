import sys
from typing import Optional, TextIO

from rich.console import Console

COMMAND_LABEL = "Proposed command:"
AFFIRMATIVE = ("y", "yes")


class ConfirmationGate:
    """Shows a proposed command and asks the operator whether to run it."""

    def __init__(
        self,
        default_yes: bool = False,
        console: Optional[Console] = None,
        stdin: Optional[TextIO] = None,
    ):
        self.default_yes = default_yes
        self.console = console or Console()
        self._stdin = stdin

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def prompt(self) -> str:
        choices = "[Y/n]" if self.default_yes else "[y/N]"
        return f"Run this command? {choices}: "

    def _write_raw(self, text: str) -> None:
        # Skip rich rendering: tabs and control characters must reach the terminal unchanged
        self.console.file.write(text + "\n")
        self.console.file.flush()

    def show_command(self, command: str) -> None:
        """Display the command exactly as it will be run."""
        self.console.print()
        self.console.print(COMMAND_LABEL, style="bold")
        self._write_raw(command)
        self.console.print()

    def confirm(self) -> bool:
        """Read one line of input; anything unrecognised or unreadable declines."""
        self.console.print(self.prompt, end="", markup=False, highlight=False)
        try:
            line = self.stdin.readline()
        except (OSError, ValueError):
            return False
        if not line:
            # EOF
            return False

        answer = line.strip().lower()
        if answer == "":
            return self.default_yes
        # "n"/"no" and anything unrecognised decline
        return answer in AFFIRMATIVE

    def ask(self, command: str) -> bool:
        self.show_command(command)
        return self.confirm()

    def report_declined(self) -> None:
        self.console.print("Aborted by user; command not executed.")

    def report_executing(self, command: str) -> None:
        self._write_raw(f"Executing: {command}")
