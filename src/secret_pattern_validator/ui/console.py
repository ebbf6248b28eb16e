"""
Local console reporting.

Provides a Rich-based reporter for runs outside GitHub Actions and a
summary table of rule outcomes.
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from secret_pattern_validator.models.outcome import ErrorKind
from secret_pattern_validator.models.run_result import RunResult

_STATUS_LABELS: dict[ErrorKind, tuple[str, str]] = {
    ErrorKind.NONE: ("valid", "green"),
    ErrorKind.PATTERN_MISMATCH: ("mismatch", "red"),
    ErrorKind.VALUE_MISSING: ("missing", "yellow"),
    ErrorKind.PATTERN_COMPILE_ERROR: ("bad pattern", "magenta"),
}


class ConsoleReporter:
	"""Reporter that prints styled lines to a Rich console."""

	def __init__(self, console: Console | None = None,
	             verbose: bool = False) -> None:
		self.console = console or Console()
		self.verbose = verbose
		self.failed = False
		self.outputs: dict[str, str] = {}

	def _print(self, message: str, style: str | None = None) -> None:
		# Text avoids Rich markup parsing of regex brackets.
		self.console.print(Text(message, style=style or ""))

	def debug(self, message: str) -> None:
		if self.verbose:
			self._print(message, "dim")

	def info(self, message: str) -> None:
		self._print(message)

	def warning(self, message: str) -> None:
		self._print(f"warning: {message}", "yellow")

	def error(self, message: str) -> None:
		self._print(f"error: {message}", "red")

	def set_failed(self, message: str) -> None:
		self.failed = True
		self._print(message, "bold red")

	def set_output(self, name: str, value: str) -> None:
		self.outputs[name] = value

	@property
	def exit_code(self) -> int:
		return 1 if self.failed else 0


def render_summary(result: RunResult) -> Table:
	"""
	Build a summary table with one row per evaluated rule.

	Parameters:
		result: Aggregate run result.

	Returns:
		Rich Table listing each secret and its status.
	"""
	table = Table(show_header=True, box=box.ROUNDED,
	              title=f"{result.total} secret(s) checked, "
	              f"{len(result.failures)} failed")
	table.add_column("Secret")
	table.add_column("Status")
	for outcome in sorted(result.outcomes, key=lambda o: o.name):
		label, style = _STATUS_LABELS[outcome.error_kind]
		table.add_row(Text(outcome.name), Text(label, style=style))
	return table


__all__ = ["ConsoleReporter", "render_summary"]
