"""
GitHub Actions reporting.

Implements the reporter protocol with GitHub Actions workflow commands
(``::warning::`` etc.) and the ``GITHUB_OUTPUT`` file for step outputs.
"""

from __future__ import annotations

import sys
import uuid
from pathlib import Path
from typing import TextIO


def escape_data(message: str) -> str:
	"""Escape a workflow command message."""
	return (message.replace("%", "%25").replace("\r",
	                                            "%0D").replace("\n", "%0A"))


def escape_property(value: str) -> str:
	"""Escape a workflow command property value."""
	return (escape_data(value).replace(":", "%3A").replace(",", "%2C"))


def format_command(command: str, message: str, **properties: str) -> str:
	"""
	Render a workflow command line.

	Parameters:
		command: Command name, e.g. ``error``.
		message: Command payload.
		properties: Optional ``key=value`` command properties.

	Returns:
		A line of the form ``::command key=value::message``.
	"""
	props = ",".join(f"{k}={escape_property(v)}"
	                 for k, v in properties.items() if v)
	head = f"::{command} {props}" if props else f"::{command}"
	return f"{head}::{escape_data(message)}"


class ActionsReporter:
	"""Reporter that writes GitHub Actions workflow commands to a stream."""

	def __init__(
	    self,
	    stream: TextIO | None = None,
	    output_file: str | Path | None = None,
	) -> None:
		self.stream = stream or sys.stdout
		self.output_file = Path(output_file) if output_file else None
		self.failed = False

	def _write(self, line: str) -> None:
		self.stream.write(line + "\n")
		self.stream.flush()

	def debug(self, message: str) -> None:
		self._write(format_command("debug", message))

	def info(self, message: str) -> None:
		self._write(message)

	def warning(self, message: str) -> None:
		self._write(format_command("warning", message))

	def error(self, message: str) -> None:
		self._write(format_command("error", message))

	def set_failed(self, message: str) -> None:
		"""Emit an error annotation and mark the step as failed."""
		self.failed = True
		self.error(message)

	def set_output(self, name: str, value: str) -> None:
		"""
		Publish a step output.

		Appends to the ``GITHUB_OUTPUT`` file when configured, using the
		heredoc form for multi-line values. Without an output file the
		legacy ``::set-output`` command is written instead.
		"""
		if self.output_file is None:
			self._write(format_command("set-output", value, name=name))
			return
		if "\n" in value:
			delimiter = f"ghadelimiter_{uuid.uuid4()}"
			entry = f"{name}<<{delimiter}\n{value}\n{delimiter}\n"
		else:
			entry = f"{name}={value}\n"
		with self.output_file.open("a", encoding="utf-8") as fh:
			fh.write(entry)

	@property
	def exit_code(self) -> int:
		return 1 if self.failed else 0


__all__ = [
    "ActionsReporter",
    "escape_data",
    "escape_property",
    "format_command",
]
