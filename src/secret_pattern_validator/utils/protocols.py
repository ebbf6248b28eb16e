"""
Protocol definitions for dependency injection.

Defines the host-platform reporting interface so the orchestrator can be
driven by GitHub Actions, a local console, or a test double.
"""

from __future__ import annotations

from typing import Protocol


class ReporterProtocol(Protocol):
	"""
	Protocol for the host platform's reporting sink.

	``set_failed`` is the single authoritative signal that the overall run
	failed; ``error`` annotations are advisory per-rule detail.
	"""

	def debug(self, message: str) -> None:
		"""Emit a debug-level line."""
		...

	def info(self, message: str) -> None:
		"""Emit an informational line."""
		...

	def warning(self, message: str) -> None:
		"""Emit a warning annotation."""
		...

	def error(self, message: str) -> None:
		"""Emit an error annotation."""
		...

	def set_failed(self, message: str) -> None:
		"""Mark the overall run as failed."""
		...

	def set_output(self, name: str, value: str) -> None:
		"""Publish a named step output."""
		...


__all__ = ["ReporterProtocol"]
