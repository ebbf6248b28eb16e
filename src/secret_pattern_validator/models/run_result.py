"""
Run result model.

Defines the aggregate of every rule outcome produced by a single run.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .outcome import ValidationOutcome


class RunResult(BaseModel):
	"""
	Aggregate result of a validation run.

	A run passes when no fatal configuration error occurred and every
	evaluated rule matched.
	"""

	outcomes: list[ValidationOutcome] = Field(default_factory=list)
	fatal_error: str | None = Field(
	    default=None,
	    description="Message of the configuration error that aborted the run",
	)

	@property
	def total(self) -> int:
		"""Return the number of rules evaluated."""
		return len(self.outcomes)

	@property
	def failures(self) -> list[ValidationOutcome]:
		"""Return outcomes that did not match, in evaluation order."""
		return [o for o in self.outcomes if not o.matched]

	@property
	def passed(self) -> bool:
		return self.fatal_error is None and not self.failures


__all__ = ["RunResult"]
