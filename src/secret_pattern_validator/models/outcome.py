"""
Validation outcome model.

Defines the per-rule result of checking a secret value against its
pattern, including the kind of failure when the check did not pass.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ErrorKind(str, Enum):
	"""Why a rule failed, or ``NONE`` when it passed."""

	NONE = "none"
	PATTERN_COMPILE_ERROR = "pattern_compile_error"
	VALUE_MISSING = "value_missing"
	PATTERN_MISMATCH = "pattern_mismatch"


class ValidationOutcome(BaseModel):
	"""Result of evaluating one rule against an actual value."""

	model_config = ConfigDict(frozen=True)

	name: str = Field(description="Secret name the rule applies to")
	matched: bool = Field(description="Whether the value satisfied the rule")
	message: str = Field(description="Human-readable result line")
	error_kind: ErrorKind = Field(
	    default=ErrorKind.NONE,
	    description="Failure category; NONE when matched",
	)

	@model_validator(mode="after")
	def check_error_kind(self) -> "ValidationOutcome":
		if self.matched and self.error_kind is not ErrorKind.NONE:
			raise ValueError("matched outcome cannot carry an error kind")
		if not self.matched and self.error_kind is ErrorKind.NONE:
			raise ValueError("failed outcome requires an error kind")
		return self


__all__ = ["ErrorKind", "ValidationOutcome"]
