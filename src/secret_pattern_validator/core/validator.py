"""
Secret validation engine.

Compiles a rule's pattern and tests a value against it. Every outcome,
including a malformed pattern, is returned as a ValidationOutcome so
that a bad rule never aborts the surrounding run.
"""

from __future__ import annotations

import re
from typing import Callable

from secret_pattern_validator.models.outcome import ErrorKind, ValidationOutcome
from secret_pattern_validator.utils.logging import get_logger

logger = get_logger(__name__)

MessageSink = Callable[[str], None]


def _emit(outcome: ValidationOutcome,
          sink: MessageSink | None) -> ValidationOutcome:
	logger.debug("secret %r: %s", outcome.name, outcome.error_kind.value)
	if sink is not None:
		sink(outcome.message)
	return outcome


def validate_secret(
    name: str,
    value: str,
    pattern: str,
    sink: MessageSink | None = None,
) -> ValidationOutcome:
	"""
	Validate a secret value against a regular expression.

	The pattern is compiled with Python's ``re`` dialect and applied with
	search semantics: it is not implicitly anchored and no flags are added,
	so ``^``/``$``, ``(?s)`` and friends behave exactly as written.

	Parameters:
		name: Secret name, used in the result message.
		value: The secret value. Treated purely as data.
		pattern: Regular expression the value must satisfy.
		sink: Optional callable receiving the result message line.

	Returns:
		ValidationOutcome with ``matched`` and a human-readable message.
		A pattern that fails to compile yields ``matched=False`` with
		``ErrorKind.PATTERN_COMPILE_ERROR``; nothing is raised.
	"""
	try:
		regex = re.compile(pattern)
	# huge repeat counts raise OverflowError, deep nesting RecursionError
	except (re.error, OverflowError, RecursionError, ValueError) as exc:
		return _emit(
		    ValidationOutcome(
		        name=name,
		        matched=False,
		        message=f"⚠️ Error validating secret '{name}': {exc}",
		        error_kind=ErrorKind.PATTERN_COMPILE_ERROR,
		    ), sink)

	if regex.search(value) is None:
		return _emit(
		    ValidationOutcome(
		        name=name,
		        matched=False,
		        message=(f"❌ Secret '{name}' does not match the required "
		                 f"pattern: {pattern}"),
		        error_kind=ErrorKind.PATTERN_MISMATCH,
		    ), sink)

	return _emit(
	    ValidationOutcome(
	        name=name,
	        matched=True,
	        message=f"✅ Secret '{name}' is valid.",
	    ), sink)


def missing_outcome(name: str) -> ValidationOutcome:
	"""Build the failure outcome for a secret absent from the environment."""
	return ValidationOutcome(
	    name=name,
	    matched=False,
	    message=f"❌ Secret '{name}' is missing.",
	    error_kind=ErrorKind.VALUE_MISSING,
	)


__all__ = ["validate_secret", "missing_outcome", "MessageSink"]
