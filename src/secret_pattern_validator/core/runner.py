"""
Main orchestrator for a validation run.

Loads the configured rules, resolves each secret from an explicit
environment mapping, evaluates it and reports the aggregate result to
the host platform.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping

from secret_pattern_validator.core.validator import (
    MessageSink,
    missing_outcome,
    validate_secret,
)
from secret_pattern_validator.errors import ConfigError
from secret_pattern_validator.loaders.config_file import load_rules
from secret_pattern_validator.models.outcome import ValidationOutcome
from secret_pattern_validator.models.rule import SecretRule
from secret_pattern_validator.models.run_result import RunResult
from secret_pattern_validator.utils.logging import get_logger
from secret_pattern_validator.utils.protocols import ReporterProtocol

logger = get_logger(__name__)

FAILED_MESSAGE = "One or more secrets failed validation"
SUCCESS_MESSAGE = "All secrets validated successfully"
OUTPUT_NAME = "validation-passed"


def evaluate_rule(
    rule: SecretRule,
    environment: Mapping[str, str],
    sink: MessageSink | None = None,
) -> ValidationOutcome:
	"""
	Evaluate a single rule against the environment.

	Only a name absent from the mapping counts as missing; an empty value
	is a present value and is tested against the pattern.
	"""
	value = environment.get(rule.name)
	if value is None:
		outcome = missing_outcome(rule.name)
		if sink is not None:
			sink(outcome.message)
		return outcome
	return validate_secret(rule.name, value, rule.pattern, sink=sink)


def evaluate_rules(
    rules: Iterable[SecretRule],
    environment: Mapping[str, str],
    sink: MessageSink | None = None,
) -> RunResult:
	"""Evaluate every rule and collect the outcomes into a RunResult."""
	return RunResult(
	    outcomes=[evaluate_rule(r, environment, sink) for r in rules])


def report_result(result: RunResult, reporter: ReporterProtocol) -> None:
	"""
	Send the terminal signal for a completed run to the reporter.

	Parameters:
		result: Aggregate result of the run.
		reporter: Host platform reporting sink.
	"""
	failures = result.failures
	if failures:
		for outcome in failures:
			reporter.error(f"Validation failed for secret: {outcome.name}")
		reporter.set_failed(FAILED_MESSAGE)
	else:
		reporter.info(SUCCESS_MESSAGE)
	reporter.set_output(OUTPUT_NAME, "true" if result.passed else "false")


def run(
    config_path: str | Path,
    environment: Mapping[str, str],
    reporter: ReporterProtocol,
) -> RunResult:
	"""
	Validate every configured secret and report the outcome.

	Configuration errors are fatal: they are reported through
	``reporter.set_failed`` and no rule is evaluated. Per-rule failures
	never stop the remaining rules from being checked.

	Parameters:
		config_path: Path to the secret patterns configuration file.
		environment: Mapping to resolve secret values from.
		reporter: Host platform reporting sink.

	Returns:
		RunResult describing every evaluated rule.
	"""
	try:
		rules = load_rules(config_path)
	except ConfigError as exc:
		logger.debug("aborting run: %s", exc)
		reporter.set_failed(str(exc))
		reporter.set_output(OUTPUT_NAME, "false")
		return RunResult(fatal_error=str(exc))

	reporter.debug(f"Validating {len(rules)} secret(s) from {config_path}")

	outcomes = []
	for rule in rules:
		if rule.name not in environment:
			reporter.warning(f'Secret "{rule.name}" not found in environment.')
		outcomes.append(evaluate_rule(rule, environment, reporter.info))

	result = RunResult(outcomes=outcomes)
	logger.debug("evaluated %d rule(s), %d failure(s)", result.total,
	             len(result.failures))
	report_result(result, reporter)
	return result


__all__ = [
    "run",
    "evaluate_rule",
    "evaluate_rules",
    "report_result",
    "FAILED_MESSAGE",
    "SUCCESS_MESSAGE",
    "OUTPUT_NAME",
]
