"""Tests for the Rich console reporter and summary table."""

from __future__ import annotations

from rich.console import Console

from secret_pattern_validator.models.outcome import (
    ErrorKind,
    ValidationOutcome,
)
from secret_pattern_validator.models.run_result import RunResult
from secret_pattern_validator.ui.console import ConsoleReporter, render_summary


def _console() -> Console:
	return Console(record=True, width=120, color_system=None)


def test_regex_brackets_are_not_markup():
	console = _console()
	reporter = ConsoleReporter(console=console)
	reporter.info("❌ Secret 'K' does not match the required pattern: "
	              "^[A-Za-z0-9]{16}$")
	assert "^[A-Za-z0-9]{16}$" in console.export_text()


def test_debug_hidden_unless_verbose():
	console = _console()
	ConsoleReporter(console=console).debug("hidden")
	ConsoleReporter(console=console, verbose=True).debug("shown")
	text = console.export_text()
	assert "hidden" not in text
	assert "shown" in text


def test_set_failed_and_outputs():
	console = _console()
	reporter = ConsoleReporter(console=console)
	assert reporter.exit_code == 0
	reporter.set_failed("One or more secrets failed validation")
	reporter.set_output("validation-passed", "false")
	assert reporter.exit_code == 1
	assert reporter.outputs == {"validation-passed": "false"}
	assert "One or more secrets failed validation" in console.export_text()


def test_render_summary():
	result = RunResult(outcomes=[
	    ValidationOutcome(name="B_KEY", matched=True, message="ok"),
	    ValidationOutcome(name="A_KEY", matched=False, message="gone",
	                      error_kind=ErrorKind.VALUE_MISSING),
	])
	console = _console()
	console.print(render_summary(result))
	text = console.export_text()
	assert "2 secret(s) checked, 1 failed" in text
	assert "missing" in text
	assert "valid" in text
	assert text.index("A_KEY") < text.index("B_KEY")
