"""Console output for local runs."""

from secret_pattern_validator.ui.console import ConsoleReporter, render_summary

__all__ = ["ConsoleReporter", "render_summary"]
