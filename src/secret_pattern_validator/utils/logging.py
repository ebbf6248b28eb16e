"""
Logging configuration module.

Provides centralized logging setup with configurable log levels. Inside
GitHub Actions, records are rendered as workflow commands so debug lines
only show up when step debugging is enabled.
"""

from __future__ import annotations

import logging
import sys

from secret_pattern_validator.integrations.actions import format_command

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
ACTIONS_FORMAT = "%(name)s: %(message)s"

_COMMANDS = {
    logging.DEBUG: "debug",
    logging.INFO: "notice",
    logging.WARNING: "warning",
    logging.ERROR: "error",
}


class ActionsCommandFormatter(logging.Formatter):
	"""Formatter that renders records as GitHub Actions workflow commands."""

	def __init__(self) -> None:
		super().__init__(ACTIONS_FORMAT)

	def format(self, record: logging.LogRecord) -> str:
		"""Prefix the formatted record with its workflow command."""
		level = max(lvl for lvl in _COMMANDS if lvl <= max(
		    record.levelno, logging.DEBUG))
		return format_command(_COMMANDS[level], super().format(record))


def configure_logging(level: str = "warning",
                      github_actions: bool = False) -> None:
	"""
	Configure basic logging with level and format.

	Parameters:
		level: Log level string (e.g., "info", "debug", "warning").
		github_actions: Render records as workflow commands on stdout.
	"""
	lvl = logging._nameToLevel.get(level.upper(), logging.WARNING)
	if not github_actions:
		logging.basicConfig(level=lvl, format=LOG_FORMAT)
		return
	root = logging.getLogger()
	root.setLevel(lvl)
	# Avoid adding duplicate handlers on repeated calls
	if not any(
	    isinstance(h.formatter, ActionsCommandFormatter)
	    for h in root.handlers):
		handler = logging.StreamHandler(sys.stdout)
		handler.setFormatter(ActionsCommandFormatter())
		root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
	"""
	Get a logger for the specified module.

	Parameters:
		name: The logger name, typically __name__.

	Returns:
		Configured logger instance.
	"""
	return logging.getLogger(name)


__all__ = [
    "configure_logging",
    "get_logger",
    "ActionsCommandFormatter",
    "LOG_FORMAT",
]
