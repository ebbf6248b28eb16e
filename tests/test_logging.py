"""Tests for the logging module."""

from __future__ import annotations

import logging

from secret_pattern_validator.utils.logging import (
    ActionsCommandFormatter,
    configure_logging,
)


def _record(level: int, msg: str) -> logging.LogRecord:
	return logging.LogRecord(
	    name="secret_pattern_validator.core.runner",
	    level=level,
	    pathname="runner.py",
	    lineno=1,
	    msg=msg,
	    args=None,
	    exc_info=None,
	)


class TestActionsCommandFormatter:
	"""Tests for ActionsCommandFormatter."""

	def test_debug(self) -> None:
		line = ActionsCommandFormatter().format(_record(logging.DEBUG, "hi"))
		assert line == "::debug::secret_pattern_validator.core.runner: hi"

	def test_warning(self) -> None:
		line = ActionsCommandFormatter().format(_record(logging.WARNING, "w"))
		assert line.startswith("::warning::")

	def test_critical_maps_to_error(self) -> None:
		line = ActionsCommandFormatter().format(
		    _record(logging.CRITICAL, "c"))
		assert line.startswith("::error::")

	def test_newlines_escaped(self) -> None:
		line = ActionsCommandFormatter().format(
		    _record(logging.INFO, "a\nb"))
		assert line.endswith("a%0Ab")
		assert line.startswith("::notice::")


class TestConfigureLogging:
	"""Tests for configure_logging()."""

	def _strip(self, root: logging.Logger) -> None:
		root.handlers = [
		    h for h in root.handlers
		    if not isinstance(h.formatter, ActionsCommandFormatter)
		]

	def test_actions_handler_installed_once(self) -> None:
		root = logging.getLogger()
		level = root.level
		self._strip(root)
		try:
			configure_logging("info", github_actions=True)
			configure_logging("info", github_actions=True)
			count = sum(1 for h in root.handlers
			            if isinstance(h.formatter, ActionsCommandFormatter))
			assert count == 1
			assert root.level == logging.INFO
		finally:
			self._strip(root)
			root.setLevel(level)
