from __future__ import annotations

import pytest


class RecordingReporter:
	"""Reporter double that records every call as (channel, message)."""

	def __init__(self):
		self.calls: list[tuple[str, str]] = []
		self.outputs: dict[str, str] = {}

	def debug(self, message):
		self.calls.append(("debug", message))

	def info(self, message):
		self.calls.append(("info", message))

	def warning(self, message):
		self.calls.append(("warning", message))

	def error(self, message):
		self.calls.append(("error", message))

	def set_failed(self, message):
		self.calls.append(("set_failed", message))

	def set_output(self, name, value):
		self.outputs[name] = value

	def messages(self, channel: str) -> list[str]:
		return [m for c, m in self.calls if c == channel]


@pytest.fixture
def reporter():
	return RecordingReporter()


@pytest.fixture(autouse=True)
def _isolate_ci_env(monkeypatch):
	"""Keep the runner's own CI variables out of Config()."""
	for key in ("GITHUB_ACTIONS", "GITHUB_OUTPUT", "CONFIG_FILE",
	            "ENV_CHECKS_FILE", "LOG_LEVEL", "INPUT_CONFIG-FILE",
	            "INPUT_ENV-CHECKS-FILE"):
		monkeypatch.delenv(key, raising=False)
