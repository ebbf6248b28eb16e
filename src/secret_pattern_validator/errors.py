"""
Exception types.

Fatal configuration errors abort a run before any rule is evaluated.
Per-rule failures are never raised; they are carried on the outcome as
an ``ErrorKind``.
"""

from __future__ import annotations


class ConfigError(ValueError):
	"""Base class for fatal configuration errors."""


class ConfigNotFound(ConfigError):
	"""Raised when the configuration file does not exist."""

	def __init__(self, path: str, message: str | None = None):
		self.path = path
		super().__init__(message or
		                 f"Configuration file not found at path: {path}")


class ConfigParseError(ConfigError):
	"""Raised when the underlying format parser rejects the file."""

	def __init__(self, path: str, cause: Exception):
		self.path = path
		self.cause = cause
		super().__init__(
		    f"Failed to parse configuration file {path}: {cause}")


class ConfigUnreadable(ConfigError):
	"""Raised when the configuration file exists but cannot be read."""

	def __init__(self, path: str, cause: OSError):
		self.path = path
		self.cause = cause
		super().__init__(
		    f"Failed to read configuration file {path}: {cause}")


class InvalidConfigShape(ConfigError):
	"""Raised when the parsed document has no usable ``secrets`` table."""


class EnvCheckError(ValueError):
	"""Raised when an environment type check fails."""


__all__ = [
    "ConfigError",
    "ConfigNotFound",
    "ConfigParseError",
    "ConfigUnreadable",
    "InvalidConfigShape",
    "EnvCheckError",
]
