from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

DEFAULT_CONFIG_FILE = ".github/secret-patterns.toml"
DEFAULT_ENV_CHECKS_FILE = "env_checks.toml"


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


class Config(BaseSettings):
	"""Runtime configuration loaded from environment variables."""

	model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

	config_file: str = Field(
	    DEFAULT_CONFIG_FILE,
	    alias="CONFIG_FILE",
	    description="Path to the secret patterns configuration file",
	)
	env_checks_file: str = Field(
	    DEFAULT_ENV_CHECKS_FILE,
	    alias="ENV_CHECKS_FILE",
	    description="Path to the `KEY: type` environment checks file",
	)
	log_level: str = Field("warning", alias="LOG_LEVEL",
	                       description="Log level for diagnostic output")
	github_actions: bool = Field(
	    False,
	    alias="GITHUB_ACTIONS",
	    description="Set by the runner when executing inside GitHub Actions",
	)
	github_output: str | None = Field(
	    default=None,
	    alias="GITHUB_OUTPUT",
	    description="File that step outputs are appended to",
	)

	@field_validator("log_level", mode="before")
	@classmethod
	def normalize_log_level(cls, v: Any) -> str:
		if v is None or v == "":
			return "warning"
		return str(v).strip().lower()

	@property
	def config_path(self) -> Path:
		"""Return config_file as Path."""
		return Path(self.config_file)

	def apply_overrides(self, run_params: "RunParams") -> None:
		"""Apply CLI overrides from RunParams onto this config.

		Only non-None fields in run_params are applied, preserving
		environment-based defaults for anything the user didn't explicitly set.

		Parameters:
			run_params: Validated run parameters with optional overrides.
		"""
		_OVERRIDES: list[tuple[str, str]] = [
			("config_file", "config_file"),
			("env_checks_file", "env_checks_file"),
			("log_level", "log_level"),
		]
		for param_field, config_field in _OVERRIDES:
			value = getattr(run_params, param_field)
			if value is not None:
				setattr(self, config_field, value)


__all__ = ["Config", "load_env", "DEFAULT_CONFIG_FILE"]
