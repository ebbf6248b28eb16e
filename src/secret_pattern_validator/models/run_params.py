"""
Run parameters model.

Defines validated overrides collected from the command line before they
are applied onto the environment-derived Config.
"""

from __future__ import annotations

import logging
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class RunParams(BaseModel):
	"""Validated CLI overrides for a run."""

	config_file: Optional[str] = Field(default=None,
	                                   description="Override config file path")
	env_checks_file: Optional[str] = Field(
	    default=None, description="Override env checks file path")
	env_file: Optional[str] = Field(default=None,
	                                description="Dotenv file to load first")
	log_level: Optional[str] = Field(default=None,
	                                 description="Override log level")

	@field_validator('config_file', 'env_checks_file', 'env_file')
	@classmethod
	def validate_path(cls, v: Optional[str]) -> Optional[str]:
		if v is None:
			return v
		if not v.strip():
			raise ValueError("path must not be blank")
		return v

	@field_validator('log_level')
	@classmethod
	def validate_log_level(cls, v: Optional[str]) -> Optional[str]:
		if v is None:
			return v
		level = v.strip().upper()
		if level not in logging._nameToLevel:
			raise ValueError(f"unknown log level: {v}")
		return level.lower()


__all__ = ["RunParams"]
