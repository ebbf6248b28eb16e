"""
Secret rule model.

A rule pairs an environment variable name with the regular expression
its value must satisfy.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SecretRule(BaseModel):
	"""One declared (name, pattern) check from the ``secrets`` table."""

	model_config = ConfigDict(frozen=True)

	name: str = Field(description="Environment variable name")
	pattern: str = Field(description="Regular expression the value must match")


__all__ = ["SecretRule"]
