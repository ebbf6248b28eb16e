"""
Environment checks file loader.

Parses the line-oriented ``KEY: type`` format used to declare which
environment variables must be present and what built-in type they carry.
"""

from __future__ import annotations

from pathlib import Path

from secret_pattern_validator.errors import ConfigNotFound
from secret_pattern_validator.utils.logging import get_logger

logger = get_logger(__name__)


def parse_env_checks(text: str) -> dict[str, str]:
	"""
	Parse ``KEY: type`` lines into a mapping.

	Blank lines, ``#`` comments and lines without both a key and a type
	are skipped. A repeated key keeps its last type.

	Parameters:
		text: File content.

	Returns:
		Mapping of environment variable name to type name.
	"""
	checks: dict[str, str] = {}
	for line in text.splitlines():
		stripped = line.strip()
		if not stripped or stripped.startswith("#"):
			continue
		parts = [p.strip() for p in stripped.split(":")]
		if len(parts) < 2:
			continue
		key, kind = parts[0], parts[1]
		if key and kind:
			checks[key] = kind
	return checks


def load_env_checks(path: str | Path) -> dict[str, str]:
	"""
	Load environment checks from a file.

	Raises:
		ConfigNotFound: If the path does not exist.
	"""
	p = Path(path)
	if not p.is_file():
		raise ConfigNotFound(str(p))
	checks = parse_env_checks(p.read_text(encoding="utf-8"))
	logger.debug("loaded %d env check(s) from %s", len(checks), p)
	return checks


__all__ = ["parse_env_checks", "load_env_checks"]
