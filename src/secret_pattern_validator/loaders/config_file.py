"""
Secret patterns configuration loader.

Reads a TOML (or YAML) document and extracts the ``secrets`` table that
maps environment variable names to regular expression patterns.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import yaml

from secret_pattern_validator.errors import (
    ConfigNotFound,
    ConfigParseError,
    ConfigUnreadable,
    InvalidConfigShape,
)
from secret_pattern_validator.models.rule import SecretRule
from secret_pattern_validator.utils.logging import get_logger

logger = get_logger(__name__)

SECRETS_KEY = "secrets"
YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def _is_yaml(path: Path) -> bool:
	return path.suffix.lower() in YAML_SUFFIXES


def _parse_document(path: Path) -> Any:
	"""
	Parse the file with the format matching its extension.

	TOML rejects duplicate keys as a syntax error; YAML keeps the last
	occurrence. Both behaviors come from the parsers and are left as is.

	Raises:
		ConfigParseError: If the file is not valid UTF-8 or the parser
			rejects it.
		ConfigUnreadable: If the file cannot be read.
	"""
	try:
		text = path.read_text(encoding="utf-8")
	except UnicodeDecodeError as exc:
		raise ConfigParseError(str(path), exc) from exc
	except OSError as exc:
		raise ConfigUnreadable(str(path), exc) from exc
	try:
		if _is_yaml(path):
			return yaml.safe_load(text) or {}
		return tomllib.loads(text)
	except (tomllib.TOMLDecodeError, yaml.YAMLError) as exc:
		raise ConfigParseError(str(path), exc) from exc


def extract_secrets(document: Any) -> dict[str, str]:
	"""
	Validate the shape of a parsed document and return its secrets table.

	Parameters:
		document: Parsed configuration document.

	Returns:
		Mapping of secret name to pattern string.

	Raises:
		InvalidConfigShape: If ``secrets`` is missing or is not a
			string-to-string mapping.
	"""
	if not isinstance(document, dict) or SECRETS_KEY not in document:
		raise InvalidConfigShape(
		    'Invalid configuration file format. Missing "secrets" section.')
	secrets = document[SECRETS_KEY]
	if not isinstance(secrets, dict):
		raise InvalidConfigShape(
		    'Invalid configuration file format. "secrets" must be a table '
		    'of name = "pattern" entries.')
	for key, value in secrets.items():
		if not isinstance(key, str):
			raise InvalidConfigShape(
			    f'Invalid configuration file format. Secret name {key!r} '
			    f'must be a string, got {type(key).__name__}.')
		if not isinstance(value, str):
			raise InvalidConfigShape(
			    f'Invalid configuration file format. Pattern for secret '
			    f'"{key}" must be a string, got {type(value).__name__}.')
	return dict(secrets)


def load_config(path: str | Path) -> dict[str, str]:
	"""
	Load the ``secrets`` mapping from a configuration file.

	Parameters:
		path: Path to a TOML file, or a YAML file (``.yaml``/``.yml``).

	Returns:
		Mapping of secret name to pattern string. Other top-level tables
		are ignored.

	Raises:
		ConfigNotFound: If the path does not exist.
		ConfigParseError: If the file is not valid TOML/YAML.
		InvalidConfigShape: If the ``secrets`` table is missing or malformed.
	"""
	p = Path(path)
	if not p.is_file():
		if _is_yaml(p):
			raise ConfigNotFound(str(p))
		raise ConfigNotFound(str(p), f"TOML file not found at path: {p}")
	secrets = extract_secrets(_parse_document(p))
	logger.debug("loaded %d secret rule(s) from %s", len(secrets), p)
	return secrets


def load_rules(path: str | Path) -> list[SecretRule]:
	"""Load the configuration file as a list of SecretRule models."""
	return [
	    SecretRule(name=name, pattern=pattern)
	    for name, pattern in load_config(path).items()
	]


__all__ = ["load_config", "load_rules", "extract_secrets", "SECRETS_KEY"]
