"""Configuration file loaders.

Key modules:
    - config_file: TOML/YAML secret patterns loader
    - env_checks: `KEY: type` environment checks loader
"""

from secret_pattern_validator.loaders.config_file import (
    load_config,
    load_rules,
    extract_secrets,
)
from secret_pattern_validator.loaders.env_checks import (
    load_env_checks,
    parse_env_checks,
)

__all__ = [
    "load_config",
    "load_rules",
    "extract_secrets",
    "load_env_checks",
    "parse_env_checks",
]
