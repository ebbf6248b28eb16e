"""
Secret Pattern Validator models.

This subpackage contains Pydantic models for configuration, rules,
per-rule outcomes and aggregate run results.

Key models:
    - Config: Application configuration loaded from environment
    - RunParams: CLI overrides for a run
    - SecretRule: One declared (name, pattern) check
    - ValidationOutcome: Result of checking one rule
    - RunResult: Aggregate of every outcome in a run
"""

from .config import Config, load_env
from .run_params import RunParams
from .rule import SecretRule
from .outcome import ErrorKind, ValidationOutcome
from .run_result import RunResult

__all__ = [
    "Config",
    "load_env",
    "RunParams",
    "SecretRule",
    "ErrorKind",
    "ValidationOutcome",
    "RunResult",
]
