"""Core validation logic.

This subpackage contains the validation engine and the orchestration
loop that applies it to every configured secret.

Key modules:
    - validator: Single secret validation via validate_secret()
    - runner: Batch orchestration via run()
    - env_checks: Typed `KEY: type` environment checks
"""

from secret_pattern_validator.core.validator import (
    validate_secret,
    missing_outcome,
)
from secret_pattern_validator.core.runner import (
    run,
    evaluate_rule,
    evaluate_rules,
    report_result,
)
from secret_pattern_validator.core.env_checks import validate_env

__all__ = [
    # validator
    "validate_secret",
    "missing_outcome",
    # runner
    "run",
    "evaluate_rule",
    "evaluate_rules",
    "report_result",
    # env_checks
    "validate_env",
]
