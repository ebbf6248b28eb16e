"""External platform integrations.

Key modules:
    - actions: GitHub Actions workflow command reporter
"""

from secret_pattern_validator.integrations.actions import (
    ActionsReporter,
    format_command,
)

__all__ = ["ActionsReporter", "format_command"]
