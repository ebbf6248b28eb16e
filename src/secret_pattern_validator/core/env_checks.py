"""
Typed environment variable checks.

Each check names an environment variable and a built-in type. Variables
must be present and non-empty; known types additionally constrain the
value's format.
"""

from __future__ import annotations

import re
from typing import Mapping

from secret_pattern_validator.errors import EnvCheckError

# Built-in types: name -> (compiled pattern, description used in errors).
BUILTIN_TYPES: dict[str, tuple[re.Pattern[str], str]] = {
    "sha": (re.compile(r"[0-9a-fA-F]{40}"), "SHA"),
}


def validate_env(env: Mapping[str, str], checks: Mapping[str, str]) -> None:
	"""
	Check environment variables against their declared types.

	Stops at the first failing variable. Unknown type names only require
	the variable to be present.

	Parameters:
		env: Environment mapping to check.
		checks: Mapping of variable name to type name.

	Raises:
		EnvCheckError: If a variable is missing/empty or has the wrong format.
	"""
	for key, kind in checks.items():
		value = env.get(key)
		if not value:
			raise EnvCheckError(f"Environment variable {key} is missing.")
		builtin = BUILTIN_TYPES.get(kind)
		if builtin is None:
			continue
		regex, label = builtin
		if not regex.fullmatch(value):
			raise EnvCheckError(
			    f"Environment variable {key} is not a valid {label}.")


__all__ = ["validate_env", "BUILTIN_TYPES"]
