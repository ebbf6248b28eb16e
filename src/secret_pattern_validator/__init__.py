"""
Secret Pattern Validator - pre-flight checks for CI secrets.

This package validates that secrets provided through environment
variables match the regular expressions declared in a configuration
file, reporting per-secret results to the CI host.

Main entry points:
    - secret_pattern_validator.main: CLI entrypoint
    - secret_pattern_validator.core.runner: run() for batch validation
    - secret_pattern_validator.core.validator: validate_secret()
"""
