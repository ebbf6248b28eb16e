"""Tests for typed `KEY: type` environment checks."""

from __future__ import annotations

import pytest

from secret_pattern_validator.core.env_checks import validate_env
from secret_pattern_validator.errors import ConfigNotFound, EnvCheckError
from secret_pattern_validator.loaders.env_checks import (
    load_env_checks,
    parse_env_checks,
)

SHA = "0123456789abcdef0123456789ABCDEF01234567"


def test_parse_env_checks():
	text = ("GITHUB_SHA: sha\n"
	        "\n"
	        "# comment: ignored\n"
	        "  DEPLOY_TOKEN : string  \n"
	        "no-type-here\n"
	        "EMPTY_TYPE:\n")
	assert parse_env_checks(text) == {
	    "GITHUB_SHA": "sha",
	    "DEPLOY_TOKEN": "string",
	}


def test_load_env_checks(tmp_path):
	path = tmp_path / "env_checks.toml"
	path.write_text("GITHUB_SHA: sha\n", encoding="utf-8")
	assert load_env_checks(path) == {"GITHUB_SHA": "sha"}


def test_load_env_checks_missing_file(tmp_path):
	with pytest.raises(ConfigNotFound):
		load_env_checks(tmp_path / "absent.toml")


def test_valid_sha_passes():
	validate_env({"GITHUB_SHA": SHA}, {"GITHUB_SHA": "sha"})


def test_invalid_sha():
	with pytest.raises(EnvCheckError) as exc_info:
		validate_env({"GITHUB_SHA": "abc123"}, {"GITHUB_SHA": "sha"})
	assert str(exc_info.value) == (
	    "Environment variable GITHUB_SHA is not a valid SHA.")


def test_sha_with_trailing_newline_is_invalid():
	with pytest.raises(EnvCheckError):
		validate_env({"GITHUB_SHA": SHA + "\n"}, {"GITHUB_SHA": "sha"})


@pytest.mark.parametrize("env", [{}, {"GITHUB_SHA": ""}])
def test_missing_or_empty(env):
	with pytest.raises(EnvCheckError) as exc_info:
		validate_env(env, {"GITHUB_SHA": "sha"})
	assert str(exc_info.value) == "Environment variable GITHUB_SHA is missing."


def test_unknown_type_only_requires_presence():
	validate_env({"TOKEN": "anything"}, {"TOKEN": "string"})
