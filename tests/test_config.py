import pytest

from secret_pattern_validator.models.config import (
    DEFAULT_CONFIG_FILE,
    Config,
    load_env,
)
from secret_pattern_validator.models.run_params import RunParams


def test_defaults():
	cfg = Config()
	assert cfg.config_file == DEFAULT_CONFIG_FILE
	assert cfg.env_checks_file == "env_checks.toml"
	assert cfg.log_level == "warning"
	assert cfg.github_actions is False
	assert cfg.github_output is None


def test_config_file_from_env(monkeypatch):
	monkeypatch.setenv("CONFIG_FILE", "ci/patterns.toml")
	cfg = Config()
	assert str(cfg.config_path) == "ci/patterns.toml"


def test_github_actions_flag(monkeypatch):
	monkeypatch.setenv("GITHUB_ACTIONS", "true")
	monkeypatch.setenv("GITHUB_OUTPUT", "/tmp/out")
	cfg = Config()
	assert cfg.github_actions is True
	assert cfg.github_output == "/tmp/out"


def test_log_level_normalized():
	assert Config(LOG_LEVEL=" DEBUG ").log_level == "debug"
	assert Config(LOG_LEVEL="").log_level == "warning"


def test_load_env_reads_dotenv(tmp_path, monkeypatch):
	env_file = tmp_path / "local.env"
	env_file.write_text("SPV_TEST_FROM_DOTENV=yes\n", encoding="utf-8")
	monkeypatch.delenv("SPV_TEST_FROM_DOTENV", raising=False)
	load_env(env_file)
	import os
	assert os.environ["SPV_TEST_FROM_DOTENV"] == "yes"
	monkeypatch.delenv("SPV_TEST_FROM_DOTENV")


def test_load_env_missing_file_is_noop(tmp_path):
	load_env(tmp_path / "absent.env")


# ── apply_overrides ──────────────────────────────────────────────────


def test_apply_overrides_all_fields():
	"""apply_overrides sets every overridable field from RunParams."""
	cfg = Config()
	rp = RunParams(config_file="a.toml", env_checks_file="checks.txt",
	               log_level="DEBUG")
	cfg.apply_overrides(rp)
	assert cfg.config_file == "a.toml"
	assert cfg.env_checks_file == "checks.txt"
	assert cfg.log_level == "debug"


def test_apply_overrides_none_preserves_defaults():
	"""apply_overrides skips None fields, keeping env/default values."""
	cfg = Config(CONFIG_FILE="env.toml")
	cfg.apply_overrides(RunParams())
	assert cfg.config_file == "env.toml"
	assert cfg.log_level == "warning"


def test_run_params_rejects_blank_path():
	with pytest.raises(ValueError):
		RunParams(config_file="  ")


def test_run_params_rejects_unknown_log_level():
	with pytest.raises(ValueError):
		RunParams(log_level="chatty")
