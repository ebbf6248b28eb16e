from __future__ import annotations

import os
import sys

import click
import typer
from typer.main import get_command

from secret_pattern_validator.core.env_checks import validate_env
from secret_pattern_validator.core.runner import OUTPUT_NAME
from secret_pattern_validator.core.runner import run as run_validation
from secret_pattern_validator.core.validator import validate_secret
from secret_pattern_validator.errors import ConfigNotFound, EnvCheckError
from secret_pattern_validator.integrations.actions import ActionsReporter
from secret_pattern_validator.loaders.env_checks import load_env_checks
from secret_pattern_validator.models.config import Config, load_env
from secret_pattern_validator.models.run_params import RunParams
from secret_pattern_validator.ui.console import ConsoleReporter, render_summary
from secret_pattern_validator.utils.logging import configure_logging

PROG_NAME = "secret-pattern-validator"
CHECK_PROG_NAME = "validate-secret"
USAGE_ERROR = ("Missing required arguments. Usage: validate-secret "
               "--name NAME --value VALUE --regex PATTERN")

cli = typer.Typer(add_completion=False, no_args_is_help=False)


@cli.callback()
def root() -> None:
	"""
	Root callback for the secret-pattern-validator CLI.

	Validates secrets from the environment against configured patterns.
	"""
	return None


def make_reporter(config: Config) -> ActionsReporter | ConsoleReporter:
	"""Pick the GitHub Actions reporter inside a runner, else the console."""
	if config.github_actions:
		return ActionsReporter(output_file=config.github_output)
	return ConsoleReporter(verbose=config.log_level == "debug")


def _prepare(params: RunParams) -> Config:
	"""Load dotenv, build Config with overrides and configure logging."""
	load_env(params.env_file)
	config = Config()
	config.apply_overrides(params)
	configure_logging(config.log_level, github_actions=config.github_actions)
	return config


def run_impl(
    config_file: str | None = None,
    env_file: str | None = None,
    log_level: str | None = None,
) -> int:
	"""
	Validate every secret declared in the configuration file.

	Parameters:
		config_file: Override for the configuration file path.
		env_file: Dotenv file loaded into the environment first.
		log_level: Override for the log level.

	Returns:
		Process exit code: 0 when every secret passed, 1 otherwise.
	"""
	params = RunParams(config_file=config_file, env_file=env_file,
	                   log_level=log_level)
	config = _prepare(params)
	reporter = make_reporter(config)
	result = run_validation(config.config_path, dict(os.environ), reporter)
	if isinstance(reporter, ConsoleReporter) and result.total:
		reporter.console.print(render_summary(result))
	return reporter.exit_code


def check_impl(name: str | None, value: str | None, regex: str | None) -> int:
	"""
	Validate a single value against a pattern.

	Returns:
		0 on match, 1 on mismatch, malformed pattern or missing arguments.
	"""
	if not name or not value or not regex:
		typer.echo(USAGE_ERROR, err=True)
		return 1
	outcome = validate_secret(name, value, regex, sink=typer.echo)
	return 0 if outcome.matched else 1


def env_check_impl(
    env_checks_file: str | None = None,
    env_file: str | None = None,
) -> int:
	"""
	Run the typed `KEY: type` environment checks.

	Returns:
		Process exit code: 0 when every check passed, 1 otherwise.
	"""
	config = _prepare(
	    RunParams(env_checks_file=env_checks_file, env_file=env_file))
	reporter = make_reporter(config)
	try:
		checks = load_env_checks(config.env_checks_file)
		validate_env(dict(os.environ), checks)
	except (ConfigNotFound, EnvCheckError) as exc:
		reporter.set_failed(str(exc))
		reporter.set_output(OUTPUT_NAME, "false")
		return reporter.exit_code
	reporter.info(f"All {len(checks)} environment variable(s) passed checks")
	reporter.set_output(OUTPUT_NAME, "true")
	return reporter.exit_code


@cli.command()
def run(
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        envvar="INPUT_CONFIG-FILE",
        help="Secret patterns file (TOML or YAML)",
    ),
    env_file: str = typer.Option(None, "--env-file",
                                 help="Dotenv file to load first"),
    log_level: str = typer.Option(None, "--log-level",
                                  help="Override log level"),
) -> None:
	"""
	Validate secrets from the environment against the configured patterns.

	This is the default command and the one the CI step runs.
	"""
	raise typer.Exit(run_impl(config_file, env_file, log_level))


@cli.command()
def check(
    name: str = typer.Option(None, "--name", help="Secret name"),
    value: str = typer.Option(None, "--value", help="Secret value"),
    regex: str = typer.Option(None, "--regex", help="Pattern to match"),
) -> None:
	"""Validate a single value against a pattern."""
	raise typer.Exit(check_impl(name, value, regex))


@cli.command("env-check")
def env_check(
    env_checks_file: str = typer.Option(
        None,
        "--file",
        "-f",
        envvar="INPUT_ENV-CHECKS-FILE",
        help="`KEY: type` checks file",
    ),
    env_file: str = typer.Option(None, "--env-file",
                                 help="Dotenv file to load first"),
) -> None:
	"""Check that typed environment variables are present and well-formed."""
	raise typer.Exit(env_check_impl(env_checks_file, env_file))


def entrypoint(argv=None, *, standalone_mode: bool = True):
	"""
	Typer entrypoint that defaults to `run` when appropriate.

	Allows calling 'secret-pattern-validator --config path.toml' (or no
	arguments at all inside a CI step) without the 'run' subcommand.

	Parameters:
		argv: Command-line arguments. Defaults to sys.argv[1:].
		standalone_mode: If True, Click handles exit codes.

	Returns:
		Result of the Click application main invocation.
	"""
	args = sys.argv[1:] if argv is None else list(argv)

	_click_app = get_command(cli)
	commands = getattr(_click_app, "commands", {}).keys()
	if not args or (args[0] not in commands and args[0] != "--help"):
		args = ["run"] + args
	if args[0] == "check":
		return _run_check(_click_app, args, PROG_NAME, standalone_mode)
	return _click_app.main(
	    args=args,
	    prog_name=PROG_NAME,
	    standalone_mode=standalone_mode,
	)


def _run_check(_click_app, args: list[str], prog_name: str,
               standalone_mode: bool):
	"""
	Invoke the `check` command, treating a valueless option as missing.

	A trailing `--name` (or `--value`/`--regex`) without a value is a
	missing argument: the usage line goes to stderr and the exit code is 1
	rather than Click's usage error code.
	"""
	try:
		code = _click_app.main(args=args, prog_name=prog_name,
		                       standalone_mode=False)
	except click.BadOptionUsage:
		typer.echo(USAGE_ERROR, err=True)
		code = 1
	except click.ClickException as exc:
		if not standalone_mode:
			raise
		exc.show()
		code = exc.exit_code
	if standalone_mode:
		sys.exit(code or 0)
	return code


def check_entrypoint(argv=None, *, standalone_mode: bool = True):
	"""Entrypoint for the `validate-secret` single-check script."""
	args = sys.argv[1:] if argv is None else list(argv)
	return _run_check(get_command(cli), ["check"] + args, CHECK_PROG_NAME,
	                  standalone_mode)


if __name__ == "__main__":
	entrypoint()
