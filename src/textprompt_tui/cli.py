"""textprompt CLI entry point.

Usage:
    textprompt ask "Project name" --default my-app   # Ask for one value
    textprompt vars variables.yaml                   # Ask for every variable in a file
    textprompt vars variables.yaml --no-input        # Use defaults, no prompts
    textprompt init                                  # Initialize configuration
    textprompt config --show                         # Show configuration
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NoReturn

import click

from . import __version__
from .errors import PromptCancelled, TextPromptError

if TYPE_CHECKING:
    from .app import PromptResult
    from .config import Settings
    from .prompt import ControlKeys

CONTROL_KEY_CHOICES = ["append", "ignore"]
LOG_LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Conventional exit status for an interrupted command
CANCELLED_EXIT_CODE = 130


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """textprompt - single-line prompts for terminal scripts.

    Answers are printed to stdout, so they can be captured by a shell.
    """


# =============================================================================
# Ask Command
# =============================================================================


@main.command("ask")
@click.argument("label")
@click.option("--default", "-d", "default", default=None, help="Value used for an empty answer")
@click.option("--no-input", is_flag=True, help="Don't prompt; print the default")
@click.option(
    "--control-keys",
    type=click.Choice(CONTROL_KEY_CHOICES),
    default=None,
    help="Append or ignore non-printable keys (overrides config)",
)
def ask_command(
    label: str,
    default: str | None,
    no_input: bool,
    control_keys: str | None,
) -> None:
    """Ask for a single value.

    Examples:

        # Prompt with a default
        textprompt ask "Project name" --default my-app

        # Non-interactive
        textprompt ask "Project name" --default my-app --no-input
    """
    from .prompt import ControlKeys, stringify

    if no_input:
        click.echo(stringify(default))
        return

    settings = _load_settings()
    keys = ControlKeys(control_keys) if control_keys else settings.control_keys
    result = _ask(label, default, keys)
    if result.cancelled:
        _cancelled()
    click.echo(result.value)


# =============================================================================
# Vars Command
# =============================================================================


@main.command("vars")
@click.argument("var_file", type=click.Path(dir_okay=False))
@click.option("--var", "-v", "extra_vars", multiple=True, help="Set a variable (key=value)")
@click.option("--no-input", is_flag=True, help="Don't prompt; use defaults")
def vars_command(var_file: str, extra_vars: tuple[str, ...], no_input: bool) -> None:
    """Ask for every variable defined in VAR_FILE and print them as YAML.

    Examples:

        # Prompt for each variable
        textprompt vars variables.yaml

        # Mix defaults with overrides
        textprompt vars variables.yaml --no-input --var environment=prod
    """
    import yaml

    from .variables import collect_values, load_variables, parse_overrides

    try:
        variables = load_variables(var_file)
        overrides = parse_overrides(extra_vars)
    except TextPromptError as e:
        raise click.ClickException(str(e)) from e

    keys = _load_settings().control_keys

    def asker(label: str, default: Any) -> PromptResult:
        return _ask(label, default, keys)

    try:
        values = collect_values(variables, asker, overrides=overrides, no_input=no_input)
    except PromptCancelled:
        _cancelled()

    click.echo(yaml.dump(values, default_flow_style=False, sort_keys=False), nl=False)


# =============================================================================
# Init Command
# =============================================================================


@main.command("init")
@click.option(
    "--control-keys",
    type=click.Choice(CONTROL_KEY_CHOICES),
    default=None,
    help="Append or ignore non-printable keys",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVEL_CHOICES, case_sensitive=False),
    default=None,
    help="Log level for the log file",
)
@click.option("--force", "-f", is_flag=True, help="Overwrite existing configuration")
@click.option("--yes", "-y", is_flag=True, help="Accept defaults without prompting")
def init_config(
    control_keys: str | None,
    log_level: str | None,
    force: bool,
    yes: bool,
) -> None:
    """Initialize the textprompt configuration."""
    from .config import Settings, save_settings, settings_path
    from .prompt import ControlKeys

    settings_file = settings_path()

    if settings_file.exists() and not force:
        click.echo(f"Configuration already exists at {settings_file}")
        click.echo("Use --force to overwrite existing configuration.")
        if yes or not click.confirm("Continue anyway?"):
            return

    selected_keys = control_keys
    if not selected_keys:
        if yes:
            selected_keys = ControlKeys.APPEND.value
        else:
            selected_keys = click.prompt(
                "Non-printable keys",
                default=ControlKeys.APPEND.value,
                type=click.Choice(CONTROL_KEY_CHOICES),
            )

    selected_level = log_level
    if not selected_level:
        if yes:
            selected_level = "WARNING"
        else:
            selected_level = click.prompt(
                "Log level",
                default="WARNING",
                type=click.Choice(LOG_LEVEL_CHOICES, case_sensitive=False),
            )

    settings = Settings(control_keys=ControlKeys(selected_keys), log_level=selected_level.upper())
    path = save_settings(settings, settings_file)

    click.echo(f"✓ Configuration saved to {path}")
    click.echo(f"  Non-printable keys: {settings.control_keys.value}")
    click.echo(f"  Log level:          {settings.log_level}")
    click.echo(f"  Log file:           {settings.resolved_log_file}")


# =============================================================================
# Config Command
# =============================================================================


@main.command("config")
@click.option("--show", is_flag=True, help="Show current configuration")
def config_command(show: bool) -> None:
    """View textprompt configuration."""
    import yaml

    from .config import settings_path

    settings_file = settings_path()
    if not settings_file.exists():
        click.echo("No configuration found. Run 'textprompt init' to create one.")
        return

    settings = _load_settings()
    click.echo(f"Configuration file: {settings_file}")
    if show:
        click.echo("")
        click.echo(yaml.dump(settings.to_dict(), default_flow_style=False, sort_keys=False))


# =============================================================================
# Helper Functions
# =============================================================================


def _load_settings() -> Settings:
    """Load settings and start file logging."""
    from .config import load_settings
    from .logging_setup import setup_logging

    try:
        settings = load_settings()
    except TextPromptError as e:
        raise click.ClickException(str(e)) from e
    setup_logging(settings.log_level, settings.resolved_log_file)
    return settings


def _ask(label: str, default: Any, control_keys: ControlKeys) -> PromptResult:
    from .app import ask

    return ask(label, default, control_keys=control_keys)


def _cancelled() -> NoReturn:
    click.echo("Cancelled.", err=True)
    raise SystemExit(CANCELLED_EXIT_CODE)


if __name__ == "__main__":
    main()
