#!/usr/bin/env python3
"""
Main CLI Entry Point for the Household Budget Ledger

Root options override the environment-based configuration for a single run;
the subcommands read the resulting settings from the click context.
"""

import logging
import os
from pathlib import Path

import click

from ..core.config import Config, reload_config

# Root option -> environment variable it overrides
_ENV_OVERRIDES = {
    "config_env": "LEDGER_ENV",
    "data_dir": "LEDGER_DATA_DIR",
    "currency_symbol": "LEDGER_CURRENCY_SYMBOL",
}


def _apply_overrides(**overrides: str | Path | None) -> Config:
    """Export root option values to the environment and rebuild the config."""
    for option, value in overrides.items():
        if value is not None:
            os.environ[_ENV_OVERRIDES[option]] = str(value)

    try:
        return reload_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override LEDGER_ENV",
)
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Override LEDGER_DATA_DIR",
)
@click.option("--currency-symbol", help="Override LEDGER_CURRENCY_SYMBOL for displayed amounts")
@click.option("--verbose", "-v", is_flag=True, help="Show net positions and settings (on stderr)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(
    ctx: click.Context,
    config_env: str | None,
    data_dir: Path | None,
    currency_symbol: str | None,
    verbose: bool,
    debug: bool,
) -> None:
    """
    Household Budget Ledger - Account Transfer Planning

    Works out which transfers between bank accounts a monthly budget needs.
    """
    ctx.ensure_object(dict)

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    config = _apply_overrides(config_env=config_env, data_dir=data_dir, currency_symbol=currency_symbol)

    if debug:
        logging.getLogger("budget_ledger").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if verbose:
        click.echo(f"Environment: {config.environment.value} (data: {config.data_dir})", err=True)


@main.command()
def version() -> None:
    """Show version information."""
    from budget_ledger import __author__, __version__

    click.echo(f"Household Budget Ledger v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj: Config = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Output Directory: {config_obj.output_dir}")
    click.echo(f"  Strict Balance: {config_obj.transfers.strict_balance}")
    click.echo(f"  Currency Symbol: {config_obj.display.currency_symbol}")
    click.echo(f"  Log Level: {config_obj.log_level}")


from .transfers import todo, transfers  # noqa: E402

main.add_command(transfers)
main.add_command(todo)


if __name__ == "__main__":
    main()
