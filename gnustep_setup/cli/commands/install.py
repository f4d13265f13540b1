import asyncio
from pathlib import Path

import typer
from pydantic import ValidationError

from gnustep_setup.application.dto.provision_settings import ProvisionSettings
from gnustep_setup.cli.runner import install_async


def print_validation_errors(e: ValidationError) -> None:
    for error in e.errors():
        loc = error.get("loc", ())
        field = str(loc[0]) if loc else ""
        msg = error.get("msg", str(error))
        # Clean up Pydantic message format
        if msg.startswith("Value error, "):
            msg = msg[13:]
        if field:
            typer.echo(f"Error: --{field.replace('_', '-')}: {msg}", err=True)
        else:
            typer.echo(f"Error: {msg}", err=True)


def build_settings(**overrides: object) -> ProvisionSettings:
    """Settings with CLI overrides applied; options left as None keep their defaults."""
    try:
        return ProvisionSettings(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as e:
        print_validation_errors(e)
        raise typer.Exit(1) from None


def install(
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Continue on an unexpected host without asking"
    ),
    log_dir: Path | None = typer.Option(None, "--log-dir", help="Directory for the run log"),
    gnustep_root: Path | None = typer.Option(None, "--gnustep-root", help="GNUstep install root"),
    fish_config: Path | None = typer.Option(
        None, "--fish-config", help="Where to write the Fish environment file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Provision the GNUstep development environment."""
    if verbose:
        from gnustep_setup.cli.main import setup_logging

        setup_logging(verbose=True)
    settings = build_settings(
        assume_yes=yes,
        log_dir=log_dir,
        gnustep_root=gnustep_root,
        fish_config_path=fish_config,
    )
    result = asyncio.run(install_async(settings))
    raise typer.Exit(result.exit_code)
