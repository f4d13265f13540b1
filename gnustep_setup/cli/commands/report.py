import asyncio
from pathlib import Path

import typer

from gnustep_setup.cli.commands.install import build_settings
from gnustep_setup.cli.runner import report_async


def report(
    log_dir: Path | None = typer.Option(None, "--log-dir", help="Directory for the report log"),
    gnustep_root: Path | None = typer.Option(None, "--gnustep-root", help="GNUstep install root"),
) -> None:
    """Print the verification report without changing anything."""
    settings = build_settings(log_dir=log_dir, gnustep_root=gnustep_root)
    result = asyncio.run(report_async(settings))
    raise typer.Exit(0 if result.all_passed else 1)
