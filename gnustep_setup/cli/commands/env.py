from enum import Enum
from pathlib import Path

import typer

from gnustep_setup.cli.commands.install import build_settings
from gnustep_setup.domain.services.shell_env import render_fish, render_posix


class ShellKind(str, Enum):
    FISH = "fish"
    SH = "sh"


def env(
    shell: ShellKind = typer.Option(ShellKind.FISH, "--shell", "-s", help="Shell syntax"),
    gnustep_root: Path | None = typer.Option(None, "--gnustep-root", help="GNUstep install root"),
) -> None:
    """Print the GNUstep environment file for a shell."""
    layout = build_settings(gnustep_root=gnustep_root).layout
    content = render_fish(layout) if shell == ShellKind.FISH else render_posix(layout)
    typer.echo(content, nl=False)
