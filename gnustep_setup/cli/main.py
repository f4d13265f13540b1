import typer
from loguru import logger

from gnustep_setup.cli.commands import env, install, report
from gnustep_setup.cli.formatters.progress_formatter import err_console
from gnustep_setup.infrastructure.process.supervised_runner import OUTPUT_CHANNEL


def _terminal_filter(record: dict) -> bool:
    # Command output belongs in the run log only.
    return record["extra"].get("channel") != OUTPUT_CHANNEL


def _terminal_sink(message: str) -> None:
    err_console.print(message, end="", markup=False, highlight=False, soft_wrap=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure loguru terminal output. The run log adds its own file sink."""
    logger.remove()
    logger.add(
        _terminal_sink,
        format="{message}",
        level="DEBUG" if verbose else "INFO",
        filter=_terminal_filter,
        colorize=False,
    )


app = typer.Typer(
    name="gnustep-setup",
    help="gnustep-setup - provision a GNUstep development environment on GhostBSD",
    no_args_is_help=True,
)

# Register commands
app.command(name="install")(install.install)
app.command(name="report")(report.report)
app.command(name="env")(env.env)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output", is_eager=True),
) -> None:
    """gnustep-setup - provision a GNUstep development environment on GhostBSD."""
    setup_logging(verbose=verbose)


if __name__ == "__main__":
    app()
