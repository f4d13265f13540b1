from rich.console import Console
from rich.panel import Panel

from gnustep_setup.application.dto.provision_result import ProvisionResult
from gnustep_setup.cli.theme import theme


def format_result(console: Console, result: ProvisionResult) -> None:
    if result.ok:
        console.print(f"\n[{theme.SUCCESS_BOLD}]GNUstep environment ready.[/]")
        if result.report is not None and not result.report.all_passed:
            console.print(
                f"[{theme.WARNING}]   {result.report.failed} report checks failed, "
                "see the verification report above.[/]"
            )
        console.print(f"[{theme.DIM}]Log: {result.log_path}[/]")
        return

    steps = ", ".join(result.completed_steps) or "none"
    panel = Panel(
        f"""[bold]Provisioning aborted.[/]

Reason: {result.failure or "Unknown"}
Completed steps: {steps}

Full log: [cyan]{result.log_path}[/]
""",
        title="Failed",
        border_style=theme.BORDER_ERROR,
    )
    console.print(panel)
