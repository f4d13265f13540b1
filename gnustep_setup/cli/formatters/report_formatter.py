from rich.console import Console
from rich.table import Table

from gnustep_setup.cli.theme import theme
from gnustep_setup.domain.entities.verification_report import TITLE, VerificationReport
from gnustep_setup.domain.value_objects.report_types import CheckStatus


def format_report_table(console: Console, report: VerificationReport) -> None:
    table = Table(title=TITLE, show_lines=False)
    table.add_column("Section", style=theme.TABLE_SECTION)
    table.add_column("Check", style=theme.TABLE_SUBJECT)
    table.add_column("Detail", style=theme.TABLE_DETAIL)
    table.add_column("Status")

    for section in report.sections:
        for index, line in enumerate(section.lines):
            status_style = theme.SUCCESS if line.status == CheckStatus.PASS else theme.ERROR
            table.add_row(
                section.title if index == 0 else "",
                line.subject,
                line.detail,
                f"[{status_style}]{line.status.value}[/]",
            )

    console.print(table)
    console.print(
        f"[{theme.DIM}]{report.passed} passed, {report.failed} failed[/]",
    )
