from io import StringIO
from pathlib import Path

from rich.console import Console

from gnustep_setup.application.dto.provision_result import ProvisionResult
from gnustep_setup.cli.formatters.progress_formatter import RichProgress
from gnustep_setup.cli.formatters.report_formatter import format_report_table
from gnustep_setup.cli.formatters.result_formatter import format_result
from gnustep_setup.domain.entities.verification_report import VerificationReport
from gnustep_setup.domain.value_objects.report_types import CheckStatus, ReportLine, ReportSection


def make_console() -> Console:
    return Console(file=StringIO(), force_terminal=True, color_system=None, width=100)


def get_output(console: Console) -> str:
    console.file.seek(0)
    return console.file.read()


class TestRichProgress:
    def test_finishes_with_done(self) -> None:
        console = make_console()
        progress = RichProgress(console)

        progress.frame("Installing vim...", "|")
        progress.frame("Installing vim...", "/")
        progress.done("Installing vim...")

        assert "Installing vim... Done" in get_output(console)
        assert progress._live is None

    def test_done_without_frames(self) -> None:
        console = make_console()

        RichProgress(console).done("Checking for git")

        assert "Checking for git Done" in get_output(console)


class TestFormatResult:
    def test_success(self, tmp_path: Path) -> None:
        console = make_console()

        format_result(console, ProvisionResult(exit_code=0, log_path=tmp_path / "run.log"))

        output = get_output(console)
        assert "GNUstep environment ready." in output
        assert "run.log" in output

    def test_failure_panel(self, tmp_path: Path) -> None:
        console = make_console()
        result = ProvisionResult(
            exit_code=1,
            log_path=tmp_path / "run.log",
            failure="gnustep-config configuration failed",
            completed_steps=["preflight", "update_system"],
        )

        format_result(console, result)

        output = get_output(console)
        assert "Provisioning aborted." in output
        assert "gnustep-config configuration failed" in output
        assert "preflight, update_system" in output


class TestReportTable:
    def test_counts(self) -> None:
        console = make_console()
        report = VerificationReport(
            sections=[
                ReportSection(
                    title="Test Program Status",
                    lines=[
                        ReportLine(subject="hello", detail="Exists", status=CheckStatus.PASS),
                        ReportLine(subject="gui", detail="Missing", status=CheckStatus.FAIL),
                    ],
                )
            ]
        )

        format_report_table(console, report)

        output = get_output(console)
        assert "Test Program Status" in output
        assert "1 passed, 1 failed" in output
