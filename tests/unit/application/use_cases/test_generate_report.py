import pytest
from fakes import FakeProbe, FakeRunner, Outcome

from gnustep_setup.application.dto.provision_settings import ProvisionSettings
from gnustep_setup.application.use_cases.generate_report import GenerateReport
from gnustep_setup.domain.entities.verification_report import RULE, TITLE
from gnustep_setup.infrastructure.pkg.pkg_manager import PkgManager
from gnustep_setup.infrastructure.toolchain.gnustep_toolchain import GNUstepToolchain


@pytest.fixture
def report(
    fake_runner: FakeRunner, fake_probe: FakeProbe, settings: ProvisionSettings
) -> GenerateReport:
    return GenerateReport(
        PkgManager(fake_runner), GNUstepToolchain(fake_runner), fake_probe, settings
    )


class TestGenerateReport:
    async def test_fresh_host_reports_failures(
        self, report: GenerateReport, fake_runner: FakeRunner, fake_probe: FakeProbe
    ) -> None:
        fake_runner.on("pkg info -e", Outcome(exit_code=1))
        fake_runner.on("gnustep-config", Outcome(exit_code=127))
        fake_probe.commands.clear()

        snapshot = await report.collect()

        assert not any(p.installed for p in snapshot.packages)
        assert snapshot.objc_flags is None
        assert not snapshot.hello_binary_exists
        assert snapshot.tools == {"gorm": False, "projectcenter": False}

    async def test_runs_existing_hello_binary(
        self,
        report: GenerateReport,
        fake_runner: FakeRunner,
        fake_probe: FakeProbe,
        settings: ProvisionSettings,
        environ: dict[str, str],
    ) -> None:
        settings.smoke_dir.mkdir()
        hello = settings.smoke_dir / "hello"
        hello.write_text("ELF")
        environ["GNUSTEP_SYSTEM_ROOT"] = "/usr/local/GNUstep/System"
        fake_runner.on(str(hello), Outcome(output="Hello, GhostBSD!\n"))
        fake_runner.on("pkg query", Outcome(output="1.0\n"))

        snapshot = await report.collect()

        assert snapshot.hello_output_ok
        assert snapshot.system_root == "/usr/local/GNUstep/System"
        assert all(p.version == "1.0" for p in snapshot.packages)

    async def test_report_changes_nothing(
        self, report: GenerateReport, fake_runner: FakeRunner
    ) -> None:
        await report.execute()

        for command in fake_runner.commands:
            assert not command.startswith(("pkg install", "pkg delete", "pkg update", "clang"))

    async def test_logs_framed_report(
        self, report: GenerateReport, log_messages: list[str], settings: ProvisionSettings
    ) -> None:
        log_path = settings.log_dir / "run.log"

        result = await report.execute(log_path)

        assert log_messages[:3] == [RULE, TITLE, RULE]
        assert f"Verification report saved to {log_path}" in log_messages
        assert result.render_lines()[0] in log_messages
