from pathlib import Path

from loguru import logger

from gnustep_setup.application.dto.provision_settings import ProvisionSettings
from gnustep_setup.domain.entities.system_snapshot import PackageState, SystemSnapshot
from gnustep_setup.domain.entities.verification_report import RULE, TITLE, VerificationReport
from gnustep_setup.domain.ports.system_probe_port import SystemProbePort
from gnustep_setup.domain.services.report_builder import build_report
from gnustep_setup.domain.services.shell_env import SYSTEM_ROOT_VAR
from gnustep_setup.infrastructure.pkg.pkg_manager import PkgManager
from gnustep_setup.infrastructure.toolchain.gnustep_toolchain import GNUstepToolchain
from gnustep_setup.infrastructure.toolchain.objc_sources import EXPECTED_GREETING


class GenerateReport:
    """Collect a snapshot of the host and write the verification report to the log.

    Changes nothing on the host, so it is safe to run on the abort path.
    """

    def __init__(
        self,
        pkg: PkgManager,
        toolchain: GNUstepToolchain,
        probe: SystemProbePort,
        settings: ProvisionSettings,
    ) -> None:
        self.pkg = pkg
        self.toolchain = toolchain
        self.probe = probe
        self.settings = settings

    async def collect(self) -> SystemSnapshot:
        packages = []
        for name in self.settings.report_packages:
            if await self.pkg.exists(name):
                packages.append(
                    PackageState(name=name, installed=True, version=await self.pkg.version(name))
                )
            else:
                packages.append(PackageState(name=name, installed=False))

        hello = self.settings.smoke_dir / "hello"
        gui = self.settings.smoke_dir / "gui"
        hello_exists = self.probe.file_exists(hello)
        hello_ok = False
        if hello_exists:
            result = await self.toolchain.run_program(
                hello, "Running test program for report", quiet=True, capture=True
            )
            hello_ok = result.ok and EXPECTED_GREETING in result.output

        return SystemSnapshot(
            packages=packages,
            objc_flags=await self.toolchain.objc_flags(quiet=True),
            system_root=self.probe.env(SYSTEM_ROOT_VAR),
            hello_binary=str(hello),
            hello_binary_exists=hello_exists,
            hello_output_ok=hello_ok,
            gui_binary=str(gui),
            gui_binary_exists=self.probe.file_exists(gui),
            tools={
                tool: self.probe.which(tool) is not None for tool in self.settings.optional_tools
            },
        )

    async def execute(self, log_path: Path | None = None) -> VerificationReport:
        report = build_report(await self.collect())
        logger.info(RULE)
        logger.info(TITLE)
        logger.info(RULE)
        for line in report.render_lines():
            logger.info(line)
        logger.info(RULE)
        if log_path is not None:
            logger.info("Verification report saved to {}", log_path)
        logger.info(
            "Please review the report for any [FAIL] statuses and check recovery options if needed."
        )
        return report
