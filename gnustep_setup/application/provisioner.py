import os
from collections.abc import Awaitable, Callable, MutableMapping
from pathlib import Path

from loguru import logger

from gnustep_setup.application.dto.provision_result import ProvisionResult
from gnustep_setup.application.dto.provision_settings import ProvisionSettings
from gnustep_setup.application.services.escalation import Escalator
from gnustep_setup.application.services.ports_rebuilder import PortsRebuilder
from gnustep_setup.application.use_cases.check_preconditions import (
    CheckPreconditions,
    ConfirmCallback,
)
from gnustep_setup.application.use_cases.configure_fish import ConfigureFish
from gnustep_setup.application.use_cases.generate_report import GenerateReport
from gnustep_setup.application.use_cases.install_base_tools import InstallBaseTools
from gnustep_setup.application.use_cases.install_bash import InstallBash
from gnustep_setup.application.use_cases.install_gnustep import InstallGNUstep
from gnustep_setup.application.use_cases.install_optional_tools import InstallOptionalTools
from gnustep_setup.application.use_cases.run_smoke_tests import RunSmokeTests
from gnustep_setup.application.use_cases.update_system import UpdateSystem
from gnustep_setup.application.use_cases.verify_toolchain import VerifyToolchain
from gnustep_setup.domain.entities.verification_report import VerificationReport
from gnustep_setup.domain.errors import PreconditionFailure, ProvisioningError, UserDeclined
from gnustep_setup.domain.ports.command_runner_port import CommandRunnerPort
from gnustep_setup.domain.ports.system_probe_port import SystemProbePort
from gnustep_setup.infrastructure.build.ports_tree import PortsTree
from gnustep_setup.infrastructure.persistence.run_lock import run_lock
from gnustep_setup.infrastructure.pkg.pkg_manager import PkgManager
from gnustep_setup.infrastructure.toolchain.gnustep_toolchain import GNUstepToolchain

Step = Callable[[], Awaitable[object]]


def recovery_hints(settings: ProvisionSettings) -> list[str]:
    return [
        f"- Check network: ping {settings.network_host}",
        "- Check disk space: df -h",
        "- Reinstall package: sudo pkg install -f <package>",
        f"- Use GhostBSD ports: sudo git clone {settings.ports_url} {settings.ports_dir}",
        f"- Manual config: Set GNUSTEP_SYSTEM_ROOT, PATH, etc., in {settings.fish_config_path}",
    ]


class Provisioner:
    """Runs the provisioning steps in order and owns the single abort path.

    Steps never run concurrently. The first step that raises ends the run:
    the cause and recovery hints are logged, the verification report is
    generated, and the result carries exit code 1.
    """

    def __init__(
        self,
        settings: ProvisionSettings,
        runner: CommandRunnerPort,
        probe: SystemProbePort,
        log_path: Path,
        confirm: ConfirmCallback | None = None,
        environ: MutableMapping[str, str] | None = None,
    ) -> None:
        self.settings = settings
        self.runner = runner
        self.probe = probe
        self.log_path = log_path
        self.environ = os.environ if environ is None else environ

        timeouts = settings.timeouts
        self.pkg = PkgManager(runner)
        self.escalator = Escalator(runner)
        self.toolchain = GNUstepToolchain(runner, timeouts.verify)
        self.ports_tree = PortsTree(
            runner,
            ports_dir=settings.ports_dir,
            ports_url=settings.ports_url,
            build_log_dir=settings.build_log_dir,
            clone_timeout_s=timeouts.clone,
            build_timeout_s=timeouts.build,
        )
        self.rebuilder = PortsRebuilder(
            self.pkg,
            self.ports_tree,
            probe,
            self.escalator,
            chain=settings.rebuild_chain,
            port_deps_timeout_s=timeouts.port_deps,
            delete_timeout_s=timeouts.delete,
        )

        self.preconditions = CheckPreconditions(probe, settings, confirm)
        self.update_system = UpdateSystem(
            self.pkg, self.escalator, timeouts.update, timeouts.upgrade
        )
        self.base_tools = InstallBaseTools(
            self.pkg, self.escalator, probe, self.toolchain, settings
        )
        self.gnustep = InstallGNUstep(
            runner, self.pkg, self.escalator, self.rebuilder, probe, settings, self.environ
        )
        self.fish = ConfigureFish(settings.layout, settings.fish_config_path)
        self.verify_toolchain = VerifyToolchain(
            self.toolchain, self.escalator, self.rebuilder, probe, settings.layout, self.environ
        )
        self.bash = InstallBash(
            self.escalator,
            probe,
            settings.shell_package,
            timeouts.install,
            timeouts.retry_install,
        )
        self.smoke_tests = RunSmokeTests(self.toolchain, self.escalator, probe, settings.smoke_dir)
        self.optional_tools = InstallOptionalTools(
            self.pkg, probe, settings.optional_tools, timeouts.install
        )
        self.reporter = GenerateReport(self.pkg, self.toolchain, probe, settings)
        self.report: VerificationReport | None = None

    def steps(self) -> list[tuple[str, Step]]:
        return [
            ("preflight", self.preconditions.execute),
            ("update_system", self.update_system.execute),
            ("base_tools", self.base_tools.execute),
            ("gnustep", self.gnustep.execute),
            ("fish", self.fish.execute),
            ("toolchain", self.verify_toolchain.execute),
            ("bash", self.bash.execute),
            ("smoke_tests", self.smoke_tests.execute),
            ("optional_tools", self.optional_tools.execute),
            ("report", self.generate_report),
            ("notify", self.notify),
            ("cleanup", self.cleanup),
        ]

    async def run(self) -> ProvisionResult:
        completed: list[str] = []
        try:
            for name, step in self.steps():
                logger.debug("Step {} starting", name)
                await step()
                completed.append(name)
        except UserDeclined as e:
            logger.info(e.message)
            return ProvisionResult(
                exit_code=1, log_path=self.log_path, failure=e.message, completed_steps=completed
            )
        except ProvisioningError as e:
            return await self.abort(e.message, e.command, completed)
        except Exception as e:
            logger.opt(exception=e).debug("Unexpected error")
            return await self.abort(f"Unexpected error: {e}", None, completed)

        return ProvisionResult(
            exit_code=0, log_path=self.log_path, report=self.report, completed_steps=completed
        )

    async def run_exclusive(self) -> ProvisionResult:
        """Run while holding the run lock. A held lock ends through the abort path."""
        try:
            async with run_lock(self.settings.lock_path):
                return await self.run()
        except PreconditionFailure as e:
            return await self.abort(e.message, None, [])

    async def abort(
        self, message: str, command: str | None, completed: list[str]
    ) -> ProvisionResult:
        logger.error("ERROR: {}", message)
        if command:
            logger.error("Command: {}", command)
        logger.error("See {} for details.", self.log_path)
        logger.info("Recovery options:")
        for hint in recovery_hints(self.settings):
            logger.info(hint)
        report = await self.reporter.execute(self.log_path)
        return ProvisionResult(
            exit_code=1,
            log_path=self.log_path,
            report=report,
            failure=message,
            completed_steps=completed,
        )

    async def generate_report(self) -> VerificationReport:
        self.report = await self.reporter.execute(self.log_path)
        return self.report

    async def notify(self) -> None:
        fish = self.settings.fish_config_path
        logger.info("Installation complete. Log file: {}", self.log_path)
        logger.info(
            "For Bash: Start a session with 'bash' and verify with 'echo $GNUSTEP_SYSTEM_ROOT'."
        )
        logger.info(
            "For Fish: Source '{}' or copy to ~/.config/fish/conf.d/ and source it, "
            "then verify with 'echo $GNUSTEP_SYSTEM_ROOT'.",
            fish,
        )
        logger.info("To set Bash as default shell, run: chsh -s /usr/local/bin/bash")
        logger.info("To set Fish as default shell, run: chsh -s /usr/local/bin/fish")

    async def cleanup(self) -> None:
        self.smoke_tests.cleanup()
