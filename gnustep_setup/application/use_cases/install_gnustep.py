import os
from collections.abc import MutableMapping

from loguru import logger

from gnustep_setup.application.dto.provision_settings import ProvisionSettings
from gnustep_setup.application.services.escalation import Escalator
from gnustep_setup.application.services.ports_rebuilder import PortsRebuilder
from gnustep_setup.domain.ports.command_runner_port import CommandRunnerPort
from gnustep_setup.domain.ports.system_probe_port import SystemProbePort
from gnustep_setup.domain.services.shell_env import SYSTEM_ROOT_VAR, apply_to_environ
from gnustep_setup.domain.value_objects.command_spec import CommandSpec
from gnustep_setup.infrastructure.persistence.atomic_io import append_line
from gnustep_setup.infrastructure.pkg.pkg_manager import PkgManager
from gnustep_setup.infrastructure.system.shell_loader import source_into

CONFLICT_PATTERN = "gnustep.*"


class InstallGNUstep:
    """Install GNUstep and make its environment available to Bash and to this process.

    Each artifact is checked before anything is changed, so a second run on a
    provisioned host removes nothing and rebuilds nothing.
    """

    def __init__(
        self,
        runner: CommandRunnerPort,
        pkg: PkgManager,
        escalator: Escalator,
        rebuilder: PortsRebuilder,
        probe: SystemProbePort,
        settings: ProvisionSettings,
        environ: MutableMapping[str, str] | None = None,
    ) -> None:
        self.runner = runner
        self.pkg = pkg
        self.escalator = escalator
        self.rebuilder = rebuilder
        self.probe = probe
        self.settings = settings
        self.environ = os.environ if environ is None else environ
        self.layout = settings.layout

    async def execute(self) -> None:
        logger.info("Installing GNUstep components...")
        await self.escalator.ensure(
            "GNUstep packages",
            verify=self.packages_installed,
            primary=self.install_packages,
            fallback=self.rebuilder.rebuild_chain,
        )

        logger.info("Configuring GNUstep environment for Bash...")
        gnustep_sh = self.layout.gnustep_sh
        await self.escalator.ensure(
            f"GNUstep.sh ({gnustep_sh})",
            verify=self._gnustep_sh_exists,
            fallback=self.rebuilder.rebuild_chain,
        )
        await self.ensure_root_export()
        await self.ensure_profile_hook()
        await self.escalator.ensure(
            "GNUstep environment",
            verify=self._load_environment,
            fallback=self.rebuilder.rebuild_chain,
        )

        logger.info("Verifying {} for Bash...", SYSTEM_ROOT_VAR)
        await self.escalator.ensure(
            SYSTEM_ROOT_VAR,
            verify=self._system_root_set,
            fallback=self._set_manually_and_rebuild,
        )
        logger.info("{}: {}", SYSTEM_ROOT_VAR, self.environ[SYSTEM_ROOT_VAR])

    async def packages_installed(self) -> bool:
        for package in self.settings.gnustep_packages:
            if not await self.pkg.exists(package):
                return False
        return True

    async def remove_conflicts(self) -> bool:
        """Delete partial GNUstep installs. Returns True if anything was removed."""
        logger.info("Checking for existing GNUstep packages...")
        if not await self.pkg.exists(CONFLICT_PATTERN, regex=True):
            logger.info("No conflicting GNUstep packages found.")
            return False
        logger.info("Removing existing GNUstep packages to avoid conflicts...")
        await self.escalator.require(
            CommandSpec(
                command=PkgManager.delete_command(self.settings.gnustep_packages),
                label="Removing existing GNUstep packages...",
                timeout_s=self.settings.timeouts.delete,
            )
        )
        return True

    async def install_packages(self) -> bool:
        await self.remove_conflicts()
        result = await self.pkg.install(
            self.settings.gnustep_packages,
            "Installing GNUstep components...",
            self.settings.timeouts.bulk_install,
        )
        return result.ok

    async def ensure_root_export(self) -> None:
        gnustep_sh = self.layout.gnustep_sh
        if self.probe.file_contains(gnustep_sh, SYSTEM_ROOT_VAR):
            return
        logger.warning("WARNING: GNUstep.sh does not set {}. Setting manually...", SYSTEM_ROOT_VAR)
        await append_line(gnustep_sh, f"export {SYSTEM_ROOT_VAR}={self.layout.system_root}")

    async def ensure_profile_hook(self) -> None:
        profile = self.settings.profile_path
        gnustep_sh = self.layout.gnustep_sh
        if self.probe.file_contains(profile, gnustep_sh.name):
            logger.info("GNUstep.sh already in {}", profile)
            return
        await append_line(profile, f". {gnustep_sh}")
        logger.info("Added GNUstep.sh to {}", profile)

    async def _gnustep_sh_exists(self) -> bool:
        return self.probe.file_exists(self.layout.gnustep_sh)

    async def _load_environment(self) -> bool:
        return await source_into(self.runner, self.layout.gnustep_sh, self.environ)

    async def _system_root_set(self) -> bool:
        return bool(self.environ.get(SYSTEM_ROOT_VAR))

    async def _set_manually_and_rebuild(self) -> None:
        apply_to_environ(self.layout, self.environ)
        await self.rebuilder.rebuild_chain()
        if not await self._load_environment():
            logger.warning("WARNING: Failed to reload GNUstep.sh after rebuild")

