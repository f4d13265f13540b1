from collections.abc import Callable

from loguru import logger

from gnustep_setup.application.dto.provision_settings import ProvisionSettings
from gnustep_setup.domain.errors import PreconditionFailure, UserDeclined
from gnustep_setup.domain.ports.system_probe_port import SystemProbePort

# Asked once on an unexpected host; returns True to continue.
ConfirmCallback = Callable[[str], bool]


class CheckPreconditions:
    def __init__(
        self,
        probe: SystemProbePort,
        settings: ProvisionSettings,
        confirm: ConfirmCallback | None = None,
    ) -> None:
        self.probe = probe
        self.settings = settings
        self.confirm = confirm

    async def execute(self) -> None:
        """Fail fast when the host cannot be provisioned.

        Runs before anything is installed, so a failure here leaves the host
        untouched.
        """
        if not self.probe.is_root():
            raise PreconditionFailure(
                "This command must be run as root (e.g., sudo gnustep-setup install)"
            )

        identity = self.probe.os_identity()
        if self.settings.expected_os not in identity:
            logger.warning(
                "WARNING: This installer is designed for {}. Proceed at your own risk.",
                self.settings.expected_os,
            )
            if not self.settings.assume_yes:
                if self.confirm is None or not self.confirm("Continue?"):
                    raise UserDeclined("Aborting.")

        logger.info("Checking X11 for GUI support...")
        if not await self.probe.is_x11_running():
            logger.warning("WARNING: X11 not running. GUI applications may fail.")

        logger.info("Checking network connectivity...")
        if not await self.probe.has_network(self.settings.network_host):
            raise PreconditionFailure("No network connectivity. Please ensure internet access.")
        logger.info("Network connectivity confirmed.")

        logger.info("Checking disk space...")
        free_kb = self.probe.free_disk_kb(self.settings.disk_path)
        if free_kb < self.settings.min_free_disk_kb:
            raise PreconditionFailure(
                f"Insufficient disk space on {self.settings.disk_path}. "
                f"Need at least {self.settings.min_free_disk_mb} MB."
            )
        logger.info("Disk space sufficient.")
