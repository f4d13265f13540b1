from loguru import logger

from gnustep_setup.application.services.escalation import Escalator
from gnustep_setup.domain.errors import IntegrityFailure
from gnustep_setup.domain.ports.system_probe_port import SystemProbePort


class InstallBash:
    def __init__(
        self,
        escalator: Escalator,
        probe: SystemProbePort,
        package: str = "bash",
        timeout_s: float = 60,
        retry_timeout_s: float = 120,
    ) -> None:
        self.escalator = escalator
        self.probe = probe
        self.package = package
        self.timeout_s = timeout_s
        self.retry_timeout_s = retry_timeout_s

    async def execute(self) -> int:
        logger.info("Installing Bash (for compatibility)...")
        attempts = await self.escalator.install_with_retry(
            [self.package],
            "Installing Bash...",
            self.timeout_s,
            self.retry_timeout_s,
            retry_label="Retrying Bash installation...",
        )
        if self.probe.which(self.package) is None:
            raise IntegrityFailure(f"Bash installation failed: {self.package} not found")
        return attempts
