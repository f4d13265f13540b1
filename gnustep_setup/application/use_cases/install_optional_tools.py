from collections.abc import Sequence

from loguru import logger

from gnustep_setup.domain.errors import IntegrityFailure
from gnustep_setup.domain.ports.system_probe_port import SystemProbePort
from gnustep_setup.infrastructure.pkg.pkg_manager import PkgManager


class InstallOptionalTools:
    def __init__(
        self,
        pkg: PkgManager,
        probe: SystemProbePort,
        tools: Sequence[str],
        timeout_s: float = 60,
    ) -> None:
        self.pkg = pkg
        self.probe = probe
        self.tools = list(tools)
        self.timeout_s = timeout_s

    async def execute(self) -> bool:
        """Install the tools. A failed install is only a warning."""
        logger.info("Installing optional GNUstep tools ({})...", ", ".join(self.tools))
        result = await self.pkg.install(
            self.tools, f"Installing {', '.join(self.tools)}...", self.timeout_s
        )
        if not result.ok:
            logger.warning("WARNING: Failed to install optional tools. Continuing...")
            return False
        for tool in self.tools:
            if self.probe.which(tool) is None:
                raise IntegrityFailure(f"{tool} installation failed: {tool} not found")
        return True
