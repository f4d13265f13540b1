import os
from collections.abc import MutableMapping

from loguru import logger

from gnustep_setup.application.services.escalation import Escalator
from gnustep_setup.application.services.ports_rebuilder import PortsRebuilder
from gnustep_setup.domain.errors import IntegrityFailure
from gnustep_setup.domain.ports.system_probe_port import SystemProbePort
from gnustep_setup.domain.services.report_builder import OBJC_FLAGS_QUERY, has_include_flags
from gnustep_setup.domain.value_objects.gnustep_layout import GNUstepLayout
from gnustep_setup.infrastructure.toolchain.gnustep_toolchain import GNUstepToolchain


class VerifyToolchain:
    def __init__(
        self,
        toolchain: GNUstepToolchain,
        escalator: Escalator,
        rebuilder: PortsRebuilder,
        probe: SystemProbePort,
        layout: GNUstepLayout,
        environ: MutableMapping[str, str] | None = None,
    ) -> None:
        self.toolchain = toolchain
        self.escalator = escalator
        self.rebuilder = rebuilder
        self.probe = probe
        self.layout = layout
        self.environ = os.environ if environ is None else environ

    async def execute(self) -> None:
        self.expose_tools()
        if self.probe.which("gnustep-config") is None:
            raise IntegrityFailure("GNUstep installation failed: gnustep-config not found")

        logger.info("Verifying GNUstep configuration...")
        header = self.layout.foundation_header
        if not self.probe.file_exists(header):
            raise IntegrityFailure(f"GNUstep Foundation headers missing: {header} not found")

        try:
            await self.escalator.ensure(
                OBJC_FLAGS_QUERY,
                verify=self.flags_valid,
                fallback=self.rebuilder.rebuild_chain,
            )
        except IntegrityFailure as e:
            logger.error(
                "ERROR: {} still returns empty output after ports rebuild.", OBJC_FLAGS_QUERY
            )
            raise IntegrityFailure("gnustep-config configuration failed") from e

    def expose_tools(self) -> None:
        """Append Tools to PATH and point GNUSTEP_MAKEFILES at the makefiles."""
        tools = str(self.layout.tools)
        path = self.environ.get("PATH", "")
        if tools not in path.split(os.pathsep):
            self.environ["PATH"] = f"{path}{os.pathsep}{tools}" if path else tools
        self.environ["GNUSTEP_MAKEFILES"] = str(self.layout.makefiles)

    async def flags_valid(self) -> bool:
        return has_include_flags(await self.toolchain.objc_flags())
