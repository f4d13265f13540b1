from loguru import logger

from gnustep_setup.application.dto.provision_settings import ProvisionSettings
from gnustep_setup.application.services.escalation import Escalator
from gnustep_setup.domain.errors import IntegrityFailure, PreconditionFailure
from gnustep_setup.domain.ports.system_probe_port import SystemProbePort
from gnustep_setup.infrastructure.pkg.pkg_manager import PkgManager
from gnustep_setup.infrastructure.toolchain.gnustep_toolchain import GNUstepToolchain


class InstallBaseTools:
    """Editors, compiler check, Objective-C runtime and ports build tools."""

    def __init__(
        self,
        pkg: PkgManager,
        escalator: Escalator,
        probe: SystemProbePort,
        toolchain: GNUstepToolchain,
        settings: ProvisionSettings,
    ) -> None:
        self.pkg = pkg
        self.escalator = escalator
        self.probe = probe
        self.toolchain = toolchain
        self.settings = settings

    async def execute(self) -> None:
        await self.install_editors()
        await self.verify_compiler()
        await self.install_objc_runtime()
        await self.install_dev_tools()

    async def install_editors(self) -> None:
        timeout = self.settings.timeouts.install
        for editor in self.settings.editor_packages:
            logger.info("Checking for {}...", editor)
            if self.probe.which(editor) is not None:
                logger.info("{} already installed.", editor)
                continue
            self.escalator.check(
                await self.pkg.install([editor], f"Installing {editor}...", timeout)
            )
            if self.probe.which(editor) is None:
                raise IntegrityFailure(f"{editor} installation failed: {editor} not found")

    async def verify_compiler(self) -> None:
        logger.info("Verifying Clang...")
        if self.probe.which("clang") is None:
            raise PreconditionFailure(
                "Clang not found. Ensure llvm or base system Clang is installed: clang not found"
            )
        version = await self.toolchain.clang_version()
        logger.info("Clang installed: {}", version or "unknown version")

    async def install_objc_runtime(self) -> int:
        """Returns the number of install attempts that were needed."""
        package = self.settings.objc_runtime_package
        timeouts = self.settings.timeouts
        logger.info("Installing {}...", package)
        attempts = await self.escalator.install_with_retry(
            [package],
            f"Installing {package}...",
            timeouts.install,
            timeouts.retry_install,
            retry_label=f"Retrying {package} installation...",
        )
        logger.info("Verifying {}...", package)
        self.escalator.check(await self.pkg.info(package, timeouts.verify))
        library = self.settings.objc_runtime_library
        if not self.probe.file_exists(library):
            raise IntegrityFailure(f"{package} library not found: {library} not found")
        return attempts

    async def install_dev_tools(self) -> None:
        logger.info("Installing development tools for ports...")
        self.escalator.check(
            await self.pkg.install(
                [self.settings.dev_tools_glob, self.settings.llvm_package],
                "Installing GhostBSD development tools...",
                self.settings.timeouts.bulk_install,
                glob=True,
            )
        )

