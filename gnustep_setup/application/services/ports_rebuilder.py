from collections.abc import Sequence

from loguru import logger

from gnustep_setup.application.services.escalation import Escalator
from gnustep_setup.domain.errors import IntegrityFailure, PreconditionFailure, TransientFailure
from gnustep_setup.domain.ports.system_probe_port import SystemProbePort
from gnustep_setup.domain.value_objects.command_spec import CommandSpec
from gnustep_setup.domain.value_objects.port_target import GNUSTEP_REBUILD_CHAIN, PortTarget
from gnustep_setup.infrastructure.build.ports_tree import PortsTree
from gnustep_setup.infrastructure.pkg.pkg_manager import PkgManager
from gnustep_setup.infrastructure.process.supervised_runner import OUTPUT_CHANNEL

# Build prerequisites: (pattern, is_regex).
PORT_BUILD_DEPS: tuple[tuple[str, bool], ...] = (
    ("libobjc2", False),
    ("GhostBSD.*-dev", True),
    ("llvm19", False),
)

output_log = logger.bind(channel=OUTPUT_CHANNEL)


class PortsRebuilder:
    """Rebuild packages from the ports tree.

    The whole chain is always rebuilt in order, from the first dependency to
    the top-level package. There is no incremental path.
    """

    def __init__(
        self,
        pkg: PkgManager,
        ports_tree: PortsTree,
        probe: SystemProbePort,
        escalator: Escalator,
        chain: Sequence[PortTarget] = GNUSTEP_REBUILD_CHAIN,
        port_deps_timeout_s: float = 300,
        delete_timeout_s: float = 60,
    ) -> None:
        self.pkg = pkg
        self.ports_tree = ports_tree
        self.probe = probe
        self.escalator = escalator
        self.chain = tuple(chain)
        self.port_deps_timeout_s = port_deps_timeout_s
        self.delete_timeout_s = delete_timeout_s
        self.rebuilds = 0

    async def ensure_build_deps(self) -> None:
        logger.info("Checking ports build dependencies...")
        present = [await self.pkg.exists(name, regex=regex) for name, regex in PORT_BUILD_DEPS]
        if not all(present):
            logger.warning(
                "WARNING: Required dependencies (libobjc2, GhostBSD*-dev, llvm19) "
                "not fully installed."
            )
            await self.escalator.require(
                CommandSpec(
                    command=PkgManager.install_command(
                        ["GhostBSD*-dev", "libobjc2", "llvm19"], glob=True
                    ),
                    label="Installing required dependencies...",
                    timeout_s=self.port_deps_timeout_s,
                )
            )
        logger.info("Dependencies satisfied.")

    async def prepare_tree(self) -> None:
        """Fetch a fresh ports tree."""
        if self.probe.which("git") is None:
            raise PreconditionFailure("Git not installed for ports: git not found")
        await self.ensure_build_deps()
        await self.ports_tree.clear()
        await self.ports_tree.fetch()

    async def build_port(self, target: PortTarget) -> None:
        """Replace the installed package with one built from its port."""
        logger.info(
            "Attempting to install {} from GhostBSD ports ({})...", target.package, target.origin
        )
        if await self.pkg.exists(target.package):
            logger.info("Existing {} package found. Removing to avoid conflicts...", target.package)
            await self.escalator.require(
                CommandSpec(
                    command=PkgManager.delete_command([target.package]),
                    label=f"Removing existing {target.package} package...",
                    timeout_s=self.delete_timeout_s,
                )
            )

        origin = self.ports_tree.origin_path(target)
        if not self.probe.dir_exists(origin):
            raise IntegrityFailure(f"Ports path {origin} not found")

        build_log = self.ports_tree.build_log_path(target)
        logger.info(
            "Building {} non-interactively. Detailed log at {}...", target.package, build_log
        )
        result = await self.ports_tree.build(target)
        if not result.ok:
            logger.error("ERROR: Failed to build {}. Checking log for details...", target.package)
            for line in self.ports_tree.tail_build_log(target):
                output_log.info(line)
            raise TransientFailure(
                f"Failed to build {target.package}. See {build_log} for details.",
                label=result.label,
                command=result.command,
            )
        logger.info("{} build completed successfully.", target.package)

    async def install_from_ports(self, target: PortTarget) -> None:
        await self.prepare_tree()
        await self.build_port(target)

    async def rebuild_chain(self) -> None:
        """Rebuild every package in the chain, dependencies first."""
        self.rebuilds += 1
        logger.warning(
            "Forcing GhostBSD ports rebuild of {}...", ", ".join(t.package for t in self.chain)
        )
        await self.prepare_tree()
        for target in self.chain:
            await self.build_port(target)
