"""Adapter for the GhostBSD ports tree: fetch it and build single ports."""

import asyncio
import os
import shlex
import shutil
from pathlib import Path

from loguru import logger

from gnustep_setup.domain.errors import TransientFailure
from gnustep_setup.domain.ports.command_runner_port import CommandRunnerPort, InvocationResult
from gnustep_setup.domain.value_objects.command_spec import CommandSpec
from gnustep_setup.domain.value_objects.port_target import PortTarget

DEFAULT_PORTS_URL = "https://github.com/ghostbsd/ghostbsd-ports.git"
DEFAULT_PORTS_DIR = Path("/usr/ports")


class PortsTree:
    def __init__(
        self,
        runner: CommandRunnerPort,
        ports_dir: Path = DEFAULT_PORTS_DIR,
        ports_url: str = DEFAULT_PORTS_URL,
        build_log_dir: Path = Path("/tmp"),
        clone_timeout_s: float = 60,
        build_timeout_s: float = 7200,
    ) -> None:
        self.runner = runner
        self.ports_dir = ports_dir
        self.ports_url = ports_url
        self.build_log_dir = build_log_dir
        self.clone_timeout_s = clone_timeout_s
        self.build_timeout_s = build_timeout_s

    def origin_path(self, target: PortTarget) -> Path:
        return self.ports_dir / target.origin

    def build_log_path(self, target: PortTarget) -> Path:
        return self.build_log_dir / f"gnustep_build_{target.package}.log"

    async def clear(self) -> None:
        """Empty the ports directory, releasing mounts and open handles first."""
        logger.info("Clearing {} directory...", self.ports_dir)
        quoted = shlex.quote(str(self.ports_dir))

        if self.ports_dir.is_dir():
            if os.path.ismount(self.ports_dir):
                logger.warning(
                    "WARNING: {} is a mount point. Attempting to unmount...", self.ports_dir
                )
                result = await self.runner.run(
                    CommandSpec(
                        command=f"umount {quoted}",
                        label=f"Unmounting {self.ports_dir}...",
                        timeout_s=30,
                    )
                )
                if not result.ok:
                    raise TransientFailure(
                        f"Failed to unmount {self.ports_dir}", command=result.command
                    )

            holders = await self.runner.run(
                CommandSpec(
                    command=f"lsof -t +D {quoted}",
                    label=f"Checking processes using {self.ports_dir}",
                    timeout_s=30,
                    show_progress=False,
                ),
                capture=True,
            )
            pids = [p for p in holders.output.split() if p.isdigit()]
            if pids:
                logger.warning(
                    "WARNING: Processes using {} detected. Terminating...", self.ports_dir
                )
                killed = await self.runner.run(
                    CommandSpec(
                        command=f"kill {' '.join(pids)}",
                        label="Terminating processes...",
                        timeout_s=10,
                    )
                )
                if not killed.ok:
                    logger.warning("WARNING: Failed to terminate all processes")
                await asyncio.sleep(2)

            try:
                await asyncio.to_thread(shutil.rmtree, self.ports_dir)
            except OSError as e:
                raise TransientFailure(
                    f"Failed to remove {self.ports_dir}: {e}. Try rebooting or manually unmounting."
                ) from e

        try:
            self.ports_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise TransientFailure(f"Failed to create {self.ports_dir}: {e}") from e

    async def fetch(self) -> None:
        url = shlex.quote(self.ports_url)
        target_dir = shlex.quote(str(self.ports_dir))
        result = await self.runner.run(
            CommandSpec(
                command=f"git clone {url} {target_dir}",
                label="Cloning GhostBSD ports tree...",
                timeout_s=self.clone_timeout_s,
            )
        )
        if not result.ok:
            raise TransientFailure(
                "Cloning GhostBSD ports tree failed",
                label=result.label,
                command=result.command,
            )

    async def build(self, target: PortTarget) -> InvocationResult:
        """Build and install one port non-interactively; output goes to its build log."""
        build_log = shlex.quote(str(self.build_log_path(target)))
        origin = shlex.quote(str(self.origin_path(target)))
        return await self.runner.run(
            CommandSpec(
                command=f"cd {origin} && make -DBATCH install clean > {build_log} 2>&1",
                label=f"Building {target.package} from ports...",
                timeout_s=self.build_timeout_s,
            )
        )

    def tail_build_log(self, target: PortTarget, lines: int = 20) -> list[str]:
        path = self.build_log_path(target)
        if not path.exists():
            return []
        return path.read_text(encoding="utf-8", errors="replace").splitlines()[-lines:]
