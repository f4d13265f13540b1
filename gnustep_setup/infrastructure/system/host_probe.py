import os
import shlex
import shutil
from pathlib import Path

from gnustep_setup.domain.ports.command_runner_port import CommandRunnerPort
from gnustep_setup.domain.ports.system_probe_port import SystemProbePort
from gnustep_setup.domain.value_objects.command_spec import CommandSpec


class HostProbe(SystemProbePort):
    """Answers questions about the local host.

    Anything that needs a subprocess goes through the supervised runner with
    the progress display turned off.
    """

    def __init__(self, runner: CommandRunnerPort) -> None:
        self.runner = runner

    def is_root(self) -> bool:
        return os.geteuid() == 0

    def os_identity(self) -> str:
        u = os.uname()
        return f"{u.sysname} {u.release}"

    async def is_x11_running(self) -> bool:
        result = await self.runner.run(
            CommandSpec(
                command="pgrep -x Xorg",
                label="Checking for a running X server",
                timeout_s=5,
                show_progress=False,
            )
        )
        return result.ok

    async def has_network(self, host: str) -> bool:
        result = await self.runner.run(
            CommandSpec(
                command=f"ping -c 1 {shlex.quote(host)}",
                label=f"Pinging {host}",
                timeout_s=10,
                show_progress=False,
            )
        )
        return result.ok

    def free_disk_kb(self, path: Path) -> int:
        return shutil.disk_usage(path).free // 1024

    def which(self, command: str) -> str | None:
        return shutil.which(command)

    def file_exists(self, path: Path) -> bool:
        return path.is_file()

    def dir_exists(self, path: Path) -> bool:
        return path.is_dir()

    def file_contains(self, path: Path, text: str) -> bool:
        try:
            return text in path.read_text(encoding="utf-8", errors="replace")
        except OSError:
            return False

    def env(self, name: str) -> str | None:
        return os.environ.get(name) or None
