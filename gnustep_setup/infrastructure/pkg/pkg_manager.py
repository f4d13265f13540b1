"""Adapter for the FreeBSD/GhostBSD ``pkg`` package manager."""

import shlex
from collections.abc import Sequence

from gnustep_setup.domain.ports.command_runner_port import CommandRunnerPort, InvocationResult
from gnustep_setup.domain.value_objects.command_spec import CommandSpec

QUERY_TIMEOUT_S = 10.0


def _quote_all(names: Sequence[str]) -> str:
    return " ".join(shlex.quote(n) for n in names)


class PkgManager:
    def __init__(self, runner: CommandRunnerPort) -> None:
        self.runner = runner

    @staticmethod
    def install_command(packages: Sequence[str], *, glob: bool = False) -> str:
        flags = "-y -g" if glob else "-y"
        return f"pkg install {flags} {_quote_all(packages)}"

    @classmethod
    def clean_install_command(cls, packages: Sequence[str], *, glob: bool = False) -> str:
        """Install after clearing the package cache and refreshing the catalogue."""
        return f"pkg clean -y && pkg update && {cls.install_command(packages, glob=glob)}"

    @staticmethod
    def delete_command(packages: Sequence[str]) -> str:
        return f"pkg delete -f -y {_quote_all(packages)}"

    async def update(self, timeout_s: float = 60) -> InvocationResult:
        return await self.runner.run(
            CommandSpec(
                command="pkg update",
                label="Updating package repositories...",
                timeout_s=timeout_s,
            )
        )

    async def upgrade(self, timeout_s: float = 300) -> InvocationResult:
        return await self.runner.run(
            CommandSpec(
                command="pkg upgrade -y", label="Upgrading packages...", timeout_s=timeout_s
            )
        )

    async def install(
        self,
        packages: Sequence[str],
        label: str,
        timeout_s: float = 60,
        *,
        glob: bool = False,
    ) -> InvocationResult:
        return await self.runner.run(
            CommandSpec(
                command=self.install_command(packages, glob=glob),
                label=label,
                timeout_s=timeout_s,
            )
        )

    async def info(self, package: str, timeout_s: float = QUERY_TIMEOUT_S) -> InvocationResult:
        return await self.runner.run(
            CommandSpec(
                command=f"pkg info {shlex.quote(package)}",
                label=f"Verifying {package}...",
                timeout_s=timeout_s,
            )
        )

    async def exists(self, pattern: str, *, regex: bool = False) -> bool:
        """Return True if an installed package matches ``pattern``."""
        flags = "-e -x" if regex else "-e"
        result = await self.runner.run(
            CommandSpec(
                command=f"pkg info {flags} {shlex.quote(pattern)}",
                label=f"Checking for {pattern}",
                timeout_s=QUERY_TIMEOUT_S,
                show_progress=False,
            )
        )
        return result.ok

    async def version(self, package: str) -> str | None:
        result = await self.runner.run(
            CommandSpec(
                command=f"pkg query %v {shlex.quote(package)}",
                label=f"Querying {package} version",
                timeout_s=QUERY_TIMEOUT_S,
                show_progress=False,
                log_output=False,
            ),
            capture=True,
        )
        if not result.ok:
            return None
        return result.output.strip() or None
