import shlex
from collections.abc import Sequence
from pathlib import Path

from gnustep_setup.domain.ports.command_runner_port import CommandRunnerPort, InvocationResult
from gnustep_setup.domain.services.report_builder import OBJC_FLAGS_QUERY
from gnustep_setup.domain.value_objects.command_spec import CommandSpec


class GNUstepToolchain:
    """Compiler-side operations: flag queries, compiling and running test programs."""

    def __init__(self, runner: CommandRunnerPort, timeout_s: float = 10) -> None:
        self.runner = runner
        self.timeout_s = timeout_s

    async def objc_flags(self, *, quiet: bool = False) -> str | None:
        """Output of ``gnustep-config --objc-flags``, or None when it fails."""
        result = await self.runner.run(
            CommandSpec(
                command=OBJC_FLAGS_QUERY,
                label="Checking gnustep-config output...",
                timeout_s=self.timeout_s,
                show_progress=not quiet,
            ),
            capture=True,
        )
        return result.output if result.ok else None

    async def clang_version(self) -> str | None:
        result = await self.runner.run(
            CommandSpec(
                command="clang --version",
                label="Querying clang version",
                timeout_s=self.timeout_s,
                show_progress=False,
            ),
            capture=True,
        )
        if not result.ok or not result.output.strip():
            return None
        return result.output.splitlines()[0].strip()

    @staticmethod
    def compile_command(source: Path, binary: Path, libraries: Sequence[str]) -> str:
        libs = " ".join(f"-l{lib}" for lib in libraries)
        return (
            f"clang `{OBJC_FLAGS_QUERY}` -o {shlex.quote(str(binary))} "
            f"{shlex.quote(str(source))} {libs}"
        )

    async def compile(
        self, source: Path, binary: Path, libraries: Sequence[str], label: str
    ) -> InvocationResult:
        return await self.runner.run(
            CommandSpec(
                command=self.compile_command(source, binary, libraries),
                label=label,
                timeout_s=self.timeout_s,
            )
        )

    async def run_program(
        self, binary: Path, label: str, *, quiet: bool = False, capture: bool = False
    ) -> InvocationResult:
        return await self.runner.run(
            CommandSpec(
                command=shlex.quote(str(binary)),
                label=label,
                timeout_s=self.timeout_s,
                show_progress=not quiet,
                log_output=not quiet,
            ),
            capture=capture,
        )
