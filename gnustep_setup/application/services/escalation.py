"""The escalating installation procedure.

Every step of a run is one of two shapes:

- retry: run the primary command; on failure run a cleanup-and-retry command
  once; fail the run if that fails too.
- ensure: if the artifact is already in place do nothing; otherwise run the
  primary action, and if the artifact is still not verified run the fallback
  once; fail the run if it is still missing.

Neither shape loops.
"""

from collections.abc import Awaitable, Callable, Sequence
from enum import Enum

from loguru import logger

from gnustep_setup.domain.errors import IntegrityFailure, TransientFailure
from gnustep_setup.domain.ports.command_runner_port import CommandRunnerPort, InvocationResult
from gnustep_setup.domain.value_objects.command_spec import CommandSpec
from gnustep_setup.infrastructure.pkg.pkg_manager import PkgManager

# An action reports False when it failed; None counts as success.
Action = Callable[[], Awaitable[bool | None]]
Check = Callable[[], Awaitable[bool]]


class EnsureOutcome(str, Enum):
    ALREADY_SATISFIED = "already_satisfied"
    PRIMARY = "primary"
    FALLBACK = "fallback"


class Escalator:
    def __init__(self, runner: CommandRunnerPort) -> None:
        self.runner = runner

    @staticmethod
    def check(result: InvocationResult) -> InvocationResult:
        """Raise if a finished invocation failed."""
        if not result.ok:
            reason = result.label.rstrip(".")
            if result.timed_out:
                reason += " (timed out)"
            raise TransientFailure(reason, label=result.label, command=result.command)
        return result

    async def require(self, spec: CommandSpec, *, capture: bool = False) -> InvocationResult:
        """Run a command whose failure ends the run."""
        return self.check(await self.runner.run(spec, capture=capture))

    async def retry_with_cleanup(
        self,
        primary: CommandSpec,
        retry: CommandSpec,
    ) -> int:
        """Run ``primary``, then ``retry`` once if it failed.

        Returns the number of attempts that were needed.
        """
        result = await self.runner.run(primary)
        if result.ok:
            return 1
        logger.warning("WARNING: {} failed. Retrying...", primary.label.rstrip("."))
        await self.require(retry)
        return 2

    async def install_with_retry(
        self,
        packages: Sequence[str],
        label: str,
        timeout_s: float = 60,
        retry_timeout_s: float = 120,
        *,
        glob: bool = False,
        retry_label: str | None = None,
    ) -> int:
        primary = CommandSpec(
            command=PkgManager.install_command(packages, glob=glob),
            label=label,
            timeout_s=timeout_s,
        )
        retry = CommandSpec(
            command=PkgManager.clean_install_command(packages, glob=glob),
            label=retry_label or f"Retrying: {label}",
            timeout_s=retry_timeout_s,
        )
        return await self.retry_with_cleanup(primary, retry)

    async def ensure(
        self,
        artifact: str,
        *,
        verify: Check,
        fallback: Action,
        primary: Action | None = None,
    ) -> EnsureOutcome:
        """Make sure ``artifact`` verifies, escalating at most once."""
        if await verify():
            logger.debug("{} already in place", artifact)
            return EnsureOutcome.ALREADY_SATISFIED

        if primary is not None:
            primary_ok = await primary()
            if primary_ok is not False and await verify():
                return EnsureOutcome.PRIMARY
            logger.warning("WARNING: {} not in place after primary action. Escalating...", artifact)
        else:
            logger.warning("WARNING: {} not in place. Escalating...", artifact)

        await fallback()
        if await verify():
            return EnsureOutcome.FALLBACK

        raise IntegrityFailure(f"{artifact} still not in place after fallback")
