from abc import ABC, abstractmethod
from datetime import datetime

from pydantic import BaseModel

from gnustep_setup.domain.value_objects.command_spec import CommandSpec
from gnustep_setup.domain.value_objects.verdict import Verdict


class InvocationResult(BaseModel):
    """Outcome of one supervised invocation."""

    command: str
    label: str
    verdict: Verdict
    exit_code: int | None
    timed_out: bool
    duration_ms: int
    started_at: datetime
    output: str = ""

    @property
    def ok(self) -> bool:
        return self.verdict.ok


class CommandRunnerPort(ABC):
    """Port for running external commands under supervision."""

    @abstractmethod
    async def run(self, spec: CommandSpec, *, capture: bool = False) -> InvocationResult:
        """Run a command and return its verdict.

        Never raises for command failures. When ``capture`` is set, the
        combined output is also returned on the result.
        """
