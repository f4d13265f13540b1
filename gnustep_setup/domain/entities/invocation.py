from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, Field

from gnustep_setup.domain.value_objects.command_spec import CommandSpec
from gnustep_setup.domain.value_objects.verdict import Verdict


class InvocationState(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"


class SupervisedInvocation(BaseModel):
    """One attempt to run a command under supervision.

    Tracks the command's pid, the single watchdog, and the exit status. The
    verdict is only available once the invocation is completed.
    """

    spec: CommandSpec
    state: InvocationState = InvocationState.PENDING
    pid: int | None = None
    watchdog_armed: bool = False
    timed_out: bool = False
    exit_code: int | None = None
    launch_error: str | None = None
    started_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    finished_at: datetime | None = None

    def start(self, pid: int) -> None:
        if self.state != InvocationState.PENDING:
            raise RuntimeError(f"Invocation already {self.state.value}")
        self.pid = pid
        self.state = InvocationState.RUNNING

    def arm_watchdog(self) -> None:
        if self.state != InvocationState.RUNNING:
            raise RuntimeError("Watchdog can only be armed on a running invocation")
        if self.watchdog_armed:
            raise RuntimeError("Invocation already has a watchdog")
        self.watchdog_armed = True

    def disarm_watchdog(self) -> None:
        self.watchdog_armed = False

    def mark_timed_out(self) -> None:
        if self.state != InvocationState.RUNNING:
            raise RuntimeError("Only a running invocation can time out")
        self.timed_out = True

    def complete(self, exit_code: int) -> None:
        if self.state != InvocationState.RUNNING:
            raise RuntimeError(f"Cannot complete invocation in state {self.state.value}")
        if self.watchdog_armed:
            raise RuntimeError("Watchdog must be disarmed before completion")
        self.exit_code = exit_code
        self.finished_at = datetime.now(UTC)
        self.state = InvocationState.COMPLETED

    def fail_to_launch(self, error: str) -> None:
        if self.state != InvocationState.PENDING:
            raise RuntimeError(f"Invocation already {self.state.value}")
        self.launch_error = error
        self.finished_at = datetime.now(UTC)
        self.state = InvocationState.COMPLETED

    @property
    def duration_ms(self) -> int:
        end = self.finished_at or datetime.now(UTC)
        return int((end - self.started_at).total_seconds() * 1000)

    @property
    def verdict(self) -> Verdict:
        if self.state != InvocationState.COMPLETED:
            raise RuntimeError("Verdict is not available before completion")
        if self.timed_out:
            return Verdict.TIMED_OUT
        if self.exit_code == 0:
            return Verdict.SUCCESS
        return Verdict.FAILURE
