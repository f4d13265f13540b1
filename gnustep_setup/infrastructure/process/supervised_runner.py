import asyncio
import codecs
import contextlib
import itertools
import os
import signal

from loguru import logger

from gnustep_setup.domain.entities.invocation import SupervisedInvocation
from gnustep_setup.domain.ports.command_runner_port import CommandRunnerPort, InvocationResult
from gnustep_setup.domain.ports.progress_port import SPINNER_FRAMES, NullProgress, ProgressPort
from gnustep_setup.domain.value_objects.command_spec import CommandSpec

FRAME_INTERVAL_S = 0.1
READ_CHUNK = 64 * 1024
# After a timeout, how long buffered output may still drain before the pump is cancelled.
DRAIN_GRACE_S = 0.2

# Command output goes to the run log only, never to the terminal sink.
OUTPUT_CHANNEL = "output"
output_log = logger.bind(channel=OUTPUT_CHANNEL)


def _kill_group(pid: int) -> None:
    """Kill the command's whole process group."""
    with contextlib.suppress(ProcessLookupError, PermissionError):
        os.killpg(pid, signal.SIGKILL)


class SupervisedCommandRunner(CommandRunnerPort):
    """Run shell commands with a spinner, a watchdog and durable logging.

    Each call owns three concurrent activities: the command, the progress
    display and the watchdog. Both background tasks live in a TaskGroup
    scoped to the call, so neither outlives it.
    """

    def __init__(
        self,
        progress: ProgressPort | None = None,
        frame_interval_s: float = FRAME_INTERVAL_S,
    ) -> None:
        self.progress = progress or NullProgress()
        self.frame_interval_s = frame_interval_s

    async def run(self, spec: CommandSpec, *, capture: bool = False) -> InvocationResult:
        invocation = SupervisedInvocation(spec=spec)
        logger.info("Starting: {}", spec.label)
        logger.debug("Command: {}", spec.command)

        env = dict(os.environ)
        env.update(spec.env)

        try:
            proc = await asyncio.create_subprocess_shell(
                spec.command,
                cwd=str(spec.cwd) if spec.cwd else None,
                env=env,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
                start_new_session=True,  # own process group, killed as a unit
            )
        except OSError as e:
            logger.error("ERROR: {} could not be started: {}", spec.label, e)
            invocation.fail_to_launch(str(e))
            return self._result(invocation, "")

        invocation.start(proc.pid)
        captured: list[str] = []

        try:
            async with asyncio.TaskGroup() as tg:
                if spec.show_progress:
                    tg.create_task(self._render_progress(spec.label, proc))
                pump = tg.create_task(self._pump_output(proc, spec, captured))
                invocation.arm_watchdog()
                watchdog = tg.create_task(self._watchdog(proc, invocation, pump))

                exit_code = await proc.wait()
                # Leftover background children would keep the pipe open.
                _kill_group(proc.pid)
                # The time limit also covers draining the output.
                await asyncio.wait({pump})
                watchdog.cancel()
                invocation.disarm_watchdog()
        finally:
            if proc.returncode is None:
                _kill_group(proc.pid)
                with contextlib.suppress(ProcessLookupError):
                    await asyncio.shield(proc.wait())
            invocation.disarm_watchdog()

        invocation.complete(exit_code)
        result = self._result(invocation, "".join(captured) if capture else "")
        if not result.ok:
            logger.debug(
                "{} finished with verdict {} (exit {})",
                spec.label,
                result.verdict.value,
                result.exit_code,
            )
        return result

    async def _render_progress(self, label: str, proc: asyncio.subprocess.Process) -> None:
        for glyph in itertools.cycle(SPINNER_FRAMES):
            if proc.returncode is not None:
                break
            self.progress.frame(label, glyph)
            await asyncio.sleep(self.frame_interval_s)
        self.progress.done(label)

    async def _watchdog(
        self,
        proc: asyncio.subprocess.Process,
        invocation: SupervisedInvocation,
        pump: asyncio.Task[None],
    ) -> None:
        timeout_s = invocation.spec.timeout_s
        await asyncio.sleep(timeout_s)
        if proc.returncode is not None and pump.done():
            return
        invocation.mark_timed_out()
        _kill_group(proc.pid)
        logger.error("ERROR: {} timed out after {:g} seconds", invocation.spec.label, timeout_s)

        # A descendant that left the process group can hold the pipe open.
        done, _ = await asyncio.wait({pump}, timeout=DRAIN_GRACE_S)
        if not done:
            pump.cancel()

    async def _pump_output(
        self,
        proc: asyncio.subprocess.Process,
        spec: CommandSpec,
        captured: list[str],
    ) -> None:
        assert proc.stdout is not None
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        last = ""
        try:
            while chunk := await proc.stdout.read(READ_CHUNK):
                last = self._emit(decoder.decode(chunk), spec, captured) or last
            last = self._emit(decoder.decode(b"", final=True), spec, captured) or last
        finally:
            if last and not last.endswith("\n") and spec.log_output:
                output_log.opt(raw=True).info("\n")

    @staticmethod
    def _emit(text: str, spec: CommandSpec, captured: list[str]) -> str:
        if text:
            captured.append(text)
            if spec.log_output:
                output_log.opt(raw=True).info(text)
        return text

    @staticmethod
    def _result(invocation: SupervisedInvocation, output: str) -> InvocationResult:
        return InvocationResult(
            command=invocation.spec.command,
            label=invocation.spec.label,
            verdict=invocation.verdict,
            exit_code=invocation.exit_code,
            timed_out=invocation.timed_out,
            duration_ms=invocation.duration_ms,
            started_at=invocation.started_at,
            output=output,
        )
