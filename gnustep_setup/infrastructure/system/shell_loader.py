"""Import the environment a POSIX shell script exports.

A Python process cannot ``source`` a shell script, so the script is sourced
in a child shell which then dumps its environment as JSON.
"""

import json
import os
import shlex
import sys
from collections.abc import MutableMapping
from pathlib import Path

from loguru import logger

from gnustep_setup.domain.ports.command_runner_port import CommandRunnerPort
from gnustep_setup.domain.value_objects.command_spec import CommandSpec

_DUMP_ENV = "import json, os; print(json.dumps(dict(os.environ)))"


async def load_script_environment(
    runner: CommandRunnerPort,
    script: Path,
    timeout_s: float = 10,
) -> dict[str, str] | None:
    """Return the environment after sourcing ``script``, or None if it failed."""
    command = (
        f". {shlex.quote(str(script))} && "
        f"{shlex.quote(sys.executable)} -c {shlex.quote(_DUMP_ENV)}"
    )
    result = await runner.run(
        CommandSpec(
            command=command,
            label=f"Sourcing {script.name}...",
            timeout_s=timeout_s,
            show_progress=False,
            log_output=False,  # full environment dump
        ),
        capture=True,
    )
    if not result.ok:
        return None

    for line in reversed(result.output.splitlines()):
        line = line.strip()
        if line.startswith("{"):
            try:
                data = json.loads(line)
            except json.JSONDecodeError:
                break
            return {str(k): str(v) for k, v in data.items()}
    logger.warning("Sourcing {} produced no environment dump", script)
    return None


async def source_into(
    runner: CommandRunnerPort,
    script: Path,
    environ: MutableMapping[str, str] | None = None,
) -> bool:
    """Source ``script`` and copy the resulting variables into ``environ``."""
    loaded = await load_script_environment(runner, script)
    if loaded is None:
        return False
    target = os.environ if environ is None else environ
    target.update(loaded)
    return True
