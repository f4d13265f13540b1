from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_TIMEOUT_S = 5.0


class CommandSpec(BaseModel, frozen=True):
    """A shell command to run under supervision.

    The command string is opaque: it is handed to the shell as-is.
    """

    command: str
    label: str
    timeout_s: float = Field(default=DEFAULT_TIMEOUT_S, gt=0)
    cwd: Path | None = None
    env: dict[str, str] = {}
    show_progress: bool = True
    log_output: bool = True
