"""Durable, append-only log for one provisioning run."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import TracebackType

from loguru import logger

LOG_TITLE = "GNUstep Installation Log"
LOG_RULE = "------------------------"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"


class RunLog:
    """Owns the run's log file for the whole process lifetime.

    Opening writes the header and registers a loguru file sink; closing removes
    the sink, which flushes and closes the file. Use it as a context manager so
    the close happens on every exit path.
    """

    def __init__(self, path: Path, system: str = "", init_system: str = "BSD rc") -> None:
        self.path = path
        self.system = system
        self.init_system = init_system
        self._sink_id: int | None = None

    @staticmethod
    def path_for(log_dir: Path, prefix: str, now: datetime | None = None) -> Path:
        stamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
        return log_dir / f"{prefix}_{stamp}.log"

    @property
    def is_open(self) -> bool:
        return self._sink_id is not None

    def open(self) -> RunLog:
        if self.is_open:
            return self
        self.path.parent.mkdir(parents=True, exist_ok=True)
        header = [
            LOG_TITLE,
            f"Date: {datetime.now().astimezone().strftime('%a %b %d %H:%M:%S %Z %Y')}",
            f"System: {self.system}",
            f"Init System: {self.init_system}",
            LOG_RULE,
        ]
        self.path.write_text("\n".join(header) + "\n", encoding="utf-8")
        self._sink_id = logger.add(
            self.path,
            format=FILE_FORMAT,
            level="DEBUG",
            mode="a",
            encoding="utf-8",
        )
        logger.debug("Run log opened at {}", self.path)
        return self

    def close(self) -> None:
        if self._sink_id is None:
            return
        logger.remove(self._sink_id)
        self._sink_id = None

    def __enter__(self) -> RunLog:
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc is not None and not isinstance(exc, SystemExit | KeyboardInterrupt):
            logger.opt(exception=exc).error("Run ended with an unhandled error")
        self.close()

