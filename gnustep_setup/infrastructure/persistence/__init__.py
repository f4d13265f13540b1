from gnustep_setup.infrastructure.persistence.atomic_io import append_line, atomic_write
from gnustep_setup.infrastructure.persistence.run_lock import run_lock
from gnustep_setup.infrastructure.persistence.run_log import LOG_RULE, LOG_TITLE, RunLog

__all__ = [
    "LOG_RULE",
    "LOG_TITLE",
    "RunLog",
    "append_line",
    "atomic_write",
    "run_lock",
]
