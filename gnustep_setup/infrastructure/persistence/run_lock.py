"""Async-safe run lock.

Wraps filelock.FileLock so that only one provisioning run at a time touches
the package database and the ports tree.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from filelock import FileLock, Timeout

from gnustep_setup.domain.errors import PreconditionFailure


@asynccontextmanager
async def run_lock(lock_path: Path, timeout_s: float = 0) -> AsyncIterator[None]:
    """Hold the run lock for the duration of the block.

    Raises PreconditionFailure if another run holds it for longer than
    ``timeout_s``.

    Usage:
        async with run_lock(lock_path):
            await provision()
    """
    # Acquired and released on different worker threads.
    lock = FileLock(lock_path, thread_local=False)

    try:
        await asyncio.to_thread(lock.acquire, timeout=timeout_s)
    except Timeout:
        raise PreconditionFailure(
            f"Another gnustep-setup run holds {lock_path}. Wait for it to finish."
        ) from None
    try:
        yield
    finally:
        await asyncio.to_thread(lock.release)
