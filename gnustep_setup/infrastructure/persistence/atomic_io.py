from __future__ import annotations

import asyncio
import tempfile
from pathlib import Path

import aiofiles
from loguru import logger


async def atomic_write(path: Path, content: str, suffix: str | None = None) -> None:
    """Write content to file atomically using temp file + rename pattern."""
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_path_str = tempfile.mkstemp(
        dir=str(path.parent),
        prefix=".tmp_",
        suffix=suffix or path.suffix,
    )
    temp_path = Path(temp_path_str)

    try:
        async with aiofiles.open(fd, mode="w", encoding="utf-8", closefd=True) as f:
            await f.write(content)
        await asyncio.to_thread(temp_path.chmod, 0o644)
        await asyncio.to_thread(temp_path.replace, path)
        logger.debug("Atomic write completed: {}", path)
    except Exception:
        if temp_path.exists():
            temp_path.unlink()
        raise


async def append_line(path: Path, line: str) -> None:
    """Append one line to a text file, adding a newline before it if needed."""
    async with aiofiles.open(path, mode="a+", encoding="utf-8") as f:
        await f.seek(0)
        existing = await f.read()
        prefix = "" if not existing or existing.endswith("\n") else "\n"
        await f.write(f"{prefix}{line}\n")
    logger.debug("Appended to {}: {}", path, line)
