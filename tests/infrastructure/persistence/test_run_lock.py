from pathlib import Path

import pytest

from gnustep_setup.domain.errors import PreconditionFailure
from gnustep_setup.infrastructure.persistence.run_lock import run_lock


class TestRunLock:
    async def test_second_run_is_refused_while_first_holds_lock(self, tmp_path: Path) -> None:
        lock_path = tmp_path / "run.lock"

        async with run_lock(lock_path):
            with pytest.raises(PreconditionFailure, match="Another gnustep-setup run"):
                async with run_lock(lock_path):
                    pass

    async def test_lock_is_released_after_block(self, tmp_path: Path) -> None:
        lock_path = tmp_path / "run.lock"

        async with run_lock(lock_path):
            pass
        async with run_lock(lock_path):
            pass
