from collections.abc import Iterator
from pathlib import Path

import pytest
from fakes import FakeProbe, FakeRunner, RecordingProgress
from loguru import logger

from gnustep_setup.application.dto.provision_settings import ProvisionSettings


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def environ() -> dict[str, str]:
    return {"PATH": "/usr/bin:/bin"}


@pytest.fixture
def fake_probe(environ: dict[str, str]) -> FakeProbe:
    return FakeProbe(environ)


@pytest.fixture
def recording_progress() -> RecordingProgress:
    return RecordingProgress()


@pytest.fixture
def settings(tmp_path: Path) -> ProvisionSettings:
    return ProvisionSettings(
        log_dir=tmp_path / "logs",
        lock_path=tmp_path / "run.lock",
        gnustep_root=tmp_path / "GNUstep",
        profile_path=tmp_path / "profile",
        fish_config_path=tmp_path / "fish" / "conf.d" / "gnustep.fish",
        objc_runtime_library=tmp_path / "lib" / "libobjc.so",
        ports_dir=tmp_path / "ports",
        build_log_dir=tmp_path / "build",
        smoke_dir=tmp_path / "smoke",
    )


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Messages logged through loguru while the test runs."""
    messages: list[str] = []
    sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(sink_id)
