from datetime import UTC, datetime
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from fakes import FakeProbe, FakeRunner, Outcome

from gnustep_setup.application.services.escalation import Escalator
from gnustep_setup.application.services.ports_rebuilder import PortsRebuilder
from gnustep_setup.domain.errors import IntegrityFailure, PreconditionFailure, TransientFailure
from gnustep_setup.domain.ports.command_runner_port import InvocationResult
from gnustep_setup.domain.value_objects.port_target import GNUSTEP_REBUILD_CHAIN, PortTarget
from gnustep_setup.domain.value_objects.verdict import Verdict
from gnustep_setup.infrastructure.pkg.pkg_manager import PkgManager

CHAIN_ORDER = ["gnustep-make", "gnustep-base", "gnustep-gui", "gnustep-back", "gnustep"]


def build_result(target: PortTarget, ok: bool = True) -> InvocationResult:
    return InvocationResult(
        command=f"make -DBATCH install clean # {target.package}",
        label=f"Building {target.package} from ports...",
        verdict=Verdict.SUCCESS if ok else Verdict.FAILURE,
        exit_code=0 if ok else 2,
        timed_out=False,
        duration_ms=1,
        started_at=datetime.now(UTC),
    )


@pytest.fixture
def ports_tree(tmp_path: Path) -> MagicMock:
    tree = MagicMock()
    tree.clear = AsyncMock()
    tree.fetch = AsyncMock()
    tree.build = AsyncMock(side_effect=lambda target: build_result(target))
    tree.origin_path.side_effect = lambda target: tmp_path / "ports" / target.origin
    tree.build_log_path.side_effect = lambda target: (
        tmp_path / f"gnustep_build_{target.package}.log"
    )
    tree.tail_build_log.return_value = ["cc: error: something broke"]
    for target in GNUSTEP_REBUILD_CHAIN:
        (tmp_path / "ports" / target.origin).mkdir(parents=True)
    return tree


@pytest.fixture
def rebuilder(
    fake_runner: FakeRunner, fake_probe: FakeProbe, ports_tree: MagicMock
) -> PortsRebuilder:
    return PortsRebuilder(PkgManager(fake_runner), ports_tree, fake_probe, Escalator(fake_runner))


class TestRebuildChain:
    async def test_builds_whole_chain_in_dependency_order(
        self, rebuilder: PortsRebuilder, ports_tree: MagicMock
    ) -> None:
        await rebuilder.rebuild_chain()

        built = [call.args[0].package for call in ports_tree.build.await_args_list]
        assert built == CHAIN_ORDER
        ports_tree.clear.assert_awaited_once()
        ports_tree.fetch.assert_awaited_once()
        assert rebuilder.rebuilds == 1

    async def test_existing_packages_are_removed_before_build(
        self, rebuilder: PortsRebuilder, fake_runner: FakeRunner
    ) -> None:
        await rebuilder.rebuild_chain()

        deletes = [c for c in fake_runner.commands if c.startswith("pkg delete")]
        assert deletes == [f"pkg delete -f -y {name}" for name in CHAIN_ORDER]

    async def test_absent_packages_are_not_removed(
        self, rebuilder: PortsRebuilder, fake_runner: FakeRunner
    ) -> None:
        fake_runner.on("pkg info -e gnustep", Outcome(exit_code=1))

        await rebuilder.rebuild_chain()

        assert fake_runner.count("pkg delete") == 0

    async def test_build_failure_stops_chain_and_logs_tail(
        self, rebuilder: PortsRebuilder, ports_tree: MagicMock, log_messages: list[str]
    ) -> None:
        ports_tree.build.side_effect = lambda target: build_result(
            target, ok=target.package != "gnustep-gui"
        )

        with pytest.raises(TransientFailure, match="Failed to build gnustep-gui"):
            await rebuilder.rebuild_chain()

        built = [call.args[0].package for call in ports_tree.build.await_args_list]
        assert built == ["gnustep-make", "gnustep-base", "gnustep-gui"]
        assert "cc: error: something broke" in log_messages


class TestInstallFromPorts:
    async def test_requires_git(self, rebuilder: PortsRebuilder, fake_probe: FakeProbe) -> None:
        fake_probe.commands.discard("git")

        with pytest.raises(PreconditionFailure, match="git"):
            await rebuilder.install_from_ports(GNUSTEP_REBUILD_CHAIN[0])

    async def test_missing_origin_is_integrity_failure(
        self, rebuilder: PortsRebuilder
    ) -> None:
        target = PortTarget(package="gnustep-extra", origin="devel/missing")

        with pytest.raises(IntegrityFailure, match="Ports path"):
            await rebuilder.install_from_ports(target)

    async def test_missing_build_deps_are_installed(
        self, rebuilder: PortsRebuilder, fake_runner: FakeRunner
    ) -> None:
        fake_runner.on("pkg info -e llvm19", Outcome(exit_code=1))

        await rebuilder.install_from_ports(GNUSTEP_REBUILD_CHAIN[0])

        assert "pkg install -y -g 'GhostBSD*-dev' libobjc2 llvm19" in fake_runner.commands
        install = next(s for s in fake_runner.specs if s.command.startswith("pkg install"))
        assert install.timeout_s == 300

    async def test_present_build_deps_install_nothing(
        self, rebuilder: PortsRebuilder, fake_runner: FakeRunner
    ) -> None:
        await rebuilder.install_from_ports(GNUSTEP_REBUILD_CHAIN[0])

        assert fake_runner.count("pkg install") == 0
        assert "pkg info -e -x 'GhostBSD.*-dev'" in fake_runner.commands
