import pytest

from gnustep_setup.domain.entities.system_snapshot import PackageState, SystemSnapshot
from gnustep_setup.domain.services.report_builder import build_report, has_include_flags


@pytest.fixture
def healthy() -> SystemSnapshot:
    return SystemSnapshot(
        packages=[
            PackageState(name="gnustep-make", installed=True, version="2.9.2"),
            PackageState(name="gnustep", installed=False),
        ],
        objc_flags="-I/usr/local/GNUstep/System/Library/Headers -fobjc-runtime=gnustep-2.0\n",
        system_root="/usr/local/GNUstep/System",
        hello_binary="/tmp/hello",
        hello_binary_exists=True,
        hello_output_ok=True,
        gui_binary="/tmp/gui",
        gui_binary_exists=True,
        tools={"gorm": True, "projectcenter": False},
    )


class TestHasIncludeFlags:
    @pytest.mark.parametrize(
        ("output", "expected"),
        [("-I/usr/include -O2", True), ("-O2", False), ("", False), (None, False)],
    )
    def test_marker(self, output: str | None, expected: bool) -> None:
        assert has_include_flags(output) is expected


class TestBuildReport:
    def test_renders_expected_lines(self, healthy: SystemSnapshot) -> None:
        lines = build_report(healthy).render_lines()

        assert lines == [
            "1. GNUstep Packages Status:",
            "   - gnustep-make: Installed (Version 2.9.2) [PASS]",
            "   - gnustep: Not installed [FAIL]",
            "2. GNUstep Configuration Status:",
            "   - gnustep-config --objc-flags: Valid output "
            "(-I/usr/local/GNUstep/System/Library/Headers -fobjc-runtime=gnustep-2.0) [PASS]",
            "3. Environment Variable Status:",
            "   - GNUSTEP_SYSTEM_ROOT: Set to /usr/local/GNUstep/System [PASS]",
            "4. Test Programs Status:",
            "   - Command-line test (hello.m): Compiled and ran successfully [PASS]",
            "   - GUI test (gui.m): Compiled successfully [PASS]",
            "     Note: Run '/tmp/gui' manually to verify GUI (requires X11).",
            "5. Optional Tools Status:",
            "   - gorm: Installed [PASS]",
            "   - projectcenter: Not installed [FAIL]",
        ]

    def test_identical_snapshots_render_identically(self, healthy: SystemSnapshot) -> None:
        copy = SystemSnapshot.model_validate(healthy.model_dump())

        assert build_report(healthy).render_lines() == build_report(copy).render_lines()

    def test_failed_config_query(self, healthy: SystemSnapshot) -> None:
        snapshot = healthy.model_copy(update={"objc_flags": None})

        lines = build_report(snapshot).render_lines()

        assert "   - gnustep-config --objc-flags: Command failed [FAIL]" in lines

    def test_output_without_marker_is_invalid(self, healthy: SystemSnapshot) -> None:
        snapshot = healthy.model_copy(update={"objc_flags": "-O2"})

        lines = build_report(snapshot).render_lines()

        assert "   - gnustep-config --objc-flags: Empty or invalid output [FAIL]" in lines

    def test_counts(self, healthy: SystemSnapshot) -> None:
        report = build_report(healthy)

        assert report.passed == 6
        assert report.failed == 2
        assert not report.all_passed

    def test_empty_host(self) -> None:
        snapshot = SystemSnapshot(hello_binary="/tmp/hello", gui_binary="/tmp/gui")

        lines = build_report(snapshot).render_lines()

        assert "   - GNUSTEP_SYSTEM_ROOT: Not set [FAIL]" in lines
        assert "   - Command-line test (hello.m): Not compiled [FAIL]" in lines
        assert "   - GUI test (gui.m): Not compiled [FAIL]" in lines
