from gnustep_setup.domain.entities.system_snapshot import SystemSnapshot
from gnustep_setup.domain.entities.verification_report import VerificationReport
from gnustep_setup.domain.value_objects.report_types import CheckStatus, ReportLine, ReportSection

OBJC_FLAGS_QUERY = "gnustep-config --objc-flags"
INCLUDE_FLAG_MARKER = "-I"


def has_include_flags(output: str | None, marker: str = INCLUDE_FLAG_MARKER) -> bool:
    return bool(output) and marker in (output or "")


def build_report(snapshot: SystemSnapshot) -> VerificationReport:
    """Turn a snapshot into report sections. Pure: same snapshot, same report."""
    packages = ReportSection(
        title="GNUstep Packages Status",
        lines=[
            ReportLine(
                subject=p.name,
                detail=f"Installed (Version {p.version or 'unknown'})",
                status=CheckStatus.PASS,
            )
            if p.installed
            else ReportLine(subject=p.name, detail="Not installed", status=CheckStatus.FAIL)
            for p in snapshot.packages
        ],
    )

    if snapshot.objc_flags is None:
        config_line = ReportLine(
            subject=OBJC_FLAGS_QUERY, detail="Command failed", status=CheckStatus.FAIL
        )
    elif has_include_flags(snapshot.objc_flags):
        config_line = ReportLine(
            subject=OBJC_FLAGS_QUERY,
            detail=f"Valid output ({snapshot.objc_flags.strip()})",
            status=CheckStatus.PASS,
        )
    else:
        config_line = ReportLine(
            subject=OBJC_FLAGS_QUERY, detail="Empty or invalid output", status=CheckStatus.FAIL
        )
    configuration = ReportSection(title="GNUstep Configuration Status", lines=[config_line])

    if snapshot.system_root:
        env_line = ReportLine(
            subject="GNUSTEP_SYSTEM_ROOT",
            detail=f"Set to {snapshot.system_root}",
            status=CheckStatus.PASS,
        )
    else:
        env_line = ReportLine(
            subject="GNUSTEP_SYSTEM_ROOT", detail="Not set", status=CheckStatus.FAIL
        )
    environment = ReportSection(title="Environment Variable Status", lines=[env_line])

    hello = "Command-line test (hello.m)"
    if not snapshot.hello_binary_exists:
        hello_line = ReportLine(subject=hello, detail="Not compiled", status=CheckStatus.FAIL)
    elif snapshot.hello_output_ok:
        hello_line = ReportLine(
            subject=hello, detail="Compiled and ran successfully", status=CheckStatus.PASS
        )
    else:
        hello_line = ReportLine(
            subject=hello, detail="Compiled but failed to run", status=CheckStatus.FAIL
        )

    gui = "GUI test (gui.m)"
    if snapshot.gui_binary_exists:
        gui_line = ReportLine(
            subject=gui,
            detail="Compiled successfully",
            status=CheckStatus.PASS,
            note=f"Run '{snapshot.gui_binary}' manually to verify GUI (requires X11).",
        )
    else:
        gui_line = ReportLine(subject=gui, detail="Not compiled", status=CheckStatus.FAIL)
    programs = ReportSection(title="Test Programs Status", lines=[hello_line, gui_line])

    tools = ReportSection(
        title="Optional Tools Status",
        lines=[
            ReportLine(
                subject=name,
                detail="Installed" if present else "Not installed",
                status=CheckStatus.PASS if present else CheckStatus.FAIL,
            )
            for name, present in snapshot.tools.items()
        ],
    )

    return VerificationReport(sections=[packages, configuration, environment, programs, tools])
