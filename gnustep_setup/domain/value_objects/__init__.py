from gnustep_setup.domain.value_objects.command_spec import DEFAULT_TIMEOUT_S, CommandSpec
from gnustep_setup.domain.value_objects.gnustep_layout import DEFAULT_GNUSTEP_ROOT, GNUstepLayout
from gnustep_setup.domain.value_objects.port_target import GNUSTEP_REBUILD_CHAIN, PortTarget
from gnustep_setup.domain.value_objects.report_types import CheckStatus, ReportLine, ReportSection
from gnustep_setup.domain.value_objects.verdict import Verdict

__all__ = [
    "CheckStatus",
    "CommandSpec",
    "DEFAULT_GNUSTEP_ROOT",
    "DEFAULT_TIMEOUT_S",
    "GNUSTEP_REBUILD_CHAIN",
    "GNUstepLayout",
    "PortTarget",
    "ReportLine",
    "ReportSection",
    "Verdict",
]
