from gnustep_setup.domain.ports.command_runner_port import CommandRunnerPort, InvocationResult
from gnustep_setup.domain.ports.progress_port import SPINNER_FRAMES, NullProgress, ProgressPort
from gnustep_setup.domain.ports.system_probe_port import SystemProbePort

__all__ = [
    # Command runner port
    "CommandRunnerPort",
    "InvocationResult",
    # Progress port
    "NullProgress",
    "ProgressPort",
    "SPINNER_FRAMES",
    # System probe port
    "SystemProbePort",
]
