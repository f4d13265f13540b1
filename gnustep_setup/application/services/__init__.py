from gnustep_setup.application.services.escalation import EnsureOutcome, Escalator
from gnustep_setup.application.services.ports_rebuilder import PORT_BUILD_DEPS, PortsRebuilder

__all__ = [
    "EnsureOutcome",
    "Escalator",
    "PORT_BUILD_DEPS",
    "PortsRebuilder",
]
