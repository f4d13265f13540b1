from gnustep_setup.domain.entities.invocation import InvocationState, SupervisedInvocation
from gnustep_setup.domain.entities.system_snapshot import PackageState, SystemSnapshot
from gnustep_setup.domain.entities.verification_report import VerificationReport

__all__ = [
    "InvocationState",
    "PackageState",
    "SupervisedInvocation",
    "SystemSnapshot",
    "VerificationReport",
]
