from gnustep_setup.application.use_cases.check_preconditions import (
    CheckPreconditions,
    ConfirmCallback,
)
from gnustep_setup.application.use_cases.configure_fish import ConfigureFish
from gnustep_setup.application.use_cases.generate_report import GenerateReport
from gnustep_setup.application.use_cases.install_base_tools import InstallBaseTools
from gnustep_setup.application.use_cases.install_bash import InstallBash
from gnustep_setup.application.use_cases.install_gnustep import InstallGNUstep
from gnustep_setup.application.use_cases.install_optional_tools import InstallOptionalTools
from gnustep_setup.application.use_cases.run_smoke_tests import RunSmokeTests
from gnustep_setup.application.use_cases.update_system import UpdateSystem
from gnustep_setup.application.use_cases.verify_toolchain import VerifyToolchain

__all__ = [
    "CheckPreconditions",
    "ConfigureFish",
    "ConfirmCallback",
    "GenerateReport",
    "InstallBaseTools",
    "InstallBash",
    "InstallGNUstep",
    "InstallOptionalTools",
    "RunSmokeTests",
    "UpdateSystem",
    "VerifyToolchain",
]
