from gnustep_setup.application.dto.provision_result import ProvisionResult
from gnustep_setup.application.dto.provision_settings import ProvisionSettings, Timeouts

__all__ = ["ProvisionResult", "ProvisionSettings", "Timeouts"]
