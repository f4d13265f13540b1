from gnustep_setup.infrastructure.system.host_probe import HostProbe
from gnustep_setup.infrastructure.system.shell_loader import load_script_environment, source_into

__all__ = ["HostProbe", "load_script_environment", "source_into"]
