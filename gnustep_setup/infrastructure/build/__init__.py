from gnustep_setup.infrastructure.build.ports_tree import (
    DEFAULT_PORTS_DIR,
    DEFAULT_PORTS_URL,
    PortsTree,
)

__all__ = ["DEFAULT_PORTS_DIR", "DEFAULT_PORTS_URL", "PortsTree"]
