from gnustep_setup.infrastructure.toolchain.gnustep_toolchain import GNUstepToolchain
from gnustep_setup.infrastructure.toolchain.objc_sources import (
    EXPECTED_GREETING,
    GUI_SOURCE,
    HELLO_SOURCE,
)

__all__ = ["EXPECTED_GREETING", "GNUstepToolchain", "GUI_SOURCE", "HELLO_SOURCE"]
