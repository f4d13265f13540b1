from pathlib import Path

from pydantic import BaseModel

DEFAULT_GNUSTEP_ROOT = Path("/usr/local/GNUstep")


class GNUstepLayout(BaseModel, frozen=True):
    """Filesystem layout of a GNUstep installation, derived from one root."""

    root: Path = DEFAULT_GNUSTEP_ROOT

    @property
    def system_root(self) -> Path:
        return self.root / "System"

    @property
    def tools(self) -> Path:
        return self.system_root / "Tools"

    @property
    def libraries(self) -> Path:
        return self.system_root / "Libraries"

    @property
    def headers(self) -> Path:
        return self.system_root / "Headers"

    @property
    def man(self) -> Path:
        return self.system_root / "Documentation" / "man"

    @property
    def makefiles(self) -> Path:
        return self.system_root / "Library" / "Makefiles"

    @property
    def gnustep_sh(self) -> Path:
        return self.makefiles / "GNUstep.sh"

    @property
    def foundation_header(self) -> Path:
        return self.system_root / "Library" / "Headers" / "Foundation" / "NSString.h"
