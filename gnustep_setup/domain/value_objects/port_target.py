from pydantic import BaseModel


class PortTarget(BaseModel, frozen=True):
    """A package and its origin inside the ports tree (category/name)."""

    package: str
    origin: str


# Dependencies first: every entry depends on the ones before it.
GNUSTEP_REBUILD_CHAIN: tuple[PortTarget, ...] = (
    PortTarget(package="gnustep-make", origin="devel/gnustep-make"),
    PortTarget(package="gnustep-base", origin="lang/gnustep-base"),
    PortTarget(package="gnustep-gui", origin="x11-toolkits/gnustep-gui"),
    PortTarget(package="gnustep-back", origin="x11-toolkits/gnustep-back"),
    PortTarget(package="gnustep", origin="lang/gnustep"),
)
