"""Shell environment for a GNUstep installation.

Every variable is derived from the system root. Search-path variables are
prepended to whatever the shell already has.
"""

from collections.abc import MutableMapping
from dataclasses import dataclass

from gnustep_setup.domain.value_objects.gnustep_layout import GNUstepLayout

SYSTEM_ROOT_VAR = "GNUSTEP_SYSTEM_ROOT"


@dataclass(frozen=True)
class EnvVariable:
    name: str
    suffix: str
    search_path: bool


# Relative to GNUSTEP_SYSTEM_ROOT.
GNUSTEP_VARIABLES: tuple[EnvVariable, ...] = (
    EnvVariable("PATH", "Tools", search_path=True),
    EnvVariable("LD_LIBRARY_PATH", "Libraries", search_path=True),
    EnvVariable("LIBRARY_PATH", "Libraries", search_path=True),
    EnvVariable("CPATH", "Headers", search_path=True),
    EnvVariable("MANPATH", "Documentation/man", search_path=True),
    EnvVariable("GNUSTEP_MAKEFILES", "Library/Makefiles", search_path=False),
)


def render_fish(layout: GNUstepLayout) -> str:
    lines = [f"set -gx {SYSTEM_ROOT_VAR} {layout.system_root}"]
    for var in GNUSTEP_VARIABLES:
        value = f"${SYSTEM_ROOT_VAR}/{var.suffix}"
        if var.search_path:
            value += f" ${var.name}"
        lines.append(f"set -gx {var.name} {value}")
    return "\n".join(lines) + "\n"


def render_posix(layout: GNUstepLayout) -> str:
    lines = [f"export {SYSTEM_ROOT_VAR}={layout.system_root}"]
    for var in GNUSTEP_VARIABLES:
        value = f"${SYSTEM_ROOT_VAR}/{var.suffix}"
        if var.search_path:
            value += f":${var.name}"
        lines.append(f"export {var.name}={value}")
    return "\n".join(lines) + "\n"


def apply_to_environ(layout: GNUstepLayout, environ: MutableMapping[str, str]) -> None:
    """Set the GNUstep variables in ``environ`` the way the rendered files would."""
    root = str(layout.system_root)
    environ[SYSTEM_ROOT_VAR] = root
    for var in GNUSTEP_VARIABLES:
        value = f"{root}/{var.suffix}"
        existing = environ.get(var.name)
        if var.search_path and existing:
            value = f"{value}:{existing}"
        environ[var.name] = value
