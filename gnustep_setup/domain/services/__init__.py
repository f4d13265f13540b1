from gnustep_setup.domain.services.report_builder import (
    INCLUDE_FLAG_MARKER,
    OBJC_FLAGS_QUERY,
    build_report,
    has_include_flags,
)
from gnustep_setup.domain.services.shell_env import (
    GNUSTEP_VARIABLES,
    SYSTEM_ROOT_VAR,
    apply_to_environ,
    render_fish,
    render_posix,
)

__all__ = [
    "GNUSTEP_VARIABLES",
    "INCLUDE_FLAG_MARKER",
    "OBJC_FLAGS_QUERY",
    "SYSTEM_ROOT_VAR",
    "apply_to_environ",
    "build_report",
    "has_include_flags",
    "render_fish",
    "render_posix",
]
