from pydantic import BaseModel


class PackageState(BaseModel, frozen=True):
    name: str
    installed: bool
    version: str | None = None


class SystemSnapshot(BaseModel, frozen=True):
    """Observed state of the host, as read for the verification report.

    ``objc_flags`` is None when ``gnustep-config`` itself failed.
    """

    packages: list[PackageState] = []
    objc_flags: str | None = None
    system_root: str | None = None
    hello_binary: str
    hello_binary_exists: bool = False
    hello_output_ok: bool = False
    gui_binary: str
    gui_binary_exists: bool = False
    tools: dict[str, bool] = {}
