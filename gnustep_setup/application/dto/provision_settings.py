from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from gnustep_setup.domain.value_objects.gnustep_layout import DEFAULT_GNUSTEP_ROOT, GNUstepLayout
from gnustep_setup.domain.value_objects.port_target import GNUSTEP_REBUILD_CHAIN, PortTarget


class Timeouts(BaseModel, frozen=True):
    """Per-operation timeouts, in seconds."""

    update: float = Field(default=60, gt=0)
    upgrade: float = Field(default=300, gt=0)
    install: float = Field(default=60, gt=0)
    retry_install: float = Field(default=120, gt=0)
    bulk_install: float = Field(default=120, gt=0)
    port_deps: float = Field(default=300, gt=0)
    delete: float = Field(default=60, gt=0)
    clone: float = Field(default=60, gt=0)
    build: float = Field(default=7200, gt=0)
    verify: float = Field(default=10, gt=0)


class ProvisionSettings(BaseModel):
    """Everything a provisioning run needs to know about paths, hosts and packages."""

    # Logging
    log_dir: Path = Path("/tmp")
    log_prefix: str = "gnustep_install"
    lock_path: Path = Path("/tmp/gnustep_setup.lock")

    # Host checks
    expected_os: str = "GhostBSD"
    network_host: str = "freebsd.org"
    disk_path: Path = Path("/")
    min_free_disk_mb: int = Field(default=512, gt=0)
    assume_yes: bool = False

    # GNUstep layout and shell configuration
    gnustep_root: Path = DEFAULT_GNUSTEP_ROOT
    profile_path: Path = Path("/etc/profile")
    fish_config_path: Path = Path("/root/.config/fish/conf.d/gnustep.fish")

    # Packages
    editor_packages: list[str] = ["pluma", "vim"]
    objc_runtime_package: str = "libobjc2"
    objc_runtime_library: Path = Path("/usr/local/lib/libobjc.so")
    dev_tools_glob: str = "GhostBSD*-dev"
    llvm_package: str = "llvm19"
    gnustep_packages: list[str] = [
        "gnustep",
        "gnustep-make",
        "gnustep-base",
        "gnustep-gui",
        "gnustep-back",
    ]
    shell_package: str = "bash"
    optional_tools: list[str] = ["gorm", "projectcenter"]
    rebuild_chain: list[PortTarget] = list(GNUSTEP_REBUILD_CHAIN)

    # Ports tree
    ports_dir: Path = Path("/usr/ports")
    ports_url: str = "https://github.com/ghostbsd/ghostbsd-ports.git"
    build_log_dir: Path = Path("/tmp")

    # Smoke tests
    smoke_dir: Path = Path("/tmp")

    timeouts: Timeouts = Timeouts()

    @field_validator("gnustep_root", "log_dir", mode="before")
    @classmethod
    def validate_absolute(cls, v: Path | str) -> Path:
        """Paths written into shell files must be absolute."""
        path = Path(v) if isinstance(v, str) else v
        if not path.is_absolute():
            raise ValueError(f"must be an absolute path: {path}")
        return path

    @property
    def layout(self) -> GNUstepLayout:
        return GNUstepLayout(root=self.gnustep_root)

    @property
    def min_free_disk_kb(self) -> int:
        return self.min_free_disk_mb * 1024

    @property
    def report_packages(self) -> list[str]:
        """Packages listed in the report, dependencies first."""
        return [t.package for t in self.rebuild_chain]
