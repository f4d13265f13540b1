from abc import ABC, abstractmethod
from pathlib import Path


class SystemProbePort(ABC):
    """Read-only questions about the host."""

    @abstractmethod
    def is_root(self) -> bool: ...

    @abstractmethod
    def os_identity(self) -> str:
        """Kernel name and release, like ``uname -sr``."""

    @abstractmethod
    async def is_x11_running(self) -> bool: ...

    @abstractmethod
    async def has_network(self, host: str) -> bool: ...

    @abstractmethod
    def free_disk_kb(self, path: Path) -> int: ...

    @abstractmethod
    def which(self, command: str) -> str | None: ...

    @abstractmethod
    def file_exists(self, path: Path) -> bool: ...

    @abstractmethod
    def dir_exists(self, path: Path) -> bool: ...

    @abstractmethod
    def file_contains(self, path: Path, text: str) -> bool: ...

    @abstractmethod
    def env(self, name: str) -> str | None: ...
