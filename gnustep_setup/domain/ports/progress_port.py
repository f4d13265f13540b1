from abc import ABC, abstractmethod

SPINNER_FRAMES = ("|", "/", "-", "\\")


class ProgressPort(ABC):
    """Interactive liveness display for a running command."""

    @abstractmethod
    def frame(self, label: str, glyph: str) -> None:
        """Render one spinner frame next to the label."""

    @abstractmethod
    def done(self, label: str) -> None:
        """Render the final state once the command is no longer alive."""


class NullProgress(ProgressPort):
    def frame(self, label: str, glyph: str) -> None:
        pass

    def done(self, label: str) -> None:
        pass
