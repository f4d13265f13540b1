from rich.console import Console
from rich.live import Live
from rich.text import Text

from gnustep_setup.cli.theme import theme
from gnustep_setup.domain.ports.progress_port import ProgressPort

# Status stream: spinner frames and terminal log lines, never stdout.
err_console = Console(stderr=True)


class RichProgress(ProgressPort):
    """Renders ``<label> <glyph>`` on one line and finishes with ``<label> Done``.

    Frames are transient display state; only the final line stays on screen.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or err_console
        self._live: Live | None = None

    def frame(self, label: str, glyph: str) -> None:
        text = Text.assemble(label, " ", (glyph, theme.SPINNER))
        if self._live is None:
            self._live = Live(
                text,
                console=self.console,
                auto_refresh=False,
                redirect_stdout=False,
                redirect_stderr=False,
            )
            self._live.start()
        self._live.update(text, refresh=True)

    def done(self, label: str) -> None:
        text = Text.assemble(label, " ", ("Done", theme.SPINNER_DONE))
        if self._live is None:
            self.console.print(text)
            return
        self._live.update(text, refresh=True)
        self._live.stop()
        self._live = None
