from pathlib import Path

from loguru import logger

from gnustep_setup.domain.errors import IntegrityFailure
from gnustep_setup.domain.services.shell_env import render_fish
from gnustep_setup.domain.value_objects.gnustep_layout import GNUstepLayout
from gnustep_setup.infrastructure.persistence.atomic_io import atomic_write


class ConfigureFish:
    def __init__(self, layout: GNUstepLayout, config_path: Path) -> None:
        self.layout = layout
        self.config_path = config_path

    async def execute(self) -> Path:
        logger.info("Configuring GNUstep environment for Fish...")
        try:
            await atomic_write(self.config_path, render_fish(self.layout))
        except OSError as e:
            raise IntegrityFailure(f"Failed to create Fish configuration: {e}") from e
        logger.info("Fish configuration created at {}", self.config_path)
        logger.info(
            "Note: For non-root users, copy {} to ~/.config/fish/conf.d/ and source it.",
            self.config_path,
        )
        return self.config_path
