from loguru import logger

from gnustep_setup.application.services.escalation import Escalator
from gnustep_setup.infrastructure.pkg.pkg_manager import PkgManager


class UpdateSystem:
    def __init__(
        self,
        pkg: PkgManager,
        escalator: Escalator,
        update_timeout_s: float = 60,
        upgrade_timeout_s: float = 300,
    ) -> None:
        self.pkg = pkg
        self.escalator = escalator
        self.update_timeout_s = update_timeout_s
        self.upgrade_timeout_s = upgrade_timeout_s

    async def execute(self) -> None:
        logger.info("Updating package repositories...")
        self.escalator.check(await self.pkg.update(self.update_timeout_s))
        logger.info("Upgrading packages...")
        self.escalator.check(await self.pkg.upgrade(self.upgrade_timeout_s))
