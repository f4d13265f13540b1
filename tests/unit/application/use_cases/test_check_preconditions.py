from unittest.mock import MagicMock

import pytest
from fakes import FakeProbe

from gnustep_setup.application.dto.provision_settings import ProvisionSettings
from gnustep_setup.application.use_cases.check_preconditions import CheckPreconditions
from gnustep_setup.domain.errors import PreconditionFailure, UserDeclined


class TestCheckPreconditions:
    async def test_healthy_host_passes(
        self, fake_probe: FakeProbe, settings: ProvisionSettings
    ) -> None:
        confirm = MagicMock()

        await CheckPreconditions(fake_probe, settings, confirm).execute()

        confirm.assert_not_called()

    async def test_requires_root(self, fake_probe: FakeProbe, settings: ProvisionSettings) -> None:
        fake_probe.root = False

        with pytest.raises(PreconditionFailure, match="root"):
            await CheckPreconditions(fake_probe, settings).execute()

    async def test_unexpected_os_asks_once_and_continues_on_yes(
        self, fake_probe: FakeProbe, settings: ProvisionSettings
    ) -> None:
        fake_probe.identity = "FreeBSD 14.1-RELEASE"
        confirm = MagicMock(return_value=True)

        await CheckPreconditions(fake_probe, settings, confirm).execute()

        confirm.assert_called_once_with("Continue?")

    async def test_unexpected_os_declined(
        self, fake_probe: FakeProbe, settings: ProvisionSettings
    ) -> None:
        fake_probe.identity = "FreeBSD 14.1-RELEASE"

        with pytest.raises(UserDeclined):
            await CheckPreconditions(fake_probe, settings, MagicMock(return_value=False)).execute()

    async def test_assume_yes_skips_prompt(
        self, fake_probe: FakeProbe, settings: ProvisionSettings
    ) -> None:
        fake_probe.identity = "FreeBSD 14.1-RELEASE"
        confirm = MagicMock()
        settings = settings.model_copy(update={"assume_yes": True})

        await CheckPreconditions(fake_probe, settings, confirm).execute()

        confirm.assert_not_called()

    async def test_missing_x11_only_warns(
        self, fake_probe: FakeProbe, settings: ProvisionSettings, log_messages: list[str]
    ) -> None:
        fake_probe.x11 = False

        await CheckPreconditions(fake_probe, settings).execute()

        assert "WARNING: X11 not running. GUI applications may fail." in log_messages

    async def test_no_network_fails(
        self, fake_probe: FakeProbe, settings: ProvisionSettings
    ) -> None:
        fake_probe.network = False

        with pytest.raises(PreconditionFailure, match="network"):
            await CheckPreconditions(fake_probe, settings).execute()

    async def test_low_disk_fails(self, fake_probe: FakeProbe, settings: ProvisionSettings) -> None:
        fake_probe.free_kb = 511 * 1024

        with pytest.raises(PreconditionFailure, match="512 MB"):
            await CheckPreconditions(fake_probe, settings).execute()
