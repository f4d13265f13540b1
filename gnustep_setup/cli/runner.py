from rich.prompt import Prompt

from gnustep_setup.application.dto.provision_result import ProvisionResult
from gnustep_setup.application.dto.provision_settings import ProvisionSettings
from gnustep_setup.application.provisioner import Provisioner
from gnustep_setup.application.use_cases.generate_report import GenerateReport
from gnustep_setup.cli.formatters.progress_formatter import RichProgress, err_console
from gnustep_setup.cli.formatters.report_formatter import format_report_table
from gnustep_setup.cli.formatters.result_formatter import format_result
from gnustep_setup.cli.theme import theme
from gnustep_setup.cli.utils import is_yes
from gnustep_setup.domain.entities.verification_report import VerificationReport
from gnustep_setup.infrastructure.persistence.run_log import RunLog
from gnustep_setup.infrastructure.pkg.pkg_manager import PkgManager
from gnustep_setup.infrastructure.process.supervised_runner import SupervisedCommandRunner
from gnustep_setup.infrastructure.system.host_probe import HostProbe
from gnustep_setup.infrastructure.toolchain.gnustep_toolchain import GNUstepToolchain

REPORT_LOG_PREFIX = "gnustep_report"


def confirm_continue(question: str) -> bool:
    """Ask once; anything but an answer starting with y declines."""
    try:
        answer = Prompt.ask(
            f"[{theme.PROMPT}]{question} [y/N][/]",
            default="",
            show_default=False,
            console=err_console,
        )
    except EOFError:
        return False
    return is_yes(answer)


async def install_async(settings: ProvisionSettings) -> ProvisionResult:
    runner = SupervisedCommandRunner(RichProgress(err_console))
    probe = HostProbe(runner)
    log_path = RunLog.path_for(settings.log_dir, settings.log_prefix)

    with RunLog(log_path, system=probe.os_identity()):
        provisioner = Provisioner(settings, runner, probe, log_path, confirm=confirm_continue)
        result = await provisioner.run_exclusive()

    format_result(err_console, result)
    return result


async def report_async(settings: ProvisionSettings) -> VerificationReport:
    runner = SupervisedCommandRunner(RichProgress(err_console))
    probe = HostProbe(runner)
    log_path = RunLog.path_for(settings.log_dir, REPORT_LOG_PREFIX)

    with RunLog(log_path, system=probe.os_identity()):
        reporter = GenerateReport(
            PkgManager(runner),
            GNUstepToolchain(runner, settings.timeouts.verify),
            probe,
            settings,
        )
        report = await reporter.execute(log_path)

    format_report_table(err_console, report)
    return report
