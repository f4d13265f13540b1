from gnustep_setup.cli.formatters.progress_formatter import RichProgress, err_console
from gnustep_setup.cli.formatters.report_formatter import format_report_table
from gnustep_setup.cli.formatters.result_formatter import format_result

__all__ = [
    "RichProgress",
    "err_console",
    "format_report_table",
    "format_result",
]
