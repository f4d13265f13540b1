from pydantic import BaseModel

from gnustep_setup.domain.value_objects.report_types import CheckStatus, ReportSection

TITLE = "GNUstep Installation Verification Report"
RULE = "------------------------"


class VerificationReport(BaseModel, frozen=True):
    sections: list[ReportSection] = []

    def render_lines(self) -> list[str]:
        """Report body, one string per line."""
        lines: list[str] = []
        for number, section in enumerate(self.sections, 1):
            lines.append(f"{number}. {section.title}:")
            for line in section.lines:
                lines.extend(line.render())
        return lines

    @property
    def passed(self) -> int:
        return sum(1 for s in self.sections for line in s.lines if line.status == CheckStatus.PASS)

    @property
    def failed(self) -> int:
        return sum(1 for s in self.sections for line in s.lines if line.status == CheckStatus.FAIL)

    @property
    def all_passed(self) -> bool:
        return self.failed == 0
