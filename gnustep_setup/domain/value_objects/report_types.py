from enum import Enum

from pydantic import BaseModel


class CheckStatus(str, Enum):
    PASS = "PASS"
    FAIL = "FAIL"


class ReportLine(BaseModel, frozen=True):
    subject: str
    detail: str
    status: CheckStatus
    note: str | None = None

    def render(self) -> list[str]:
        lines = [f"   - {self.subject}: {self.detail} [{self.status.value}]"]
        if self.note:
            lines.append(f"     Note: {self.note}")
        return lines


class ReportSection(BaseModel, frozen=True):
    title: str
    lines: list[ReportLine] = []
