from pathlib import Path

from pydantic import BaseModel

from gnustep_setup.domain.entities.verification_report import VerificationReport


class ProvisionResult(BaseModel):
    exit_code: int
    log_path: Path
    report: VerificationReport | None = None
    failure: str | None = None
    completed_steps: list[str] = []

    @property
    def ok(self) -> bool:
        return self.exit_code == 0
