from enum import Enum


class Verdict(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    TIMED_OUT = "timed_out"

    @property
    def ok(self) -> bool:
        """Only SUCCESS counts as success; a timeout is a failure."""
        return self is Verdict.SUCCESS
