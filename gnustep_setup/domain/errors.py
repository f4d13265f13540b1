class ProvisioningError(Exception):
    """Base class for failures that end a provisioning run.

    ``label`` and ``command`` describe the attempted action, when there was one.
    """

    def __init__(self, message: str, *, label: str | None = None, command: str | None = None):
        super().__init__(message)
        self.message = message
        self.label = label
        self.command = command


class PreconditionFailure(ProvisioningError):
    """Host is not fit for provisioning. Fatal without retry."""


class UserDeclined(PreconditionFailure):
    """The operator answered no to the unsupported-host prompt."""


class TransientFailure(ProvisioningError):
    """An operation failed again after its single cleanup-and-retry."""


class IntegrityFailure(ProvisioningError):
    """An expected file, variable or tool output is still missing after the fallback."""
