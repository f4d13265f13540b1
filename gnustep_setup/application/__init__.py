from gnustep_setup.application.provisioner import Provisioner, recovery_hints

__all__ = [
    "Provisioner",
    "recovery_hints",
]
