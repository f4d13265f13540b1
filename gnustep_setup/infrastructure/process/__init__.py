from gnustep_setup.infrastructure.process.supervised_runner import (
    FRAME_INTERVAL_S,
    OUTPUT_CHANNEL,
    SupervisedCommandRunner,
)

__all__ = ["FRAME_INTERVAL_S", "OUTPUT_CHANNEL", "SupervisedCommandRunner"]
