"""Custom exceptions for microbench.

Errors raised by user benchmarks (setup, job, teardown, shutdown) are never
wrapped: they propagate to the caller unchanged. The classes below cover the
library's own failure modes.
"""


class MicrobenchError(Exception):
    """Base exception for all microbench errors."""

    pass


class ConfigError(MicrobenchError):
    """Raised when a run configuration is invalid or a config file cannot be used."""

    pass


class ProfileValidationError(MicrobenchError):
    """Raised when a profile carries counts the engine cannot measure with."""

    pass


class WorkerError(MicrobenchError):
    """Raised when an isolation worker reports that setup or shutdown failed.

    Attributes:
        stage: Lifecycle stage that failed on the worker ("setup" or "shutdown")
        worker_traceback: Formatted traceback captured inside the worker
    """

    def __init__(self, stage: str, worker_traceback: str):
        super().__init__(f"Isolation worker failed during {stage}:\n{worker_traceback}")
        self.stage = stage
        self.worker_traceback = worker_traceback
