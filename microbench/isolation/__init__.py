"""Worker-isolated setup/shutdown coordination."""

from .worker import IsolatedBenchmark, IsolateSetupHandle, run_setup_on_worker

__all__ = ["IsolatedBenchmark", "IsolateSetupHandle", "run_setup_on_worker"]
