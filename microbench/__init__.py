"""Micro-benchmark execution engine.

Provides:
- benchmarks (Benchmark, SetupResult)
- configs (Profile presets and registry, RunOptions, ConfigManager)
- schema (RoundResult, BenchmarkResult)
- runners (run_benchmark, run_all and their async variants)
- isolation (setup/shutdown on a worker process)
- utils.compare (best-of selection, ranking, speed ratios)
- reporting (TerminalReporter, DataFrame/CSV/JSON export)
"""

from microbench.benchmarks import Benchmark, SetupResult
from microbench.configs import ConfigManager, RunOptions
from microbench.configs.profiles import (
    DEFAULT_PROFILE,
    FAST,
    HEAVY,
    INSTANT,
    NORMAL,
    Profile,
    get_profile,
    list_profiles,
    register_profile,
    validate_profile,
)
from microbench.isolation import IsolatedBenchmark, IsolateSetupHandle, run_setup_on_worker
from microbench.reporting import (
    TerminalReporter,
    results_to_dataframe,
    save_results_csv,
    save_results_json,
)
from microbench.runners import arun_all, arun_benchmark, run_all, run_benchmark
from microbench.schema import BenchmarkResult, RoundResult
from microbench.utils.compare import (
    SpeedComparison,
    best_result,
    best_round,
    compare_results,
    rank_results,
)
from microbench.utils.errors import (
    ConfigError,
    MicrobenchError,
    ProfileValidationError,
    WorkerError,
)

__version__ = "1.0.0"

__all__ = [
    "Benchmark",
    "SetupResult",
    "Profile",
    "INSTANT",
    "FAST",
    "NORMAL",
    "HEAVY",
    "DEFAULT_PROFILE",
    "get_profile",
    "list_profiles",
    "register_profile",
    "validate_profile",
    "RunOptions",
    "ConfigManager",
    "RoundResult",
    "BenchmarkResult",
    "run_benchmark",
    "arun_benchmark",
    "run_all",
    "arun_all",
    "IsolatedBenchmark",
    "IsolateSetupHandle",
    "run_setup_on_worker",
    "SpeedComparison",
    "best_round",
    "best_result",
    "rank_results",
    "compare_results",
    "TerminalReporter",
    "results_to_dataframe",
    "save_results_csv",
    "save_results_json",
    "MicrobenchError",
    "ConfigError",
    "ProfileValidationError",
    "WorkerError",
]
