"""Reporting: verbose terminal output and result export."""

from .export import results_to_dataframe, results_to_dict, save_results_csv, save_results_json
from .terminal_reporter import TerminalReporter

__all__ = [
    "TerminalReporter",
    "results_to_dataframe",
    "results_to_dict",
    "save_results_csv",
    "save_results_json",
]
