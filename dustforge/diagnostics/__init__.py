"""Simulation and estimation tools."""

from .economy_simulator import (
    ComparisonResult,
    EconomySimulator,
    RunOutcome,
    RunResult,
    SimStats,
    SimulationResult,
    compare_strategies,
    simulate,
    simulate_multi_expansion,
)
from .golden_analysis import GoldenAnalysis, calc_golden_pack_analysis

__all__ = [
    "ComparisonResult",
    "EconomySimulator",
    "GoldenAnalysis",
    "RunOutcome",
    "RunResult",
    "SimStats",
    "SimulationResult",
    "calc_golden_pack_analysis",
    "compare_strategies",
    "simulate",
    "simulate_multi_expansion",
]
