"""DustForge public API."""

from .config import SimulatorConfig
from .diagnostics import (
    EconomySimulator,
    calc_golden_pack_analysis,
    compare_strategies,
    simulate,
    simulate_multi_expansion,
)
from .domain import CollectionState, Expansion, empty_collection_state

__all__ = [
    "CollectionState",
    "EconomySimulator",
    "Expansion",
    "SimulatorConfig",
    "calc_golden_pack_analysis",
    "compare_strategies",
    "empty_collection_state",
    "simulate",
    "simulate_multi_expansion",
]
