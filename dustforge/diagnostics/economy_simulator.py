"""Monte-Carlo simulation of pack opening until a collection is complete."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from ..config import SimulatorConfig
from ..domain.collection import CollectionState
from ..domain.economy import DustWallet, add_normal_card, craft_missing, disenchant_value
from ..domain.exceptions import InvalidCollectionState
from ..domain.packs import PityState, generate_pack
from ..domain.rng import Mulberry32, RandomSource, seed_from_state, seed_from_states
from ..validators import validate_collection_state
from .golden_analysis import GoldenAnalysis, calc_golden_pack_analysis

logger = logging.getLogger(__name__)


class RunOutcome(str, Enum):
    COMPLETED = "completed"
    CAP_EXCEEDED = "cap_exceeded"


@dataclass(frozen=True, slots=True)
class RunResult:
    packs_opened: int
    dust_leftover: int
    dust_generated: int
    dust_spent_crafting: int
    outcome: RunOutcome = RunOutcome.COMPLETED

    @property
    def converged(self) -> bool:
        return self.outcome is RunOutcome.COMPLETED


@dataclass(frozen=True, slots=True)
class SimStats:
    runs: int
    mean: int
    median: int
    min: int
    max: int
    p25: int
    p75: int
    capped_runs: int = 0


@dataclass(frozen=True, slots=True)
class SimulationResult:
    expansion: str
    runs: int
    mean: int
    median: int
    min: int
    max: int
    p25: int
    p75: int
    avg_dust_left: int
    avg_dust_generated: int
    avg_dust_spent_crafting: int
    already_complete: bool = False
    capped_runs: int = 0


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Buying packs set by set versus spreading them over a shared dust pool."""

    per_set_total: int
    multi_pack_stats: SimStats
    golden_analysis: GoldenAnalysis
    per_expansion: Sequence[SimulationResult] = field(default_factory=tuple)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _average(values: Sequence[int]) -> int:
    return _round_half_up(sum(values) / len(values))


def _summarise(packs: Sequence[int], capped_runs: int = 0) -> SimStats:
    """Order statistics use plain indexing: even run counts report the upper median."""
    runs = len(packs)
    ordered = sorted(packs)
    return SimStats(
        runs=runs,
        mean=_average(ordered),
        median=ordered[runs // 2],
        min=ordered[0],
        max=ordered[-1],
        p25=ordered[math.floor(runs * 0.25)],
        p75=ordered[math.floor(runs * 0.75)],
        capped_runs=capped_runs,
    )


def _open_pack(
    state: CollectionState, pity: PityState, wallet: DustWallet, rng: RandomSource
) -> int:
    generated = 0
    for card in generate_pack(pity, rng):
        if card.golden:
            dust = disenchant_value(card)
        else:
            dust = add_normal_card(state, card.rarity, rng)
        wallet.credit(dust)
        generated += dust
    return generated


def _ensure_valid(state: CollectionState) -> None:
    errors = validate_collection_state(state)
    if errors:
        raise InvalidCollectionState(errors)


class EconomySimulator:
    """Estimate how many packs complete one or several expansions."""

    def __init__(self, config: SimulatorConfig | None = None) -> None:
        self._config = config or SimulatorConfig()

    @property
    def config(self) -> SimulatorConfig:
        return self._config

    def _resolve_seed(self, derived_seed: int) -> int:
        return self._config.rng_seed if self._config.rng_seed is not None else derived_seed

    def _resolve_runs(self, runs: int | None) -> int:
        runs = self._config.runs if runs is None else runs
        if runs <= 0:
            raise ValueError("Number of runs must be positive")
        return runs

    def run_single(
        self,
        collection: CollectionState,
        starting_dust: int,
        is_new_expansion: bool,
        rng: RandomSource,
    ) -> RunResult:
        state = collection.clone()
        wallet = DustWallet(balance=starting_dust)
        pity = PityState.for_expansion(is_new_expansion)

        dust_generated = 0
        dust_spent = craft_missing([state], wallet)
        packs = 0
        cap = self._config.single_pack_cap
        while not state.is_complete and packs < cap:
            dust_generated += _open_pack(state, pity, wallet, rng)
            packs += 1
            dust_spent += craft_missing([state], wallet)

        return RunResult(
            packs_opened=packs,
            dust_leftover=wallet.balance,
            dust_generated=dust_generated,
            dust_spent_crafting=dust_spent,
            outcome=RunOutcome.COMPLETED if state.is_complete else RunOutcome.CAP_EXCEEDED,
        )

    def run_multi(
        self,
        collections: Sequence[CollectionState],
        starting_dust: int,
        is_new_per_expansion: Sequence[bool],
        rng: RandomSource,
    ) -> RunResult:
        """One run where each pack goes to a uniformly chosen expansion."""
        states = [collection.clone() for collection in collections]
        pities = [PityState.for_expansion(is_new) for is_new in is_new_per_expansion]
        wallet = DustWallet(balance=starting_dust)

        dust_generated = 0
        dust_spent = craft_missing(states, wallet)
        packs = 0
        cap = self._config.multi_pack_cap
        while not all(state.is_complete for state in states) and packs < cap:
            idx = int(rng.random() * len(states))
            dust_generated += _open_pack(states[idx], pities[idx], wallet, rng)
            packs += 1
            dust_spent += craft_missing(states, wallet)

        completed = all(state.is_complete for state in states)
        return RunResult(
            packs_opened=packs,
            dust_leftover=wallet.balance,
            dust_generated=dust_generated,
            dust_spent_crafting=dust_spent,
            outcome=RunOutcome.COMPLETED if completed else RunOutcome.CAP_EXCEEDED,
        )

    def simulate(
        self,
        collection: CollectionState,
        dust: int,
        runs: int | None = None,
        is_new_expansion: bool = False,
    ) -> SimulationResult:
        runs = self._resolve_runs(runs)
        _ensure_valid(collection)
        name = collection.expansion.name

        if collection.is_complete:
            return SimulationResult(
                expansion=name,
                runs=runs,
                mean=0,
                median=0,
                min=0,
                max=0,
                p25=0,
                p75=0,
                avg_dust_left=dust,
                avg_dust_generated=0,
                avg_dust_spent_crafting=0,
                already_complete=True,
            )

        # One stream for the whole aggregate; runs are not reseeded.
        seed = self._resolve_seed(seed_from_state(collection, dust))
        rng = Mulberry32(seed)
        logger.debug(
            "Simulating %s: %s runs, dust=%s, new=%s, seed=%s",
            name,
            runs,
            dust,
            is_new_expansion,
            seed,
        )
        results = [
            self.run_single(collection, dust, is_new_expansion, rng) for _ in range(runs)
        ]
        stats = _summarise(
            [result.packs_opened for result in results],
            capped_runs=sum(1 for result in results if not result.converged),
        )
        logger.debug(
            "%s: mean %s packs, median %s, range %s-%s",
            name,
            stats.mean,
            stats.median,
            stats.min,
            stats.max,
        )
        if stats.capped_runs:
            logger.warning(
                "%s: %s of %s runs hit the %s pack safety cap.",
                name,
                stats.capped_runs,
                runs,
                self._config.single_pack_cap,
            )

        return SimulationResult(
            expansion=name,
            runs=runs,
            mean=stats.mean,
            median=stats.median,
            min=stats.min,
            max=stats.max,
            p25=stats.p25,
            p75=stats.p75,
            avg_dust_left=_average([result.dust_leftover for result in results]),
            avg_dust_generated=_average([result.dust_generated for result in results]),
            avg_dust_spent_crafting=_average([result.dust_spent_crafting for result in results]),
            capped_runs=stats.capped_runs,
        )

    def simulate_multi_expansion(
        self,
        collections: Sequence[CollectionState],
        dust: int,
        is_new_per_expansion: Sequence[bool],
        runs: int | None = None,
    ) -> SimStats:
        runs = self._resolve_runs(runs)
        if len(collections) != len(is_new_per_expansion):
            raise ValueError("is_new_per_expansion must have one flag per collection")
        for collection in collections:
            _ensure_valid(collection)

        seed = self._resolve_seed(seed_from_states(collections, dust))
        rng = Mulberry32(seed)
        logger.debug(
            "Simulating %s expansions with shared dust: %s runs, dust=%s, seed=%s",
            len(collections),
            runs,
            dust,
            seed,
        )
        results = [
            self.run_multi(collections, dust, is_new_per_expansion, rng) for _ in range(runs)
        ]
        stats = _summarise(
            [result.packs_opened for result in results],
            capped_runs=sum(1 for result in results if not result.converged),
        )
        logger.debug(
            "Shared-dust simulation: mean %s packs, median %s, range %s-%s",
            stats.mean,
            stats.median,
            stats.min,
            stats.max,
        )
        if stats.capped_runs:
            logger.warning(
                "Shared-dust simulation: %s of %s runs hit the %s pack safety cap.",
                stats.capped_runs,
                runs,
                self._config.multi_pack_cap,
            )
        return stats

    def compare(
        self,
        collections: Sequence[CollectionState],
        dust: int,
        is_new_per_expansion: Sequence[bool] | None = None,
        runs: int | None = None,
    ) -> ComparisonResult:
        if is_new_per_expansion is None:
            is_new_per_expansion = [c.legendaries.owned == 0 for c in collections]
        per_expansion = tuple(
            self.simulate(collection, dust, runs, is_new)
            for collection, is_new in zip(collections, is_new_per_expansion)
        )
        return ComparisonResult(
            per_set_total=sum(r.mean for r in per_expansion if not r.already_complete),
            multi_pack_stats=self.simulate_multi_expansion(
                collections, dust, is_new_per_expansion, runs
            ),
            golden_analysis=calc_golden_pack_analysis(
                collections, dust, avg_dust_per_pack=self._config.avg_dust_per_pack
            ),
            per_expansion=per_expansion,
        )


def simulate(
    collection: CollectionState,
    dust: int,
    runs: int = 200,
    is_new_expansion: bool = False,
) -> SimulationResult:
    return EconomySimulator().simulate(collection, dust, runs, is_new_expansion)


def simulate_multi_expansion(
    collections: Sequence[CollectionState],
    dust: int,
    is_new_per_expansion: Sequence[bool],
    runs: int = 200,
) -> SimStats:
    return EconomySimulator().simulate_multi_expansion(
        collections, dust, is_new_per_expansion, runs
    )


def compare_strategies(
    collections: Sequence[CollectionState],
    dust: int,
    is_new_per_expansion: Sequence[bool] | None = None,
    runs: int = 200,
) -> ComparisonResult:
    return EconomySimulator().compare(collections, dust, is_new_per_expansion, runs)
