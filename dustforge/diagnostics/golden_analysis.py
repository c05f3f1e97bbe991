"""Closed-form crafting estimate that skips the Monte-Carlo path."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from ..domain.cards import BUCKET_RARITIES, Rarity
from ..domain.collection import CollectionState
from ..domain.economy import DUST_CRAFT

AVG_DUST_PER_PACK = 434


@dataclass(frozen=True, slots=True)
class GoldenAnalysis:
    avg_dust_per_pack: int
    packs_to_complete: int
    total_craft_cost: int


def calc_golden_pack_analysis(
    collections: Iterable[CollectionState],
    dust: int,
    *,
    avg_dust_per_pack: int = AVG_DUST_PER_PACK,
) -> GoldenAnalysis:
    """Price every missing copy at craft cost, net of ``dust``, in packs."""
    total = 0
    for state in collections:
        total += state.legendaries.unowned * DUST_CRAFT[Rarity.LEGENDARY]
        for rarity in BUCKET_RARITIES:
            total += state.bucket(rarity).missing_copies * DUST_CRAFT[rarity]

    total = max(0, total - dust)
    packs = math.ceil(total / avg_dust_per_pack) if total > 0 else 0
    return GoldenAnalysis(
        avg_dust_per_pack=avg_dust_per_pack,
        packs_to_complete=packs,
        total_craft_cost=total,
    )
