"""Booster pack generation with rarity guarantees and pity timers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import accumulate

from .cards import DrawnCard, Rarity
from .rng import RandomSource

CARDS_PER_PACK = 5

# (rarity, golden, weight in percent)
ROLL_TABLE: tuple[tuple[Rarity, bool, float], ...] = (
    (Rarity.COMMON, False, 76.14),
    (Rarity.RARE, False, 15.51),
    (Rarity.EPIC, False, 4.29),
    (Rarity.LEGENDARY, False, 1.00),
    (Rarity.COMMON, True, 1.49),
    (Rarity.RARE, True, 1.23),
    (Rarity.EPIC, True, 0.25),
    (Rarity.LEGENDARY, True, 0.09),
)

_TOTAL_WEIGHT = sum(weight for _, _, weight in ROLL_TABLE)
ROLL_CDF: tuple[float, ...] = tuple(
    accumulate(weight / _TOTAL_WEIGHT for _, _, weight in ROLL_TABLE)
)
_OUTCOMES: tuple[DrawnCard, ...] = tuple(
    DrawnCard(rarity, golden) for rarity, golden, _ in ROLL_TABLE
)

LEGENDARY_HARD_CAP = 40
LEGENDARY_SOFT_START = 30
EPIC_HARD_CAP = 10
EPIC_SOFT_START = 7
FIRST_LEGENDARY_CAP = 10
FIRST_LEGENDARY_SOFT_START = math.floor(FIRST_LEGENDARY_CAP * 0.7)


@dataclass(slots=True)
class PityState:
    """Per-expansion pity counters, mutated by :func:`generate_pack`."""

    packs_since_epic: int = 0
    packs_since_legendary: int = 0
    is_first_legendary: bool = False

    @classmethod
    def for_expansion(cls, is_new_expansion: bool) -> "PityState":
        return cls(is_first_legendary=is_new_expansion)

    def legendary_window(self) -> tuple[int, int]:
        """Return ``(soft_start, hard_cap)`` for the legendary timer."""
        if self.is_first_legendary:
            return FIRST_LEGENDARY_SOFT_START, FIRST_LEGENDARY_CAP
        return LEGENDARY_SOFT_START, LEGENDARY_HARD_CAP


def soft_pity_chance(packs_since: int, soft_start: int, hard_cap: int) -> float:
    if packs_since < soft_start:
        return 0.0
    if packs_since >= hard_cap:
        return 1.0
    progress = (packs_since - soft_start + 1) / (hard_cap - soft_start + 1)
    return progress * progress


def roll_card(rng: RandomSource) -> DrawnCard:
    roll = rng.random()
    for threshold, outcome in zip(ROLL_CDF, _OUTCOMES):
        if roll < threshold:
            return outcome
    return DrawnCard(Rarity.COMMON)


def upgrade_lowest_card(cards: list[DrawnCard], target: Rarity) -> bool:
    """Replace the lowest non-golden card below ``target``; first slot wins ties."""
    lowest_idx = -1
    lowest_rank = target.rank
    for idx, card in enumerate(cards):
        if card.golden:
            continue
        if card.rarity.rank < lowest_rank:
            lowest_rank = card.rarity.rank
            lowest_idx = idx
    if lowest_idx < 0:
        return False
    cards[lowest_idx] = DrawnCard(target)
    return True


def _pity_triggers(rng: RandomSource, chance: float) -> bool:
    # The rng is consumed only inside the soft window.
    return chance >= 1 or (chance > 0 and rng.random() < chance)


def generate_pack(pity: PityState, rng: RandomSource) -> list[DrawnCard]:
    cards = [roll_card(rng) for _ in range(CARDS_PER_PACK)]

    # Golden cards neither satisfy nor absorb the rare-or-better guarantee.
    if not any(card.is_normal(Rarity.RARE, Rarity.EPIC, Rarity.LEGENDARY) for card in cards):
        for idx, card in enumerate(cards):
            if card.is_normal(Rarity.COMMON):
                cards[idx] = DrawnCard(Rarity.RARE)
                break

    next_epic = pity.packs_since_epic + 1
    next_legendary = pity.packs_since_legendary + 1
    soft_start, hard_cap = pity.legendary_window()

    if not any(card.is_normal(Rarity.LEGENDARY) for card in cards):
        chance = soft_pity_chance(next_legendary, soft_start, hard_cap)
        if _pity_triggers(rng, chance):
            upgrade_lowest_card(cards, Rarity.LEGENDARY)

    if not any(card.is_normal(Rarity.EPIC, Rarity.LEGENDARY) for card in cards):
        chance = soft_pity_chance(next_epic, EPIC_SOFT_START, EPIC_HARD_CAP)
        if _pity_triggers(rng, chance):
            upgrade_lowest_card(cards, Rarity.EPIC)

    if any(card.is_normal(Rarity.LEGENDARY) for card in cards):
        pity.packs_since_legendary = 0
        pity.is_first_legendary = False
    else:
        pity.packs_since_legendary = next_legendary

    if any(card.is_normal(Rarity.EPIC, Rarity.LEGENDARY) for card in cards):
        pity.packs_since_epic = 0
    else:
        pity.packs_since_epic = next_epic

    return cards
