"""Dust economy: disenchanting draws and greedy crafting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from .cards import DrawnCard, Rarity
from .collection import CollectionState
from .exceptions import InsufficientDust
from .rng import RandomSource

DUST_DISENCHANT: Mapping[Rarity, int] = {
    Rarity.COMMON: 5,
    Rarity.RARE: 20,
    Rarity.EPIC: 100,
    Rarity.LEGENDARY: 400,
}
DUST_DISENCHANT_GOLDEN: Mapping[Rarity, int] = {
    Rarity.COMMON: 50,
    Rarity.RARE: 100,
    Rarity.EPIC: 400,
    Rarity.LEGENDARY: 1600,
}
DUST_CRAFT: Mapping[Rarity, int] = {
    Rarity.COMMON: 40,
    Rarity.RARE: 100,
    Rarity.EPIC: 400,
    Rarity.LEGENDARY: 1600,
}

CRAFT_PRIORITY: tuple[Rarity, ...] = (
    Rarity.LEGENDARY,
    Rarity.EPIC,
    Rarity.RARE,
    Rarity.COMMON,
)


@dataclass(slots=True)
class DustWallet:
    """Mutable dust balance, possibly shared by several expansions."""

    balance: int = 0

    def credit(self, amount: int) -> None:
        if amount < 0:
            raise ValueError("Cannot credit negative amount")
        self.balance += amount

    def debit(self, amount: int) -> None:
        if amount < 0:
            raise ValueError("Cannot debit negative amount")
        if self.balance < amount:
            raise InsufficientDust(self.balance, amount)
        self.balance -= amount

    def can_afford(self, amount: int) -> bool:
        return self.balance >= amount


def add_normal_card(state: CollectionState, rarity: Rarity, rng: RandomSource) -> int:
    """Apply a normal-variant draw to ``state`` and return the dust it yields."""
    if rarity is Rarity.LEGENDARY:
        if state.legendaries.unowned > 0:
            state.legendaries.acquire()
            return 0
        return DUST_DISENCHANT[rarity]

    bucket = state.bucket(rarity)
    incomplete = bucket.incomplete
    if incomplete == 0:
        return DUST_DISENCHANT[rarity]
    bucket.advance(from_zero=rng.random() * incomplete < bucket.at0)
    return 0


def disenchant_value(card: DrawnCard) -> int:
    table = DUST_DISENCHANT_GOLDEN if card.golden else DUST_DISENCHANT
    return table[card.rarity]


def _missing(state: CollectionState, rarity: Rarity) -> int:
    if rarity is Rarity.LEGENDARY:
        return state.legendaries.unowned
    return state.bucket(rarity).incomplete


def _craft(state: CollectionState, rarity: Rarity, wallet: DustWallet) -> int:
    cost = DUST_CRAFT[rarity]
    wallet.debit(cost)
    if rarity is Rarity.LEGENDARY:
        state.legendaries.acquire()
    else:
        # One craft finishes the card at two copies.
        state.bucket(rarity).complete_one()
    return cost


def craft_missing(states: Sequence[CollectionState], wallet: DustWallet) -> int:
    """Spend ``wallet`` on missing cards and return the dust spent.

    This is a fixed legendary-first heuristic, not an optimal allocator: a
    lower tier is only considered once every expansion has finished the tiers
    above it, even when a cheaper craft would be affordable. Within a tier,
    expansions are served in the order given.
    """
    spent = 0
    while True:
        crafted = False
        for rarity in CRAFT_PRIORITY:
            candidates = [state for state in states if _missing(state, rarity) > 0]
            if not candidates:
                continue
            if wallet.can_afford(DUST_CRAFT[rarity]):
                spent += _craft(candidates[0], rarity, wallet)
                crafted = True
            break
        if not crafted:
            return spent
