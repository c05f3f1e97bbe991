"""Aggregate ownership state of one expansion."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Mapping

from .cards import BUCKET_RARITIES, CardEntry, Expansion, Rarity


@dataclass(slots=True)
class RarityBucket:
    """Distinct cards of one rarity owned at 0, 1 and 2 copies."""

    at0: int = 0
    at1: int = 0
    at2: int = 0

    @property
    def total(self) -> int:
        return self.at0 + self.at1 + self.at2

    @property
    def incomplete(self) -> int:
        return self.at0 + self.at1

    @property
    def missing_copies(self) -> int:
        return self.at0 * 2 + self.at1

    def advance(self, from_zero: bool) -> None:
        """Move one card up a single copy level."""
        if from_zero:
            self.at0 -= 1
            self.at1 += 1
        else:
            self.at1 -= 1
            self.at2 += 1

    def complete_one(self) -> None:
        """Bring one incomplete card (zero-copy cards first) to two copies."""
        if self.at0 > 0:
            self.at0 -= 1
        else:
            self.at1 -= 1
        self.at2 += 1


@dataclass(slots=True)
class LegendaryBucket:
    unowned: int = 0
    owned: int = 0

    @property
    def total(self) -> int:
        return self.unowned + self.owned

    def acquire(self) -> None:
        self.unowned -= 1
        self.owned += 1


@dataclass(slots=True)
class CollectionState:
    """Bucketed ownership counts for one expansion.

    The dust balance is not stored here; runs pair a state with a
    :class:`~dustforge.domain.economy.DustWallet` so several expansions can
    share a single pool.
    """

    expansion: Expansion
    commons: RarityBucket = field(default_factory=RarityBucket)
    rares: RarityBucket = field(default_factory=RarityBucket)
    epics: RarityBucket = field(default_factory=RarityBucket)
    legendaries: LegendaryBucket = field(default_factory=LegendaryBucket)

    def bucket(self, rarity: Rarity) -> RarityBucket:
        if rarity is Rarity.COMMON:
            return self.commons
        if rarity is Rarity.RARE:
            return self.rares
        if rarity is Rarity.EPIC:
            return self.epics
        raise ValueError("Legendaries are tracked by LegendaryBucket")

    def clone(self) -> "CollectionState":
        return CollectionState(
            expansion=self.expansion,
            commons=replace(self.commons),
            rares=replace(self.rares),
            epics=replace(self.epics),
            legendaries=replace(self.legendaries),
        )

    @property
    def is_complete(self) -> bool:
        return (
            all(self.bucket(rarity).incomplete == 0 for rarity in BUCKET_RARITIES)
            and self.legendaries.unowned == 0
        )

    def missing_copies(self) -> dict[Rarity, int]:
        missing = {rarity: self.bucket(rarity).missing_copies for rarity in BUCKET_RARITIES}
        missing[Rarity.LEGENDARY] = self.legendaries.unowned
        return missing


def empty_collection_state(expansion: Expansion) -> CollectionState:
    return CollectionState(
        expansion=expansion,
        commons=RarityBucket(at0=expansion.commons),
        rares=RarityBucket(at0=expansion.rares),
        epics=RarityBucket(at0=expansion.epics),
        legendaries=LegendaryBucket(unowned=expansion.legendaries),
    )


def _split_owned(total: int, owned: int, doubled_share: float) -> RarityBucket:
    at2 = math.floor(owned * doubled_share)
    return RarityBucket(at0=total - owned, at1=owned - at2, at2=at2)


def manual_collection_state(
    expansion: Expansion,
    owned_commons: int,
    owned_rares: int,
    owned_epics: int,
    owned_legendaries: int,
) -> CollectionState:
    """Build a state from counts of distinct owned cards.

    Only the number of distinct cards is known, so a fixed share of them is
    assumed to be at two copies: half of commons, 40% of rares and 30% of epics.
    """
    commons = max(0, min(owned_commons, expansion.commons))
    rares = max(0, min(owned_rares, expansion.rares))
    epics = max(0, min(owned_epics, expansion.epics))
    legendaries = max(0, min(owned_legendaries, expansion.legendaries))
    return CollectionState(
        expansion=expansion,
        commons=_split_owned(expansion.commons, commons, 0.5),
        rares=_split_owned(expansion.rares, rares, 0.4),
        epics=_split_owned(expansion.epics, epics, 0.3),
        legendaries=LegendaryBucket(
            unowned=expansion.legendaries - legendaries, owned=legendaries
        ),
    )


def build_collection_state(
    expansion: Expansion,
    owned_normal: Mapping[str, int],
    card_db: Mapping[str, CardEntry],
) -> CollectionState:
    """Bucket an ownership snapshot (card id -> normal copies) for one expansion."""
    state = empty_collection_state(expansion)
    owned_legendaries = 0
    for card_id, count in owned_normal.items():
        entry = card_db.get(card_id)
        if entry is None or entry.set_code != expansion.code or count <= 0:
            continue
        if entry.rarity is Rarity.LEGENDARY:
            owned_legendaries += 1
            continue
        bucket = state.bucket(entry.rarity)
        bucket.at0 -= 1
        if count >= 2:
            bucket.at2 += 1
        else:
            bucket.at1 += 1

    for rarity in BUCKET_RARITIES:
        bucket = state.bucket(rarity)
        bucket.at0 = max(0, bucket.at0)
    state.legendaries = LegendaryBucket(
        unowned=max(0, expansion.legendaries - owned_legendaries),
        owned=owned_legendaries,
    )
    return state
