"""Card domain models and utilities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Rarity(str, Enum):
    COMMON = "common"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"

    @property
    def rank(self) -> int:
        return RARITY_RANK[self]


RARITY_RANK: dict[Rarity, int] = {
    Rarity.COMMON: 0,
    Rarity.RARE: 1,
    Rarity.EPIC: 2,
    Rarity.LEGENDARY: 3,
}

# Rarities tracked with 0/1/2 copy buckets; legendaries are single-copy.
BUCKET_RARITIES: tuple[Rarity, ...] = (Rarity.COMMON, Rarity.RARE, Rarity.EPIC)


@dataclass(frozen=True, slots=True)
class DrawnCard:
    """One card slot of an opened pack."""

    rarity: Rarity
    golden: bool = False

    def is_normal(self, *rarities: Rarity) -> bool:
        return not self.golden and self.rarity in rarities


@dataclass(frozen=True, slots=True)
class Expansion:
    """Per-expansion card totals supplied by the card database."""

    code: str
    name: str
    commons: int = 0
    rares: int = 0
    epics: int = 0
    legendaries: int = 0

    def total(self, rarity: Rarity) -> int:
        return {
            Rarity.COMMON: self.commons,
            Rarity.RARE: self.rares,
            Rarity.EPIC: self.epics,
            Rarity.LEGENDARY: self.legendaries,
        }[rarity]

    @property
    def card_count(self) -> int:
        return self.commons + self.rares + self.epics + self.legendaries


@dataclass(frozen=True, slots=True)
class CardEntry:
    """Minimal card database row needed to bucket an ownership snapshot."""

    card_id: str
    set_code: str
    rarity: Rarity
