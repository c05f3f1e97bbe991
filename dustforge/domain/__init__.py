"""Domain models and services."""

from .cards import CardEntry, DrawnCard, Expansion, Rarity
from .collection import (
    CollectionState,
    LegendaryBucket,
    RarityBucket,
    build_collection_state,
    empty_collection_state,
    manual_collection_state,
)
from .economy import DustWallet, add_normal_card, craft_missing
from .packs import PityState, generate_pack, roll_card
from .rng import Mulberry32, RandomSource, seed_from_state, seed_from_states
from .exceptions import DustForgeError, InsufficientDust, InvalidCollectionState

__all__ = [
    "CardEntry",
    "DrawnCard",
    "Expansion",
    "Rarity",
    "CollectionState",
    "LegendaryBucket",
    "RarityBucket",
    "build_collection_state",
    "empty_collection_state",
    "manual_collection_state",
    "DustWallet",
    "add_normal_card",
    "craft_missing",
    "PityState",
    "generate_pack",
    "roll_card",
    "Mulberry32",
    "RandomSource",
    "seed_from_state",
    "seed_from_states",
    "DustForgeError",
    "InsufficientDust",
    "InvalidCollectionState",
]
