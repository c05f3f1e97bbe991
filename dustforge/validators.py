"""Validation utilities for DustForge inputs."""

from __future__ import annotations

from .config import SimulatorConfig
from .domain.cards import BUCKET_RARITIES, Rarity
from .domain.collection import CollectionState


def validate_collection_state(state: CollectionState) -> list[str]:
    """Return list of invariant violations found in ``state``."""
    errors: list[str] = []
    expansion = state.expansion
    label = expansion.code or expansion.name

    for rarity in BUCKET_RARITIES:
        bucket = state.bucket(rarity)
        for level, value in (("at0", bucket.at0), ("at1", bucket.at1), ("at2", bucket.at2)):
            if value < 0:
                errors.append(f"Expansion '{label}' {rarity.value} {level} is negative ({value}).")
        expected = expansion.total(rarity)
        if bucket.total != expected:
            errors.append(
                f"Expansion '{label}' {rarity.value} bucket sums to {bucket.total}, "
                f"expected {expected}."
            )

    legendaries = state.legendaries
    if legendaries.unowned < 0 or legendaries.owned < 0:
        errors.append(f"Expansion '{label}' legendary counts cannot be negative.")
    expected = expansion.total(Rarity.LEGENDARY)
    if legendaries.total != expected:
        errors.append(
            f"Expansion '{label}' legendary bucket sums to {legendaries.total}, "
            f"expected {expected}."
        )
    return errors


def validate_config(config: SimulatorConfig) -> list[str]:
    errors: list[str] = []
    if config.runs <= 0:
        errors.append("Simulator configuration 'runs' must be positive.")
    if config.single_pack_cap <= 0:
        errors.append("Simulator configuration 'single_pack_cap' must be positive.")
    if config.multi_pack_cap <= 0:
        errors.append("Simulator configuration 'multi_pack_cap' must be positive.")
    if config.avg_dust_per_pack <= 0:
        errors.append("Simulator configuration 'avg_dust_per_pack' must be positive.")
    return errors


__all__ = ["validate_collection_state", "validate_config"]
