"""Configuration models for DustForge."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(slots=True)
class SimulatorConfig:
    """Knobs for the Monte Carlo simulator and the closed-form estimator."""

    runs: int = 200
    single_pack_cap: int = 10000
    multi_pack_cap: int = 20000
    avg_dust_per_pack: int = 434
    rng_seed: int | None = None

    @classmethod
    def from_env(cls) -> "SimulatorConfig":
        """Create config from environment variables prefixed with DUSTFORGE_."""
        prefix = "DUSTFORGE_"
        defaults = cls()
        return cls(
            runs=_env_int(f"{prefix}RUNS", defaults.runs),
            single_pack_cap=_env_int(f"{prefix}SINGLE_PACK_CAP", defaults.single_pack_cap),
            multi_pack_cap=_env_int(f"{prefix}MULTI_PACK_CAP", defaults.multi_pack_cap),
            avg_dust_per_pack=_env_int(f"{prefix}AVG_DUST_PER_PACK", defaults.avg_dust_per_pack),
            rng_seed=_env_optional_int(f"{prefix}RNG_SEED"),
        )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid integer for {name}: {raw!r}") from exc


def _env_optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return _env_int(name, 0)
