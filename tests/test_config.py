import pytest

from dustforge.config import SimulatorConfig


def test_from_env_defaults(monkeypatch):
    for name in ("RUNS", "SINGLE_PACK_CAP", "MULTI_PACK_CAP", "AVG_DUST_PER_PACK", "RNG_SEED"):
        monkeypatch.delenv(f"DUSTFORGE_{name}", raising=False)
    assert SimulatorConfig.from_env() == SimulatorConfig()


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("DUSTFORGE_RUNS", "50")
    monkeypatch.setenv("DUSTFORGE_SINGLE_PACK_CAP", "500")
    monkeypatch.setenv("DUSTFORGE_RNG_SEED", "42")
    config = SimulatorConfig.from_env()
    assert config.runs == 50
    assert config.single_pack_cap == 500
    assert config.multi_pack_cap == 20000
    assert config.rng_seed == 42


def test_from_env_rejects_garbage(monkeypatch):
    monkeypatch.setenv("DUSTFORGE_RUNS", "many")
    with pytest.raises(ValueError, match="DUSTFORGE_RUNS"):
        SimulatorConfig.from_env()


@pytest.mark.parametrize("raw", ["", "   "])
def test_from_env_blank_seed_means_no_override(monkeypatch, raw):
    monkeypatch.setenv("DUSTFORGE_RNG_SEED", raw)
    assert SimulatorConfig.from_env().rng_seed is None


def test_from_env_seed_zero_is_an_override(monkeypatch):
    monkeypatch.setenv("DUSTFORGE_RNG_SEED", " 0 ")
    assert SimulatorConfig.from_env().rng_seed == 0
