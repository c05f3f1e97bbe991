from dustforge.config import SimulatorConfig
from dustforge.domain.cards import Expansion
from dustforge.domain.collection import empty_collection_state
from dustforge.validators import validate_collection_state, validate_config

EXPANSION = Expansion(code="VAL", name="Validation", commons=2, rares=2, epics=2, legendaries=2)


def test_validate_collection_state_success():
    assert validate_collection_state(empty_collection_state(EXPANSION)) == []


def test_validate_collection_state_detects_negative_and_mismatch():
    state = empty_collection_state(EXPANSION)
    state.rares.at0 = -1
    state.rares.at1 = 3
    state.legendaries.owned = 1
    errors = validate_collection_state(state)
    assert "Expansion 'VAL' rare at0 is negative (-1)." in errors
    assert "Expansion 'VAL' legendary bucket sums to 3, expected 2." in errors
    assert not any("rare bucket sums" in err for err in errors)


def test_validate_config():
    assert validate_config(SimulatorConfig()) == []
    errors = validate_config(SimulatorConfig(runs=0, multi_pack_cap=-1))
    assert "Simulator configuration 'runs' must be positive." in errors
    assert "Simulator configuration 'multi_pack_cap' must be positive." in errors
