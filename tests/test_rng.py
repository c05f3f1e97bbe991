from dustforge.domain.cards import Expansion
from dustforge.domain.collection import empty_collection_state
from dustforge.domain.rng import Mulberry32, seed_from_state, seed_from_states


def _small_expansion(code="SML"):
    return Expansion(code=code, name="Small", commons=2, rares=1, epics=1, legendaries=1)


def test_mulberry32_is_reproducible():
    first = Mulberry32(1234)
    second = Mulberry32(1234)
    assert [first.random() for _ in range(50)] == [second.random() for _ in range(50)]


def test_mulberry32_values_in_unit_interval():
    rng = Mulberry32(99)
    values = [rng.random() for _ in range(5000)]
    assert all(0.0 <= value < 1.0 for value in values)
    assert 0.45 < sum(values) / len(values) < 0.55


def test_mulberry32_seed_is_reduced_to_32_bits():
    assert [Mulberry32(5 + 2**32).random() for _ in range(3)] == [
        Mulberry32(5).random() for _ in range(3)
    ]


def test_seed_from_state_uses_weighted_bucket_sum():
    state = empty_collection_state(_small_expansion())
    # 2 commons * 7 + 1 rare * 31 + 1 epic * 61 + 1 legendary * 127, plus dust * 3
    assert seed_from_state(state, 10) == 233 + 30


def test_seed_from_state_wraps_at_32_bits():
    state = empty_collection_state(_small_expansion())
    assert seed_from_state(state, 2**32) == seed_from_state(state, 0)


def test_seed_from_states_sums_collections():
    a = empty_collection_state(_small_expansion("A"))
    b = empty_collection_state(Expansion(code="B", name="B", commons=5, legendaries=2))
    expected = (100 * 3 + seed_from_state(a, 0) + seed_from_state(b, 0)) & 0xFFFFFFFF
    assert seed_from_states([a, b], 100) == expected


def test_mulberry32_first_value_for_seed_zero():
    # Published mulberry32 output for seed 0.
    assert Mulberry32(0).random() == 1144304738 / 2**32


def test_mulberry32_state_advances_by_weyl_increment():
    rng = Mulberry32(0)
    assert rng.state == 0
    rng.random()
    assert rng.state == 0x6D2B79F5
    rng.random()
    assert rng.state == 0xDA56F3EA


def test_mulberry32_state_wraps_at_32_bits():
    rng = Mulberry32(0xFFFFFFFF)
    rng.random()
    assert rng.state == 0x6D2B79F4
