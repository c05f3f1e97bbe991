from dustforge.diagnostics.golden_analysis import calc_golden_pack_analysis
from dustforge.domain.cards import Expansion
from dustforge.domain.collection import CollectionState, LegendaryBucket, RarityBucket


def _state():
    return CollectionState(
        expansion=Expansion(code="G", name="G", commons=1, rares=1, epics=2, legendaries=1),
        commons=RarityBucket(at1=1),
        rares=RarityBucket(at0=1),
        epics=RarityBucket(at0=1, at1=1),
        legendaries=LegendaryBucket(unowned=1),
    )


def test_golden_analysis_prices_missing_copies():
    analysis = calc_golden_pack_analysis([_state()], 40)
    # 1600 + 3 epic copies * 400 + 2 rare copies * 100 + 1 common copy * 40 - 40 dust
    assert analysis.total_craft_cost == 3000
    assert analysis.packs_to_complete == 7
    assert analysis.avg_dust_per_pack == 434


def test_golden_analysis_sums_expansions_and_floors_at_zero():
    assert calc_golden_pack_analysis([_state(), _state()], 0).total_craft_cost == 6080
    analysis = calc_golden_pack_analysis([_state()], 10_000)
    assert analysis.total_craft_cost == 0
    assert analysis.packs_to_complete == 0


def test_golden_analysis_custom_rate():
    analysis = calc_golden_pack_analysis([_state()], 40, avg_dust_per_pack=1000)
    assert analysis.packs_to_complete == 3
