import json

import pytest

from dustforge.domain.collection import LegendaryBucket, RarityBucket
from dustforge.loaders import (
    load_collection_from_json,
    parse_collection_dict,
    validate_collection_dict,
    validate_collection_file,
)


def _collection_data():
    return {
        "dust": 1200,
        "cards": [
            {"id": "c1", "set": "OWN", "rarity": "COMMON"},
            {"id": "l1", "set": "OWN", "rarity": "legendary"},
        ],
        "ownership": {"c1": 2, "l1": 1},
        "expansions": [
            {
                "code": "EXP",
                "name": "Explicit",
                "commons": 3,
                "rares": 1,
                "epics": 1,
                "legendaries": 2,
                "state": {
                    "commons": {"at0": 1, "at1": 1, "at2": 1},
                    "rares": {"at2": 1},
                    "epics": {"at0": 1},
                    "legendaries": {"unowned": 1, "owned": 1},
                },
            },
            {
                "code": "MAN",
                "commons": 10,
                "rares": 10,
                "epics": 10,
                "legendaries": 5,
                "owned": {"commons": 5, "legendaries": 0},
                "isNew": False,
            },
            {"code": "OWN", "commons": 2, "legendaries": 1},
            {"code": "NEW", "commons": 2, "rares": 2, "epics": 2, "legendaries": 2},
        ],
    }


def test_parse_collection_dict_supports_all_entry_kinds():
    definition = parse_collection_dict(_collection_data())
    explicit, manual, from_ownership, fresh = definition.states
    assert definition.dust == 1200
    assert explicit.commons == RarityBucket(at0=1, at1=1, at2=1)
    assert explicit.legendaries == LegendaryBucket(unowned=1, owned=1)
    assert manual.expansion.name == "MAN"
    assert manual.commons == RarityBucket(at0=5, at1=3, at2=2)
    assert from_ownership.commons == RarityBucket(at0=1, at1=0, at2=1)
    assert from_ownership.legendaries == LegendaryBucket(unowned=0, owned=1)
    assert fresh.rares == RarityBucket(at0=2)
    assert definition.is_new == (False, False, False, True)
    assert [e.code for e in definition.expansions] == ["EXP", "MAN", "OWN", "NEW"]


def test_parse_collection_dict_rejects_bucket_mismatch():
    data = _collection_data()
    data["expansions"][0]["state"]["commons"]["at0"] = 5
    with pytest.raises(ValueError) as exc:
        parse_collection_dict(data)
    assert "common bucket sums to 7, expected 3" in str(exc.value)


def test_validate_collection_dict_reports_structure_errors():
    errors = validate_collection_dict(
        {
            "dust": -5,
            "expansions": [
                {"code": "A", "commons": -1},
                {"code": "A", "state": {}, "owned": {}},
                {"name": "missing code"},
            ],
        }
    )
    assert "'dust' must be a non-negative integer, got '-5'." in errors
    assert "Expansion 'A' has invalid 'commons' count '-1'." in errors
    assert "Expansion code 'A' defined multiple times." in errors
    assert "Expansion 'A' must define either 'state' or 'owned', not both." in errors
    assert "Expansion #3 must define non-empty 'code'." in errors


def test_parse_collection_dict_lenient_keeps_bucket_mismatch():
    data = _collection_data()
    data["dust"] = -10
    data["expansions"][0]["state"]["commons"]["at0"] = 5
    definition = parse_collection_dict(data, strict=False)
    assert definition.dust == -10
    assert definition.states[0].commons == RarityBucket(at0=5, at1=1, at2=1)


def test_parse_collection_dict_lenient_still_checks_structure():
    data = _collection_data()
    data["dust"] = "lots"
    with pytest.raises(ValueError) as exc:
        parse_collection_dict(data, strict=False)
    assert "'dust' must be an integer, got 'lots'." in str(exc.value)


def test_load_collection_from_json_lenient(tmp_path):
    data = _collection_data()
    data["expansions"][0]["state"]["legendaries"]["owned"] = 4
    path = tmp_path / "collection.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    with pytest.raises(ValueError):
        load_collection_from_json(path)
    definition = load_collection_from_json(path, strict=False)
    assert definition.states[0].legendaries == LegendaryBucket(unowned=1, owned=4)


def test_validate_collection_dict_requires_expansions():
    assert validate_collection_dict({"dust": 0}) == [
        "Collection must contain non-empty 'expansions' array."
    ]


def test_load_collection_from_json(tmp_path):
    path = tmp_path / "collection.json"
    path.write_text(json.dumps(_collection_data()), encoding="utf-8")
    definition = load_collection_from_json(path)
    assert len(definition.states) == 4
    assert validate_collection_file(path) == []


def test_validate_collection_file_reports_state_errors(tmp_path):
    data = _collection_data()
    data["expansions"][0]["state"]["legendaries"]["owned"] = 4
    path = tmp_path / "broken.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    errors = validate_collection_file(path)
    assert errors == ["Expansion 'EXP' legendary bucket sums to 5, expected 2."]
