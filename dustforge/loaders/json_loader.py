"""Load expansions and collection snapshots from JSON definitions."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Sequence

from ..domain.cards import BUCKET_RARITIES, CardEntry, Expansion, Rarity
from ..domain.collection import (
    CollectionState,
    LegendaryBucket,
    RarityBucket,
    build_collection_state,
    empty_collection_state,
    manual_collection_state,
)
from ..validators import validate_collection_state

_PLURALS = {
    Rarity.COMMON: "commons",
    Rarity.RARE: "rares",
    Rarity.EPIC: "epics",
    Rarity.LEGENDARY: "legendaries",
}


@dataclass(slots=True)
class CollectionDefinition:
    states: Sequence[CollectionState]
    dust: int
    is_new: Sequence[bool]

    @property
    def expansions(self) -> list[Expansion]:
        return [state.expansion for state in self.states]


def load_collection_from_json(path: str | Path, *, strict: bool = True) -> CollectionDefinition:
    """Load a collection file; raise ``ValueError`` listing every problem."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return parse_collection_dict(data, strict=strict)


def parse_collection_dict(data: dict[str, Any], *, strict: bool = True) -> CollectionDefinition:
    """Parse a JSON dict (already decoded) into collection states.

    With ``strict=False`` only the file structure is checked: negative dust and
    bucket sums that disagree with the expansion are left for
    :func:`dustforge.diagnostics.checklist.run_checklist` to report.
    """
    errors = validate_collection_dict(data, strict=strict)
    if errors:
        raise ValueError(_format_errors("Collection validation failed", errors))
    definition = _build_definition(data)
    if not strict:
        return definition
    errors = [err for state in definition.states for err in validate_collection_state(state)]
    if errors:
        raise ValueError(_format_errors("Collection validation failed", errors))
    return definition


def _build_definition(data: dict[str, Any]) -> CollectionDefinition:
    card_db = {entry.card_id: entry for entry in map(parse_card_entry, data.get("cards", []))}
    ownership = {str(k): int(v) for k, v in data.get("ownership", {}).items()}

    states: list[CollectionState] = []
    is_new: list[bool] = []
    for entry in data["expansions"]:
        state = parse_state_entry(entry, ownership=ownership, card_db=card_db)
        states.append(state)
        is_new.append(bool(entry.get("isNew", state.legendaries.owned == 0)))
    return CollectionDefinition(
        states=tuple(states), dust=int(data.get("dust", 0)), is_new=tuple(is_new)
    )


def parse_expansion(entry: dict[str, Any]) -> Expansion:
    return Expansion(
        code=entry["code"],
        name=entry.get("name", entry["code"]),
        commons=int(entry.get("commons", 0)),
        rares=int(entry.get("rares", 0)),
        epics=int(entry.get("epics", 0)),
        legendaries=int(entry.get("legendaries", 0)),
    )


def parse_card_entry(entry: dict[str, Any]) -> CardEntry:
    return CardEntry(
        card_id=str(entry["id"]),
        set_code=entry["set"],
        rarity=Rarity(str(entry["rarity"]).lower()),
    )


def parse_state_entry(
    entry: dict[str, Any],
    *,
    ownership: dict[str, int] | None = None,
    card_db: dict[str, CardEntry] | None = None,
) -> CollectionState:
    expansion = parse_expansion(entry)

    state_data = entry.get("state")
    if state_data is not None:
        buckets = {
            rarity: RarityBucket(
                at0=int(state_data[_PLURALS[rarity]].get("at0", 0)),
                at1=int(state_data[_PLURALS[rarity]].get("at1", 0)),
                at2=int(state_data[_PLURALS[rarity]].get("at2", 0)),
            )
            for rarity in BUCKET_RARITIES
        }
        legendaries = state_data["legendaries"]
        return CollectionState(
            expansion=expansion,
            commons=buckets[Rarity.COMMON],
            rares=buckets[Rarity.RARE],
            epics=buckets[Rarity.EPIC],
            legendaries=LegendaryBucket(
                unowned=int(legendaries.get("unowned", 0)),
                owned=int(legendaries.get("owned", 0)),
            ),
        )

    owned = entry.get("owned")
    if owned is not None:
        return manual_collection_state(
            expansion,
            int(owned.get("commons", 0)),
            int(owned.get("rares", 0)),
            int(owned.get("epics", 0)),
            int(owned.get("legendaries", 0)),
        )

    if ownership and card_db:
        return build_collection_state(expansion, ownership, card_db)
    return empty_collection_state(expansion)


def validate_collection_file(path: str | Path) -> list[str]:
    """Validate collection JSON file and return a list of errors."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    errors = validate_collection_dict(data)
    if errors:
        return errors
    definition = _build_definition(data)
    return [err for state in definition.states for err in validate_collection_state(state)]


def validate_collection_dict(data: dict[str, Any], *, strict: bool = True) -> list[str]:
    errors: list[str] = []
    if not isinstance(data, dict):
        return ["Collection file must contain a JSON object."]

    dust = data.get("dust", 0)
    if not isinstance(dust, int) or isinstance(dust, bool):
        errors.append(f"'dust' must be an integer, got '{dust}'.")
    elif strict and dust < 0:
        errors.append(f"'dust' must be a non-negative integer, got '{dust}'.")

    cards_raw = data.get("cards", [])
    if not isinstance(cards_raw, list):
        errors.append("'cards' must be an array.")
    else:
        for idx, entry in enumerate(cards_raw, start=1):
            if not isinstance(entry, dict):
                errors.append(f"Card #{idx} must be an object.")
                continue
            for field_name in ("id", "set", "rarity"):
                if not isinstance(entry.get(field_name), str) or not entry.get(field_name).strip():
                    errors.append(f"Card #{idx} must define non-empty '{field_name}'.")
            rarity_value = entry.get("rarity")
            try:
                Rarity(str(rarity_value).lower())
            except ValueError:
                errors.append(f"Card #{idx} has invalid rarity '{rarity_value}'.")

    ownership = data.get("ownership", {})
    if not isinstance(ownership, dict):
        errors.append("'ownership' must be an object mapping card ids to copies.")
    else:
        for card_id, count in ownership.items():
            if not isinstance(count, int) or count < 0:
                errors.append(f"Ownership of card '{card_id}' must be a non-negative integer.")

    expansions_raw = data.get("expansions")
    if not isinstance(expansions_raw, list) or not expansions_raw:
        errors.append("Collection must contain non-empty 'expansions' array.")
        return errors

    codes: set[str] = set()
    for idx, entry in enumerate(expansions_raw, start=1):
        if not isinstance(entry, dict):
            errors.append(f"Expansion #{idx} must be an object.")
            continue
        code = entry.get("code")
        if not isinstance(code, str) or not code.strip():
            errors.append(f"Expansion #{idx} must define non-empty 'code'.")
            continue
        if code in codes:
            errors.append(f"Expansion code '{code}' defined multiple times.")
        codes.add(code)

        for rarity in _PLURALS.values():
            value = entry.get(rarity, 0)
            if not isinstance(value, int) or value < 0:
                errors.append(f"Expansion '{code}' has invalid '{rarity}' count '{value}'.")

        is_new = entry.get("isNew")
        if is_new is not None and not isinstance(is_new, bool):
            errors.append(f"Expansion '{code}' 'isNew' must be a boolean.")

        if "state" in entry and "owned" in entry:
            errors.append(f"Expansion '{code}' must define either 'state' or 'owned', not both.")
        if "state" in entry:
            errors.extend(_validate_state_block(code, entry["state"]))
        if "owned" in entry:
            owned = entry["owned"]
            if not isinstance(owned, dict):
                errors.append(f"Expansion '{code}' 'owned' must be an object.")
            else:
                for rarity, value in owned.items():
                    if rarity not in _PLURALS.values():
                        errors.append(f"Expansion '{code}' 'owned' has unknown key '{rarity}'.")
                    elif not isinstance(value, int) or value < 0:
                        errors.append(
                            f"Expansion '{code}' owned {rarity} must be non-negative integer."
                        )
    return errors


def _validate_state_block(code: str, state: Any) -> list[str]:
    if not isinstance(state, dict):
        return [f"Expansion '{code}' 'state' must be an object."]
    errors: list[str] = []
    for rarity in BUCKET_RARITIES:
        key = _PLURALS[rarity]
        bucket = state.get(key)
        if not isinstance(bucket, dict):
            errors.append(f"Expansion '{code}' state must define '{key}' object.")
            continue
        for level in ("at0", "at1", "at2"):
            if not isinstance(bucket.get(level, 0), int):
                errors.append(f"Expansion '{code}' state {key}.{level} must be an integer.")
    legendaries = state.get("legendaries")
    if not isinstance(legendaries, dict):
        errors.append(f"Expansion '{code}' state must define 'legendaries' object.")
    else:
        for level in ("unowned", "owned"):
            if not isinstance(legendaries.get(level, 0), int):
                errors.append(f"Expansion '{code}' state legendaries.{level} must be an integer.")
    return errors


def _format_errors(prefix: str, errors: Iterable[str]) -> str:
    formatted = "\n".join(f"- {err}" for err in errors)
    return f"{prefix}:\n{formatted}"
