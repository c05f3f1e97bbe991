"""Automated checks to highlight problems in a collection definition."""

from __future__ import annotations

from dataclasses import dataclass

from ..loaders import CollectionDefinition
from ..validators import validate_collection_state


@dataclass(slots=True)
class ChecklistIssue:
    severity: str
    message: str


def run_checklist(definition: CollectionDefinition) -> list[ChecklistIssue]:
    issues: list[ChecklistIssue] = []
    if not definition.states:
        issues.append(ChecklistIssue("error", "No expansions defined."))
    if definition.dust < 0:
        issues.append(ChecklistIssue("warning", f"Dust balance is negative ({definition.dust})."))

    for state in definition.states:
        expansion = state.expansion
        errors = validate_collection_state(state)
        for err in errors:
            issues.append(ChecklistIssue("error", err))
        if errors:
            continue
        if expansion.card_count == 0:
            issues.append(
                ChecklistIssue("warning", f"Expansion {expansion.code} has no cards.")
            )
        elif state.is_complete:
            issues.append(
                ChecklistIssue("info", f"Expansion {expansion.code} is already complete.")
            )

    return issues
