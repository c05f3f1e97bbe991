from dustforge.diagnostics.checklist import run_checklist
from dustforge.domain.cards import Expansion
from dustforge.domain.collection import empty_collection_state
from dustforge.loaders import CollectionDefinition


def test_checklist_flags_problems(collection_factory):
    complete = collection_factory.complete(Expansion(code="DONE", name="Done", commons=1))
    hollow = empty_collection_state(Expansion(code="HOLLOW", name="Hollow"))
    broken = empty_collection_state(Expansion(code="BAD", name="Bad", epics=1))
    broken.epics.at0 = 2
    definition = CollectionDefinition(
        states=(complete, hollow, broken), dust=-1, is_new=(False, True, True)
    )
    issues = run_checklist(definition)
    by_severity = {(issue.severity, issue.message) for issue in issues}
    assert ("warning", "Dust balance is negative (-1).") in by_severity
    assert ("warning", "Expansion HOLLOW has no cards.") in by_severity
    assert ("info", "Expansion DONE is already complete.") in by_severity
    assert ("error", "Expansion 'BAD' epic bucket sums to 2, expected 1.") in by_severity


def test_checklist_clean_definition(collection_factory):
    definition = CollectionDefinition(
        states=(collection_factory.empty(),), dust=0, is_new=(True,)
    )
    assert run_checklist(definition) == []
