"""Testing utilities for DustForge."""

from .factory import CollectionFactory, ExpansionFactory
from .fixtures import collection_factory, seeded_collection_factory, simulator
from .scripted import ScriptedRandom

__all__ = [
    "CollectionFactory",
    "ExpansionFactory",
    "ScriptedRandom",
    "collection_factory",
    "seeded_collection_factory",
    "simulator",
]
