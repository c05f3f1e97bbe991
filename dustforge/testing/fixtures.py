"""Pytest fixtures for DustForge."""

from __future__ import annotations

from random import Random

import pytest
from faker import Faker

from ..config import SimulatorConfig
from ..diagnostics.economy_simulator import EconomySimulator
from .factory import CollectionFactory, ExpansionFactory


@pytest.fixture()
def simulator() -> EconomySimulator:
    return EconomySimulator(SimulatorConfig())


@pytest.fixture()
def collection_factory() -> CollectionFactory:
    return seeded_collection_factory()


def seeded_collection_factory(seed: int = 0) -> CollectionFactory:
    """Helper for ad-hoc use where pytest fixtures are not available."""
    faker = Faker()
    faker.seed_instance(seed)
    return CollectionFactory(expansions=ExpansionFactory(faker=faker, rng=Random(seed)))
