from dustforge.testing.fixtures import collection_factory, simulator  # noqa: F401
