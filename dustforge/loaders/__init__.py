"""Loaders for declarative collection definitions."""

from .json_loader import (
    CollectionDefinition,
    load_collection_from_json,
    parse_collection_dict,
    validate_collection_dict,
    validate_collection_file,
)

__all__ = [
    "CollectionDefinition",
    "load_collection_from_json",
    "parse_collection_dict",
    "validate_collection_dict",
    "validate_collection_file",
]
