"""
Utils Package

Serialization and utility functions.
"""

from .serialization import (
    serialize_document,
    deserialize_document,
    loads_document,
    dumps_document,
    load_document_json,
    save_document_json,
)

__all__ = [
    "serialize_document",
    "deserialize_document",
    "loads_document",
    "dumps_document",
    "load_document_json",
    "save_document_json",
]
