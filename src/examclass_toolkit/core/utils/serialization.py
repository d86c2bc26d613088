"""
Serialization Utilities

Provides to/from JSON utilities for Pandoc documents.

- ``serialize_*`` / ``deserialize_*`` convert between models and dicts
- ``loads_*`` / ``dumps_*`` work on JSON text (the filter's stdin/stdout)
- ``load_*`` / ``save_*`` work on files
- Validation runs before deserialization unless disabled
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..models.document import Document
from ..schemas.validator import validate_document, ValidationError


# ─────────────────────────────────────────────────────────────────────────────
# Document Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_document(document: Document) -> dict[str, Any]:
    """
    Serialize a Document to a Pandoc JSON dictionary.

    Args:
        document: Document instance to serialize

    Returns:
        Dictionary suitable for JSON serialization
    """
    return document.to_dict()


def deserialize_document(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
) -> Document:
    """
    Deserialize a Document from a Pandoc JSON dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate the document shape first
        strict: Whether validation also runs the JSON schema

    Returns:
        Document instance

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_document(data, strict=strict)
    try:
        return Document.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise ValidationError(f"Cannot parse Pandoc document: {e}", errors=[str(e)])


# ─────────────────────────────────────────────────────────────────────────────
# JSON Text / Files
# ─────────────────────────────────────────────────────────────────────────────

def loads_document(text: str, *, validate: bool = True, strict: bool = False) -> Document:
    """
    Parse a Document from Pandoc JSON text.

    Raises:
        ValidationError: If the text is not valid JSON or not a document
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON: {e}", errors=[str(e)])
    return deserialize_document(data, validate=validate, strict=strict)


def dumps_document(document: Document) -> str:
    """Render a Document as compact Pandoc JSON text."""
    return json.dumps(serialize_document(document), ensure_ascii=False)


def load_document_json(path: Path, *, validate: bool = True, strict: bool = False) -> Document:
    """
    Load a Document from a Pandoc JSON file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If the file is not a valid document
    """
    if not path.exists():
        raise FileNotFoundError(f"Document file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        text = f.read()

    try:
        return loads_document(text, validate=validate, strict=strict)
    except ValidationError as e:
        raise ValidationError(str(e), path=str(path), errors=e.errors)


def save_document_json(document: Document, path: Path) -> None:
    """
    Save a Document to a Pandoc JSON file.

    Args:
        document: Document to save
        path: Output path
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(serialize_document(document), f, ensure_ascii=False)
