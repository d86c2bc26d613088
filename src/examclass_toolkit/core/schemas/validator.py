"""
Schema Validation Utilities

Validates Pandoc JSON documents before they are deserialized.

Two levels:
- Basic checks (always): document keys, API version, and the shapes of
  the block types the toolkit rewrites (Div, RawBlock, BlockQuote)
- Strict mode: full ``jsonschema`` validation against
  ``document.schema.json``

Structural exam checks that do not stop a filter run (e.g. a solution
nested in another solution) are reported as issue strings instead of
exceptions.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, List

import jsonschema

from ..models.blocks import Block

# Pandoc JSON API major version the toolkit understands.
SUPPORTED_API_MAJOR = 1


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_document(data: Any, *, strict: bool = False) -> None:
    """
    Validate a Pandoc JSON document.

    Args:
        data: Decoded JSON value
        strict: If True, also validate against the JSON schema

    Raises:
        ValidationError: If data is not a usable Pandoc document
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Pandoc document must be a JSON object, got {type(data).__name__}",
        )

    required = ["pandoc-api-version", "meta", "blocks"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )

    version = data["pandoc-api-version"]
    if not (isinstance(version, list) and version and isinstance(version[0], int)):
        raise ValidationError(
            f"Invalid pandoc-api-version: {version!r}",
            path="pandoc-api-version"
        )
    if version[0] != SUPPORTED_API_MAJOR:
        raise ValidationError(
            f"Unsupported pandoc-api-version: {version} (expected {SUPPORTED_API_MAJOR}.x)",
            path="pandoc-api-version"
        )

    blocks = data["blocks"]
    if not isinstance(blocks, list):
        raise ValidationError("blocks must be a list", path="blocks")
    for i, block in enumerate(blocks):
        _validate_block(block, f"blocks[{i}]")

    if strict:
        schema = _load_schema("document")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message]
            )


def _validate_block(data: Any, path: str) -> None:
    """Validate a block recursively."""
    if not isinstance(data, dict) or not isinstance(data.get("t"), str):
        raise ValidationError(
            "Block must be an object with a string 't'",
            path=path
        )

    kind = data["t"]
    content = data.get("c")

    if kind == "Div":
        if not (isinstance(content, list) and len(content) == 2):
            raise ValidationError(
                "Div content must be [attr, blocks]",
                path=f"{path}.c"
            )
        _validate_attr(content[0], f"{path}.c[0]")
        if not isinstance(content[1], list):
            raise ValidationError(
                "Div children must be a list",
                path=f"{path}.c[1]"
            )
        for i, child in enumerate(content[1]):
            _validate_block(child, f"{path}.c[1][{i}]")

    elif kind == "BlockQuote":
        if not isinstance(content, list):
            raise ValidationError(
                "BlockQuote content must be a list of blocks",
                path=f"{path}.c"
            )
        for i, child in enumerate(content):
            _validate_block(child, f"{path}.c[{i}]")

    elif kind == "RawBlock":
        if not (
            isinstance(content, list)
            and len(content) == 2
            and all(isinstance(part, str) for part in content)
        ):
            raise ValidationError(
                "RawBlock content must be [format, text]",
                path=f"{path}.c"
            )


def _validate_attr(data: Any, path: str) -> None:
    """Validate a Pandoc attribute triple."""
    if not (isinstance(data, list) and len(data) == 3):
        raise ValidationError(
            "Attr must be [id, classes, key/values]",
            path=path
        )
    identifier, classes, attributes = data
    if not isinstance(identifier, str):
        raise ValidationError("Attr id must be a string", path=f"{path}[0]")
    if not (isinstance(classes, list) and all(isinstance(c, str) for c in classes)):
        raise ValidationError("Attr classes must be strings", path=f"{path}[1]")
    if not isinstance(attributes, list):
        raise ValidationError("Attr key/values must be a list", path=f"{path}[2]")
    for i, pair in enumerate(attributes):
        if not (isinstance(pair, list) and len(pair) == 2):
            raise ValidationError(
                f"Attr key/value must be a pair, got {pair!r}",
                path=f"{path}[2][{i}]"
            )


def check_solution_nesting(blocks: Iterable[Block]) -> List[str]:
    """
    Report solutions nested inside other solutions.

    Args:
        blocks: Top-level blocks to scan

    Returns:
        One issue string per offending solution, with its block path
    """
    issues: List[str] = []

    def _walk(block: Block, path: str, inside_solution: bool) -> None:
        if block.is_solution:
            if inside_solution:
                issues.append(f"{path}: solution nested inside another solution")
            inside_solution = True
        for i, child in enumerate(block.children):
            _walk(child, f"{path}.children[{i}]", inside_solution)

    for i, block in enumerate(blocks):
        _walk(block, f"blocks[{i}]", False)
    return issues
