"""
Unit Tests for Serialization Utilities

Tests for serialization and deserialization functions.
"""

import json
import pytest
from pathlib import Path

from examclass_toolkit.core.models import Document
from examclass_toolkit.core.utils.serialization import (
    deserialize_document,
    dumps_document,
    load_document_json,
    loads_document,
    save_document_json,
    serialize_document,
)
from examclass_toolkit.core.schemas.validator import ValidationError


class TestDocumentSerialization:
    """Tests for document serialization/deserialization."""

    def test_deserialize_when_valid_then_returns_document(self, exam_json):
        doc = deserialize_document(exam_json)
        assert isinstance(doc, Document)
        assert len(doc.blocks) == 4

    def test_serialize_when_document_given_then_returns_dict(self, exam_json):
        result = serialize_document(deserialize_document(exam_json))
        assert isinstance(result, dict)
        assert result == exam_json

    def test_deserialize_when_invalid_then_raises_error(self):
        with pytest.raises(ValidationError):
            deserialize_document({"blocks": []})

    def test_deserialize_when_validation_off_and_malformed_then_raises_error(self):
        data = {"pandoc-api-version": [1, 23], "meta": {}, "blocks": [{"t": "Div", "c": []}]}
        with pytest.raises(ValidationError, match="Cannot parse"):
            deserialize_document(data, validate=False)


class TestJsonText:
    """Tests for loads/dumps."""

    def test_loads_when_bad_json_then_raises_error(self):
        with pytest.raises(ValidationError, match="Invalid JSON"):
            loads_document("{not json")

    def test_dumps_when_unicode_then_not_escaped(self):
        doc = loads_document(json.dumps({
            "pandoc-api-version": [1, 23, 1],
            "meta": {},
            "blocks": [{"t": "Para", "c": [{"t": "Str", "c": "café"}]}],
        }))
        assert "café" in dumps_document(doc)


class TestDocumentFiles:
    """Tests for file load/save."""

    def test_save_then_load_when_valid_then_equal(self, exam_json, tmp_path: Path):
        doc = deserialize_document(exam_json)
        path = tmp_path / "nested" / "exam.json"

        save_document_json(doc, path)
        loaded = load_document_json(path)

        assert loaded == doc

    def test_load_when_missing_then_raises_file_not_found(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_document_json(tmp_path / "missing.json")

    def test_load_when_invalid_then_error_carries_path(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("[]", encoding="utf-8")

        with pytest.raises(ValidationError) as exc_info:
            load_document_json(path)
        assert exc_info.value.path == str(path)
