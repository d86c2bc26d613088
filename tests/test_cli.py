"""
Tests for the examclass-filter command line entry point.
"""

import io
import json
import logging

import pytest

from examclass_toolkit.cli import build_parser, main


class _Streams:
    """Binary-backed stdin/stdout with a non-UTF-8 text layer."""

    def __init__(self, monkeypatch):
        self._monkeypatch = monkeypatch
        self.stdout = io.TextIOWrapper(io.BytesIO(), encoding="cp1252")

    def feed(self, data) -> None:
        if isinstance(data, str):
            data = data.encode("utf-8")
        # Patched here, during the test call, so pytest's capture does not replace it
        self._monkeypatch.setattr("sys.stdout", self.stdout)
        self._monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(data), encoding="cp1252"))

    @property
    def output(self) -> str:
        self.stdout.flush()
        return self.stdout.buffer.getvalue().decode("utf-8")


@pytest.fixture
def streams(monkeypatch) -> _Streams:
    return _Streams(monkeypatch)


class TestMain:
    """Tests for main()."""

    def test_main_when_valid_document_then_filtered_json_on_stdout(self, exam_json, streams):
        streams.feed(json.dumps(exam_json))

        assert main(["latex"]) == 0

        output = json.loads(streams.output)
        assert output["blocks"][1] == {"t": "RawBlock", "c": ["tex", "\\begin{questions}"]}
        assert output["blocks"][2] == {"t": "RawBlock", "c": ["tex", "\\titledquestion{Warm-up}[5]"]}

    def test_main_when_non_ascii_title_then_utf8_regardless_of_locale(self, exam_json, streams):
        exam_json["blocks"][2]["c"][0][2][0] = ["title", "問題"]
        streams.feed(json.dumps(exam_json, ensure_ascii=False))

        assert main(["latex"]) == 0

        output = json.loads(streams.output)
        assert output["blocks"][2] == {"t": "RawBlock", "c": ["tex", "\\titledquestion{問題}[5]"]}

    def test_main_when_input_not_utf8_then_exit_one(self, streams, caplog):
        streams.feed(b'{"blocks": "\xff"}')

        with caplog.at_level(logging.ERROR):
            assert main([]) == 1

        assert streams.output == ""
        assert "not UTF-8" in caplog.text

    def test_main_when_no_relocate_then_preface_left(self, exam_json, streams):
        streams.feed(json.dumps(exam_json))

        assert main(["--no-relocate"]) == 0

        output = json.loads(streams.output)
        assert output["blocks"][0] == {"t": "RawBlock", "c": ["tex", "\\begin{questions}"]}

    def test_main_when_invalid_json_then_exit_one(self, streams, caplog):
        streams.feed("not json")

        with caplog.at_level(logging.ERROR):
            assert main([]) == 1

        assert streams.output == ""
        assert "Invalid Pandoc document" in caplog.text

    def test_main_when_strict_and_schema_violation_then_exit_one(self, exam_json, streams):
        exam_json["blocks"][2]["c"][0][2] = [["points", 5]]
        streams.feed(json.dumps(exam_json))

        assert main(["latex", "--strict"]) == 1


class TestParser:
    """Tests for argument parsing."""

    def test_parser_when_no_args_then_defaults(self):
        args = build_parser().parse_args([])
        assert args.format == "latex"
        assert not args.wrap_questions
        assert not args.no_relocate
        assert not args.strict
