import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import examclass_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


def part_div(*children, title=None, points=None, classes=("part",), **extra) -> dict:
    """Pandoc JSON for a container Div."""
    attributes = []
    if title is not None:
        attributes.append(["title", title])
    if points is not None:
        attributes.append(["points", points])
    attributes.extend([k, v] for k, v in extra.items())
    return {"t": "Div", "c": [["", list(classes), attributes], list(children)]}


def para(text: str) -> dict:
    inlines = []
    for i, word in enumerate(text.split(" ")):
        if i:
            inlines.append({"t": "Space"})
        inlines.append({"t": "Str", "c": word})
    return {"t": "Para", "c": inlines}


def raw(text: str) -> dict:
    return {"t": "RawBlock", "c": ["tex", text]}


# Common test fixtures
@pytest.fixture
def exam_json() -> dict:
    """A small exam: preface, one titled question with two parts and a solution."""
    return {
        "pandoc-api-version": [1, 23, 1],
        "meta": {},
        "blocks": [
            raw("\\begin{questions}"),
            para("Answer all questions."),
            part_div(
                para("Convert the numbers."),
                part_div(para("Binary."), points="2"),
                part_div(
                    para("Hex."),
                    {"t": "Div", "c": [["", ["solution"], [["space", "1in"]]], [para("FF")]]},
                    points="3",
                ),
                title="Warm-up",
                points="5",
            ),
            raw("\\end{questions}"),
        ],
    }
