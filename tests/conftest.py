"""Test setup for richdoc."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def text(value: str, *marks: dict[str, Any]) -> dict[str, Any]:
    """Build a wire-format text node."""
    node: dict[str, Any] = {"type": "text", "text": value}
    if marks:
        node["marks"] = list(marks)
    return node


def doc(*content: dict[str, Any]) -> dict[str, Any]:
    """Build a wire-format document node."""
    return {"type": "doc", "content": list(content)}


@pytest.fixture
def sample_payload() -> str:
    """A document exercising every supported node and mark type."""
    return json.dumps(
        doc(
            {"type": "heading", "attrs": {"level": 1}, "content": [text("Course overview")]},
            {
                "type": "paragraph",
                "content": [
                    text("Learn "),
                    text("fast", {"type": "bold"}),
                    text(" and "),
                    text("well", {"type": "textStyle", "attrs": {"color": "#16a34a"}}),
                ],
            },
            {"type": "paragraph", "content": []},
            {
                "type": "bulletList",
                "content": [
                    {"type": "listItem", "content": [{"type": "paragraph", "content": [text("One")]}]},
                    {"type": "listItem", "content": [{"type": "paragraph", "content": [text("Two")]}]},
                ],
            },
        )
    )
