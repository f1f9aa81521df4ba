"""Tests for style presets and mark resolution."""

from __future__ import annotations

import pytest

from richdoc.schemas import DEFAULT_FOREGROUND, Bold, Span, TextRun, TextStyle, UnknownMark
from richdoc.styles import (
    HEADING_STYLES,
    heading_style,
    is_safe_color,
    resolve_text_run,
)


class TestHeadingStyles:
    """Tests for heading presets."""

    def test_six_presets(self) -> None:
        """There is one preset per heading level."""
        assert sorted(HEADING_STYLES) == [1, 2, 3, 4, 5, 6]

    def test_size_and_weight_decrease_with_level(self) -> None:
        """Deeper headings are never larger or heavier."""
        styles = [HEADING_STYLES[level] for level in range(1, 7)]
        for upper, lower in zip(styles, styles[1:]):
            assert lower.font_size < upper.font_size
            assert lower.font_weight <= upper.font_weight

    @pytest.mark.parametrize("level", [0, 7, 9, -1])
    def test_out_of_range_uses_level_one(self, level: int) -> None:
        """Levels outside 1..6 fall back to the level-1 preset."""
        assert heading_style(level) == HEADING_STYLES[1]

    def test_in_range_level(self) -> None:
        """Valid levels select their own preset."""
        assert heading_style(3).name == "heading-3"


class TestResolveTextRun:
    """Tests for resolve_text_run."""

    def test_default_style(self) -> None:
        """A run without marks uses normal weight and the default color."""
        span = resolve_text_run(TextRun(text="hello"))

        assert span == Span(text="hello", bold=False, color=DEFAULT_FOREGROUND)

    def test_bold_and_color_compose(self) -> None:
        """Bold and color apply together."""
        span = resolve_text_run(
            TextRun(text="x", marks=(Bold(), TextStyle(color="#ff0000")))
        )

        assert span.bold is True
        assert span.color == "#ff0000"

    def test_duplicate_bold_is_idempotent(self) -> None:
        """A second bold mark changes nothing."""
        once = resolve_text_run(TextRun(text="x", marks=(Bold(),)))
        twice = resolve_text_run(TextRun(text="x", marks=(Bold(), Bold())))

        assert once == twice

    def test_last_color_wins(self) -> None:
        """With several textStyle marks the last color applies."""
        span = resolve_text_run(
            TextRun(text="x", marks=(TextStyle(color="red"), TextStyle(color="blue")))
        )

        assert span.color == "blue"

    def test_colorless_text_style_keeps_previous_color(self) -> None:
        """A textStyle mark without color does not reset the color."""
        span = resolve_text_run(
            TextRun(text="x", marks=(TextStyle(color="red"), TextStyle()))
        )

        assert span.color == "red"

    def test_unknown_marks_ignored(self) -> None:
        """Unknown marks have no effect."""
        span = resolve_text_run(TextRun(text="x", marks=(UnknownMark(type="italic"),)))

        assert span == Span(text="x")

    def test_empty_text_yields_empty_span(self) -> None:
        """Empty runs still produce a zero-length span."""
        assert resolve_text_run(TextRun(text="")) == Span(text="")

    def test_color_passed_through_by_default(self) -> None:
        """Without validation any color token is kept verbatim."""
        span = resolve_text_run(TextRun(text="x", marks=(TextStyle(color="url(javascript:x)"),)))

        assert span.color == "url(javascript:x)"

    def test_validation_drops_unsafe_color(self) -> None:
        """With validation an unsafe token leaves the earlier color in place."""
        span = resolve_text_run(
            TextRun(text="x", marks=(TextStyle(color="#00ff00"), TextStyle(color="url(x)"))),
            validate_colors=True,
        )

        assert span.color == "#00ff00"

    def test_validation_keeps_safe_color(self) -> None:
        """With validation a hex color is still applied."""
        span = resolve_text_run(
            TextRun(text="x", marks=(TextStyle(color="#ff0000"),)), validate_colors=True
        )

        assert span.color == "#ff0000"


class TestIsSafeColor:
    """Tests for is_safe_color."""

    @pytest.mark.parametrize(
        "token",
        ["#fff", "#ffff", "#ff0000", "#ff000080", "red", "rgb(255, 0, 0)", "rgba(0,0,0,0.5)", "hsl(120, 50%, 50%)"],
    )
    def test_accepts(self, token: str) -> None:
        """Common color notations are accepted."""
        assert is_safe_color(token)

    @pytest.mark.parametrize(
        "token",
        ["", "#ff", "#gggggg", "url(x)", "red; background: blue", "expression(alert(1))", "12"],
    )
    def test_rejects(self, token: str) -> None:
        """Anything else is rejected."""
        assert not is_safe_color(token)
