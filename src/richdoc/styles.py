"""Block style presets and text-run mark resolution."""

from __future__ import annotations

import re
from typing import Final

from richdoc.schemas import DEFAULT_FOREGROUND, BlockStyle, Bold, Span, TextRun, TextStyle

FONT_WEIGHT_NORMAL: Final[int] = 400
FONT_WEIGHT_SEMIBOLD: Final[int] = 600
FONT_WEIGHT_BOLD: Final[int] = 700

ERROR_FOREGROUND: Final[str] = "#ef4444"

HEADING_STYLES: Final[dict[int, BlockStyle]] = {
    1: BlockStyle(name="heading-1", font_size=30, font_weight=FONT_WEIGHT_BOLD, margin_top=24, margin_bottom=16),
    2: BlockStyle(name="heading-2", font_size=24, font_weight=FONT_WEIGHT_BOLD, margin_top=20, margin_bottom=12),
    3: BlockStyle(name="heading-3", font_size=20, font_weight=FONT_WEIGHT_SEMIBOLD, margin_top=16, margin_bottom=12),
    4: BlockStyle(name="heading-4", font_size=18, font_weight=FONT_WEIGHT_SEMIBOLD, margin_top=12, margin_bottom=8),
    5: BlockStyle(name="heading-5", font_size=16, font_weight=FONT_WEIGHT_SEMIBOLD, margin_top=12, margin_bottom=8),
    6: BlockStyle(name="heading-6", font_size=14, font_weight=FONT_WEIGHT_SEMIBOLD, margin_top=12, margin_bottom=8),
}

PARAGRAPH_STYLE: Final[BlockStyle] = BlockStyle(name="paragraph", font_size=16, line_height=24, margin_bottom=16)
PLAIN_TEXT_STYLE: Final[BlockStyle] = BlockStyle(name="plain-text", font_size=16, line_height=24, padding=16)
PLACEHOLDER_STYLE: Final[BlockStyle] = BlockStyle(name="placeholder", font_size=16, italic=True, padding=16)
ERROR_STYLE: Final[BlockStyle] = BlockStyle(name="error", font_size=16, color=ERROR_FOREGROUND, padding=16)

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_FUNCTIONAL_COLOR_RE = re.compile(r"^(?:rgb|rgba|hsl|hsla)\(\s*[0-9.%,\s/+-]+\)$", re.IGNORECASE)
_NAMED_COLOR_RE = re.compile(r"^[a-zA-Z]+$")


def heading_style(level: int) -> BlockStyle:
    """Return the preset for a heading level; levels outside 1..6 use level 1."""
    return HEADING_STYLES.get(level, HEADING_STYLES[1])


def is_safe_color(token: str) -> bool:
    """Check a color token against hex, functional and named color grammars."""
    token = token.strip()
    return bool(
        _HEX_COLOR_RE.match(token)
        or _FUNCTIONAL_COLOR_RE.match(token)
        or _NAMED_COLOR_RE.match(token)
    )


def resolve_text_run(run: TextRun, *, validate_colors: bool = False) -> Span:
    """Resolve a run's marks into a span.

    Bold marks are idempotent. Each ``TextStyle`` carrying a color replaces
    the previous one, so the last color wins. Unknown marks are ignored.

    Args:
        run: The text run to resolve.
        validate_colors: If True, colors failing ``is_safe_color`` are dropped
            and the run keeps the default foreground.
    """
    bold = False
    color = DEFAULT_FOREGROUND
    for mark in run.marks:
        if isinstance(mark, Bold):
            bold = True
        elif isinstance(mark, TextStyle) and mark.color:
            if validate_colors and not is_safe_color(mark.color):
                continue
            color = mark.color
    return Span(text=run.text, bold=bold, color=color)
