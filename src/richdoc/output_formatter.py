"""Format render instructions into a readable outline."""

from __future__ import annotations

from typing import Iterable

from richdoc.schemas import ListRow, Spacer, TextBlock
from richdoc.schemas.instructions import RenderInstruction


def format_instructions(instructions: Iterable[RenderInstruction]) -> str:
    """Create an indented outline with one line per instruction."""
    return "\n".join(_format_lines(instructions, indent=0))


def count_instructions(instructions: Iterable[RenderInstruction]) -> int:
    """Count instructions, including those nested inside list rows."""
    total = 0
    for instruction in instructions:
        total += 1
        if isinstance(instruction, ListRow):
            total += count_instructions(instruction.children)
    return total


def _format_lines(instructions: Iterable[RenderInstruction], indent: int) -> list[str]:
    lines: list[str] = []
    prefix = "  " * indent
    for instruction in instructions:
        if isinstance(instruction, TextBlock):
            lines.append(f"{prefix}[{instruction.style.name}] {instruction.text}".rstrip())
        elif isinstance(instruction, Spacer):
            lines.append(f"{prefix}[spacer {instruction.height}]")
        elif isinstance(instruction, ListRow):
            lines.append(f"{prefix}{instruction.marker}")
            lines.extend(_format_lines(instruction.children, indent + 1))
    return lines
