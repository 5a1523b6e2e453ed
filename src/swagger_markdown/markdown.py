"""Markdown section nodes.

Renderers build a list of blocks and turn it into text at the very end, so
each section can be produced and tested on its own.
"""

from dataclasses import dataclass, field

FENCE = "```"


@dataclass(frozen=True)
class Heading:
    level: int
    text: str

    def render(self) -> str:
        return f"{'#' * self.level} {self.text}"


@dataclass(frozen=True)
class Paragraph:
    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class CodeBlock:
    """A fenced block; ``language`` is the info string after the fence."""

    language: str
    body: str

    def render(self) -> str:
        return f"{FENCE}{self.language}\n{self.body}\n{FENCE}"


@dataclass(frozen=True)
class Table:
    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...] = field(default_factory=tuple)

    def render(self) -> str:
        lines = [" | ".join(self.headers), "|".join("---" for _ in self.headers)]
        lines.extend("|".join(row) for row in self.rows)
        return "\n".join(lines)


Block = Heading | Paragraph | CodeBlock | Table


def code_span(text: str) -> str:
    return f"`{text}`"


def render_blocks(blocks: list[Block]) -> str:
    """Join blocks with one blank line between them, ending in a newline."""
    parts = [block.render() for block in blocks]
    parts = [part for part in parts if part]
    if not parts:
        return ""
    return "\n\n".join(parts) + "\n"
