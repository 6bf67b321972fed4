"""Render run result carriers for pipeline entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from wlpprint.doc.model import Document
from wlpprint.render.options import RenderOptions
from wlpprint.render.sdoc import SimpleDocument


@dataclass(frozen=True, slots=True)
class RenderRunResult:
    """Result of rendering one document with one set of options."""

    document: Document
    options: RenderOptions
    simple: SimpleDocument
    text: str

    @property
    def line_count(self) -> int:
        return self.simple.line_count()

    @property
    def max_line_width(self) -> int:
        return max(self.simple.line_widths())

    def overflows(self) -> bool:
        """Whether any output line is wider than the page."""
        return self.max_line_width > self.options.page_width
