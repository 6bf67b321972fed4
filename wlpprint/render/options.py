"""Render modes and layout configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import math

from wlpprint.render.pretty import ribbon_width


class RenderMode(StrEnum):
    """Which renderer turns a document into a simple document."""

    PRETTY = "pretty"
    COMPACT = "compact"


DEFAULT_PAGE_WIDTH = 80
DEFAULT_RIBBON_FRACTION = 0.4


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Page geometry for the pretty renderer.

    Out-of-range ribbon fractions are clamped by the renderer. A page width of
    zero or less is allowed and breaks every alternative that can break.
    """

    page_width: int = DEFAULT_PAGE_WIDTH
    ribbon_fraction: float = DEFAULT_RIBBON_FRACTION
    mode: RenderMode = RenderMode.PRETTY

    def __post_init__(self):
        if math.isnan(self.ribbon_fraction):
            raise ValueError("ribbon_fraction cannot be NaN")

    @staticmethod
    def for_mode(mode: RenderMode) -> "RenderOptions":
        return RenderOptions(mode=mode)

    @property
    def ribbon_width(self) -> int:
        return ribbon_width(self.ribbon_fraction, self.page_width)


__all__ = ["DEFAULT_PAGE_WIDTH", "DEFAULT_RIBBON_FRACTION", "RenderMode", "RenderOptions"]
