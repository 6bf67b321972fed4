"""Simple documents: the decision-free output of a renderer."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class SChar:
    char: str


@dataclass(frozen=True, slots=True)
class SText:
    length: int
    text: str


@dataclass(frozen=True, slots=True)
class SLine:
    """Line break; the next line starts with `indent` spaces."""

    indent: int


SimpleToken: TypeAlias = SChar | SText | SLine


@dataclass(frozen=True, slots=True)
class SimpleDocument:
    """Rendered token sequence. The end of `tokens` is the end-of-document marker."""

    tokens: tuple[SimpleToken, ...] = ()

    @staticmethod
    def of(tokens: Iterable[SimpleToken]) -> "SimpleDocument":
        return SimpleDocument(tuple(tokens))

    def __iter__(self) -> Iterator[SimpleToken]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def is_empty(self) -> bool:
        return not self.tokens

    def line_count(self) -> int:
        """Number of output lines (an empty document still has one)."""
        return 1 + sum(1 for tok in self.tokens if isinstance(tok, SLine))

    def line_widths(self) -> list[int]:
        """Width of every output line, indentation included."""
        widths = [0]
        for tok in self.tokens:
            if isinstance(tok, SChar):
                widths[-1] += 1
            elif isinstance(tok, SText):
                widths[-1] += tok.length
            else:
                widths.append(tok.indent)
        return widths


__all__ = ["SChar", "SLine", "SText", "SimpleDocument", "SimpleToken"]
