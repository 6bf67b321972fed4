"""Construction-boundary errors for document values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class ErrorSpec:
    code: str
    message: str
    hint: str | None = None


DOC_TEXT_CONTAINS_NEWLINE: Final[ErrorSpec] = ErrorSpec(
    code="DOC_TEXT_CONTAINS_NEWLINE",
    message="Text documents cannot contain a line feed.",
    hint="Use `string()` to turn embedded newlines into `line` documents.",
)

DOC_CHAR_IS_NEWLINE: Final[ErrorSpec] = ErrorSpec(
    code="DOC_CHAR_IS_NEWLINE",
    message="Char documents cannot hold a line feed.",
    hint="Use `line` or `hardline` for line breaks.",
)

DOC_CHAR_NOT_SINGLE: Final[ErrorSpec] = ErrorSpec(
    code="DOC_CHAR_NOT_SINGLE",
    message="Char documents hold exactly one character.",
    hint="Use `text()` for longer runs.",
)


class DocumentError(ValueError):
    """Raised when a smart constructor is handed a value that breaks a document invariant."""

    def __init__(self, spec: ErrorSpec, value: str) -> None:
        super().__init__(f"{spec.message} Got {value!r}.")
        self.spec = spec
        self.value = value

    @property
    def code(self) -> str:
        return self.spec.code


__all__ = [
    "DOC_CHAR_IS_NEWLINE",
    "DOC_CHAR_NOT_SINGLE",
    "DOC_TEXT_CONTAINS_NEWLINE",
    "DocumentError",
    "ErrorSpec",
]
