from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Tuple

from ..errors import InvalidSpanError


class SpanKind(str, Enum):
    CODE = "code"
    LINK = "link"


@dataclass(frozen=True)
class Span:
    """A half-open character range [start, end) within a comment's text."""

    start: int
    end: int

    kind: ClassVar[SpanKind]

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise InvalidSpanError(
                f"invalid span range [{self.start}, {self.end})", self.start, self.end
            )

    @property
    def range(self) -> Tuple[int, int]:
        return (self.start, self.end)

    def slice(self, text: str) -> str:
        return text[self.start:self.end]


@dataclass(frozen=True)
class CodeBlockSpan(Span):
    """
    A fenced source-code block.

    The range covers `body` only; `prefix_line` and `postfix_line` hold the
    complete fence lines, surrounding whitespace included.
    """

    fence_token: str
    closing_token: str
    prefix_line: str
    postfix_line: str
    body: str

    kind: ClassVar[SpanKind] = SpanKind.CODE


@dataclass(frozen=True)
class LinkSpan(Span):
    """A markdown reference link such as `[label](target)`."""

    text: str

    kind: ClassVar[SpanKind] = SpanKind.LINK
