from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .spans import Span


class SegmentKind(str, Enum):
    PROSE = "prose"
    CODE = "code"
    LINK = "link"


@dataclass(frozen=True)
class Segment:
    """One piece of a comment partitioned for rendering."""

    kind: SegmentKind
    start: int
    end: int
    text: str
    span: Optional[Span] = None  # None for prose
