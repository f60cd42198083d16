from .fence import CLOSING_FENCES, OPENING_FENCES, Fence
from .segments import Segment, SegmentKind
from .spans import CodeBlockSpan, LinkSpan, Span, SpanKind

__all__ = [
    "Fence",
    "OPENING_FENCES",
    "CLOSING_FENCES",
    "Span",
    "SpanKind",
    "CodeBlockSpan",
    "LinkSpan",
    "Segment",
    "SegmentKind",
]
