from .core import find_code_and_link_spans, split_segments
from .errors import InvalidSpanError, SpanError
from .extract import find_code_blocks, find_links, is_valid_pairing, merge_spans
from .models import (
    CodeBlockSpan,
    Fence,
    LinkSpan,
    Segment,
    SegmentKind,
    Span,
    SpanKind,
)
from .utils.ranges import ranges_overlap

__all__ = [
    "find_code_and_link_spans",
    "split_segments",
    "find_code_blocks",
    "find_links",
    "merge_spans",
    "is_valid_pairing",
    "ranges_overlap",
    "Span",
    "SpanKind",
    "CodeBlockSpan",
    "LinkSpan",
    "Segment",
    "SegmentKind",
    "Fence",
    "SpanError",
    "InvalidSpanError",
]
