# commentspans/core.py
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ._logging import resolve_logger
from .errors import InvalidSpanError
from .extract import find_code_blocks, find_links, merge_spans
from .models.segments import Segment, SegmentKind
from .models.spans import Span


def find_code_and_link_spans(
    text: Optional[str],
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> List[Span]:
    """
    Locate the code blocks and reference links in a documentation comment.

    Returns `CodeBlockSpan` and `LinkSpan` values ordered by start offset.
    Links inside code blocks are not reported, so no two spans overlap.
    Everything not covered by a span is ordinary prose.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__)
    code_blocks = find_code_blocks(text, logger=log)
    links = find_links(text, code_blocks, logger=log)
    return merge_spans(code_blocks, links)


def split_segments(
    text: Optional[str],
    spans: Optional[Sequence[Span]] = None,
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> List[Segment]:
    """
    Partition `text` into prose, code and link segments for rendering.

    The segments are in order, do not overlap and, joined, reproduce `text`
    exactly. When `spans` is None they are computed with
    `find_code_and_link_spans`. Raises InvalidSpanError if the given spans
    fall outside `text` or overlap each other.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__)
    if not text:
        return []
    if spans is None:
        spans = find_code_and_link_spans(text, logger=log)

    segments: List[Segment] = []
    cursor = 0
    for span in sorted(spans, key=lambda s: s.start):
        if span.end > len(text):
            raise InvalidSpanError(
                f"span [{span.start}, {span.end}) exceeds text length {len(text)}",
                span.start,
                span.end,
            )
        if span.start < cursor:
            raise InvalidSpanError(
                f"span [{span.start}, {span.end}) overlaps a previous span",
                span.start,
                span.end,
            )
        if span.start > cursor:
            segments.append(
                Segment(SegmentKind.PROSE, cursor, span.start, text[cursor:span.start])
            )
        segments.append(
            Segment(SegmentKind(span.kind.value), span.start, span.end, span.slice(text), span)
        )
        cursor = span.end

    if cursor < len(text):
        segments.append(Segment(SegmentKind.PROSE, cursor, len(text), text[cursor:]))

    log.debug("Split %d chars into %d segment(s)", len(text), len(segments))
    return segments
