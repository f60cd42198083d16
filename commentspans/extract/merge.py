from __future__ import annotations

from typing import List, Sequence

from ..models.spans import CodeBlockSpan, LinkSpan, Span


def merge_spans(
    code_blocks: Sequence[CodeBlockSpan],
    links: Sequence[LinkSpan],
) -> List[Span]:
    """
    Combine code and link spans into one list ordered by start offset.

    Spans starting at the same offset keep their input order, with code
    spans ahead of links.
    """
    combined: List[Span] = [*code_blocks, *links]
    # sorted() is stable, which gives the tie-break above.
    return sorted(combined, key=lambda span: span.start)
