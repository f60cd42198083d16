# commentspans/extract/code_blocks.py

from __future__ import annotations

import logging
import re
from typing import List, Optional

from .._logging import resolve_logger
from ..models.fence import CLOSING_FENCES, OPENING_FENCES, Fence
from ..models.spans import CodeBlockSpan

# A block is a boundary line, a body, and a closing boundary line, each
# bounded by line breaks. The body is lazy so the first closer wins: the
# opening token again, or @endcode. Pairs are validated after matching.
_OPENERS = "|".join(re.escape(fence.value) for fence in OPENING_FENCES)
_OTHER_CLOSERS = "|".join(
    re.escape(fence.value) for fence in CLOSING_FENCES if fence not in OPENING_FENCES
)

_CODE_BLOCK_RE = re.compile(
    r"\r?\n"
    rf"(?P<prefix>[ \t]*(?P<begin>{_OPENERS})[ \t]*)"
    r"\r?\n"
    r"(?P<body>[\s\S]*?)"
    r"\r?\n"
    rf"(?P<postfix>[ \t]*(?P<end>(?P=begin)|{_OTHER_CLOSERS})[ \t]*)"
    r"\r?\n"
)


def is_valid_pairing(begin: str, end: str) -> bool:
    """Return True if a block opened with `begin` may be closed by `end`."""
    if begin == Fence.DOXYGEN and end == Fence.DOXYGEN_END:
        return True
    return begin == end


def find_code_blocks(
    text: Optional[str],
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> List[CodeBlockSpan]:
    """
    Find fenced source-code blocks in a documentation comment.

    A block is any text between doxygen style @code/@endcode markers or
    between markdown ``` or ~~~ markers. Each marker must sit alone on its
    own line (surrounding spaces and tabs allowed) and be preceded and
    followed by a line break.

    Blocks are returned in document order and never overlap: scanning for
    the next block resumes after the previous block's closing line. Each
    span's range is the exact position of its body in `text`, taken from
    the match itself, so blocks with identical bodies still get distinct
    ranges.

    Never raises; text that does not form a valid block yields no span.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__)
    if not text:
        return []

    blocks: List[CodeBlockSpan] = []
    discarded = 0
    for m in _CODE_BLOCK_RE.finditer(text):
        begin = m.group("begin")
        end = m.group("end")
        if not is_valid_pairing(begin, end):
            discarded += 1
            log.debug("Ignoring block opened with %r and closed with %r", begin, end)
            continue

        start, stop = m.span("body")
        blocks.append(
            CodeBlockSpan(
                start=start,
                end=stop,
                fence_token=begin,
                closing_token=end,
                prefix_line=m.group("prefix"),
                postfix_line=m.group("postfix"),
                body=m.group("body"),
            )
        )

    log.debug("Found %d code block(s), discarded %d", len(blocks), discarded)
    return blocks
