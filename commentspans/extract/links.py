# commentspans/extract/links.py

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from .._logging import resolve_logger
from ..models.spans import CodeBlockSpan, LinkSpan
from ..utils.ranges import overlaps_any

# Shortest label and shortest target, so `[a](b)[c](d)` is two links.
_LINK_RE = re.compile(r"\[.+?\]\(.+?\)")


def find_links(
    text: Optional[str],
    code_blocks: Sequence[CodeBlockSpan] = (),
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> List[LinkSpan]:
    """
    Find markdown reference links, roughly of the form `[label](target)`.

    Links whose range shares any character with one of `code_blocks` are
    dropped. `code_blocks` should come from `find_code_blocks` on the same
    text. Never raises.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__)
    if not text:
        return []

    code_ranges = [block.range for block in code_blocks]
    links: List[LinkSpan] = []
    suppressed = 0
    for m in _LINK_RE.finditer(text):
        if overlaps_any(m.span(), code_ranges):
            suppressed += 1
            continue
        links.append(LinkSpan(start=m.start(), end=m.end(), text=m.group(0)))

    log.debug("Found %d link(s), %d inside code blocks", len(links), suppressed)
    return links
