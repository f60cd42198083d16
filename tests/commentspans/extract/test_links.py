from commentspans.extract import find_code_blocks, find_links
from commentspans.models import CodeBlockSpan, LinkSpan, SpanKind


def _code(start: int, end: int) -> CodeBlockSpan:
    return CodeBlockSpan(
        start=start,
        end=end,
        fence_token="```",
        closing_token="```",
        prefix_line="```",
        postfix_line="```",
        body="x" * (end - start),
    )


def test_inline_links_without_fences():
    text = "See [inline](url) for [doc](@code)"
    links = find_links(text, find_code_blocks(text))

    assert [link.text for link in links] == ["[inline](url)", "[doc](@code)"]
    assert links[0].range == (4, 17)
    assert links[1].start == text.index("[doc]")
    assert all(link.kind is SpanKind.LINK for link in links)


def test_shortest_match_splits_adjacent_links():
    links = find_links("[a](b)[c](d)")
    assert [(link.text, link.start, link.end) for link in links] == [
        ("[a](b)", 0, 6),
        ("[c](d)", 6, 12),
    ]


def test_duplicate_links_get_distinct_ranges():
    text = "[a](b) and [a](b)"
    first, second = find_links(text)
    assert (first.start, second.start) == (0, 11)
    assert first.slice(text) == second.slice(text) == "[a](b)"


def test_links_inside_code_are_dropped(doxygen_comment):
    code = find_code_blocks(doxygen_comment)
    assert len(code) == 1
    assert find_links(doxygen_comment, code) == []


def test_links_remain_when_fences_do_not_pair():
    text = "Example:\n```\n[x](y)\n~~~\n"
    code = find_code_blocks(text)
    assert code == []
    assert find_links(text, code) == [LinkSpan(start=13, end=19, text="[x](y)")]


def test_overlap_filter_uses_given_code_spans():
    text = "[a](b) [c](d)"
    links = find_links(text, [_code(0, 5)])
    assert [link.text for link in links] == ["[c](d)"]


def test_link_outside_code_is_kept(fenced_comment):
    links = find_links(fenced_comment, find_code_blocks(fenced_comment))
    assert [link.text for link in links] == ["[a link](http://x)"]


def test_non_links():
    assert find_links("[](x)") == []
    assert find_links("[label] (target)") == []
    assert find_links("[a\nb](c)") == []
    assert find_links(None) == []
    assert find_links("") == []
