from commentspans.utils.ranges import overlaps_any, ranges_overlap


def test_ranges_overlap():
    assert ranges_overlap((0, 5), (4, 10))
    assert ranges_overlap((4, 10), (0, 5))
    assert ranges_overlap((0, 10), (3, 4))
    assert ranges_overlap((2, 3), (2, 3))


def test_touching_ranges_do_not_overlap():
    assert not ranges_overlap((0, 5), (5, 10))
    assert not ranges_overlap((5, 10), (0, 5))
    assert not ranges_overlap((0, 2), (7, 9))


def test_overlaps_any():
    code = [(10, 20), (30, 40)]
    assert overlaps_any((15, 16), code)
    assert overlaps_any((39, 45), code)
    assert not overlaps_any((20, 30), code)
    assert not overlaps_any((0, 3), [])
