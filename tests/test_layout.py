import pytest

from livesplit_term.layout import compute_layout, region_heights
from livesplit_term.region import Region


@pytest.mark.parametrize("n", [0, 1, 4, 5, 30])
def test_splits_height_is_n_plus_3(n):
    assert region_heights(n)[1] == n + 3


def test_four_segments():
    heights = region_heights(4)
    assert heights == [3, 7, 2, 1, 1, 1]
    assert sum(heights) == 15


def test_regions_stack_inside_margin():
    regions = compute_layout(Region(0, 0, 80, 24), 5)
    assert [r[3] for r in regions] == [3, 8, 2, 1, 1, 1]
    assert regions[0] == Region(1, 1, 78, 3)
    assert regions[1][1] == 4
    assert regions[-1][1] == 1 + 3 + 8 + 2 + 1 + 1


def test_zero_segments_is_degenerate_not_empty():
    regions = compute_layout(Region(0, 0, 80, 24), 0)
    assert regions[1][3] == 3


def test_small_terminal_clips():
    regions = compute_layout(Region(0, 0, 40, 10), 5)
    assert [r[3] for r in regions] == [3, 5, 0, 0, 0, 0]


def test_region_shrink_never_negative():
    assert Region(0, 0, 1, 1).shrink(1) == Region(1, 1, 0, 0)
