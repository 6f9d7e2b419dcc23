from typing import List

from .region import Region

MARGIN = 1

TITLE_ROWS = 3
SPLITS_EXTRA_ROWS = 3  # header, rule under it, bottom padding
TIMER_ROWS = 2
INFO_ROWS = 1


def region_heights(segment_count: int) -> List[int]:
    '''Rows for title, splits, timer, previous segment, sum of best, possible time save.'''
    return [
        TITLE_ROWS,
        max(0, segment_count) + SPLITS_EXTRA_ROWS,
        TIMER_ROWS,
        INFO_ROWS,
        INFO_ROWS,
        INFO_ROWS,
    ]


def compute_layout(area: Region, segment_count: int, margin: int = MARGIN) -> List[Region]:
    return area.shrink(margin).stack(*region_heights(segment_count))
