from typing import List, Optional, Tuple, Union

Rect = Tuple[int, int, int, int]  # (x, y, w, h)
RegionLike = Union['Region', Rect]


def ensure_region(r: RegionLike) -> 'Region':
    if isinstance(r, Region):
        return r
    if isinstance(r, tuple) and len(r) == 4:
        return Region(*r)
    raise TypeError(f"Expected Region or (x,y,w,h) tuple, got {r!r}")


class Region(tuple):
    """
    A (x,y,w,h) area of the terminal grid.
    Width and height never go negative.
    """
    def __new__(cls, x: int = 0, y: int = 0, w: int = 0, h: int = 0):
        return super().__new__(cls, (int(x), int(y), max(0, int(w)), max(0, int(h))))

    def __repr__(self):
        return f"Region{super().__repr__()}"

    def stack(self, *heights: int) -> List['Region']:
        '''
        Cut fixed-height rows off the top, in order.
        Rows past the bottom edge are clipped (possibly to zero height).
        '''
        regions = []
        accum_y = self[1]
        bottom = self[1] + self[3]
        for h in heights:
            h = max(0, min(h, bottom - accum_y))
            regions.append(Region(self[0], accum_y, self[2], h))
            accum_y += h
        return regions

    def shrink(self, left: int, top: Optional[int] = None, right: Optional[int] = None, bottom: Optional[int] = None) -> 'Region':
        top = top if top is not None else left
        right = right if right is not None else left
        bottom = bottom if bottom is not None else top
        return Region(
            self[0] + left,
            self[1] + top,
            self[2] - left - right,
            self[3] - top - bottom
        )
