from typing import List, Optional, Tuple, Union

from .region import RegionLike, ensure_region

RGB = Tuple[int, int, int]
Color = Union[str, RGB]  # blessed color name ('white') or 24-bit triple


class ScreenBuffer:
    '''
    Character grid with per-cell style and color; the canvas every widget
    draws into. Nothing touches the terminal until `flush`.
    '''
    def __init__(self, w, h):
        self.w, self.h = w, h
        self.chars = [[' '] * w for _ in range(h)]
        self.styles: List[List[Optional[str]]] = [[None] * w for _ in range(h)]
        self.txt_colors: List[List[Optional[Color]]] = [[None] * w for _ in range(h)]

    def put(self, x, y, char, style=None, txt_color=None):
        if 0 <= x < self.w and 0 <= y < self.h:
            self.chars[y][x] = char
            self.styles[y][x] = style
            self.txt_colors[y][x] = txt_color

    def puts(self, x, y, text, style=None, txt_color=None):
        for i, c in enumerate(text):
            self.put(x + i, y, c, style, txt_color)

    def clear(self):
        for row in self.chars: row[:] = [' '] * self.w
        for row in self.styles: row[:] = [None] * self.w
        for row in self.txt_colors: row[:] = [None] * self.w

    def text_in(self, r: RegionLike, lines: List[str], style=None, txt_color=None):
        '''Write lines top-down, clipped to the region.'''
        x, y, w, h = ensure_region(r)
        for i, line in enumerate(lines[:h]):
            self.puts(x, y + i, line[:w], style, txt_color)

    def hline(self, r: RegionLike, style=None, txt_color=None):
        x, y, w, _ = ensure_region(r)
        for i in range(w):
            self.put(x + i, y, '─', style, txt_color)

    def line(self, y) -> str:
        return "".join(self.chars[y])

    def flush(self, term):
        out = term.home
        for y in range(self.h):
            for x in range(self.w):
                c = self.chars[y][x]
                attr = _attr(term, self.styles[y][x], self.txt_colors[y][x])
                out += f"{attr}{c}{term.normal}" if attr else c
        print(out, end='', flush=True)


def _attr(term, style, txt_color) -> str:
    parts = []
    if isinstance(txt_color, tuple):
        parts.append(term.color_rgb(*txt_color))
    elif txt_color:
        parts.append(getattr(term, txt_color, ''))
    if style:
        parts.append(getattr(term, style, ''))
    return "".join(parts)
