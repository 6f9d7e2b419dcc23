from typing import Optional

WIDTH = 35


def merge(base: str, overlay: str) -> str:
    '''
    Lay `overlay` over `base`: a non-blank overlay char wins,
    blanks let the base show through. Both must be the same width.
    '''
    if len(base) != len(overlay):
        raise ValueError(f"overlay width {len(overlay)} != base width {len(base)}")
    return "".join(o if not o.isspace() else b for b, o in zip(base, overlay))


def format_info_text(text: str, value: str, width: int = WIDTH) -> str:
    return merge(f"{text:<{width}}"[:width], f"{value:>{width}}"[-width:])


def format_title_line2(category: Optional[str], attempts: int, width: int = WIDTH) -> str:
    return merge(f"{category or '':^{width}}"[:width], f"{attempts:>{width}}"[-width:])
