"""Second counts <-> display strings."""
import math
from typing import Optional, Tuple


def _units(seconds: float, decimals: int) -> Tuple[int, int, int, int]:
    scale = 10 ** decimals
    units = int(abs(seconds) * scale + 1e-6)  # truncate; epsilon absorbs float error
    whole, frac = divmod(units, scale)
    h, rem = divmod(whole, 3600)
    m, s = divmod(rem, 60)
    return h, m, s, frac


def _clock(h: int, m: int, s: int) -> str:
    if h:
        return f"{h}:{m:02}:{s:02}"
    if m:
        return f"{m}:{s:02}"
    return f"{s}"


def format_time(seconds: Optional[float], decimals: int = 2) -> str:
    """`83.456 -> '1:23.45'`, `None -> '-'`."""
    if seconds is None:
        return "-"
    h, m, s, frac = _units(seconds, decimals)
    sign = "-" if seconds < 0 and (h or m or s or frac) else ""
    out = sign + _clock(h, m, s)
    if decimals:
        out += f".{frac:0{decimals}}"
    return out


def format_delta(seconds: Optional[float], decimals: int = 1) -> str:
    """Always signed: `-3.2`, `+1:04.0`."""
    if seconds is None:
        return "-"
    h, m, s, frac = _units(seconds, decimals)
    sign = "-" if seconds < 0 else "+"
    return f"{sign}{_clock(h, m, s)}.{frac:0{decimals}}"


def split_timer(seconds: float, decimals: int = 2) -> Tuple[str, str]:
    '''Big-timer form: main part and fraction, e.g. ("1:23", ".45").'''
    h, m, s, frac = _units(seconds, decimals)
    sign = "-" if seconds < 0 else ""
    return sign + _clock(h, m, s), f".{frac:0{decimals}}"


def parse_time(text: str) -> float:
    '''
    Parse `[-][d.]hh:mm:ss[.fffffff]` (the .lss time format) into seconds.
    Raises ValueError on anything else.
    '''
    text = text.strip()
    sign = 1.0
    if text.startswith("-"):
        sign, text = -1.0, text[1:]
    parts = text.split(":")
    if len(parts) != 3:
        raise ValueError(f"bad time {text!r}")
    hours, minutes, seconds = parts
    days = 0
    if "." in hours:
        d, hours = hours.split(".", 1)
        days = int(d)
    secs = float(seconds)
    if not math.isfinite(secs):
        raise ValueError(f"bad time {text!r}")
    total = days * 86400 + int(hours) * 3600 + int(minutes) * 60 + secs
    return sign * total
