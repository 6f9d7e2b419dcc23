import enum
import math
from dataclasses import dataclass
from typing import Tuple

Normalized = Tuple[float, float, float]
RGB = Tuple[int, int, int]

# 255 and not 256: 1.0 * 256 would overflow a channel at the white point.
CHANNEL_SCALE = 255.0


class SemanticColor(enum.Enum):
    DEFAULT = "default"
    AHEAD_GAINING_TIME = "ahead_gaining_time"
    AHEAD_LOSING_TIME = "ahead_losing_time"
    BEHIND_GAINING_TIME = "behind_gaining_time"
    BEHIND_LOSING_TIME = "behind_losing_time"
    BEST_SEGMENT = "best_segment"
    NOT_RUNNING = "not_running"
    PERSONAL_BEST = "personal_best"
    PAUSED = "paused"


@dataclass(frozen=True)
class VisualizationSettings:
    """Theme: normalized RGB per semantic color. Defaults follow LiveSplit's."""
    text: Normalized = (1.0, 1.0, 1.0)
    ahead_gaining_time: Normalized = (0.0, 0.8, 0.2117647)
    ahead_losing_time: Normalized = (0.3803922, 0.8196079, 0.4745098)
    behind_gaining_time: Normalized = (0.8196079, 0.3803922, 0.3803922)
    behind_losing_time: Normalized = (0.8, 0.0, 0.0)
    best_segment: Normalized = (1.0, 0.8313726, 0.0)
    not_running: Normalized = (0.6666667, 0.6666667, 0.6666667)
    personal_best: Normalized = (0.0862745, 0.6509804, 1.0)
    paused: Normalized = (0.4784314, 0.4784314, 0.4784314)

    def visualize(self, color: SemanticColor) -> Normalized:
        if color is SemanticColor.DEFAULT:
            return self.text
        return getattr(self, color.value)


def quantize(c: float) -> int:
    return max(0, min(255, math.floor(c * CHANNEL_SCALE)))


def to_rgb(color: SemanticColor, settings: VisualizationSettings) -> RGB:
    r, g, b = settings.visualize(color)
    return (quantize(r), quantize(g), quantize(b))
