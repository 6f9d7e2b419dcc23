from .app import InputListener, RenderLoop
from .colors import SemanticColor, VisualizationSettings, to_rgb
from .components import Components
from .overlay import merge
from .run import Run, Segment, default_run, load_run
from .timer import SharedTimer, Timer, TimerPhase

__all__ = [
    "InputListener", "RenderLoop", "SemanticColor", "VisualizationSettings", "to_rgb",
    "Components", "merge", "Run", "Segment", "default_run", "load_run",
    "SharedTimer", "Timer", "TimerPhase",
]
