from .timers import PhaseTimings, Timer
from .metrics import speedup, efficiency, throughput

__all__ = [
    "PhaseTimings",
    "Timer",
    "speedup",
    "efficiency",
    "throughput",
]
