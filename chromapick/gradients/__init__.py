from .gradient1d import Gradient1D
from .compositor import compose, style_stops

__all__ = [
    "Gradient1D",
    "compose",
    "style_stops",
]
