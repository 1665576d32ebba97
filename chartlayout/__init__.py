from chartlayout.animation import NoAnimation, SteppedAnimation
from chartlayout.api import chart, render_to_rgba
from chartlayout.config import ChartConfig, ChartStyle
from chartlayout.contracts import ChartAnimation, ChartView, Painter
from chartlayout.errors import ChartError, ChartStateError, InvalidDataError
from chartlayout.model import Axis, DataPoint, Frame, Label, LayoutSnapshot, Paddings, Scale
from chartlayout.renderer import ChartRenderer, LayoutState

__all__ = [
    "Axis",
    "ChartAnimation",
    "ChartConfig",
    "ChartError",
    "ChartRenderer",
    "ChartStateError",
    "ChartStyle",
    "ChartView",
    "DataPoint",
    "Frame",
    "InvalidDataError",
    "Label",
    "LayoutSnapshot",
    "LayoutState",
    "NoAnimation",
    "Paddings",
    "Painter",
    "Scale",
    "SteppedAnimation",
    "chart",
    "render_to_rgba",
]
