"""StaggerPanel: staggered (masonry) layout engine"""

from .config import LayoutConfig, PlotConfig
from .layout import StaggeredLayoutEngine, StaggeredPanel, Size, Rect
from .visualizer import LayoutPlotter

__version__ = "0.1.0"
__all__ = ["LayoutConfig", "PlotConfig", "StaggeredLayoutEngine", "StaggeredPanel", "Size", "Rect", "LayoutPlotter"]
