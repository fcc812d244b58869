"""
StaggerPanel Configuration
Layout options plus rendering parameters for the plot subcommand
"""
from dataclasses import dataclass, field

from .types import ORIENTATIONS


@dataclass
class LayoutConfig:
    """
    Staggered layout options

    desired_item_extent is the target column width in vertical mode and
    the row height in horizontal mode.
    """

    desired_item_extent: float = 200.0
    """Target column width (vertical) or row height (horizontal)"""

    orientation: str = 'vertical'
    """Staggering axis: 'vertical' (columns) or 'horizontal' (rows)"""

    def __post_init__(self) -> None:
        self.orientation = str(self.orientation).lower()
        if self.orientation not in ORIENTATIONS:
            raise ValueError(
                f"Invalid orientation: {self.orientation}. Use 'vertical' or 'horizontal'"
            )

    @property
    def is_vertical(self) -> bool:
        return self.orientation == 'vertical'


@dataclass
class PlotConfig:
    """
    Complete plot configuration
    """

    # ============================================================
    # SUB-CONFIGURATIONS
    # ============================================================
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    """Layout configuration"""

    # ============================================================
    # FIGURE SETTINGS
    # ============================================================
    figure_width: float = 10.0
    """Figure width in inches; height follows the layout aspect ratio"""

    max_figure_height: float = 40.0
    """Upper bound on figure height in inches for very tall layouts"""

    dpi: int = 150
    """DPI for saved figures"""

    title_fontsize: int = 14
    """Font size for main title"""

    # ============================================================
    # ITEM STYLING
    # ============================================================
    colormap: str = 'tab20'
    """Matplotlib colormap used to colour items by bucket"""

    face_alpha: float = 0.85
    """Fill transparency for item rectangles"""

    edge_color: str = 'white'
    """Outline colour for item rectangles"""

    edge_linewidth: float = 1.0
    """Outline width for item rectangles"""

    show_labels: bool = True
    """Draw item labels (or indices) inside rectangles"""

    label_fontsize: int = 7
    """Font size for item labels"""

    # ============================================================
    # BUCKET GUIDES
    # ============================================================
    show_buckets: bool = True
    """Draw dashed guide lines at bucket boundaries"""

    bucket_line_alpha: float = 0.4
    """Transparency for bucket guide lines"""

    # ============================================================
    # PRESET CONFIGURATIONS
    # ============================================================

    @classmethod
    def publication(cls) -> 'PlotConfig':
        """
        High-quality settings for publication figures

        - 600 DPI
        - Wider figure
        - No labels

        Example:
            >>> config = PlotConfig.publication()
            >>> plotter = LayoutPlotter(config)
        """
        config = cls()
        config.dpi = 600
        config.figure_width = 12.0
        config.show_labels = False
        config.edge_linewidth = 0.5
        return config

    @classmethod
    def presentation(cls) -> 'PlotConfig':
        """
        Settings optimized for presentations

        - Lower DPI for smaller file size
        - Larger fonts and thicker outlines
        """
        config = cls()
        config.dpi = 100
        config.title_fontsize = 18
        config.label_fontsize = 10
        config.edge_linewidth = 2.0
        config.face_alpha = 1.0
        return config

    @classmethod
    def compact(cls) -> 'PlotConfig':
        """Small figure without guides, for many items"""
        config = cls()
        config.figure_width = 6.0
        config.show_labels = False
        config.show_buckets = False
        config.edge_linewidth = 0.3
        return config

    @classmethod
    def debug(cls) -> 'PlotConfig':
        """
        Settings for debugging layout issues

        - Labels and bucket guides on
        - Opaque guides
        """
        config = cls()
        config.show_labels = True
        config.show_buckets = True
        config.bucket_line_alpha = 1.0
        config.face_alpha = 0.5
        config.edge_color = 'black'
        return config
