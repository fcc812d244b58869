"""
Layout visualizer

Renders a staggered layout as coloured rectangles, one colour per bucket.
"""

from __future__ import annotations
from typing import List, Optional, Sequence
from pathlib import Path
import logging
import math

import numpy as np
import pandas as pd
import matplotlib
import matplotlib.pyplot as plt
import matplotlib.patches as patches
from matplotlib.figure import Figure

from .config import PlotConfig
from .layout.types import ArrangeResult

logger = logging.getLogger(__name__)


class LayoutPlotter:
    """
    Draws placements produced by the layout engine
    """

    def __init__(self, config: Optional[PlotConfig] = None) -> None:
        """
        Initialize LayoutPlotter

        Args:
            config: Visual configuration for plot styling. If None, uses default settings.

        Example:
            >>> plotter = LayoutPlotter()
            >>> plotter = LayoutPlotter(PlotConfig.publication())
        """
        self.config: PlotConfig = config or PlotConfig()

    def _figure_size(self, width: float, height: float) -> tuple:
        """Figure size in inches keeping the layout aspect ratio"""
        fig_w = self.config.figure_width
        if width <= 0 or height <= 0:
            return fig_w, fig_w / 2
        fig_h = fig_w * height / width
        return fig_w, min(max(fig_h, 1.0), self.config.max_figure_height)

    def _bucket_colors(self, n_buckets: int) -> List[tuple]:
        cmap = matplotlib.colormaps[self.config.colormap]
        if n_buckets <= 1:
            return [cmap(0.0)]
        return [cmap(v) for v in np.linspace(0.0, 1.0, n_buckets)]

    def plot(
        self,
        placements: pd.DataFrame,
        orientation: str,
        panel_width: float,
        panel_height: float,
        desired_item_extent: float,
        output_file: str = 'staggered_layout.png',
        title: Optional[str] = None,
        labels: Optional[Sequence[str]] = None,
        bucket_count: Optional[int] = None,
        show: bool = False
    ) -> Figure:
        """
        Draw placements and save the figure

        Args:
            placements: DataFrame with columns bucket, x, y, width, height
                (and optional label)
            orientation: 'vertical' or 'horizontal'
            panel_width: Width of the panel
            panel_height: Height achieved by the layout
            desired_item_extent: Column width / row height targeted
            output_file: Path to save figure
            title: Plot title (auto-generated if None)
            labels: Item labels; falls back to the 'label' column, then to indices
            bucket_count: Number of buckets; derived from the placements if None
            show: Whether to display the plot

        Returns:
            matplotlib Figure object
        """
        required = ['bucket', 'x', 'y', 'width', 'height']
        missing = [c for c in required if c not in placements.columns]
        if missing:
            raise ValueError(f"Placements are missing columns: {missing}")

        Path(output_file).parent.mkdir(parents=True, exist_ok=True)

        if labels is None and 'label' in placements.columns:
            labels = placements['label'].tolist()
        if labels is None:
            labels = [str(i) for i in range(len(placements))]

        # Unbounded widths cannot be drawn; use the rightmost item edge instead
        if not math.isfinite(panel_width):
            panel_width = float((placements['x'] + placements['width']).max()) if len(placements) else 1.0

        n_buckets = bucket_count or (int(placements['bucket'].max()) + 1 if len(placements) else 1)
        colors = self._bucket_colors(n_buckets)

        fig, ax = plt.subplots(figsize=self._figure_size(panel_width, panel_height))

        for (_, row), label in zip(placements.iterrows(), labels):
            rect = patches.Rectangle(
                (row['x'], row['y']), row['width'], row['height'],
                facecolor=colors[int(row['bucket']) % len(colors)],
                alpha=self.config.face_alpha,
                edgecolor=self.config.edge_color,
                linewidth=self.config.edge_linewidth
            )
            ax.add_patch(rect)

            if self.config.show_labels:
                ax.text(row['x'] + row['width'] / 2, row['y'] + row['height'] / 2, label,
                        fontsize=self.config.label_fontsize, ha='center', va='center')

        if self.config.show_buckets and len(placements):
            if orientation == 'vertical':
                column_width = panel_width / n_buckets
                for i in range(1, n_buckets):
                    ax.axvline(i * column_width, color='grey', linestyle='--',
                               alpha=self.config.bucket_line_alpha, linewidth=0.8)
            else:
                for i in range(1, n_buckets):
                    ax.axhline(i * desired_item_extent, color='grey', linestyle='--',
                               alpha=self.config.bucket_line_alpha, linewidth=0.8)

        ax.set_xlim(0, max(panel_width, 1.0))
        # Screen coordinates: y grows downwards
        ax.set_ylim(max(panel_height, 1.0), 0)
        ax.set_aspect('equal')
        ax.set_xlabel('x')
        ax.set_ylabel('y')

        if title is None:
            title = (f"Staggered layout ({orientation}): {len(placements)} items, "
                     f"{n_buckets} {'columns' if orientation == 'vertical' else 'rows'}")
        ax.set_title(title, fontsize=self.config.title_fontsize)

        plt.tight_layout()

        fig.savefig(output_file, dpi=self.config.dpi, bbox_inches='tight',
                    facecolor='white', edgecolor='none')
        logger.info(f"Plot saved to {output_file}")

        if show:
            plt.show()

        return fig

    def plot_result(
        self,
        result: ArrangeResult,
        output_file: str = 'staggered_layout.png',
        title: Optional[str] = None,
        labels: Optional[Sequence[str]] = None,
        show: bool = False
    ) -> Figure:
        """
        Draw an ArrangeResult straight from the engine

        Example:
            >>> result = StaggeredLayoutEngine().layout(Size(600, math.inf), sizes)
            >>> fig = LayoutPlotter().plot_result(result, 'layout.png')
        """
        return self.plot(
            result.to_frame(),
            orientation=result.orientation,
            panel_width=result.size.width,
            panel_height=result.size.height,
            desired_item_extent=result.desired_item_extent,
            output_file=output_file,
            title=title,
            labels=labels,
            bucket_count=result.bucket_count,
            show=show
        )
