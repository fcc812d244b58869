"""
Layout Engine for StaggerPanel
Staggered (masonry) layout with shortest-bucket placement

Algorithm:
- Vertical: items go into columns; each item lands in the column with the
  smallest accumulated height (first one on ties)
- Horizontal: items flow left to right in rows of fixed height and wrap
  when the row is full
- Measure and arrange recompute bucket state from scratch on every call
"""
from __future__ import annotations
from typing import Iterable, List, Optional, Sequence, Tuple
import logging
import math

import numpy as np

from ..config import LayoutConfig
from ..types import Child, MeasureChild, PlaceChild
from .types import ArrangeResult, MeasureResult, Placement, Rect, Size

logger = logging.getLogger(__name__)

MAX_BUCKET_COUNT = 1 << 16
"""Upper bound on columns; bucket extents are held in one array"""


def bucket_count(available_extent: float, desired_item_extent: float) -> int:
    """
    Number of columns (or rows) that fit into the available cross extent

    Degenerate inputs (nothing fits, non-positive or non-finite values)
    clamp to a single bucket instead of failing. Ratios too large to
    allocate clamp to MAX_BUCKET_COUNT.

    Args:
        available_extent: Available width (vertical) or height (horizontal)
        desired_item_extent: Target column width or row height

    Returns:
        floor(available / desired), between 1 and MAX_BUCKET_COUNT
    """
    if (desired_item_extent <= 0 or not math.isfinite(desired_item_extent)
            or not math.isfinite(available_extent)):
        logger.warning(f"Degenerate layout (available={available_extent}, "
                       f"desired={desired_item_extent}), using 1 bucket")
        return 1

    ratio = available_extent / desired_item_extent
    # inf when the division overflows
    if not math.isfinite(ratio) or ratio >= MAX_BUCKET_COUNT + 1:
        logger.warning(f"Available extent {available_extent} holds too many items of "
                       f"extent {desired_item_extent}, capping at {MAX_BUCKET_COUNT} buckets")
        return MAX_BUCKET_COUNT

    count = int(math.floor(ratio))
    if count < 1:
        logger.warning(f"Available extent {available_extent} is below desired item "
                       f"extent {desired_item_extent}, clamping to 1 bucket")
        return 1
    return count


def shortest_bucket(extents: np.ndarray) -> int:
    """Index of the bucket with the smallest extent, lowest index on ties"""
    # argmin returns the first occurrence of the minimum
    return int(np.argmin(extents))


class StaggeredLayoutEngine:
    """
    Staggered layout engine

    Stateless between calls: every measure/arrange builds its own bucket
    array, so one engine can serve any number of panels.
    """

    def __init__(self, config: Optional[LayoutConfig] = None):
        """
        Initialize layout engine

        Args:
            config: Layout configuration. If None, uses default settings.
        """
        self.config = config or LayoutConfig()

    @property
    def desired_item_extent(self) -> float:
        return self.config.desired_item_extent

    @property
    def orientation(self) -> str:
        return self.config.orientation

    def item_extent(self) -> float:
        """
        Desired item extent usable as geometry

        Negative, NaN and infinite values give 0.0 so that no rectangle
        gets a negative or non-finite size.
        """
        extent = self.desired_item_extent
        if extent >= 0 and math.isfinite(extent):
            return float(extent)
        logger.warning(f"Degenerate desired item extent {extent}, using 0.0")
        return 0.0

    def column_layout(self, available_width: float) -> Tuple[int, float]:
        """
        Column count and column width for the vertical orientation

        Unbounded widths fall back to the desired item extent as column width.
        """
        cols = bucket_count(available_width, self.desired_item_extent)
        if math.isfinite(available_width):
            width = max(available_width, 0.0) / cols
        else:
            width = self.item_extent()
        return cols, width

    # ------------------------------------------------------------------
    # Measure
    # ------------------------------------------------------------------

    def measure(
        self,
        available_size: Size,
        children: Iterable[Child],
        measure_child: MeasureChild
    ) -> MeasureResult:
        """
        Measurement pass

        Args:
            available_size: Space offered to the panel by the host
            children: Items in layout order
            measure_child: Host callback returning a child's natural size
                for a probe size

        Returns:
            MeasureResult with the required panel size
        """
        if self.config.is_vertical:
            return self._measure_vertical(available_size, children, measure_child)
        return self._measure_horizontal(available_size, children, measure_child)

    def _measure_vertical(
        self,
        available_size: Size,
        children: Iterable[Child],
        measure_child: MeasureChild
    ) -> MeasureResult:
        cols, column_width = self.column_layout(available_size.width)
        probe = Size(column_width, available_size.height)
        col_heights = np.zeros(cols)
        logger.debug(f"Measuring vertical: {cols} columns of {column_width:.1f}")

        natural_sizes: List[Size] = []
        assignments: List[int] = []
        for child in children:
            natural = measure_child(child, probe)
            col = shortest_bucket(col_heights)
            col_heights[col] += natural.height
            natural_sizes.append(natural)
            assignments.append(col)

        height = float(col_heights.max()) if natural_sizes else 0.0
        return MeasureResult(
            size=Size(available_size.width, height),
            natural_sizes=tuple(natural_sizes),
            assignments=tuple(assignments),
            bucket_extents=tuple(float(h) for h in col_heights),
            bucket_count=cols
        )

    def _measure_horizontal(
        self,
        available_size: Size,
        children: Iterable[Child],
        measure_child: MeasureChild
    ) -> MeasureResult:
        row_height = self.item_extent()
        probe = Size(math.inf, row_height)

        row_width = 0.0
        height = 0.0
        row_widths: List[float] = []
        natural_sizes: List[Size] = []
        assignments: List[int] = []
        for child in children:
            natural = measure_child(child, probe)
            row_width += natural.width
            # The first item always opens row 0, even with an unbounded width
            if not row_widths or row_width > available_size.width:
                row_width = natural.width
                height += row_height
                row_widths.append(0.0)
            row_widths[-1] += natural.width
            natural_sizes.append(natural)
            assignments.append(len(row_widths) - 1)

        logger.debug(f"Measured horizontal: {len(row_widths)} rows")
        return MeasureResult(
            size=Size(available_size.width, height),
            natural_sizes=tuple(natural_sizes),
            assignments=tuple(assignments),
            bucket_extents=tuple(row_widths),
            bucket_count=len(row_widths)
        )

    # ------------------------------------------------------------------
    # Arrange
    # ------------------------------------------------------------------

    def arrange(
        self,
        final_size: Size,
        natural_sizes: Sequence[Size],
        children: Optional[Sequence[Child]] = None,
        place_child: Optional[PlaceChild] = None
    ) -> ArrangeResult:
        """
        Arrangement pass

        natural_sizes must be the sizes reported during the preceding
        measure; the engine does not check that they are still current.

        Args:
            final_size: Space granted to the panel by the host
            natural_sizes: Natural size of each item, in layout order
            children: Item handles matching natural_sizes (needed for place_child)
            place_child: Optional host callback committing each rectangle

        Returns:
            ArrangeResult with one placement per item
        """
        if self.config.is_vertical:
            result = self._arrange_vertical(final_size, natural_sizes)
        else:
            result = self._arrange_horizontal(final_size, natural_sizes)

        if place_child is not None:
            if children is None:
                raise ValueError("place_child requires the matching children")
            for child, placement in zip(children, result.placements):
                place_child(child, placement.rect)

        return result

    def _arrange_vertical(self, final_size: Size, natural_sizes: Sequence[Size]) -> ArrangeResult:
        cols, column_width = self.column_layout(final_size.width)
        col_heights = np.zeros(cols)

        placements: List[Placement] = []
        for index, natural in enumerate(natural_sizes):
            col = shortest_bucket(col_heights)
            rect = Rect(column_width * col, float(col_heights[col]), column_width, natural.height)
            placements.append(Placement(index=index, bucket=col, rect=rect))
            col_heights[col] += natural.height

        height = float(col_heights.max()) if placements else 0.0
        logger.debug(f"Arranged {len(placements)} items into {cols} columns, height {height:.1f}")
        return ArrangeResult(
            size=Size(final_size.width, height),
            placements=placements,
            bucket_extents=tuple(float(h) for h in col_heights),
            bucket_count=cols,
            orientation='vertical',
            desired_item_extent=self.desired_item_extent,
            layout_stats={
                'column_width': column_width,
                'min_column_height': float(col_heights.min()) if placements else 0.0,
            }
        )

    def _arrange_horizontal(self, final_size: Size, natural_sizes: Sequence[Size]) -> ArrangeResult:
        """
        Flow items into rows of the desired height

        A row wraps when the next item would cross final_size.width, but
        never before its first item, so an oversized item sits alone on
        its row exactly as measure counted it.
        """
        row_height = self.item_extent()
        x = 0.0
        y = 0.0
        row = 0
        row_widths: List[float] = []

        placements: List[Placement] = []
        for index, natural in enumerate(natural_sizes):
            # Only wrap a row that already holds an item
            if placements and x + natural.width > final_size.width:
                x = 0.0
                y += row_height
                row += 1
            if row == len(row_widths):
                row_widths.append(0.0)
            placements.append(Placement(index=index, bucket=row,
                                        rect=Rect(x, y, natural.width, row_height)))
            x += natural.width
            row_widths[row] = x

        height = y + row_height if placements else 0.0
        logger.debug(f"Arranged {len(placements)} items into {len(row_widths)} rows")
        return ArrangeResult(
            size=Size(final_size.width, height),
            placements=placements,
            bucket_extents=tuple(row_widths),
            bucket_count=len(row_widths),
            orientation='horizontal',
            desired_item_extent=row_height,
            layout_stats={
                'overflowing_rows': sum(1 for w in row_widths if w > final_size.width),
            }
        )

    # ------------------------------------------------------------------
    # Convenience
    # ------------------------------------------------------------------

    def layout(self, available_size: Size, natural_sizes: Sequence[Size]) -> ArrangeResult:
        """
        Measure and arrange items whose natural sizes are already known

        Children are treated as fixed-size: the probe size is ignored and
        each item reports the natural size it was given. In vertical mode
        item widths are replaced by the column width, as in arrange.

        Args:
            available_size: Space offered to the panel
            natural_sizes: Natural size of each item

        Returns:
            ArrangeResult for the measured size
        """
        measured = self.measure(available_size, natural_sizes, lambda size, probe: size)
        logger.info(f"Layout of {len(natural_sizes)} items ({self.orientation}): "
                    f"{measured.size.width:g} x {measured.size.height:g}, "
                    f"{measured.bucket_count} buckets")
        return self.arrange(Size(available_size.width, measured.size.height),
                            measured.natural_sizes)
