"""
Host adapter for the staggered layout engine

StaggeredPanel owns the child list and the configuration on behalf of a
host UI toolkit. Changing a property marks the layout stale and notifies
the host through on_invalidate; the host then runs measure/arrange again.
"""
from __future__ import annotations
from typing import Callable, Iterable, List, Optional, Tuple
import logging

from ..config import LayoutConfig
from ..types import Child, MeasureChild, PlaceChild
from .engine import StaggeredLayoutEngine
from .types import ArrangeResult, MeasureResult, Size

logger = logging.getLogger(__name__)


class StaggeredPanel:
    """
    Panel that lays out its children with the staggered layout engine

    Example:
        >>> panel = StaggeredPanel(measure_child, place_child, children=items)
        >>> required = panel.measure(Size(600, math.inf))
        >>> panel.arrange(Size(600, required.height))
    """

    def __init__(
        self,
        measure_child: MeasureChild,
        place_child: PlaceChild,
        config: Optional[LayoutConfig] = None,
        on_invalidate: Optional[Callable[['StaggeredPanel'], None]] = None,
        children: Optional[Iterable[Child]] = None
    ) -> None:
        """
        Args:
            measure_child: Host callback returning a child's natural size
            place_child: Host callback committing a child's final rectangle
            config: Layout configuration (copied). If None, uses defaults.
            on_invalidate: Called whenever the layout becomes stale
            children: Initial children in layout order
        """
        config = config or LayoutConfig()
        self._config = LayoutConfig(config.desired_item_extent, config.orientation)
        self.measure_child = measure_child
        self.place_child = place_child
        self.on_invalidate = on_invalidate
        self._children: List[Child] = list(children or [])

        self.desired_size: Optional[Size] = None
        self.last_measure: Optional[MeasureResult] = None
        self.last_arrange: Optional[ArrangeResult] = None
        self._measure_valid = False

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def desired_item_extent(self) -> float:
        """Column width (vertical) or row height (horizontal)"""
        return self._config.desired_item_extent

    @desired_item_extent.setter
    def desired_item_extent(self, value: float) -> None:
        value = float(value)
        if value != self._config.desired_item_extent:
            self._config.desired_item_extent = value
            self.invalidate_measure()

    @property
    def orientation(self) -> str:
        """'vertical' or 'horizontal'"""
        return self._config.orientation

    @orientation.setter
    def orientation(self, value: str) -> None:
        # Validate through LayoutConfig before touching the live config
        value = LayoutConfig(self._config.desired_item_extent, value).orientation
        if value != self._config.orientation:
            self._config.orientation = value
            self.invalidate_measure()

    @property
    def config(self) -> LayoutConfig:
        """Snapshot of the current configuration"""
        return LayoutConfig(self._config.desired_item_extent, self._config.orientation)

    # ------------------------------------------------------------------
    # Children
    # ------------------------------------------------------------------

    @property
    def children(self) -> Tuple[Child, ...]:
        """Children in layout order; change them through add_child and friends"""
        return tuple(self._children)

    def add_child(self, child: Child) -> None:
        self._children.append(child)
        self.invalidate_measure()

    def remove_child(self, child: Child) -> None:
        self._children.remove(child)
        self.invalidate_measure()

    def clear_children(self) -> None:
        self._children.clear()
        self.invalidate_measure()

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    @property
    def is_measure_valid(self) -> bool:
        """False until measured, and again after any change"""
        return self._measure_valid

    def invalidate_measure(self) -> None:
        """Mark the cached measurement stale and notify the host"""
        self._measure_valid = False
        logger.debug("Layout invalidated")
        if self.on_invalidate is not None:
            self.on_invalidate(self)

    def measure(self, available_size: Size) -> Size:
        """
        Measure all children and return the size the panel needs

        Args:
            available_size: Space offered by the host

        Returns:
            Required size
        """
        engine = StaggeredLayoutEngine(self._config)
        self.last_measure = engine.measure(available_size, self._children, self.measure_child)
        self.desired_size = self.last_measure.size
        self._measure_valid = True
        return self.desired_size

    def arrange(self, final_size: Size) -> Size:
        """
        Place all children and return the size actually used

        A stale panel is measured against final_size first. Children and
        their natural sizes must not change between measure and arrange.

        Args:
            final_size: Space granted by the host

        Returns:
            Achieved size
        """
        if not self._measure_valid or self.last_measure is None:
            logger.debug("Arrange on stale layout, measuring first")
            self.measure(final_size)

        engine = StaggeredLayoutEngine(self._config)
        self.last_arrange = engine.arrange(
            final_size,
            self.last_measure.natural_sizes,
            children=self._children,
            place_child=self.place_child
        )
        return self.last_arrange.size
