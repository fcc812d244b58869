"""
Layout types for StaggerPanel
Data structures for layout engine inputs and results

Geometry types are immutable (frozen) for safety and testability.
"""
from dataclasses import dataclass, field
from typing import List, Tuple, Dict, Any
import pandas as pd


@dataclass(frozen=True)
class Size:
    """
    Width/height pair

    ``math.inf`` stands for an unbounded extent (e.g. the probe height
    handed to children in vertical mode).
    """
    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle in panel coordinates (y grows downwards)

    Attributes:
        x: Left edge
        y: Top edge
        width: Rectangle width
        height: Rectangle height
    """
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)


@dataclass(frozen=True)
class Placement:
    """
    Final placement of one item

    Attributes:
        index: Position of the item in the input order
        bucket: Column (vertical) or row (horizontal) the item went into
        rect: Rectangle assigned to the item
    """
    index: int
    bucket: int
    rect: Rect


@dataclass(frozen=True)
class MeasureResult:
    """
    Outcome of a measurement pass

    Attributes:
        size: Size required by the panel
        natural_sizes: Natural size reported by each child, in input order
        assignments: Bucket index chosen for each child, in input order
        bucket_extents: Accumulated extent per bucket after the pass
        bucket_count: Number of buckets used
    """
    size: Size
    natural_sizes: Tuple[Size, ...]
    assignments: Tuple[int, ...]
    bucket_extents: Tuple[float, ...]
    bucket_count: int


@dataclass
class ArrangeResult:
    """
    Outcome of an arrangement pass

    This is the output of the arrange step and the input to the
    placement writer and the plotter.

    Attributes:
        size: Size achieved by the panel
        placements: One placement per item, in input order
        bucket_extents: Accumulated extent per bucket after the pass
        bucket_count: Number of buckets used
        orientation: 'vertical' or 'horizontal'
        desired_item_extent: Column width / row height the layout targeted
        layout_stats: Statistics about the layout
    """
    size: Size
    placements: List[Placement]
    bucket_extents: Tuple[float, ...]
    bucket_count: int
    orientation: str
    desired_item_extent: float
    layout_stats: Dict[str, Any] = field(default_factory=dict)

    @property
    def n_items(self) -> int:
        """Number of placed items"""
        return len(self.placements)

    @property
    def assignments(self) -> Tuple[int, ...]:
        """Bucket index per item, in input order"""
        return tuple(p.bucket for p in self.placements)

    def get_bucket_items(self, bucket: int) -> List[Placement]:
        """Get all placements that went into one bucket"""
        return [p for p in self.placements if p.bucket == bucket]

    def to_frame(self) -> pd.DataFrame:
        """
        Placements as a DataFrame

        Columns: index, bucket, x, y, width, height
        """
        return pd.DataFrame(
            [
                {
                    'index': p.index,
                    'bucket': p.bucket,
                    'x': p.rect.x,
                    'y': p.rect.y,
                    'width': p.rect.width,
                    'height': p.rect.height,
                }
                for p in self.placements
            ],
            columns=['index', 'bucket', 'x', 'y', 'width', 'height'],
        )
