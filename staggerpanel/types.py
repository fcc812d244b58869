"""
Type definitions for StaggerPanel

Common types used throughout the package for type checking and documentation.
"""

from __future__ import annotations
from typing import TypedDict, Literal, Callable, Any, Union, Tuple, TYPE_CHECKING
from pathlib import Path

if TYPE_CHECKING:
    from .layout.types import Size, Rect

# Type aliases
PathLike = Union[str, Path]
"""File path as string or Path object"""

Orientation = Literal['vertical', 'horizontal']
"""Staggering axis"""

ORIENTATIONS: Tuple[str, ...] = ('vertical', 'horizontal')
"""Accepted orientation names"""

Child = Any
"""Opaque handle for one child; only the host knows what it is"""

MeasureChild = Callable[[Child, 'Size'], 'Size']
"""Host callback: measure child against a probe size, return its natural size"""

PlaceChild = Callable[[Child, 'Rect'], None]
"""Host callback: commit the final rectangle of a child"""


# Structured data types

class PlacementRecord(TypedDict, total=False):
    """One row of a placements file"""
    index: int
    bucket: int
    x: float
    y: float
    width: float
    height: float
    label: str


class LayoutMetadata(TypedDict, total=False):
    """Metadata header of a placements file"""
    orientation: Orientation
    desired_item_extent: float
    width: float
    height: float
    bucket_count: int
