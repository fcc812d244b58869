"""
Layout Module for StaggerPanel
Staggered (masonry) layout engine

Public API:
    - StaggeredLayoutEngine: Measure/arrange calculation engine
    - StaggeredPanel: Host adapter with invalidation
    - bucket_count, shortest_bucket: Bucket helpers
    - Size, Rect, Placement: Geometry types
    - MeasureResult, ArrangeResult: Pass results
"""

from .engine import StaggeredLayoutEngine, bucket_count, shortest_bucket
from .panel import StaggeredPanel
from .types import (
    Size,
    Rect,
    Placement,
    MeasureResult,
    ArrangeResult,
)

__all__ = [
    'StaggeredLayoutEngine',
    'StaggeredPanel',
    'bucket_count',
    'shortest_bucket',
    'Size',
    'Rect',
    'Placement',
    'MeasureResult',
    'ArrangeResult',
]
