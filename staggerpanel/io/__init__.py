"""I/O utilities for StaggerPanel"""

from .readers import ItemSizeReader, PlacementReader, read_item_sizes, read_placements
from .writers import PlacementWriter, write_placements

__all__ = [
    'ItemSizeReader', 'read_item_sizes',
    'PlacementReader', 'read_placements',
    'PlacementWriter', 'write_placements']
