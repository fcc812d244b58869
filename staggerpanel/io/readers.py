"""
I/O Readers

Handles reading of item size tables and placement files.
"""

from __future__ import annotations
from typing import List, Tuple
from pathlib import Path
import logging
import pandas as pd

from ..layout.types import Size
from ..types import LayoutMetadata, PathLike, PlacementRecord

logger = logging.getLogger(__name__)

# Metadata keys written as "# key=value" header lines, with their parsers
_METADATA_FIELDS = {
    'orientation': str,
    'desired_item_extent': float,
    'width': float,
    'height': float,
    'bucket_count': int,
}


class ItemSizeReader:
    """Reads natural item sizes from a tab-separated table"""

    REQUIRED_COLUMNS = ('width', 'height')

    @staticmethod
    def read(filepath: PathLike) -> pd.DataFrame:
        """
        Read item sizes

        Expected format (tab-separated, '#' lines ignored, optional label):
        width  height  label
        120    80      a
        90     200     b

        Args:
            filepath: Path to the sizes table

        Returns:
            DataFrame with float 'width' and 'height' columns, in file order
        """
        if not Path(filepath).exists():
            raise FileNotFoundError(f"Item size file not found: {filepath}")

        items: pd.DataFrame = pd.read_csv(filepath, sep='\t', comment='#')
        items.columns = [str(col).strip().lower() for col in items.columns]

        missing = [c for c in ItemSizeReader.REQUIRED_COLUMNS if c not in items.columns]
        if missing:
            raise ValueError(f"Missing columns {missing} in {filepath}")

        for col in ItemSizeReader.REQUIRED_COLUMNS:
            items[col] = pd.to_numeric(items[col], errors='coerce')
            if items[col].isna().any():
                raise ValueError(f"{int(items[col].isna().sum())} non-numeric {col} values in {filepath}")
            if (items[col] < 0).any():
                raise ValueError(f"Negative {col} values in {filepath}")
            items[col] = items[col].astype(float)

        if 'label' in items.columns:
            items['label'] = items['label'].astype(str)

        logger.debug(f"Read {len(items)} item sizes from {filepath}")
        return items.reset_index(drop=True)


def read_item_sizes(filepath: PathLike) -> List[Size]:
    """
    Convenience function returning item sizes as Size objects

    Args:
        filepath: Path to the sizes table

    Returns:
        List of natural sizes in file order
    """
    items = ItemSizeReader.read(filepath)
    return [Size(w, h) for w, h in zip(items['width'], items['height'])]


class PlacementReader:
    """Reads placement files written by PlacementWriter"""

    @staticmethod
    def read(filepath: PathLike) -> Tuple[pd.DataFrame, LayoutMetadata]:
        """
        Read placements with metadata

        Args:
            filepath: Path to placements TSV

        Returns:
            Tuple of (placements_df, metadata)
        """
        if not Path(filepath).exists():
            raise FileNotFoundError(f"Placement file not found: {filepath}")

        metadata: LayoutMetadata = {}
        with open(filepath, 'r') as f:
            for line in f:
                if not line.startswith('#'):
                    break
                key, sep, value = line[1:].strip().partition('=')
                key = key.strip()
                if sep and key in _METADATA_FIELDS:
                    metadata[key] = _METADATA_FIELDS[key](value.strip())  # type: ignore[literal-required]

        if 'orientation' not in metadata:
            raise ValueError(f"No orientation metadata found in {filepath}")

        placements: pd.DataFrame = pd.read_csv(filepath, sep='\t', comment='#')
        if 'label' in placements.columns:
            placements['label'] = placements['label'].astype(str)
        return placements, metadata

    @staticmethod
    def records(filepath: PathLike) -> List[PlacementRecord]:
        """Placements as a list of dicts"""
        placements, _ = PlacementReader.read(filepath)
        return placements.to_dict('records')  # type: ignore


def read_placements(filepath: PathLike) -> Tuple[pd.DataFrame, LayoutMetadata]:
    """
    Convenience function to read a placements file

    Args:
        filepath: Path to placements TSV

    Returns:
        Tuple of (placements_df, metadata)
    """
    return PlacementReader.read(filepath)
