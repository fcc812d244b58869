"""
I/O Writers

Handles writing of layout results.
"""

from typing import Optional, Sequence
from pathlib import Path
import logging

from ..layout.types import ArrangeResult
from ..types import PathLike

logger = logging.getLogger(__name__)


class PlacementWriter:
    """Writes placements in TSV format with a metadata header"""

    @staticmethod
    def write(
        result: ArrangeResult,
        output_file: PathLike,
        labels: Optional[Sequence[str]] = None
    ) -> None:
        """
        Write one row per placed item

        Header lines carry the layout parameters so the plot step can
        rebuild the figure without the original sizes:
            # orientation=vertical
            # desired_item_extent=200
            # width=600
            # height=950
            # bucket_count=3

        Args:
            result: Arrangement to write
            output_file: Path to output TSV file
            labels: Optional item labels, in input order
        """
        Path(output_file).parent.mkdir(parents=True, exist_ok=True)

        placements = result.to_frame()
        if labels is not None:
            if len(labels) != len(placements):
                raise ValueError(f"Got {len(labels)} labels for {len(placements)} placements")
            placements['label'] = list(labels)

        with open(output_file, 'w') as f:
            f.write(f"# orientation={result.orientation}\n")
            f.write(f"# desired_item_extent={result.desired_item_extent}\n")
            f.write(f"# width={result.size.width}\n")
            f.write(f"# height={result.size.height}\n")
            f.write(f"# bucket_count={result.bucket_count}\n")
            placements.to_csv(f, sep='\t', index=False)

        logger.info(f"Placements saved to {output_file}")


def write_placements(
    result: ArrangeResult,
    output_file: PathLike,
    labels: Optional[Sequence[str]] = None
) -> None:
    """Convenience function"""
    PlacementWriter.write(result, output_file, labels)
