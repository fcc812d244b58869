"""Layout subcommand - compute placements from item sizes"""

from __future__ import annotations
from pathlib import Path
import logging
import math
from argparse import ArgumentParser, Namespace, _SubParsersAction

from ..config import LayoutConfig
from ..io import ItemSizeReader, write_placements
from ..layout import Size, StaggeredLayoutEngine
from ..types import ORIENTATIONS

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add layout subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for layout subcommand
    """
    parser = subparsers.add_parser(
        'layout',
        help='Compute staggered placements for a table of item sizes'
    )

    # Input/output
    parser.add_argument('-i', '--input', required=True,
                        help='TSV with width and height columns (optional label column)')
    parser.add_argument('-o', '--output', required=True,
                        help='Output placements TSV')

    # Panel
    parser.add_argument('-W', '--width', type=float, required=True,
                        help='Available panel width')
    parser.add_argument('-H', '--height', type=float, default=math.inf,
                        help='Available panel height (default: unbounded)')

    # Layout options (optional, use config defaults)
    parser.add_argument('-e', '--item-extent', type=float,
                        help='Desired column width (vertical) or row height (horizontal) (default: 200)')
    parser.add_argument('--orientation', choices=list(ORIENTATIONS),
                        help='Staggering axis (default: vertical)')

    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute layout subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "debug", False) else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )
    logger.info("=== StaggerPanel: Layout ===")

    input_file = Path(args.input)
    if not input_file.exists():
        raise FileNotFoundError(f"Input file not found: {input_file}")

    # Build config with CLI overrides
    overrides = {}
    if getattr(args, 'item_extent', None) is not None:
        overrides['desired_item_extent'] = args.item_extent
    if getattr(args, 'orientation', None) is not None:
        overrides['orientation'] = args.orientation
    config = LayoutConfig(**overrides)

    logger.info(f"Input: {input_file}")
    logger.info(f"Output: {args.output}")
    logger.info(f"Panel: {args.width} x {args.height}, orientation={config.orientation}, "
                f"item extent={config.desired_item_extent}")

    items = ItemSizeReader.read(input_file)
    sizes = [Size(w, h) for w, h in zip(items['width'], items['height'])]
    logger.info(f"Loaded {len(sizes)} items")

    engine = StaggeredLayoutEngine(config)
    result = engine.layout(Size(args.width, args.height), sizes)

    labels = items['label'].tolist() if 'label' in items.columns else None
    write_placements(result, args.output, labels=labels)

    logger.info(f"✓ {result.n_items} items in {result.bucket_count} buckets, "
                f"size {result.size.width} x {result.size.height}")
