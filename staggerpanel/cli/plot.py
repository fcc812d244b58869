"""Plot subcommand - visualization"""

from __future__ import annotations
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction
import matplotlib.pyplot as plt

from ..config import PlotConfig
from ..io import read_placements
from ..visualizer import LayoutPlotter

logger = logging.getLogger(__name__)

PRESETS = {
    'default': PlotConfig,
    'publication': PlotConfig.publication,
    'presentation': PlotConfig.presentation,
    'compact': PlotConfig.compact,
    'debug': PlotConfig.debug,
}


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add plot subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for plot subcommand
    """
    parser = subparsers.add_parser(
        'plot',
        help='Render a placements file as an image'
    )

    parser.add_argument('-i', '--input', required=True,
                        help='Placements TSV written by the layout subcommand')
    parser.add_argument('-o', '--output', required=True,
                        help='Output image file (PNG)')

    # Optional
    parser.add_argument('--preset', choices=list(PRESETS), default='default',
                        help='Styling preset (default: default)')
    parser.add_argument('--title', help='Plot title (default: generated)')
    parser.add_argument('--labels', action='store_true',
                        help='Force item labels on, whatever the preset says')

    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute plot subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    # Configure logging as early as possible for this subcommand
    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "debug", False) else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Silence very noisy third-party loggers (matplotlib font discovery etc.)
    for noisy in ("matplotlib", "matplotlib.font_manager", "PIL", "PIL.Image", "fontTools"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    input_file = Path(args.input)
    output_file = Path(args.output)

    logger.info(f"Input: {input_file}")
    logger.info(f"Output: {output_file}")
    logger.info(f"Preset: {args.preset}")

    if not input_file.exists():
        raise FileNotFoundError(f"Input file not found: {input_file}\n"
                                f"Did you run 'staggerpanel layout --output {input_file}' first?")

    placements, metadata = read_placements(input_file)
    logger.info(f"Loaded {len(placements)} placements ({metadata['orientation']})")

    config = PRESETS[args.preset]()
    if getattr(args, 'labels', False):
        config.show_labels = True

    logger.info("Generating plot...")
    plotter = LayoutPlotter(config)
    fig = plotter.plot(
        placements,
        orientation=metadata['orientation'],
        panel_width=metadata.get('width', 0.0),
        panel_height=metadata.get('height', 0.0),
        desired_item_extent=metadata.get('desired_item_extent', config.layout.desired_item_extent),
        output_file=str(output_file),
        title=getattr(args, 'title', None),
        bucket_count=metadata.get('bucket_count')
    )

    plt.close(fig)

    logger.info(f"✓ Plot saved: {output_file}")
