"""
Shared pytest fixtures for StaggerPanel tests

Supports both development mode (python -m staggerpanel) and installed mode (pip install -e .)
"""
import sys
from pathlib import Path

import matplotlib
matplotlib.use('Agg')

import pytest

# Repo root (staggerpanel/tests/conftest.py -> three levels up) for development mode
REPO_ROOT = Path(__file__).parent.parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from staggerpanel.config import LayoutConfig
from staggerpanel.layout import Size, StaggeredLayoutEngine


@pytest.fixture
def vertical_engine():
    """Vertical engine with 100 px columns"""
    return StaggeredLayoutEngine(LayoutConfig(desired_item_extent=100))


@pytest.fixture
def horizontal_engine():
    """Horizontal engine with 80 px rows"""
    return StaggeredLayoutEngine(LayoutConfig(desired_item_extent=80, orientation='horizontal'))


@pytest.fixture
def column_items():
    """Five items whose heights give columns [50, 50, 100] at 3 columns"""
    return [Size(100, h) for h in (50, 30, 40, 20, 60)]


@pytest.fixture
def random_sizes():
    """Deterministic pseudo-random item sizes"""
    import numpy as np
    rng = np.random.default_rng(1234)
    widths = rng.uniform(20, 180, size=40)
    heights = rng.uniform(10, 300, size=40)
    return [Size(float(w), float(h)) for w, h in zip(widths, heights)]


@pytest.fixture
def sizes_file(tmp_path):
    """Small item size table with labels"""
    path = tmp_path / "sizes.tsv"
    path.write_text(
        "# demo items\n"
        "width\theight\tlabel\n"
        "100\t50\ta\n"
        "100\t30\tb\n"
        "100\t40\tc\n"
        "100\t20\td\n"
        "100\t60\te\n"
    )
    return path


class RecordingHost:
    """
    Minimal host: children are natural sizes, probes and placements are recorded
    """

    def __init__(self):
        self.probes = []
        self.placed = []

    def measure_child(self, child, probe):
        self.probes.append(probe)
        return child

    def place_child(self, child, rect):
        self.placed.append((child, rect))


@pytest.fixture
def host():
    return RecordingHost()


# Pytest configuration
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual functions"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests running the CLI subcommands"
    )
