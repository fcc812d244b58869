"""
StaggerPanel Integration Tests

Runs the layout and plot subcommands end to end through their run()
functions, the way argparse would call them.

Run: pytest staggerpanel/tests/integration/ -v
"""
import math
from argparse import Namespace

import pytest

from staggerpanel.cli import layout, plot
from staggerpanel.io import read_placements


def _layout_args(input_file, output_file, **overrides):
    args = dict(
        input=str(input_file),
        output=str(output_file),
        width=300.0,
        height=math.inf,
        item_extent=100.0,
        orientation=None,
        debug=False,
    )
    args.update(overrides)
    return Namespace(**args)


def _plot_args(input_file, output_file, **overrides):
    args = dict(
        input=str(input_file),
        output=str(output_file),
        preset='default',
        title=None,
        labels=False,
        debug=False,
    )
    args.update(overrides)
    return Namespace(**args)


@pytest.fixture
def placements_file(sizes_file, tmp_path):
    """Placements produced by the layout subcommand"""
    output = tmp_path / "placements.tsv"
    layout.run(_layout_args(sizes_file, output))
    return output


@pytest.mark.integration
def test_layout_writes_vertical_placements(placements_file):
    placements, metadata = read_placements(placements_file)

    assert metadata['orientation'] == 'vertical'
    assert metadata['bucket_count'] == 3
    assert metadata['height'] == 100.0
    assert placements['bucket'].tolist() == [0, 1, 2, 1, 2]
    assert placements['y'].tolist() == [0.0, 0.0, 0.0, 30.0, 40.0]
    assert placements['label'].tolist() == ['a', 'b', 'c', 'd', 'e']


@pytest.mark.integration
def test_layout_horizontal(tmp_path):
    sizes = tmp_path / "row_items.tsv"
    sizes.write_text("width\theight\n100\t10\n100\t10\n100\t10\n")
    output = tmp_path / "rows.tsv"

    layout.run(_layout_args(sizes, output, width=250.0, item_extent=80.0, orientation='horizontal'))
    placements, metadata = read_placements(output)

    assert metadata['orientation'] == 'horizontal'
    assert metadata['height'] == 160.0
    assert placements[['x', 'y']].values.tolist() == [[0.0, 0.0], [100.0, 0.0], [0.0, 80.0]]


@pytest.mark.integration
def test_layout_narrow_panel_clamps(sizes_file, tmp_path):
    output = tmp_path / "narrow.tsv"

    layout.run(_layout_args(sizes_file, output, width=60.0))
    placements, metadata = read_placements(output)

    assert metadata['bucket_count'] == 1
    assert metadata['height'] == 200.0
    assert set(placements['bucket']) == {0}


@pytest.mark.integration
def test_layout_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        layout.run(_layout_args(tmp_path / "missing.tsv", tmp_path / "out.tsv"))


@pytest.mark.integration
@pytest.mark.parametrize("preset", ['default', 'publication', 'compact', 'debug'])
def test_plot_creates_image(placements_file, tmp_path, preset):
    output = tmp_path / "figures" / f"{preset}.png"

    plot.run(_plot_args(placements_file, output, preset=preset, labels=True))

    assert output.exists()
    assert output.stat().st_size > 0


@pytest.mark.integration
def test_plot_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError, match="Did you run"):
        plot.run(_plot_args(tmp_path / "missing.tsv", tmp_path / "x.png"))
