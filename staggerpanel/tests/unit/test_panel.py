"""
Unit tests for StaggeredPanel

Checks that configuration changes invalidate the cached measurement and
that arrange commits placements through the host callback.
"""
import math

import pytest

from staggerpanel.config import LayoutConfig
from staggerpanel.layout import Rect, Size, StaggeredPanel


@pytest.fixture
def panel(host, column_items):
    invalidations = []
    panel = StaggeredPanel(host.measure_child, host.place_child,
                           config=LayoutConfig(desired_item_extent=100),
                           on_invalidate=invalidations.append, children=column_items)
    panel.invalidations = invalidations
    return panel


class TestConfiguration:

    def test_defaults(self, host):
        panel = StaggeredPanel(host.measure_child, host.place_child)
        assert panel.desired_item_extent == 200.0
        assert panel.orientation == 'vertical'
        assert not panel.is_measure_valid

    def test_config_is_copied(self, host):
        config = LayoutConfig(desired_item_extent=120)
        panel = StaggeredPanel(host.measure_child, host.place_child, config=config)
        config.desired_item_extent = 10

        assert panel.desired_item_extent == 120

    def test_changing_extent_invalidates(self, panel):
        panel.measure(Size(300, math.inf))
        assert panel.is_measure_valid

        panel.desired_item_extent = 150

        assert not panel.is_measure_valid
        assert panel.invalidations == [panel]

    def test_same_value_does_not_invalidate(self, panel):
        panel.measure(Size(300, math.inf))
        panel.desired_item_extent = 100
        panel.orientation = 'vertical'

        assert panel.is_measure_valid
        assert panel.invalidations == []

    def test_changing_orientation_invalidates(self, panel):
        panel.measure(Size(300, math.inf))
        panel.orientation = 'Horizontal'

        assert panel.orientation == 'horizontal'
        assert not panel.is_measure_valid
        assert len(panel.invalidations) == 1

    def test_bad_orientation_rejected(self, panel):
        with pytest.raises(ValueError):
            panel.orientation = 'diagonal'
        assert panel.orientation == 'vertical'

    def test_child_changes_invalidate(self, panel):
        panel.measure(Size(300, math.inf))
        extra = Size(100, 10)

        panel.add_child(extra)
        panel.remove_child(extra)
        panel.clear_children()

        assert len(panel.invalidations) == 3
        assert panel.children == ()

    def test_children_are_read_only(self, panel, column_items):
        assert panel.children == tuple(column_items)
        with pytest.raises(AttributeError):
            panel.children.append(Size(100, 10))
        with pytest.raises(AttributeError):
            panel.children = []


class TestMeasureArrange:

    def test_measure_returns_required_size(self, panel):
        required = panel.measure(Size(300, math.inf))

        assert required == Size(300, 100.0)
        assert panel.desired_size == required
        assert panel.last_measure.assignments == (0, 1, 2, 1, 2)

    def test_arrange_places_every_child(self, panel, host, column_items):
        required = panel.measure(Size(300, math.inf))
        achieved = panel.arrange(Size(300, required.height))

        assert achieved == Size(300, 100.0)
        assert [c for c, _ in host.placed] == column_items
        assert host.placed[4][1] == Rect(200, 40, 100, 60)

    def test_arrange_does_not_remeasure_when_valid(self, panel, host):
        panel.measure(Size(300, math.inf))
        probes = len(host.probes)

        panel.arrange(Size(300, 100))

        assert len(host.probes) == probes

    def test_arrange_on_stale_panel_measures_first(self, panel, host):
        achieved = panel.arrange(Size(300, 100))

        assert len(host.probes) == 5
        assert achieved == Size(300, 100.0)
        assert panel.is_measure_valid

    def test_relayout_after_change(self, panel, host):
        panel.arrange(Size(300, 100))
        panel.desired_item_extent = 150
        host.placed.clear()

        achieved = panel.arrange(Size(300, 1000))

        # 2 columns of 150
        assert panel.last_arrange.bucket_count == 2
        assert achieved == Size(300, 130.0)
        assert [r.width for _, r in host.placed] == [150.0] * 5

    def test_horizontal_panel(self, host):
        panel = StaggeredPanel(host.measure_child, host.place_child,
                               config=LayoutConfig(desired_item_extent=80, orientation='horizontal'),
                               children=[Size(100, 1)] * 3)

        required = panel.measure(Size(250, math.inf))
        achieved = panel.arrange(Size(250, required.height))

        assert required == achieved == Size(250, 160.0)
        assert [r for _, r in host.placed][2] == Rect(0, 80, 100, 80)

    def test_child_added_after_measure_is_placed(self, panel, host):
        panel.measure(Size(300, math.inf))
        extra = Size(100, 10)
        panel.add_child(extra)

        achieved = panel.arrange(Size(300, 1000))

        assert len(host.placed) == 6
        assert host.placed[-1][0] is extra
        assert achieved == Size(300, 100.0)

    @pytest.mark.parametrize("extent", [0.0, -80.0, math.nan])
    def test_degenerate_horizontal_extent(self, host, extent):
        panel = StaggeredPanel(host.measure_child, host.place_child,
                               config=LayoutConfig(desired_item_extent=extent, orientation='horizontal'),
                               children=[Size(100, 1)] * 3)

        required = panel.measure(Size(250, math.inf))
        achieved = panel.arrange(Size(250, required.height))

        assert required == achieved == Size(250, 0.0)
        assert all(r.height == 0.0 for _, r in host.placed)
