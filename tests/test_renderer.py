"""
Tests for squircleprogress.model.renderer: layers, sweep animation and setters.
"""
import logging

import pytest

from squircleprogress.config import ProgressBarConfig
from squircleprogress.model import round_path
from squircleprogress.model.geometry_primitives import Rect
from squircleprogress.model.renderer import ProgressRenderer, RenderFrame
from squircleprogress.model.state import Mode, ProgressState

TRACK = Rect(0.0, 0.0, 200.0, 20.0)


def _indeterminate(rate=50, radius=0.0):
    renderer = ProgressRenderer()
    renderer.set_indeterminate(True)
    renderer.set_sweep_rate(rate)
    renderer.set_radius(radius)
    return renderer


class TestDeterminate:
    def test_track_then_fill(self):
        renderer = ProgressRenderer()
        renderer.set_colors("#EEEEEE", "#3366FF")
        frame = renderer.render_tick(TRACK)
        assert isinstance(frame, RenderFrame)
        assert [color for _, color in frame.layers] == ["#EEEEEE", "#3366FF"]

    def test_track_covers_whole_rect(self):
        renderer = ProgressRenderer()
        renderer.set_radius(10.0)
        track, _ = renderer.render_tick(TRACK).layers[0]
        assert track == round_path.generate(TRACK, 10.0)
        assert track.bounds().width == pytest.approx(200.0)

    @pytest.mark.parametrize("progress, width", [(0, 0.0), (50, 100.0), (100, 200.0), (25, 50.0)])
    def test_fill_width_follows_progress(self, progress, width):
        renderer = ProgressRenderer()
        renderer.set_radius(10.0)
        renderer.set_progress(progress)
        fill, _ = renderer.render_tick(TRACK).layers[1]
        bounds = fill.bounds()
        assert bounds.left == pytest.approx(0.0)
        assert bounds.width == pytest.approx(width)
        assert bounds.height == pytest.approx(20.0)

    def test_fill_starts_at_rect_origin(self):
        renderer = ProgressRenderer()
        fill, _ = renderer.render_tick(Rect(30.0, 5.0, 200.0, 20.0)).layers[1]
        assert fill.bounds() == Rect(30.0, 5.0, 100.0, 20.0)

    def test_half_progress_shares_corner_curvature_with_track(self):
        renderer = ProgressRenderer()
        renderer.set_radius(10.0)
        frame = renderer.render_tick(TRACK)
        (track, _), (fill, _) = frame.layers
        # first control point of the top-right corner, measured from the right edge
        assert 200.0 - track.commands[2].points[0].x == pytest.approx(8.3)
        assert 100.0 - fill.commands[2].points[0].x == pytest.approx(8.3)

    def test_out_of_range_progress_is_kept_but_drawn_inside_track(self):
        renderer = ProgressRenderer()
        renderer.set_progress(150)
        fill, _ = renderer.render_tick(TRACK).layers[1]
        assert renderer.progress == 150
        assert fill.bounds().width == pytest.approx(200.0)

        renderer.set_progress(-20)
        fill, _ = renderer.render_tick(TRACK).layers[1]
        assert fill.bounds().width == pytest.approx(0.0)

    def test_no_next_frame_requested(self):
        frame = ProgressRenderer().render_tick(TRACK)
        assert frame.needs_next_frame is False

    def test_zero_width_rect(self):
        frame = ProgressRenderer().render_tick(Rect(0.0, 0.0, 0.0, 20.0))
        fill, _ = frame.layers[1]
        assert fill.bounds().width == 0.0


class TestIndeterminate:
    def test_sweep_advances_and_wraps_once(self):
        renderer = _indeterminate(rate=50)
        lefts = []
        for _ in range(12):
            sweep, _ = renderer.render_tick(TRACK).layers[1]
            lefts.append(sweep.bounds().left)
        assert lefts == pytest.approx(
            [-200.0, -150.0, -100.0, -50.0, 0.0, 50.0, 100.0, 150.0, 200.0, -200.0, -150.0, -100.0]
        )
        assert renderer.sweep_offset == pytest.approx(-50.0)

    def test_offset_equal_to_width_is_not_reset(self):
        renderer = _indeterminate(rate=50)
        renderer.state.sweep_offset = 200.0
        sweep, _ = renderer.render_tick(TRACK).layers[1]
        assert sweep.bounds().left == pytest.approx(200.0)
        assert renderer.sweep_offset == pytest.approx(250.0)

    def test_sweep_follows_an_offset_track(self):
        renderer = _indeterminate(rate=50)
        sweep, _ = renderer.render_tick(Rect(30.0, 5.0, 200.0, 20.0)).layers[1]
        bounds = sweep.bounds()
        assert bounds.left == pytest.approx(30.0 - 200.0)
        assert bounds.top == pytest.approx(5.0)
        assert bounds.height == pytest.approx(20.0)

    def test_sweep_width_derived_from_track(self):
        renderer = _indeterminate()
        sweep, _ = renderer.render_tick(TRACK).layers[1]
        assert renderer.sweep_width == pytest.approx(200.0 / 2.6)
        assert sweep.bounds().width == pytest.approx(200.0 / 2.6)

    def test_derived_sweep_width_is_kept_after_resize(self):
        renderer = _indeterminate()
        renderer.render_tick(TRACK)
        renderer.render_tick(Rect(0.0, 0.0, 400.0, 20.0))
        assert renderer.sweep_width == pytest.approx(200.0 / 2.6)

    def test_explicit_sweep_width(self):
        renderer = _indeterminate()
        renderer.set_sweep_width(30.0)
        sweep, _ = renderer.render_tick(TRACK).layers[1]
        assert sweep.bounds().width == pytest.approx(30.0)

    def test_negative_sweep_width_is_derived_again(self):
        renderer = _indeterminate()
        renderer.set_sweep_width(30.0)
        renderer.render_tick(TRACK)
        renderer.set_sweep_width(-1.0)
        renderer.render_tick(Rect(0.0, 0.0, 260.0, 20.0))
        assert renderer.sweep_width == pytest.approx(100.0)

    def test_sweep_uses_fill_color(self):
        renderer = _indeterminate()
        renderer.set_colors("white", "black")
        frame = renderer.render_tick(TRACK)
        assert [color for _, color in frame.layers] == ["white", "black"]

    def test_every_tick_requests_exactly_one_next_frame(self):
        renderer = _indeterminate()
        for _ in range(3):
            frame = renderer.render_tick(TRACK)
            assert frame.needs_next_frame is True
            assert len(frame.layers) == 2

    def test_switching_to_determinate_stops_animation(self):
        renderer = _indeterminate()
        renderer.render_tick(TRACK)
        renderer.set_mode(Mode.DETERMINATE)
        frame = renderer.render_tick(TRACK)
        assert frame.needs_next_frame is False
        fill, _ = frame.layers[1]
        assert fill.bounds().width == pytest.approx(100.0)

    def test_zero_width_track(self):
        renderer = _indeterminate()
        frame = renderer.render_tick(Rect(0.0, 0.0, 0.0, 20.0))
        sweep, _ = frame.layers[1]
        assert renderer.sweep_width == 0.0
        assert sweep.bounds().width == 0.0

    def test_restart_is_logged(self, caplog):
        renderer = _indeterminate(rate=500)
        caplog.set_level(logging.DEBUG, logger="squircleprogress")
        renderer.render_tick(TRACK)
        renderer.render_tick(TRACK)
        renderer.render_tick(TRACK)
        assert "restarting" in caplog.text


class TestSetters:
    def test_new_renderer_is_dirty(self):
        assert ProgressRenderer().dirty is True

    def test_render_clears_dirty(self):
        renderer = ProgressRenderer()
        renderer.render_tick(TRACK)
        assert renderer.dirty is False

    @pytest.mark.parametrize("call", [
        lambda r: r.set_progress(10),
        lambda r: r.set_mode(Mode.INDETERMINATE),
        lambda r: r.set_sweep_rate(5),
        lambda r: r.set_sweep_width(12.0),
        lambda r: r.set_radius(4.0),
        lambda r: r.set_colors("red", "blue"),
        lambda r: r.set_track_color("red"),
        lambda r: r.set_fill_color("blue"),
    ])
    def test_setters_mark_dirty_and_notify(self, call):
        renderer = ProgressRenderer()
        renderer.render_tick(TRACK)
        calls = []
        renderer.add_listener(lambda: calls.append(1))
        call(renderer)
        assert renderer.dirty is True
        assert calls == [1]

    def test_removed_listener_is_not_called(self):
        renderer = ProgressRenderer()
        calls = []
        listener = lambda: calls.append(1)  # noqa: E731
        renderer.add_listener(listener)
        renderer.remove_listener(listener)
        renderer.set_progress(3)
        assert calls == []

    def test_set_mode_accepts_strings(self):
        renderer = ProgressRenderer()
        renderer.set_mode("indeterminate")
        assert renderer.mode is Mode.INDETERMINATE
        assert renderer.indeterminate is True

    def test_set_mode_rejects_unknown_value(self):
        with pytest.raises(ValueError):
            ProgressRenderer().set_mode("vertical")

    def test_single_colors_keep_the_other(self):
        renderer = ProgressRenderer()
        renderer.set_colors("a", "b")
        renderer.set_track_color("c")
        renderer.set_fill_color("d")
        assert (renderer.track_color, renderer.fill_color) == ("c", "d")


class TestRadius:
    def test_same_radius_is_a_no_op(self):
        renderer = ProgressRenderer()
        renderer.set_radius(10.0)
        provider = renderer.clip_provider
        renderer.render_tick(TRACK)

        calls = []
        renderer.add_listener(lambda: calls.append(1))
        renderer.set_radius(10.0)

        assert renderer.clip_provider is provider
        assert renderer.dirty is False
        assert calls == []

    def test_new_radius_replaces_clip_provider(self):
        renderer = ProgressRenderer()
        renderer.set_radius(10.0)
        provider = renderer.clip_provider
        renderer.set_radius(12.0)
        assert renderer.clip_provider is not provider
        assert renderer.radius == 12.0

    def test_clip_outline_matches_track(self):
        renderer = ProgressRenderer()
        renderer.set_radius(10.0)
        track, _ = renderer.render_tick(TRACK).layers[0]
        assert renderer.clip_outline(TRACK) == track

    def test_clip_outline_cached_between_frames(self):
        renderer = ProgressRenderer()
        renderer.set_radius(10.0)
        first = renderer.clip_outline(TRACK)
        renderer.render_tick(TRACK)
        assert renderer.clip_outline(TRACK) is first
        assert renderer.clip_outline(Rect(0.0, 0.0, 100.0, 20.0)) is not first


class TestFromConfig:
    def test_defaults(self):
        renderer = ProgressRenderer.from_config(ProgressBarConfig())
        assert renderer.mode is Mode.DETERMINATE
        assert renderer.progress == 50
        assert renderer.sweep_rate == 50
        assert renderer.sweep_width == -1.0
        assert renderer.radius == 0.0
        assert renderer.track_color == "#FFFFFF"
        assert renderer.fill_color == "#000000"

    def test_config_values_are_applied(self):
        config = ProgressBarConfig(
            radius=8.0, indeterminate=True, progress_color="blue",
            background_color="grey", indeterminate_rate=7, progress=10, indeterminate_width=40.0,
        )
        renderer = ProgressRenderer.from_config(config)
        assert renderer.indeterminate is True
        assert renderer.radius == 8.0
        assert renderer.clip_provider.radius == 8.0
        assert renderer.sweep_rate == 7
        assert renderer.sweep_width == 40.0
        assert renderer.progress == 10
        assert (renderer.track_color, renderer.fill_color) == ("grey", "blue")

    def test_existing_state_is_used(self):
        state = ProgressState(progress=80)
        assert ProgressRenderer(state).state is state
