"""Tests for PolygonAnimator."""

import math

import pytest

from polygon_plotter import InvalidArgumentError, LineSegment, PolygonAnimator, Viewport
from polygon_plotter.constants import ROTATION_STEP
from polygon_plotter.plot import UserBounds

TWO_PI = 2 * math.pi


class RecordingSurface:
    """Drawing surface that keeps every line it is given."""

    def __init__(self):
        self.lines: list[LineSegment] = []

    def line(self, segment: LineSegment) -> None:
        self.lines.append(segment)


class TestConstruction:
    @pytest.mark.parametrize("num_points", [2, 3, 4, 20, 51])
    def test_create_builds_full_color_table(self, num_points):
        animator = PolygonAnimator.create(num_points)

        assert animator.num_points == num_points
        assert animator.line_count == num_points * (num_points - 1) // 2
        assert animator.angle == 0.0

    @pytest.mark.parametrize("num_points", [1, 0, -1, -17])
    def test_too_few_points_rejected(self, num_points):
        with pytest.raises(InvalidArgumentError, match="at least two points"):
            PolygonAnimator.create(num_points)

    def test_invalid_argument_is_a_value_error(self):
        with pytest.raises(ValueError):
            PolygonAnimator(1)

    def test_non_integer_rejected(self):
        with pytest.raises(InvalidArgumentError):
            PolygonAnimator(3.0)  # type: ignore[arg-type]

    def test_default_bounds_are_padded_square(self):
        animator = PolygonAnimator.create(5)

        assert animator.transform.bounds == UserBounds(-1.1, 1.1, -1.1, 1.1)

    def test_same_vertex_count_gives_same_colors(self):
        a = PolygonAnimator.create(9)
        b = PolygonAnimator.create(9)

        assert list(a.colors.items()) == list(b.colors.items())


class TestRender:
    def test_square_at_angle_zero(self):
        """Four points at angle 0 on a 200x200 viewport with scale 0.5."""
        animator = PolygonAnimator.create(4)

        segments = animator.render(Viewport(200, 200), 0.0)

        # Pairs come out as (1,0), (2,0), (2,1), (3,0), (3,1), (3,2).
        assert len(segments) == 6
        # (1, 0) -> (300, 100); (0, 1) -> (100, -100); (-1, 0) -> (-100, 99)
        assert segments[0] == LineSegment(100, -100, 300, 100, (64, 0, 223))
        assert segments[1] == LineSegment(-100, 99, 300, 100, (128, 0, 191))
        assert segments[2] == LineSegment(-100, 99, 100, -100, (128, 64, 159))
        # (0, -1) sits at (100, 300), give or take float rounding of 3π/2.
        x3, y3 = segments[3].x1, segments[3].y1
        assert abs(x3 - 100) <= 1
        assert abs(y3 - 300) <= 1
        assert animator.transform.bounds == UserBounds(-0.5, 0.5, -0.5, 0.5)

    def test_two_points_draw_one_line(self):
        animator = PolygonAnimator.create(2)

        segments = animator.render(Viewport(100, 100), 0.0)

        assert len(segments) == 1
        assert segments[0].color == animator.colors[1, 0]

    @pytest.mark.parametrize("num_points", [2, 3, 6, 20])
    def test_every_pair_drawn_once(self, num_points):
        animator = PolygonAnimator.create(num_points)

        segments = animator.render(Viewport(300, 300), 1.0)

        assert len(segments) == num_points * (num_points - 1) // 2
        assert [s.color for s in segments] == [c for _, c in animator.colors.items()]

    def test_render_is_idempotent(self):
        animator = PolygonAnimator.create(7)

        first = animator.render(Viewport(320, 240), 0.7)
        second = animator.render(Viewport(320, 240), 0.7)

        assert first == second

    def test_colors_do_not_depend_on_angle(self):
        animator = PolygonAnimator.create(6)

        colors_a = [s.color for s in animator.render(Viewport(100, 100), 0.1)]
        colors_b = [s.color for s in animator.render(Viewport(100, 100), 2.9)]

        assert colors_a == colors_b

    def test_non_square_viewport_uses_smaller_side(self):
        animator = PolygonAnimator.create(4)

        wide = animator.render(Viewport(400, 200), 0.0)
        square = animator.render(Viewport(200, 200), 0.0)

        assert wide == square
        assert animator.transform.viewport == Viewport(200, 200)

    def test_render_defaults_to_current_angle(self):
        animator = PolygonAnimator(5, angle=1.25)

        assert animator.render(Viewport(100, 100)) == animator.render(Viewport(100, 100), 1.25)

    def test_negative_scale_mirrors_the_polygon(self):
        """When sin(angle) < -0.5 the window is inverted rather than clamped."""
        animator = PolygonAnimator.create(4)
        angle = 3 * math.pi / 2  # scale = 0.5 - 1 = -0.5

        animator.render(Viewport(200, 200), angle)

        bounds = animator.transform.bounds
        assert bounds.x_min == pytest.approx(0.5)
        assert bounds.x_max == pytest.approx(-0.5)

    def test_zero_scale_draws_nothing(self, monkeypatch):
        monkeypatch.setattr("polygon_plotter.polygon.animator.zoom_scaling", lambda angle: 0.0)
        animator = PolygonAnimator.create(4)

        assert animator.render(Viewport(100, 100), 1.0) == []

    def test_draw_sends_segments_to_surface(self):
        animator = PolygonAnimator.create(5)
        surface = RecordingSurface()

        drawn = animator.draw(surface, Viewport(150, 150), 0.3)

        assert drawn == 10
        assert surface.lines == animator.render(Viewport(150, 150), 0.3)


class TestAdvance:
    def test_advance_adds_step(self):
        animator = PolygonAnimator.create(3)

        assert animator.advance() == pytest.approx(ROTATION_STEP)
        assert animator.advance(0.5) == pytest.approx(ROTATION_STEP + 0.5)

    def test_angle_stays_in_range_for_many_ticks(self):
        animator = PolygonAnimator.create(3)

        for _ in range(5000):
            angle = animator.advance(0.37)
            assert 0.0 <= angle < TWO_PI

    def test_angle_wraps_past_full_turn(self):
        step = ROTATION_STEP
        old_angle = TWO_PI - step / 2
        animator = PolygonAnimator(3, angle=old_angle)

        new_angle = animator.advance(step)

        assert new_angle == pytest.approx((old_angle + step) - TWO_PI, abs=1e-12)

    def test_initial_angle_is_normalized(self):
        assert PolygonAnimator(3, angle=TWO_PI + 1.0).angle == pytest.approx(1.0)
        assert 0.0 <= PolygonAnimator(3, angle=-1e-20).angle < TWO_PI

    @pytest.mark.parametrize("step", [0.0, -0.1])
    def test_non_positive_step_rejected(self, step):
        animator = PolygonAnimator.create(3)

        with pytest.raises(ValueError):
            animator.advance(step)
        assert animator.angle == 0.0
