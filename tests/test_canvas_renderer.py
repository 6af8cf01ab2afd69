"""
Canvas rendering tests.

Pixels are read back with qimage_to_numpy (RGBA). Positions are chosen well
inside dots, lines and markers so antialiasing at the borders does not matter.
"""
import numpy as np
import pytest
from PyQt6.QtGui import QColor, QImage

from Model.errors import RenderSurfaceError
from Model.geometry import Edge, GridSpec, Markers, PathOverlay, Point
from Model.image_ops import qimage_to_numpy
from Model.render_state import RenderState, cleared, with_background, with_edges, with_path
from View.canvas_renderer import CanvasRenderer

TRANSPARENT = (0, 0, 0, 0)
WHITE = (255, 255, 255, 255)
RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
BLACK = (0, 0, 0, 255)
LAWNGREEN = (124, 252, 0, 255)


def px(img: QImage, x: int, y: int):
    return tuple(int(v) for v in qimage_to_numpy(img)[y, x])


def solid(w, h, rgb):
    img = QImage(w, h, QImage.Format.Format_RGB32)
    img.fill(QColor(*rgb))
    return img


@pytest.fixture
def grid():
    return GridSpec(4, 500, 500)


class TestGridMode:

    def test_dots(self, qapp, grid):
        img = CanvasRenderer(500, 500).redraw(RenderState(), grid)
        assert px(img, 100, 100) == WHITE
        assert px(img, 400, 400) == WHITE
        assert px(img, 150, 150) == TRANSPARENT
        assert px(img, 0, 0) == TRANSPARENT

    def test_edges_are_mapped_from_grid_units(self, qapp, grid):
        state = with_edges(RenderState(), [Edge(0, 0, 1, 0, "red")])
        img = CanvasRenderer(500, 500).redraw(state, grid)
        assert px(img, 150, 100) == RED
        # not drawn in pixel space
        assert px(img, 0, 0) == TRANSPARENT

    def test_later_edges_are_drawn_over_earlier_ones(self, qapp, grid):
        state = with_edges(RenderState(), [Edge(0, 0, 2, 0, "red"), Edge(1, 0, 2, 0, "blue")])
        img = CanvasRenderer(500, 500).redraw(state, grid)
        assert px(img, 150, 100) == RED
        assert px(img, 250, 100) == BLUE

    def test_unknown_color_is_drawn_black(self, qapp, grid):
        state = with_edges(RenderState(), [Edge(0, 0, 1, 0, "notacolor")])
        img = CanvasRenderer(500, 500).redraw(state, grid)
        assert px(img, 150, 100) == BLACK

    def test_background_below_dots(self, qapp, grid):
        state = with_background(RenderState(), solid(500, 500, (10, 20, 30)))
        img = CanvasRenderer(500, 500).redraw(state, grid)
        assert px(img, 5, 5) == (10, 20, 30, 255)
        assert px(img, 100, 100) == WHITE


class TestPathMode:

    def overlay(self):
        return PathOverlay(
            edges=(Edge(20, 50, 180, 50, "blue"), Edge(180, 50, 180, 150, "blue")),
            markers=Markers(source=Point(20, 50), destination=Point(180, 150)),
        )

    def test_edges_in_pixels_and_markers_on_top(self, qapp):
        state = with_path(RenderState(), self.overlay())
        img = CanvasRenderer(200, 200).redraw(state)
        assert px(img, 100, 50) == BLUE
        assert px(img, 180, 100) == BLUE
        assert px(img, 20, 50) == LAWNGREEN
        assert px(img, 180, 150) == RED
        # no grid dots in path mode
        assert px(img, 40, 40) == TRANSPARENT

    def test_junction_dots(self, qapp):
        state = with_path(RenderState(), self.overlay())
        img = CanvasRenderer(200, 200).redraw(state)
        # the junction at (180, 50) reaches 7px to the right, past the line end
        assert px(img, 185, 50) == BLUE

    def test_surface_follows_background_size(self, qapp):
        renderer = CanvasRenderer(500, 500, fit_to_background=True)
        state = with_background(RenderState(), solid(800, 600, (1, 2, 3)))
        img = renderer.redraw(state)
        assert (img.width(), img.height()) == (800, 600)
        assert px(img, 799, 599) == (1, 2, 3, 255)

    def test_fixed_surface_ignores_background_size(self, qapp):
        renderer = CanvasRenderer(100, 100)
        img = renderer.redraw(with_background(RenderState(), solid(800, 600, (1, 2, 3))))
        assert (img.width(), img.height()) == (100, 100)


class TestRedrawContract:

    def test_idempotent(self, qapp, grid):
        state = RenderState(
            background=solid(500, 500, (40, 40, 40)),
            edges=(Edge(0, 0, 3, 3, "red"), Edge(3, 0, 0, 3, "#00ff00")),
        )
        renderer = CanvasRenderer(500, 500)
        first = qimage_to_numpy(renderer.redraw(state, grid))
        second = qimage_to_numpy(renderer.redraw(state, grid))
        assert np.array_equal(first, second)

    def test_idempotent_in_path_mode(self, qapp):
        state = with_path(RenderState(), TestPathMode().overlay())
        renderer = CanvasRenderer(200, 200)
        first = qimage_to_numpy(renderer.redraw(state))
        second = qimage_to_numpy(renderer.redraw(state))
        assert np.array_equal(first, second)

    def test_no_accumulation_between_calls(self, qapp, grid):
        renderer = CanvasRenderer(500, 500)
        drawn = with_edges(RenderState(), [Edge(0, 0, 1, 0, "red")])
        renderer.redraw(drawn, grid)
        img = renderer.redraw(cleared(drawn), grid)
        assert px(img, 150, 100) == TRANSPARENT

    def test_same_pixels_as_a_fresh_renderer(self, qapp, grid):
        state = with_edges(RenderState(), [Edge(1, 1, 2, 3, "purple")])
        used = CanvasRenderer(500, 500)
        used.redraw(with_edges(RenderState(), [Edge(0, 0, 3, 3, "red")]), grid)
        a = qimage_to_numpy(used.redraw(state, grid))
        b = qimage_to_numpy(CanvasRenderer(500, 500).redraw(state, grid))
        assert np.array_equal(a, b)

    def test_state_is_not_modified(self, qapp, grid):
        state = with_edges(RenderState(), [Edge(0, 0, 1, 1, "red")])
        before = (state.edges, state.markers, state.background)
        CanvasRenderer(500, 500).redraw(state, grid)
        assert (state.edges, state.markers, state.background) == before

    def test_missing_surface_is_fatal(self, qapp):
        with pytest.raises(RenderSurfaceError):
            CanvasRenderer(0, 0).redraw(RenderState())


class TestStateTransitions:

    def test_with_edges_replaces_wholesale(self):
        state = with_edges(RenderState(), [Edge(0, 0, 1, 1, "red")])
        state = with_edges(state, [Edge(2, 2, 3, 3, "blue")])
        assert state.edges == (Edge(2, 2, 3, 3, "blue"),)

    def test_cleared_keeps_background(self, qapp):
        bg = solid(10, 10, (0, 0, 0))
        state = with_path(with_background(RenderState(), bg),
                          PathOverlay((Edge(0, 0, 1, 1, "blue"),), Markers(Point(0, 0), Point(1, 1))))
        state = cleared(state)
        assert state.background is bg
        assert state.edges == () and state.markers is None and not state.junctions

    def test_empty_path_clears_the_overlay(self):
        state = with_path(RenderState(), PathOverlay((Edge(0, 0, 1, 1, "blue"),), Markers(Point(0, 0), Point(1, 1))))
        state = with_path(state, PathOverlay())
        assert state.edges == () and state.markers is None
