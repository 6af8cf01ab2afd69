# View/canvas_renderer.py
from __future__ import annotations
import logging
from typing import Optional

from PyQt6.QtCore import Qt, QPointF
from PyQt6.QtGui import QBrush, QColor, QImage, QPainter, QPen

import config
from Model.coordinate_mapper import dot_radius, grid_coordinates, map_coordinate
from Model.errors import RenderSurfaceError
from Model.geometry import GridSpec, Point
from Model.render_state import RenderState

logger = logging.getLogger(__name__)

SURFACE_FORMAT = QImage.Format.Format_ARGB32_Premultiplied


def _color(token: str) -> QColor:
    col = QColor(token)
    if not col.isValid():
        logger.debug(f"Unknown color {token!r}, drawing in black")
        return QColor(Qt.GlobalColor.black)
    return col


class CanvasRenderer:
    """
    Draws a RenderState onto an offscreen QImage.

    Every call starts from a cleared surface and paints, in this order:
    background image, grid dots (grid mode), edges, path junctions, markers.
    The same state therefore always gives the same pixels, no matter how often
    redraw() runs. Grid mode is selected by passing a GridSpec; without one the
    edges are taken as pixel coordinates (path mode).
    """

    def __init__(self, width: int, height: int, *, fit_to_background: bool = False):
        self._surface = QImage(width, height, SURFACE_FORMAT)
        # path mode: the canvas takes the size of the map so server pixels line up
        self.fit_to_background = fit_to_background

    @property
    def surface(self) -> QImage:
        return self._surface

    def width(self) -> int:
        return self._surface.width()

    def height(self) -> int:
        return self._surface.height()

    def redraw(self, state: RenderState, grid: Optional[GridSpec] = None) -> QImage:
        bg = state.background
        if self.fit_to_background and bg is not None and not bg.isNull() and bg.size() != self._surface.size():
            self._surface = QImage(bg.size(), SURFACE_FORMAT)

        if self._surface.isNull():
            raise RenderSurfaceError("Unable to access canvas.")

        # 1) no accumulation across calls
        self._surface.fill(Qt.GlobalColor.transparent)

        p = QPainter()
        if not p.begin(self._surface):
            raise RenderSurfaceError("Unable to create canvas drawing context.")
        try:
            p.setRenderHint(QPainter.RenderHint.Antialiasing, True)

            # 2) background, if the loader is done
            if bg is not None and not bg.isNull():
                p.drawImage(0, 0, bg)

            # 3) grid dots
            if grid is not None:
                self._draw_dots(p, grid)

            # 4) edges, in list order
            if grid is not None:
                width = dot_radius(grid.size)
                for edge in state.edges:
                    a = map_coordinate(edge.x1, edge.y1, grid.size, grid.width, grid.height)
                    b = map_coordinate(edge.x2, edge.y2, grid.size, grid.width, grid.height)
                    self._draw_line(p, QPointF(*a), QPointF(*b), edge.color, width)
            else:
                for edge in state.edges:
                    self._draw_line(p, QPointF(edge.x1, edge.y1), QPointF(edge.x2, edge.y2),
                                    edge.color, config.PATH_LINE_WIDTH)
                if state.junctions:
                    for edge in state.edges:
                        self._draw_point(p, Point(edge.x1, edge.y1), config.JUNCTION_COLOR)

            # 5) markers on top of everything
            if state.markers is not None:
                self._draw_point(p, state.markers.source, config.SOURCE_COLOR)
                self._draw_point(p, state.markers.destination, config.DESTINATION_COLOR)
        finally:
            p.end()

        return self._surface

    @staticmethod
    def _draw_dots(p: QPainter, grid: GridSpec):
        r = dot_radius(grid.size)
        p.setPen(Qt.PenStyle.NoPen)
        p.setBrush(QBrush(_color(config.DOT_COLOR)))
        for x, y in grid_coordinates(grid):
            p.drawEllipse(QPointF(float(x), float(y)), r, r)

    @staticmethod
    def _draw_line(p: QPainter, a: QPointF, b: QPointF, color: str, width: float):
        pen = QPen(_color(color), width)
        pen.setCapStyle(Qt.PenCapStyle.FlatCap)
        p.setPen(pen)
        p.setBrush(Qt.BrushStyle.NoBrush)
        p.drawLine(a, b)

    @staticmethod
    def _draw_point(p: QPainter, pt: Point, color: str):
        r = config.MARKER_RADIUS
        p.setPen(Qt.PenStyle.NoPen)
        p.setBrush(QBrush(_color(color)))
        p.drawEllipse(QPointF(pt.x, pt.y), r, r)
