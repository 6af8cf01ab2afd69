# Model/coordinate_mapper.py
from __future__ import annotations
from typing import Tuple

import numpy as np

from .geometry import GridSpec

# Dots never get bigger than this; with many dots they shrink so they do not touch.
MAX_DOT_RADIUS = 4.0


def map_coordinate(x: float, y: float, size: int, width: float, height: float) -> Tuple[float, float]:
    """
    Maps a grid unit (x, y) onto the canvas.

    The canvas is divided into size+1 cells per axis and the dots sit on the
    inner cell borders, so a grid of `size` dots always keeps one cell of
    margin to every canvas edge.
    """
    return width / (size + 1) * (x + 1), height / (size + 1) * (y + 1)


def grid_coordinates(grid: GridSpec) -> np.ndarray:
    # All dot positions, x-major (same order as the nested x/y loops), shape (size*size, 2)
    idx = np.arange(grid.size, dtype=np.float64)
    xs, ys = np.meshgrid(idx, idx, indexing="ij")
    px = grid.width / (grid.size + 1) * (xs.ravel() + 1)
    py = grid.height / (grid.size + 1) * (ys.ravel() + 1)
    return np.column_stack((px, py))


def dot_radius(size: int) -> float:
    return min(MAX_DOT_RADIUS, 100.0 / size)
