# Model/geometry.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple, Union

Number = Union[int, float, str]

# short name -> long name, as returned by /getBuildings
BuildingMap = Mapping[str, str]


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Edge:
    """
    One colored line segment.

    Path edges are in canvas pixels. Grid edges keep grid units and are mapped
    to pixels only when the canvas is drawn, so a grid size change moves the
    existing edges onto the new dot positions.
    """
    x1: int
    y1: int
    x2: int
    y2: int
    color: str


@dataclass(frozen=True)
class GridSpec:
    size: int
    width: int
    height: int

    def __post_init__(self):
        if self.size <= 0:
            raise ValueError(f"grid size must be positive, got {self.size}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"canvas dimensions must be positive, got {self.width}x{self.height}")


@dataclass(frozen=True)
class PathPoint:
    # Coordinates exactly as the server sent them (numbers or numeric strings)
    x: Number
    y: Number


@dataclass(frozen=True)
class Segment:
    start: PathPoint
    end: PathPoint
    cost: Optional[float] = None


@dataclass(frozen=True)
class PathStructure:
    segments: Tuple[Segment, ...] = ()


@dataclass(frozen=True)
class Markers:
    source: Point
    destination: Point


@dataclass(frozen=True)
class PathOverlay:
    edges: Tuple[Edge, ...] = ()
    markers: Optional[Markers] = None
