# Model/path_converter.py
from __future__ import annotations
import logging
from typing import Any, Mapping, Union

from .geometry import Edge, Markers, PathOverlay, PathPoint, PathStructure, Point
from .payloads import decode_path

logger = logging.getLogger(__name__)

PATH_COLOR = "blue"


def _to_int(value: Any) -> int:
    # Server coordinates are floats (sometimes as strings) - truncate them like parseInt
    return int(float(value))


def _to_point(p: PathPoint) -> Point:
    return Point(_to_int(p.x), _to_int(p.y))


def convert_path(path: Union[PathStructure, Mapping[str, Any]]) -> PathOverlay:
    """
    Turns a shortest path into pixel edges plus source/destination markers.

    A raw mapping (the decoded server JSON) is validated first. An empty path
    is treated as "no path": no edges and no markers.
    """
    if not isinstance(path, PathStructure):
        path = decode_path(path)

    if not path.segments:
        logger.debug("Empty path - nothing to draw.")
        return PathOverlay(edges=(), markers=None)

    edges = []
    for seg in path.segments:
        a, b = _to_point(seg.start), _to_point(seg.end)
        edges.append(Edge(a.x, a.y, b.x, b.y, PATH_COLOR))

    markers = Markers(
        source=_to_point(path.segments[0].start),
        destination=_to_point(path.segments[-1].end),
    )
    return PathOverlay(edges=tuple(edges), markers=markers)
