# Model/payloads.py
"""
Boundary decoding of the JSON the path server returns.

The server output is trusted nowhere else: every shape check happens here and
anything unexpected becomes a PayloadDecodeError.
"""
from __future__ import annotations
import math
from typing import Any, Dict, List, Mapping

from .errors import PayloadDecodeError
from .geometry import BuildingMap, PathPoint, PathStructure, Segment


def decode_buildings(payload: Any) -> BuildingMap:
    if not isinstance(payload, Mapping):
        raise PayloadDecodeError(f"Expected an object of buildings, got {type(payload).__name__}")
    buildings: Dict[str, str] = {}
    for key, value in payload.items():
        if not isinstance(key, str) or not key:
            raise PayloadDecodeError(f"Invalid building short name: {key!r}")
        # only the keys are used; the long name is kept as text
        buildings[key] = "" if value is None else str(value)
    return buildings


def _coordinate(raw: Any, where: str) -> Any:
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise PayloadDecodeError(f"{where} is not a number: {raw!r}")
    try:
        value = float(raw)
    except (ValueError, OverflowError):
        raise PayloadDecodeError(f"{where} is not a number: {raw!r}") from None
    if not math.isfinite(value):
        raise PayloadDecodeError(f"{where} is not finite: {raw!r}")
    if value < 0:
        raise PayloadDecodeError(f"{where} is negative: {raw!r}")
    return raw


def _point(raw: Any, where: str) -> PathPoint:
    if not isinstance(raw, Mapping):
        raise PayloadDecodeError(f"{where} is not a point object")
    if "x" not in raw or "y" not in raw:
        raise PayloadDecodeError(f"{where} is missing x or y")
    return PathPoint(_coordinate(raw["x"], f"{where}.x"), _coordinate(raw["y"], f"{where}.y"))


def decode_path(payload: Any) -> PathStructure:
    if not isinstance(payload, Mapping):
        raise PayloadDecodeError(f"Expected a path object, got {type(payload).__name__}")
    raw_segments = payload.get("path")
    if not isinstance(raw_segments, list):
        raise PayloadDecodeError("Path object has no 'path' list")

    segments: List[Segment] = []
    for i, raw in enumerate(raw_segments):
        if not isinstance(raw, Mapping):
            raise PayloadDecodeError(f"path[{i}] is not an object")
        cost = raw.get("cost")
        if cost is not None:
            if isinstance(cost, bool) or not isinstance(cost, (int, float)):
                raise PayloadDecodeError(f"path[{i}].cost is not a number: {cost!r}")
            try:
                cost = float(cost)
            except OverflowError:
                raise PayloadDecodeError(f"path[{i}].cost is out of range") from None
        segments.append(Segment(
            start=_point(raw.get("start"), f"path[{i}].start"),
            end=_point(raw.get("end"), f"path[{i}].end"),
            cost=cost,
        ))
    return PathStructure(tuple(segments))
