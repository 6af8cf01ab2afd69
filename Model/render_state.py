# Model/render_state.py
# The snapshot a canvas is drawn from, plus the transitions between snapshots.
# The state is never changed in place: every event produces a new RenderState.
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Iterable, Optional, Tuple

from .geometry import Edge, Markers, PathOverlay

if TYPE_CHECKING:
    from PyQt6.QtGui import QImage


@dataclass(frozen=True)
class RenderState:
    background: Optional["QImage"] = None   # set once by the image loader, never modified
    edges: Tuple[Edge, ...] = ()
    markers: Optional[Markers] = None
    junctions: bool = False                 # path mode: dot on every path vertex


def with_background(state: RenderState, image: "QImage") -> RenderState:
    return replace(state, background=image)


def with_edges(state: RenderState, edges: Iterable[Edge]) -> RenderState:
    # Replaces the edge list wholesale - "Draw" never merges with the previous drawing
    return replace(state, edges=tuple(edges), markers=None, junctions=False)


def with_path(state: RenderState, overlay: PathOverlay) -> RenderState:
    return replace(state, edges=overlay.edges, markers=overlay.markers, junctions=bool(overlay.edges))


def cleared(state: RenderState) -> RenderState:
    # Keeps the background; drops everything drawn on top of it
    return replace(state, edges=(), markers=None, junctions=False)
