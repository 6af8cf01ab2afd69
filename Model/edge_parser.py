# Model/edge_parser.py
"""
Parser for the "Connect the Dots" edge list.

Each non-blank line has the form ``x1,y1 x2,y2 color``. The parser never stops
at the first bad line: every line is checked and every problem is reported with
its 1-indexed line number, so the user can fix the whole text in one go.
Edges are only returned when there is not a single diagnostic (all-or-nothing).
"""
from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .geometry import Edge

logger = logging.getLogger(__name__)

FORMAT_HINT = "x1,y1 x2,y2 color"

_INT_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class ParseResult:
    edges: Tuple[Edge, ...] = ()
    diagnostics: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    def message(self) -> str:
        return format_diagnostics(self.diagnostics)


def format_diagnostics(diagnostics: Sequence[str]) -> str:
    """Combines all diagnostics into the single text shown to the user."""
    if not diagnostics:
        return ""
    lines = [
        "There was an error with some of your line input.",
        f"For reference, the correct form for each line is: {FORMAT_HINT}",
        "",
    ]
    lines.extend(diagnostics)
    return "\n".join(lines)


def _parse_int(raw: str) -> Optional[int]:
    # Only plain decimal integers - "1.5", "3px", "" and "1_000" are rejected
    if _INT_RE.fullmatch(raw) is None:
        return None
    return int(raw)


def _check_line(line_no: int, line: str, errors: List[str]) -> Optional[Edge]:
    # Returns the edge if this line is valid, otherwise appends its diagnostics
    data = line.split(" ")
    # "0,0 1,1 " has three fields but the color is missing
    if len(data) < 3 or (len(data) == 3 and data[2] == ""):
        errors.append(f"Line {line_no}: Missing a portion of the line, or missing a space.")
        return None
    if len(data) > 3:
        errors.append(f"Line {line_no}: Extra portion of the line, or an extra space.")
        return None

    p1 = data[0].split(",")
    if len(p1) != 2:
        errors.append(f"Line {line_no}: Wrong number of inputs to the first coordinate.")
        return None
    p2 = data[1].split(",")
    if len(p2) != 2:
        errors.append(f"Line {line_no}: Wrong number of inputs to the second coordinate.")
        return None

    values = [_parse_int(raw) for raw in (*p1, *p2)]
    parsed = [v for v in values if v is not None]
    valid = True
    if len(parsed) != len(values):
        errors.append(f"Line {line_no}: Coordinate(s) contain non-integer value(s).")
        valid = False
    # fields that failed to parse never count as negative
    if any(v < 0 for v in parsed):
        errors.append(f"Line {line_no}: Coordinate(s) contain negative values(s).")
        valid = False
    if not valid:
        return None

    x1, y1, x2, y2 = values
    return Edge(x1, y1, x2, y2, data[2])


def parse_edge_list(text: str) -> ParseResult:
    errors: List[str] = []
    edges: List[Edge] = []

    for idx, line in enumerate(text.split("\n"), start=1):
        line = line.rstrip("\r")
        # blank lines are skipped silently
        if not line.strip():
            continue
        edge = _check_line(idx, line, errors)
        if edge is not None:
            edges.append(edge)

    if errors:
        logger.debug(f"Edge list rejected with {len(errors)} diagnostic(s).")
        return ParseResult(edges=(), diagnostics=tuple(errors))
    logger.debug(f"Parsed {len(edges)} edge(s).")
    return ParseResult(edges=tuple(edges), diagnostics=())
