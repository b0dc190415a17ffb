"""
Canonical edge loader
---
Streams a `source,target,timestamp` file once and accumulates everything the later stages need:
the distinct vertex ids, the distinct timestamp ids and a per-source `{target: timestamp}` working map.
"""

import re
from typing import Dict, Iterator, Optional, Set, Tuple

from tqdm import tqdm

from .errors import DuplicateEdgeError, FormatError, ParseError


FIELD_NAMES = ("source", "target", "timestamp")
COMMENT_PREFIXES = ("#", "%")

_non_negative_int = re.compile(r"[0-9]+")


class LoadedEdges:
    def __init__(self):
        self.vertices: Set[int] = set()
        self.timestamps: Set[int] = set()

        # source -> {target -> timestamp the edge was inserted at}
        self.adjacency: Dict[int, Dict[int, int]] = {}

        self.num_edges = 0

    def add(self, source: int, target: int, timestamp: int, line_no: int) -> None:
        outgoing = self.adjacency.setdefault(source, {})
        if target in outgoing:
            raise DuplicateEdgeError(
                f"Duplicate edge ({source}, {target}) on line {line_no} with timestamp {timestamp}; "
                f"already seen with timestamp {outgoing[target]}.")

        outgoing[target] = timestamp
        self.vertices.add(source)
        self.vertices.add(target)
        self.timestamps.add(timestamp)
        self.num_edges += 1


def parse_edge_line(line: str, line_no: int) -> Optional[Tuple[int, int, int]]:
    """ Returns `(source, target, timestamp)`, or None for blank and comment lines. """
    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIXES):
        return None

    parts = stripped.split(",")
    if len(parts) != len(FIELD_NAMES):
        raise FormatError(f"Line {line_no}: number of fields is {len(parts)}, expected {len(FIELD_NAMES)}: `{stripped}`.")

    values = []
    for name, part in zip(FIELD_NAMES, parts):
        part = part.strip()
        if not _non_negative_int.fullmatch(part):
            raise ParseError(f"Line {line_no}: {name} `{part}` is not a non-negative integer.")
        values.append(int(part))

    return values[0], values[1], values[2]


def iter_edges(path: str, show_progress: bool = True) -> Iterator[Tuple[int, int, int, int]]:
    """ Yields `(source, target, timestamp, line_no)` for every data line, reading the file row by row. """
    with open(path, "rb") as f:
        for line_no, raw in enumerate(tqdm(f, desc="Reading edges", unit=" lines", disable=not show_progress), start=1):
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise ParseError(f"Line {line_no}: not valid UTF-8 text ({e.reason} at byte {e.start}).") from e
            parsed = parse_edge_line(line, line_no)
            if parsed is None:
                continue
            yield parsed[0], parsed[1], parsed[2], line_no


def load_edges(path: str, show_progress: bool = True) -> LoadedEdges:
    loaded = LoadedEdges()
    for source, target, timestamp, line_no in iter_edges(path, show_progress):
        loaded.add(source, target, timestamp, line_no)

    return loaded
