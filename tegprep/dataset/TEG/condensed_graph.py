"""
Condensed graph
---
Array-indexed adjacency of a temporal edge graph. All edges live in one flat arena (`targets`, `start_times`, `end_times`),
and `offsets` tells where the outgoing edges of every vertex start and end:
    outgoing edges of vertex `i` == arena[offsets[i]:offsets[i + 1]]
Within a vertex slot, edges are sorted ascending by target. Downstream consumers rely on this order.
"""

from typing import Dict, Optional, Tuple

import numpy as np


class CondensedGraph:
    def __init__(self,
                 offsets: np.ndarray,
                 targets: np.ndarray,
                 start_times: np.ndarray,
                 num_snapshots: int,
                 end_times: Optional[np.ndarray] = None):

        assert offsets.ndim == targets.ndim == start_times.ndim == 1, "Offsets, targets and start times should be 1-dimensional."
        assert offsets.size >= 1 and offsets[0] == 0, "Offset table should start at zero."
        assert offsets[-1] == targets.size == start_times.size, f"Offset table ends at {offsets[-1]}, but the arena has {targets.size} targets and {start_times.size} start times."
        if end_times is not None:
            assert end_times.size == targets.size, f"Got {end_times.size} end times for {targets.size} edges."

        self.offsets = offsets
        self.targets = targets
        self.start_times = start_times
        self.end_times = end_times
        self.num_snapshots = num_snapshots

    @property
    def num_vertices(self) -> int:
        return self.offsets.size - 1

    @property
    def num_edges(self) -> int:
        return self.targets.size

    def __len__(self) -> int:
        return self.num_vertices

    def out_degrees(self) -> np.ndarray:
        return np.diff(self.offsets)

    def sources(self) -> np.ndarray:
        """ Source id of every arena slot, i.e. the offset table expanded per edge. """
        return np.repeat(np.arange(self.num_vertices, dtype=np.int64), self.out_degrees())

    def outgoing(self, vertex: int) -> Tuple[np.ndarray, np.ndarray, Optional[np.ndarray]]:
        """ It returns `(targets, start_times, end_times)` views of the outgoing edges of `vertex`. """
        if not 0 <= vertex < self.num_vertices:
            raise IndexError(f"Vertex {vertex} is out of range [0, {self.num_vertices}).")
        lo, hi = self.offsets[vertex], self.offsets[vertex + 1]
        end_times = None if self.end_times is None else self.end_times[lo:hi]
        return self.targets[lo:hi], self.start_times[lo:hi], end_times


def build_condensed_graph(adjacency: Dict[int, Dict[int, int]], num_vertices: int, num_snapshots: int) -> CondensedGraph:
    """ Lays the per-source `{target: timestamp}` working map out as a `CondensedGraph` with `num_vertices` slots.
    Vertices that never appear as a source get an empty slot. Each source list is sorted once by target. """
    assert all(0 <= s < num_vertices for s in adjacency.keys()), f"All sources should be in [0, {num_vertices})."

    offsets = np.zeros(num_vertices + 1, dtype=np.int64)
    for source, outgoing in adjacency.items():
        offsets[source + 1] = len(outgoing)
    np.cumsum(offsets, out=offsets)

    num_edges = int(offsets[-1])
    targets = np.empty(num_edges, dtype=np.int64)
    start_times = np.empty(num_edges, dtype=np.int64)

    for source, outgoing in adjacency.items():
        sorted_targets = sorted(outgoing)
        lo, hi = offsets[source], offsets[source + 1]
        targets[lo:hi] = sorted_targets
        start_times[lo:hi] = [outgoing[t] for t in sorted_targets]

    return CondensedGraph(offsets, targets, start_times, num_snapshots)
