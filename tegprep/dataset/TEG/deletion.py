import numpy as np

from .condensed_graph import CondensedGraph
from .errors import IdSpaceError


DEFAULT_SEED = 0


def generate_deletions(graph: CondensedGraph, seed: int = DEFAULT_SEED) -> CondensedGraph:
    """ Assigns every edge an end time in `[start_time, num_snapshots - 1]` and returns the same graph.

    Edges are visited in arena order (increasing source, then increasing target), and the i-th edge
    consumes the i-th draw of a single PCG64 generator seeded with `seed`. Changing this order changes
    the output even for the same seed. Only `end_times` is written.
    """
    if graph.num_edges > 0 and int(graph.start_times.max()) >= graph.num_snapshots:
        raise IdSpaceError(
            f"Start time {int(graph.start_times.max())} is out of the snapshot range [0, {graph.num_snapshots}).")

    rng = np.random.Generator(np.random.PCG64(seed))
    if graph.num_edges == 0:
        graph.end_times = np.empty(0, dtype=np.int64)
        return graph

    # lifetime ~ U[0, num_snapshots - start_time)
    lifetimes = rng.integers(0, graph.num_snapshots - graph.start_times, dtype=np.int64)
    graph.end_times = graph.start_times + lifetimes

    return graph
