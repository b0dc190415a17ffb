import os
from typing import Optional

import numpy as np

from .condensed_graph import CondensedGraph
from ...utils.types import TEGFormat


def write_edges(graph: CondensedGraph, path: str, fmt: Optional[str] = None) -> int:
    """ Writes one comma-separated line per edge, sources ascending and targets ascending within a source:
        `source,target,startTime,endTime` for `TEGFormat.DELETIONS`,
        `source,target,timestamp` for `TEGFormat.TEG`.
    If `fmt` is None, the deletion format is used whenever end times exist.

    Lines go to `<path>.tmp` first; the file is renamed to `path` only after it has been completely written,
    flushed and closed. On failure the temporary file is removed and the error is re-raised.
    It returns the number of written lines, which is always `graph.num_edges`.
    """
    if fmt is None:
        fmt = TEGFormat.TEG if graph.end_times is None else TEGFormat.DELETIONS
    assert fmt in TEGFormat.list(), f"Unknown TEG format `{fmt}`; expected one of {TEGFormat.list()}."
    if fmt == TEGFormat.DELETIONS and graph.end_times is None:
        raise ValueError("End times are missing; run deletion generation before writing the deletions format.")

    columns = [graph.sources(), graph.targets, graph.start_times]
    if fmt == TEGFormat.DELETIONS:
        columns.append(graph.end_times)
    rows = np.stack(columns, axis=1)
    assert rows.shape == (graph.num_edges, TEGFormat.num_fields(fmt))

    return write_rows(rows, path)


def write_rows(rows: np.ndarray, path: str) -> int:
    """ Atomically writes a 2-dimensional integer array as comma-separated lines and returns the number of lines. """
    assert rows.ndim == 2, f"Rows should be 2-dimensional; got {rows.ndim} dimensions instead."

    d = os.path.dirname(os.path.abspath(path))
    os.makedirs(d, exist_ok=True)

    temp_path = path + ".tmp"
    try:
        with open(temp_path, "w", encoding="utf-8") as f:
            np.savetxt(f, rows, fmt="%d", delimiter=",")
            f.flush()
        os.replace(temp_path, path)
    except BaseException:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise

    return rows.shape[0]
