from abc import abstractmethod
import argparse
import gc
import itertools
import re
from typing import Dict, Hashable, Iterable, Iterator, List, Optional, Tuple

import networkx as nx
import numpy as np
from tqdm import tqdm

from ..TEG.writer import write_rows


TEG_SUFFIX = ".teg"
SIMPLIFIED_SUFFIX = ".sim"

# (snapshot key, participant names)
Record = Tuple[str, List[str]]
# (source name, target name, snapshot key)
Pair = Tuple[str, str, str]

_ascii_int = re.compile(r"[0-9]+")


def is_ascii_int(key: str) -> bool:
    return _ascii_int.fullmatch(key) is not None


def nx_undirected_graph_to_pairs(G: nx.Graph) -> List[Tuple[Hashable, Hashable]]:
    """ Every undirected edge of `G` in both directions. """
    if G.number_of_edges() == 0:
        return []

    src_to_dst = list(G.edges)
    dst_to_src = [(v, u) for u, v in src_to_dst]
    return src_to_dst + dst_to_src


def snapshot_sort_key(key: str):
    """ Numeric snapshot keys (years, dates without dashes) sort numerically, the rest lexicographically. """
    return (0, int(key), key) if is_ascii_int(key) else (1, 0, key)


class RawAdapter:
    """ Converts a raw relationship dataset into canonical TEG triples `source,target,timestamp`.
    Subclasses only describe how to read records (`get_records`) and, if needed, how to turn them into
    directed pairs (`get_pairs`). Names and snapshot keys are mapped to dense zero-based ids here. """

    def __init__(self, show_progress: bool = True):
        self.show_progress = show_progress

        self.vertex_ids: Dict[str, int] = {}
        self.snapshot_ids: Dict[str, int] = {}

    @staticmethod
    def get_parser():
        parser = argparse.ArgumentParser('*** Raw dataset to TEG adapter ***', add_help=False)
        parser.add_argument('input', type=str, help="Raw dataset file.")
        parser.add_argument('-o', '--output', type=str, default=None, help=f"Output path. Defaults to `<input>{TEG_SUFFIX}`.")
        parser.add_argument('--simplify', action='store_true', help=f"If given, a `{SIMPLIFIED_SUFFIX}` file keeping only the first appearance of every pair is also written.")
        parser.add_argument('--no-progress', action='store_true', help="If given, progress bars are not shown.")

        return parser

    @abstractmethod
    def get_records(self, path: str) -> Iterator[Record]:
        pass

    @abstractmethod
    def get_pairs(self, records: Iterable[Record]) -> Iterator[Pair]:
        pass

    def normalize(self, pairs: Iterable[Pair]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """ Maps names and snapshot keys to dense ids. Snapshots are numbered in ascending key order,
        vertices in the order they first appear. Repeated `(source, target, snapshot)` pairs are kept once. """
        unique_pairs = list(dict.fromkeys(pairs))

        keys = sorted({k for _, _, k in unique_pairs}, key=snapshot_sort_key)
        self.snapshot_ids = {k: i for i, k in enumerate(keys)}

        self.vertex_ids = {}
        for s, d, _ in unique_pairs:
            self.vertex_ids.setdefault(s, len(self.vertex_ids))
            self.vertex_ids.setdefault(d, len(self.vertex_ids))

        src = np.fromiter((self.vertex_ids[s] for s, _, _ in unique_pairs), dtype=np.int64, count=len(unique_pairs))
        dst = np.fromiter((self.vertex_ids[d] for _, d, _ in unique_pairs), dtype=np.int64, count=len(unique_pairs))
        t = np.fromiter((self.snapshot_ids[k] for _, _, k in unique_pairs), dtype=np.int64, count=len(unique_pairs))

        # Chronological order, ties broken by source then target.
        order = np.lexsort((dst, src, t))
        return src[order], dst[order], t[order]

    @staticmethod
    def simplify(src: np.ndarray, dst: np.ndarray, t: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """ Keeps the earliest snapshot of every ordered pair and renumbers the remaining snapshots densely.
        The input is expected in chronological order, as returned by `normalize`. """
        assert np.all(t[:-1] <= t[1:]), "Links should be sorted chronologically."
        if src.size == 0:
            return src, dst, t

        num_vertices = int(max(src.max(), dst.max())) + 1
        pair_codes = src * num_vertices + dst
        _, first_occurence = np.unique(pair_codes, return_index=True)
        keep = np.sort(first_occurence)

        _, dense_t = np.unique(t[keep], return_inverse=True)
        return src[keep], dst[keep], dense_t.astype(np.int64)

    def create_data(self, path: str, output_path: Optional[str] = None, simplify: bool = False) -> Dict[str, int]:
        """ Writes the TEG file (and the simplified one if asked) and returns the number of lines per written path. """
        if output_path is None:
            output_path = path + TEG_SUFFIX

        records = self.get_records(path)
        pairs = self.get_pairs(tqdm(records, desc=type(self).__name__, unit=" records", disable=not self.show_progress))
        src, dst, t = self.normalize(pairs)
        gc.collect()

        print(f"INFO: Number of edges is {src.size}.", flush=True)
        print(f"INFO: Number of vertices is {len(self.vertex_ids)}.", flush=True)
        print(f"INFO: Number of snapshots is {len(self.snapshot_ids)}.", flush=True)

        written = {output_path: write_rows(np.stack([src, dst, t], axis=1), output_path)}
        print(f"@@@ TEG saved at {output_path}", flush=True)

        if simplify:
            s_src, s_dst, s_t = self.simplify(src, dst, t)
            sim_path = output_path + SIMPLIFIED_SUFFIX
            written[sim_path] = write_rows(np.stack([s_src, s_dst, s_t], axis=1), sim_path)
            print(f"INFO: Simplified {src.size} edges to {s_src.size} over {np.unique(s_t).size} snapshots.", flush=True)
            print(f"@@@ Simplified TEG saved at {sim_path}", flush=True)

        return written


class CoOccurrenceAdapter(RawAdapter):
    """ Every record is a group of participants that are pairwise related in the record's snapshot,
    e.g. co-authors of a paper or the cast of a film. """

    def get_pairs(self, records: Iterable[Record]) -> Iterator[Pair]:
        snapshots: Dict[str, nx.Graph] = {}
        for key, participants in records:
            G = snapshots.setdefault(key, nx.Graph())
            participants = list(dict.fromkeys(participants))
            G.add_nodes_from(participants)
            G.add_edges_from(itertools.combinations(participants, 2))

        for key in sorted(snapshots.keys(), key=snapshot_sort_key):
            for u, v in nx_undirected_graph_to_pairs(snapshots[key]):
                yield u, v, key
