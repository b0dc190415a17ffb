import argparse
import gc
import timeit
from typing import Optional

from .condensed_graph import CondensedGraph, build_condensed_graph
from .deletion import DEFAULT_SEED, generate_deletions
from .loader import LoadedEdges, load_edges
from .validator import validate_id_spaces
from .writer import write_edges
from ...utils import stage_banner
from ...utils.types import TEGFormat


DELETIONS_SUFFIX = ".deletions"


class PreprocessResult:
    """ What a successful run produced; the caller decides what to report. """
    def __init__(self, input_path: str, output_path: str, num_vertices: int, num_snapshots: int, num_edges: int, num_lines_written: int, seed: int, elapsed_s: float):
        self.input_path = input_path
        self.output_path = output_path
        self.num_vertices = num_vertices
        self.num_snapshots = num_snapshots
        self.num_edges = num_edges
        self.num_lines_written = num_lines_written
        self.seed = seed
        self.elapsed_s = elapsed_s

    def __repr__(self) -> str:
        return (f"PreprocessResult(output={self.output_path!r}, vertices={self.num_vertices}, "
                f"snapshots={self.num_snapshots}, edges={self.num_edges}, seed={self.seed})")


class InsertedDeletionsPreprocessor:
    """ Turns a canonical `source,target,timestamp` file into `source,target,startTime,endTime`, where each
    edge gets a random deletion time no earlier than its insertion time.
    Stages run one after another: load -> validate -> build -> generate deletions -> write.
    Nothing is written unless every earlier stage succeeded. """

    def __init__(self, seed: int = DEFAULT_SEED, show_progress: bool = True):
        self.seed = seed
        self.show_progress = show_progress

        self.num_vertices: Optional[int] = None
        self.num_snapshots: Optional[int] = None
        self.condensed_graph: Optional[CondensedGraph] = None

    @staticmethod
    def get_parser():
        parser = argparse.ArgumentParser('*** Temporal edge graph deletion generator ***')
        parser.add_argument('input', type=str, help="Canonical TEG file with one `source,target,timestamp` line per edge.")
        parser.add_argument('-o', '--output', type=str, default=None, help=f"Output path. Defaults to `<input>{DELETIONS_SUFFIX}`.")
        parser.add_argument('--seed', type=int, default=DEFAULT_SEED, help="Seed of the deletion time generator.")
        parser.add_argument('--no-progress', action='store_true', help="If given, progress bars are not shown.")

        return parser

    @stage_banner("constructGraph")
    def construct_graph(self, path: str) -> CondensedGraph:
        loaded: LoadedEdges = load_edges(path, show_progress=self.show_progress)

        print(f"INFO: Number of edges is {loaded.num_edges}.", flush=True)
        print(f"INFO: Number of vertices is {len(loaded.vertices)}.", flush=True)
        print(f"INFO: Number of snapshots is {len(loaded.timestamps)}.", flush=True)

        self.num_vertices, self.num_snapshots = validate_id_spaces(loaded.vertices, loaded.timestamps)

        # Id sets are not needed anymore; only the working map is.
        adjacency = loaded.adjacency
        del loaded
        gc.collect()

        self.condensed_graph = build_condensed_graph(adjacency, self.num_vertices, self.num_snapshots)
        assert self.condensed_graph.num_edges == sum(len(v) for v in adjacency.values())

        return self.condensed_graph

    @stage_banner("generateDeletions")
    def generate_deletions(self) -> CondensedGraph:
        assert self.condensed_graph is not None, "The condensed graph should be constructed before generating deletions."
        return generate_deletions(self.condensed_graph, self.seed)

    @stage_banner("writeEdgesToFile")
    def write_edges_to_file(self, path: str) -> int:
        assert self.condensed_graph is not None, "The condensed graph should be constructed before writing it."
        return write_edges(self.condensed_graph, path, TEGFormat.DELETIONS)

    def process(self, path: str, output_path: Optional[str] = None) -> PreprocessResult:
        if output_path is None:
            output_path = path + DELETIONS_SUFFIX

        start_time = timeit.default_timer()
        self.construct_graph(path)
        self.generate_deletions()
        num_lines = self.write_edges_to_file(output_path)
        elapsed = timeit.default_timer() - start_time

        assert num_lines == self.condensed_graph.num_edges, f"Wrote {num_lines} lines for {self.condensed_graph.num_edges} edges."

        return PreprocessResult(input_path=path,
                                output_path=output_path,
                                num_vertices=self.num_vertices,
                                num_snapshots=self.num_snapshots,
                                num_edges=self.condensed_graph.num_edges,
                                num_lines_written=num_lines,
                                seed=self.seed,
                                elapsed_s=elapsed)
