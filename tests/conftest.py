"""Shared fixtures for the TEG preparation tests."""
import pytest

from tegprep.dataset.TEG import build_condensed_graph, load_edges, validate_id_spaces


SCENARIO_LINES = ["0,1,0", "1,2,1", "0,2,2"]


@pytest.fixture
def write_lines(tmp_path):
    """Writes the given lines to a file under tmp_path and returns its path as str."""
    def _write(lines, name="edges.teg"):
        path = tmp_path / name
        path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def scenario_path(write_lines):
    return write_lines(SCENARIO_LINES)


@pytest.fixture
def make_graph(write_lines):
    """Loads, validates and condenses the given lines."""
    def _make(lines):
        loaded = load_edges(write_lines(lines), show_progress=False)
        num_vertices, num_snapshots = validate_id_spaces(loaded.vertices, loaded.timestamps)
        return build_condensed_graph(loaded.adjacency, num_vertices, num_snapshots)
    return _make


def read_rows(path):
    with open(path, encoding="utf-8") as f:
        return [tuple(int(x) for x in line.strip().split(",")) for line in f if line.strip()]
