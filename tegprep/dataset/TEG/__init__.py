from .errors import TEGError, FormatError, ParseError, DuplicateEdgeError, IdSpaceError
from .loader import LoadedEdges, load_edges, parse_edge_line
from .validator import validate_id_spaces
from .condensed_graph import CondensedGraph, build_condensed_graph
from .deletion import DEFAULT_SEED, generate_deletions
from .writer import write_edges, write_rows
from .preprocessor import InsertedDeletionsPreprocessor, PreprocessResult
