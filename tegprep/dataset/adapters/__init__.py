from .adapter import RawAdapter, CoOccurrenceAdapter, nx_undirected_graph_to_pairs
from .dblp import DblpAdapter
from .imdb import ImdbAdapter
from .wiki import WikiAdapter
