from .vertices import unique_points, sort_indices
from .edges import CONSUMED, iter_runs, resolve_pairs, resolve_edges, resolve_edge_maps
from .polygons import assemble_polygons
