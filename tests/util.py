"""
Helpers shared across tests for comparing merge results independently of vertex order, starting vertex and winding.
"""

from typing import Iterable, List, Tuple
from rectmerge import Edge, Point

Coords = Tuple[float, float]


def coords(points: Iterable[Point]) -> List[Coords]:
    return [p.cmp_key() for p in points]


def canonical_polygon(points: Iterable) -> Tuple[Coords, ...]:
    """
    Rotates a loop so that it starts at its smallest vertex and picks the walking direction whose second vertex is
    smaller, so two loops describing the same boundary compare equal.
    """
    loop = [p.cmp_key() if isinstance(p, Point) else tuple(p) for p in points]
    candidates = []
    for sequence in (loop, loop[::-1]):
        start = sequence.index(min(sequence))
        candidates.append(tuple(sequence[start:] + sequence[:start]))
    return min(candidates)


def canonical_polygons(polygons) -> List[Tuple[Coords, ...]]:
    return sorted(canonical_polygon(p) for p in polygons)


def edge_key(edge: Edge) -> Tuple[Coords, Coords]:
    a, b = edge.start.cmp_key(), edge.end.cmp_key()
    return (a, b) if a <= b else (b, a)


def edge_keys(edges: Iterable[Edge]) -> List[Tuple[Coords, Coords]]:
    return sorted(edge_key(e) for e in edges)
