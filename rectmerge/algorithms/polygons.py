from typing import List
from rectmerge.exceptions import InconsistentEdgeSet
from .edges import CONSUMED


def assemble_polygons(horizontal: List[int], vertical: List[int]) -> List[List[int]]:
    """
    Walks the adjacency arrays produced by resolve_edge_maps to reconstruct closed boundary loops. Every boundary vertex
    has exactly one horizontal and one vertical edge, so starting from any vertex and alternating vertical and
    horizontal hops always returns to the start. Entries are consumed (set to CONSUMED) as they are used, and the
    arrays are modified in place.

    After a loop closes, all of its vertices are cleared from both arrays. For a consistent edge set this clears only
    entries that the walk would never visit again; it is kept so that leftovers of a malformed set cannot start a
    bogus loop.
    :param horizontal: Horizontal adjacency array.
    :param vertical: Vertical adjacency array.
    :return: Loops as lists of vertex indices, without a repeated closing vertex.
    :raises InconsistentEdgeSet: if the walk reaches a vertex whose next edge is missing.
    """
    polygons = []
    start = 0
    while True:
        while start < len(horizontal) and horizontal[start] == CONSUMED:
            start += 1
        if start == len(horizontal):
            break
        horizontal[start] = CONSUMED
        polygon = [start]
        find_vertical = True
        while True:
            current = polygon[-1]
            adjacency = vertical if find_vertical else horizontal
            next_vertex = adjacency[current]
            if next_vertex == CONSUMED:
                raise InconsistentEdgeSet('vertical' if find_vertical else 'horizontal', polygon)
            adjacency[current] = CONSUMED
            find_vertical = not find_vertical
            if next_vertex == start:
                break
            polygon.append(next_vertex)
        for vertex in polygon:
            horizontal[vertex] = CONSUMED
            vertical[vertex] = CONSUMED
        polygons.append(polygon)
    return polygons
