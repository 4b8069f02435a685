from unittest import TestCase
from rectmerge import Axis, Point, Rect, Tolerance, UnclosedBoundary
from rectmerge.algorithms import (
    CONSUMED, unique_points, sort_indices, iter_runs, resolve_pairs, resolve_edges, resolve_edge_maps)
from tests.util import edge_keys


def prepare(points, tol):
    return points, sort_indices(points, Axis.X, tol), sort_indices(points, Axis.Y, tol)


class TestEdgeResolution(TestCase):
    def setUp(self):
        self.tol = Tolerance()
        # L-shape: Rect(0, 0, 2, 1) + Rect(0, 1, 1, 2)
        self.points = unique_points(Rect(0, 0, 2, 1).corners() + Rect(0, 1, 1, 2).corners(), self.tol)

    def test_runs(self):
        """Runs group vertices sharing the primary coordinate"""
        points, _, order_y = prepare(self.points, self.tol)
        runs = [[points[i].y for i in run] for run in iter_runs(points, order_y, Axis.Y, self.tol)]
        self.assertEqual([[0, 0], [1, 1], [2, 2]], runs)

    def test_edge_list_horizontal_then_vertical(self):
        """Edge-list mode lists the horizontal edges first, then the vertical edges"""
        edges = resolve_edges(*prepare(self.points, self.tol), self.tol)
        self.assertEqual(6, len(edges))
        self.assertEqual([True] * 3 + [False] * 3, [e.is_horizontal for e in edges])
        self.assertEqual([
            ((0, 0), (0, 2)),
            ((0, 0), (2, 0)),
            ((0, 2), (1, 2)),
            ((1, 1), (1, 2)),
            ((1, 1), (2, 1)),
            ((2, 0), (2, 1)),
        ], edge_keys(edges))

    def test_pairs_consecutive_within_run(self):
        """A run of four vertices yields two edges: 1st-2nd and 3rd-4th"""
        points = [Point(0, 0), Point(1, 0), Point(3, 0), Point(4, 0)]
        _, _, order_y = prepare(points, self.tol)
        pairs = resolve_pairs(points, order_y, Axis.Y, self.tol)
        self.assertEqual([(0, 1), (2, 3)], pairs)

    def test_maps_are_self_inverse(self):
        """Each adjacency array maps the two ends of every edge onto each other"""
        horizontal, vertical = resolve_edge_maps(*prepare(self.points, self.tol), self.tol)
        for adjacency in (horizontal, vertical):
            self.assertNotIn(CONSUMED, adjacency)
            for i, j in enumerate(adjacency):
                self.assertEqual(i, adjacency[j])
                self.assertNotEqual(i, j)

    def test_maps_orientation(self):
        """Horizontal partners share y, vertical partners share x"""
        horizontal, vertical = resolve_edge_maps(*prepare(self.points, self.tol), self.tol)
        for i, p in enumerate(self.points):
            self.assertEqual(p.y, self.points[horizontal[i]].y)
            self.assertEqual(p.x, self.points[vertical[i]].x)

    def test_odd_run_raises(self):
        """A line with an odd number of vertices cannot be paired"""
        points = [Point(0, 0), Point(1, 0), Point(2, 0), Point(0, 1), Point(2, 1)]
        with self.assertRaises(UnclosedBoundary) as cm:
            resolve_edges(*prepare(points, self.tol), self.tol)
        self.assertEqual(Axis.Y, cm.exception.axis)
        self.assertEqual(3, len(cm.exception.points))

    def test_odd_run_raises_in_map_mode(self):
        points = [Point(0, 0), Point(0, 1), Point(0, 2), Point(1, 0), Point(1, 2), Point(5, 1)]
        with self.assertRaises(UnclosedBoundary) as cm:
            resolve_edge_maps(*prepare(points, self.tol), self.tol)
        # y=1 holds two points, so horizontal pairing passes; x=0 holds three
        self.assertEqual(Axis.X, cm.exception.axis)
