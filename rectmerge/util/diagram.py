import os
import platform
import subprocess
import tempfile
from typing import List, Optional
from rectmerge.models import Polygon, Rect, polygon_edges, union_all

try:
    import matplotlib.pyplot as plt
    import matplotlib.patches as patches
    import pydot
    from tqdm import tqdm
except ImportError:
    raise RuntimeError("The following libraries are required to create merge diagrams: matplotlib, pydot, tqdm")


def plot_merge(rects: List[Rect], polygons: List[Polygon], filename=None, show=True, annotate=False):
    """
    Create a cartesian plot (using matplotlib) of a merge. Each input rectangle is plotted as a light blue filled
    rectangle, and each merged boundary loop is drawn on top as a closed outline with its vertices marked.
    :param rects: Input rectangles
    :param polygons: Boundary loops returned by merge_polygons
    :param filename: If passed in, the plot will be saved to a file
    :param show: If True, show the plot
    :param annotate: If True, label each vertex with its position in its loop
    """
    fig, ax = plt.subplots(1)
    bbox = union_all(rects) if rects else Rect(0, 0, 1, 1)
    padx, pady = (0.1 * bbox.width or 1, 0.1 * bbox.height or 1)
    ax.set_xlim(left=bbox.min_x - padx, right=bbox.max_x + padx)
    ax.set_ylim(bottom=bbox.min_y - pady, top=bbox.max_y + pady)
    ax.set_aspect('equal')
    _plot_rects(ax, rects)
    _plot_polygons(ax, polygons, annotate)
    if filename:
        plt.savefig(filename, bbox_inches='tight')
    if show:
        plt.show()
    plt.close(fig)


def create_merge_diagram(polygons: List[Polygon], title=None, filename_ps=None, filename_dot=None, open_file=True):
    """
    Creates a graphviz diagram of the merged boundary: one cluster per loop, one node per vertex, with horizontal edges
    drawn in blue and vertical edges in red.
    :param polygons: Boundary loops returned by merge_polygons
    :param title: Optional title
    :param filename_ps: Optional filename for the generated diagram. If not provided, a temporary filename will be
        generated.
    :param filename_dot: Optional filename for the 'dot' graphviz file that will be used as an intermediate file for
        creating the diagram. If not provided, a temporary filename will be generated.
    :param open_file: If True, open the generated diagram with the platform's default viewer.
    :return: Filename of the generated diagram
    """
    graph = build_merge_graph(polygons, title)
    filename_ps = filename_ps or tempfile.mkstemp('.ps')[1]
    graph.write(filename_ps, format='ps')
    filename_dot = filename_dot or tempfile.mkstemp('.dot')[1]
    graph.write(filename_dot)
    if open_file:
        _invoke_file(filename_ps)
    return filename_ps


def build_merge_graph(polygons: List[Polygon], title: Optional[str] = None) -> 'pydot.Dot':
    graph = pydot.Dot(graph_type='graph', label=title or '', labelloc='t')
    graph.set_node_defaults(shape='box', fontsize='8')
    with tqdm(total=sum(len(p) for p in polygons), desc="Drawing boundary", unit="vertex") as pbar:
        for n, polygon in enumerate(polygons):
            cluster = pydot.Cluster(f'loop_{n}', label=f'loop {n} ({len(polygon)} vertices)')
            graph.add_subgraph(cluster)
            for i, point in enumerate(polygon):
                cluster.add_node(pydot.Node(_node_name(n, i), label=f'({point.x:g}, {point.y:g})'))
                pbar.update()
            for i, edge in enumerate(polygon_edges(polygon)):
                color = 'blue' if edge.is_horizontal else 'red'
                cluster.add_edge(pydot.Edge(_node_name(n, i), _node_name(n, (i + 1) % len(polygon)), color=color))
    return graph


def _node_name(loop, index):
    return f'v{loop}_{index}'


def _invoke_file(filepath):
    if platform.system() == 'Darwin':  # macOS
        subprocess.call(('open', filepath))
    elif platform.system() == 'Windows':  # Windows
        # noinspection PyUnresolvedReferences
        os.startfile(filepath)
    else:  # linux variants
        subprocess.call(('xdg-open', filepath))


def _plot_rects(ax, rects: List[Rect]):
    for rect in rects:
        xy = (rect.min_x, rect.min_y)
        patch = patches.Rectangle(xy, rect.width, rect.height, linewidth=1, linestyle=':',
                                  edgecolor=(0.24, 0.52, 0.78), facecolor=(0.24, 0.52, 0.78, 0.25))
        ax.add_patch(patch)


def _plot_polygons(ax, polygons: List[Polygon], annotate=False):
    for polygon in polygons:
        xs = [p.x for p in polygon] + [polygon[0].x]
        ys = [p.y for p in polygon] + [polygon[0].y]
        ax.plot(xs, ys, color=(0.78, 0.24, 0.52), linewidth=2, marker='o', markersize=3)
        if annotate:
            for i, p in enumerate(polygon):
                ax.annotate(
                    str(i),
                    color=(0.25, 0.08, 0.17),
                    fontsize=6,
                    xy=(p.x, p.y),
                    xytext=(3, 3),
                    textcoords='offset pixels')
