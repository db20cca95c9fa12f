"""
Check that a coloring of a graph is proper and report how many colors it uses
"""
import logging
from pathlib import Path
from typing import Optional, Union

from . import CommandLineError, add_graph_arguments
from ..coloring import count_colors, is_proper_coloring, UNCOLORED
from ..edgelist import read_edge_list
from ..error import BrooksError
from ..utils import dataframe_to_coloring, read_coloring

logger = logging.getLogger(__name__)


def main(args):
    try:
        run_verify(args.edge_list, args.coloring, vertices=args.vertices)
    except BrooksError as e:
        raise CommandLineError(e)


def add_arguments(parser):
    add_graph_arguments(parser)
    parser.add_argument(
        "coloring",
        type=Path,
        metavar="COLORING",
        help="Tab-separated file with columns vertex and color "
        "(such as 'coloring.txt' written by the color subcommand)",
    )


def run_verify(
    edge_list: Union[Path, str],
    coloring_path: Union[Path, str],
    vertices: Optional[int] = None,
) -> int:
    """
    Return the number of colors used. Raise BrooksError if the coloring is not
    proper or exceeds the bound of Brooks' theorem.
    """
    graph = read_edge_list(edge_list, vertices)
    try:
        df = read_coloring(coloring_path)
        if df["vertex"].max() >= graph.n or df["vertex"].min() < 0:
            raise BrooksError(
                f"Coloring in '{coloring_path}' lists vertices outside of 0..{graph.n - 1}"
            )
        colors = dataframe_to_coloring(df, graph.n)
    except (KeyError, TypeError, ValueError) as e:
        raise BrooksError(
            f"Could not read a coloring from '{coloring_path}': columns vertex and "
            f"color must hold integers ({e})"
        )

    uncolored = [node for node in graph.active_vertices() if colors[node] == UNCOLORED]
    if uncolored:
        raise BrooksError(f"{len(uncolored)} vertices are not colored: {uncolored[:10]}")
    if not is_proper_coloring(graph, colors):
        conflicts = [(u, v) for u, v in graph.edges() if colors[u] == colors[v]]
        raise BrooksError(
            f"{len(conflicts)} edges join vertices of the same color: {conflicts[:10]}"
        )

    n_colors = count_colors(colors)
    max_degree = graph.max_degree()
    exceptional = graph.is_clique() or graph.is_odd_cycle()
    bound = max(max_degree + 1 if exceptional else max_degree, 1)
    logger.info(
        f"The coloring is proper and uses {n_colors} colors "
        f"(maximum degree {max_degree}, Brooks bound {bound})"
    )
    components = graph.connected_components()
    if len(components) > 1:
        logger.warning(
            f"The graph has {len(components)} connected components; "
            "the Brooks bound is not checked"
        )
        return n_colors
    if n_colors > bound:
        raise BrooksError(f"{n_colors} colors exceed the Brooks bound of {bound}")
    return n_colors
