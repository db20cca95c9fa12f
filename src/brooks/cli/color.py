"""
Color the vertices of a connected graph with at most as many colors as its maximum degree
(Brooks' theorem)

Complete graphs and odd cycles are the exceptions and get one color more.
"""
import sys
import logging
from pathlib import Path
from typing import Optional, Union

from . import (
    CommandLineError,
    add_file_logging,
    add_graph_arguments,
    make_output_dir,
)
from .. import __version__
from ..coloring import BrooksColoring, ColoringResult
from ..cutvertex import CutVertexFinder
from ..edgelist import read_edge_list
from ..error import BrooksError, DisconnectedGraphError
from ..observer import LoggingObserver, TraceObserver
from ..writers import write_coloring, write_dot

logger = logging.getLogger(__name__)


def main(args):
    output_dir = args.output
    try:
        make_output_dir(output_dir, args.delete)
    except FileExistsError:
        raise CommandLineError(
            f"Output directory '{output_dir}' already exists "
            "(use --delete to force deleting an existing output directory)"
        )

    add_file_logging(output_dir / "log.txt")
    logger.info(f"Brooks {__version__}")
    logger.info("Command line arguments: %s", " ".join(sys.argv[1:]))

    try:
        run_color(
            output_dir,
            edge_list=args.edge_list,
            vertices=args.vertices,
            should_write_trace=args.trace,
            should_write_dot=args.dot,
        )
    except BrooksError as e:
        raise CommandLineError(e)


def add_arguments(parser):
    add_graph_arguments(parser)

    output_group = parser.add_argument_group("Output directory")
    output_group.add_argument(
        "--output",
        "-o",
        metavar="DIRECTORY",
        type=Path,
        help="Name of the run directory to be created by the program. Default: %(default)s",
        default=Path("brooks_run"),
    )
    output_group.add_argument(
        "--delete",
        action="store_true",
        help="Delete the run directory if it already exists",
    )

    optional_group = parser.add_argument_group(
        "Optional output files",
        description="Use these options to enable creation "
        "of additional files in the output directory",
    )
    optional_group.add_argument(
        "--trace",
        default=False,
        action="store_true",
        help="Write every coloring step to 'trace.txt'",
    )
    optional_group.add_argument(
        "--dot",
        default=False,
        action="store_true",
        help="Write the colored graph in Graphviz format to 'graph.gv'",
    )


def run_color(
    output_dir: Path,
    *,
    edge_list: Union[Path, str],
    vertices: Optional[int] = None,
    should_write_trace: bool = False,
    should_write_dot: bool = False,
) -> ColoringResult:
    graph = read_edge_list(edge_list, vertices)
    max_degree = graph.max_degree()
    logger.info(
        f"Read graph with {graph.n} vertices, {graph.count_edges()} edges "
        f"and maximum degree {max_degree}"
    )
    components = graph.connected_components()
    if len(components) > 1:
        sizes = sorted((len(component) for component in components), reverse=True)
        raise DisconnectedGraphError(
            f"The graph has {len(components)} connected components "
            f"(sizes {sizes[:10]}), but it must be connected to be colored"
        )
    cut_vertices = CutVertexFinder(graph).cut_vertices()
    logger.info(f"The graph has {len(cut_vertices)} cut vertices")

    if should_write_trace:
        with open(output_dir / "trace.txt", "w") as trace_file:
            result = BrooksColoring(graph, TraceObserver(trace_file)).run()
    else:
        result = BrooksColoring(graph, LoggingObserver()).run()

    logger.info(f"Strategy: {result.strategy.value}")
    logger.info(f"Colored {graph.n} vertices with {result.n_colors} colors")
    write_coloring(output_dir / "coloring.txt", result.colors)

    if should_write_dot:
        logger.info("Writing colored graph")
        write_dot(output_dir / "graph.gv", graph, result.colors)
    return result
