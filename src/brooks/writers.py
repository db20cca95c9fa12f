from io import StringIO
from pathlib import Path

import numpy as np

from .coloring import UNCOLORED
from .graph import Graph
from .utils import coloring_to_dataframe

# Fill colors for the DOT output; colors beyond the palette are drawn white
PALETTE = [
    "#e41a1c",
    "#377eb8",
    "#4daf4a",
    "#984ea3",
    "#ff7f00",
    "#ffff33",
    "#a65628",
    "#f781bf",
    "#999999",
]


def write_coloring(path: Path, colors: np.ndarray) -> None:
    """Write a coloring to a tab-separated file, one vertex per line"""
    df = coloring_to_dataframe(colors).rename(columns={"vertex": "#vertex"})
    df.to_csv(path, sep="\t", index=False)


def dot(graph: Graph, colors: np.ndarray) -> str:
    """Return a Graphviz description of the graph with colored vertices"""
    s = StringIO()
    print("graph g {", file=s)
    print('  node [style=filled, fillcolor=white, fontname="Roboto"];', file=s)
    for node in graph.active_vertices():
        color = colors[node]
        if color == UNCOLORED:
            label = f"{node}"
            fill = ""
        else:
            label = f"{node}\\n{color}"
            fill = f',fillcolor="{PALETTE[color]}"' if color < len(PALETTE) else ""
        print(f'  "{node}" [label="{label}"{fill}];', file=s)
    for node1, node2 in graph.edges():
        print(f'  "{node1}" -- "{node2}";', file=s)
    print("}", file=s)
    return s.getvalue()


def write_dot(path: Path, graph: Graph, colors: np.ndarray) -> None:
    with open(path, "w") as f:
        print(dot(graph, colors), file=f, end="")
