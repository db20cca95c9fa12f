from pathlib import Path

import numpy as np
import pandas as pd

from .coloring import UNCOLORED


def coloring_to_dataframe(colors: np.ndarray) -> pd.DataFrame:
    """Convert a coloring to a DataFrame with columns vertex and color"""
    return pd.DataFrame({"vertex": np.arange(len(colors)), "color": colors})


def dataframe_to_coloring(df: pd.DataFrame, n: int) -> np.ndarray:
    """
    Convert a DataFrame with columns vertex and color into a coloring of n
    vertices. Vertices that are not listed stay uncolored.
    """
    if df[["vertex", "color"]].isna().to_numpy().any():
        raise ValueError("missing vertex or color values")
    colors = np.full(n, UNCOLORED, dtype=int)
    colors[df["vertex"].to_numpy(dtype=int)] = df["color"].to_numpy(dtype=int)
    return colors


def read_coloring(path: Path) -> pd.DataFrame:
    """Load a coloring written by write_coloring() into a DataFrame."""
    df = pd.read_table(path)
    df.rename(columns={"#vertex": "vertex"}, inplace=True)
    return df
