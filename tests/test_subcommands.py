import logging

import numpy as np
import pandas as pd
import pytest

from brooks.__main__ import main
from brooks.cli import add_file_logging
from brooks.cli.color import run_color
from brooks.cli.verify import run_verify
from brooks.error import BrooksError, DisconnectedGraphError
from brooks.utils import coloring_to_dataframe, read_coloring
from brooks.writers import write_coloring

PRISM = "0 1\n1 2\n2 0\n3 4\n4 5\n5 3\n0 3\n1 4\n2 5\n"


@pytest.fixture
def prism_path(tmp_path):
    path = tmp_path / "prism.txt"
    path.write_text(PRISM)
    return path


def test_run_color(tmp_path, prism_path):
    output_dir = tmp_path / "run"
    output_dir.mkdir()
    add_file_logging(output_dir / "log.txt")
    logging.getLogger().setLevel(logging.INFO)

    result = run_color(
        output_dir, edge_list=prism_path, should_write_trace=True, should_write_dot=True
    )
    assert result.n_colors == 3

    df = read_coloring(output_dir / "coloring.txt")
    assert list(df.columns) == ["vertex", "color"]
    assert list(df["color"]) == [2, 0, 1, 0, 1, 2]
    pd.testing.assert_frame_equal(df, coloring_to_dataframe(result.colors))

    trace = (output_dir / "trace.txt").read_text().splitlines()
    assert len(trace) == 7
    assert trace[0].startswith("1\t")
    assert trace[-1] == "# 3 colors"
    assert trace[-2].endswith("\t2,0,1,0,1,2")

    dot = (output_dir / "graph.gv").read_text()
    assert dot.startswith("graph g {")
    assert '"0" -- "1";' in dot

    assert "with 3 colors" in (output_dir / "log.txt").read_text()


def test_run_verify(tmp_path, prism_path):
    output_dir = tmp_path / "run"
    output_dir.mkdir()
    run_color(output_dir, edge_list=prism_path)
    assert run_verify(prism_path, output_dir / "coloring.txt") == 3


def test_verify_rejects_improper_coloring(tmp_path, prism_path):
    coloring = tmp_path / "coloring.txt"
    coloring.write_text("#vertex\tcolor\n0\t0\n1\t0\n2\t1\n3\t1\n4\t2\n5\t2\n")
    with pytest.raises(BrooksError, match="same color"):
        run_verify(prism_path, coloring)


def test_verify_rejects_incomplete_coloring(tmp_path, prism_path):
    coloring = tmp_path / "coloring.txt"
    coloring.write_text("#vertex\tcolor\n0\t0\n1\t1\n")
    with pytest.raises(BrooksError, match="not colored"):
        run_verify(prism_path, coloring)


@pytest.mark.parametrize(
    "content",
    [
        "#vertex\tcolor\n0\tred\n",
        "#vertex\tcolor\n0\t0\n1\n",
        "vertex;color\n0;0\n",
    ],
)
def test_verify_rejects_unreadable_coloring(tmp_path, prism_path, content):
    coloring = tmp_path / "broken.txt"
    coloring.write_text(content)
    with pytest.raises(BrooksError, match="broken.txt"):
        run_verify(prism_path, coloring)


def test_verify_disconnected_graph(tmp_path):
    edges = tmp_path / "edges.txt"
    edges.write_text("0 1\n2 3\n")
    coloring = tmp_path / "coloring.txt"
    write_coloring(coloring, np.array([0, 1, 0, 1]))
    assert run_verify(edges, coloring) == 2


def test_write_coloring(tmp_path):
    path = tmp_path / "coloring.txt"
    write_coloring(path, np.array([1, 0, 2]))
    assert path.read_text() == "#vertex\tcolor\n0\t1\n1\t0\n2\t2\n"


def test_run_color_reports_components(tmp_path):
    edges = tmp_path / "edges.txt"
    edges.write_text("0 1\n1 2\n3 4\n5\n")
    expected = r"3 connected components \(sizes \[3, 2, 1\]\)"
    with pytest.raises(DisconnectedGraphError, match=expected):
        run_color(tmp_path, edge_list=edges)


def test_main_color(tmp_path, prism_path):
    output_dir = tmp_path / "out"
    main(["color", "-o", str(output_dir), str(prism_path)])
    assert (output_dir / "coloring.txt").exists()
    assert not (output_dir / "trace.txt").exists()


def test_main_existing_output_dir(tmp_path, prism_path):
    with pytest.raises(SystemExit) as e:
        main(["color", "-o", str(tmp_path), str(prism_path)])
    assert e.value.code == 1


def test_main_disconnected_graph(tmp_path):
    edges = tmp_path / "edges.txt"
    edges.write_text("0 1\n2 3\n")
    with pytest.raises(SystemExit) as e:
        main(["color", "-o", str(tmp_path / "out"), str(edges)])
    assert e.value.code == 1


def test_main_verify(tmp_path, prism_path):
    output_dir = tmp_path / "out"
    main(["color", "-o", str(output_dir), str(prism_path)])
    main(["verify", str(prism_path), str(output_dir / "coloring.txt")])


def test_main_without_subcommand():
    with pytest.raises(SystemExit) as e:
        main([])
    assert e.value.code == 2


def test_main_version(capsys):
    with pytest.raises(SystemExit) as e:
        main(["--version"])
    assert e.value.code == 0
    assert capsys.readouterr().out.startswith("brooks ")
