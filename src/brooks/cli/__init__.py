import logging
from pathlib import Path
import shutil

logger = logging.getLogger(__name__)


class CommandLineError(Exception):
    pass


class NiceFormatter(logging.Formatter):
    """
    Do not prefix "INFO:" to info-level log messages (but do it for all other
    levels).

    Based on http://stackoverflow.com/a/9218261/715090 .
    """

    def format(self, record):
        if record.levelno != logging.INFO:
            record.msg = "{}: {}".format(record.levelname, record.msg)
        return super().format(record)


def setup_logging(debug: bool) -> None:
    """
    Set up logging. If debug is True, then DEBUG level messages are printed.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(NiceFormatter())

    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.INFO)


def add_file_logging(path: Path) -> None:
    file_handler = logging.FileHandler(path)
    root = logging.getLogger()
    root.addHandler(file_handler)


def make_output_dir(path, delete_if_exists):
    try:
        path.mkdir()
    except FileExistsError:
        if delete_if_exists:
            logger.debug(f'Re-creating folder "{path}"')
            shutil.rmtree(path)
            path.mkdir()
        else:
            raise


def add_graph_arguments(parser):
    """Add the arguments that describe the input graph"""
    input_group = parser.add_argument_group("Input")
    input_group.add_argument(
        "--vertices",
        "-n",
        type=int,
        metavar="INT",
        help="Number of vertices. Default: Largest vertex id in the edge list plus one",
        default=None,
    )
    parser.add_argument(
        "edge_list",
        type=Path,
        metavar="EDGES",
        help="Edge list file with one edge per line given as two vertex ids "
        "(0-based) separated by whitespace. May be compressed.",
    )
    return input_group
