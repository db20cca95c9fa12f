"""
Receivers for coloring progress events
"""
import logging

import numpy as np

logger = logging.getLogger(__name__)


class ColoringObserver:
    """
    Receives one on_color_assigned() call per coloring decision, in the order
    the algorithm makes them, and one on_complete() call at the end. Calls are
    synchronous. The default implementation ignores all events.
    """

    def on_color_assigned(self, colors: np.ndarray, message: str) -> None:
        pass

    def on_complete(self, n_colors: int) -> None:
        pass


class LoggingObserver(ColoringObserver):
    def on_color_assigned(self, colors, message):
        logger.debug(message)

    def on_complete(self, n_colors):
        logger.debug("Coloring finished with %d colors", n_colors)


class TraceObserver(ColoringObserver):
    """Write each event as a tab-separated line: step, message, colors"""

    def __init__(self, file):
        self._file = file
        self._step = 0

    def on_color_assigned(self, colors, message):
        self._step += 1
        print(
            self._step,
            message,
            ",".join(str(c) for c in colors),
            sep="\t",
            file=self._file,
        )

    def on_complete(self, n_colors):
        print(f"# {n_colors} colors", file=self._file)
