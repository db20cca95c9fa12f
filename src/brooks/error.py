class BrooksError(Exception):
    pass


class DisconnectedGraphError(BrooksError):
    pass


class ColoringInvariantError(AssertionError):
    """
    Raised when a step that Brooks' theorem guarantees to succeed fails. This
    points to a bug or to an input that is not a simple connected graph.
    """
