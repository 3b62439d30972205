from enum import auto, Enum, STRICT


class SearchStatus(Enum, boundary=STRICT):
    """
    Enumeration for the states of a search.
    """
    # ------------------------------------------------------------------------------------------------------------------
    RUNNING = auto()
    """
    The search has frames left to explore.
    """

    SOLVED = auto()
    """
    All cells of the composition are occupied.
    """

    EXHAUSTED = auto()
    """
    All candidates have been tried without finding an arrangement.
    """

# ----------------------------------------------------------------------------------------------------------------------
