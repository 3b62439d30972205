from enum import auto, Enum, STRICT


class Direction(Enum, boundary=STRICT):
    """
    Enumeration for the two directions in which the border of a tile can be read.
    """
    # ------------------------------------------------------------------------------------------------------------------
    CLOCKWISE = auto()
    """
    Reading along the border of the tile clockwise.
    """

    COUNTER_CLOCKWISE = auto()
    """
    Reading along the border of the tile counterclockwise.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def opposite(self) -> 'Direction':
        """
        Returns the other direction.
        """
        if self == Direction.CLOCKWISE:
            return Direction.COUNTER_CLOCKWISE

        return Direction.CLOCKWISE

# ----------------------------------------------------------------------------------------------------------------------
