from enum import Enum, STRICT


class Side(Enum, boundary=STRICT):
    """
    Enumeration for the four sides of a tile in clockwise order.
    """
    # ------------------------------------------------------------------------------------------------------------------
    TOP = 0
    """
    Top side.
    """

    RIGHT = 1
    """
    Right side.
    """

    BOTTOM = 2
    """
    Bottom side.
    """

    LEFT = 3
    """
    Left side.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def opposite(self) -> 'Side':
        """
        Returns the side at the other end of the tile.
        """
        return self.rotate(2)

    # ------------------------------------------------------------------------------------------------------------------
    def vertical_flip(self) -> 'Side':
        """
        Returns the side this side ends up at when the tile is flipped upside down.
        """
        return Side((2 - self.value) % 4)

    # ------------------------------------------------------------------------------------------------------------------
    def rotate(self, quarter_turns: int) -> 'Side':
        """
        Returns the side this side ends up at when the tile is turned clockwise.

        :param quarter_turns: The number of clockwise quarter turns.
        """
        return Side((self.value + quarter_turns) % 4)

# ----------------------------------------------------------------------------------------------------------------------
