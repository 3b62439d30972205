from enum import Enum, STRICT
from typing import Tuple

from tile_jigsaw.jigsaw.OrientedEdge import OrientedEdge


class Symmetry(Enum, boundary=STRICT):
    """
    Enumeration of the eight symmetries of a square, i.e., the dihedral group of order 8.

    Each symmetry is an optional flip upside down followed by a number of clockwise quarter turns.
    """
    # ------------------------------------------------------------------------------------------------------------------
    IDENTITY = 0
    """
    Leaves the tile as is.
    """

    ROT90 = 1
    """
    A clockwise quarter turn.
    """

    ROT180 = 2
    """
    A half turn.
    """

    ROT270 = 3
    """
    Three clockwise quarter turns.
    """

    FLIP = 4
    """
    A flip upside down.
    """

    FLIP_ROT90 = 5
    """
    A flip upside down followed by a clockwise quarter turn.
    """

    FLIP_ROT180 = 6
    """
    A flip upside down followed by a half turn.
    """

    FLIP_ROT270 = 7
    """
    A flip upside down followed by three clockwise quarter turns.
    """

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def of(has_flip: bool, quarter_turns: int) -> 'Symmetry':
        """
        Returns the symmetry with the given factors.

        :param has_flip: Whether the symmetry starts with a flip upside down.
        :param quarter_turns: The number of clockwise quarter turns.
        """
        return Symmetry(4 * int(has_flip) + quarter_turns % 4)

    # ------------------------------------------------------------------------------------------------------------------
    def factor(self) -> Tuple[bool, int]:
        """
        Returns whether this symmetry has a flip and its number of clockwise quarter turns.
        """
        return self.value >= 4, self.value % 4

    # ------------------------------------------------------------------------------------------------------------------
    def compose(self, other: 'Symmetry') -> 'Symmetry':
        """
        Returns the symmetry that applies the other symmetry first and then this symmetry.

        :param other: The symmetry applied first.
        """
        flip1, turns1 = self.factor()
        flip2, turns2 = other.factor()

        # A flip reverses the sense of the quarter turns that follow it.
        if flip1:
            turns2 = -turns2

        return Symmetry.of(flip1 != flip2, turns1 + turns2)

    # ------------------------------------------------------------------------------------------------------------------
    def inverse(self) -> 'Symmetry':
        """
        Returns the symmetry that undoes this symmetry.
        """
        has_flip, quarter_turns = self.factor()
        if has_flip:
            return self

        return Symmetry.of(False, -quarter_turns)

    # ------------------------------------------------------------------------------------------------------------------
    def apply(self, edge: OrientedEdge) -> OrientedEdge:
        """
        Returns the oriented edge the given oriented edge ends up at under this symmetry.

        :param edge: The oriented edge.
        """
        has_flip, quarter_turns = self.factor()

        side = edge.side
        direction = edge.direction
        if has_flip:
            side = side.vertical_flip()
            direction = direction.opposite()

        return OrientedEdge(side.rotate(quarter_turns), direction)

    # ------------------------------------------------------------------------------------------------------------------
    def transform(self, row: int, col: int, size: int) -> Tuple[int, int]:
        """
        Returns the coordinates a pixel of a square ends up at under this symmetry.

        :param row: The row of the pixel.
        :param col: The column of the pixel.
        :param size: The width and height of the square.
        """
        has_flip, quarter_turns = self.factor()

        if has_flip:
            row = size - 1 - row
        for _ in range(quarter_turns):
            row, col = col, size - 1 - row

        return row, col

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def such_that(source: OrientedEdge, target: OrientedEdge) -> 'Symmetry':
        """
        Returns the symmetry that moves an oriented edge onto another oriented edge.

        :param source: The oriented edge to move.
        :param target: The oriented edge where the source must end up.
        """
        for symmetry in Symmetry:
            if symmetry.apply(source) == target:
                return symmetry

        raise AssertionError(f'No symmetry moves {source} onto {target}.')

# ----------------------------------------------------------------------------------------------------------------------
