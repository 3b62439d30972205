from dataclasses import dataclass
from typing import Tuple

from tile_jigsaw.jigsaw.Direction import Direction
from tile_jigsaw.jigsaw.Side import Side


@dataclass(frozen=True)
class OrientedEdge:
    """
    A side of a tile together with the direction in which the border at that side is read.
    """

    # ------------------------------------------------------------------------------------------------------------------
    side: Side
    """
    The side of the tile.
    """

    direction: Direction
    """
    The reading direction.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def opposite(self) -> 'OrientedEdge':
        """
        Returns the edge of an adjacent tile that touches this edge, read in the same sense as this edge.
        """
        return OrientedEdge(self.side.opposite(), self.direction.opposite())

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def all() -> Tuple['OrientedEdge', ...]:
        """
        Returns all eight oriented edges in canonical order, i.e., per side clockwise first.
        """
        return _ORIENTED_EDGES

    # ------------------------------------------------------------------------------------------------------------------
    def __str__(self) -> str:
        return f'{self.side.name}/{"CW" if self.direction == Direction.CLOCKWISE else "CCW"}'


# ----------------------------------------------------------------------------------------------------------------------
_ORIENTED_EDGES = tuple(OrientedEdge(side, direction) for side in Side for direction in Direction)

# ----------------------------------------------------------------------------------------------------------------------
