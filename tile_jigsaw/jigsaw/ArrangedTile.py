from dataclasses import dataclass
from typing import List

from tile_jigsaw.jigsaw.EdgeCodec import EdgeCodec
from tile_jigsaw.jigsaw.OrientedEdge import OrientedEdge
from tile_jigsaw.jigsaw.Symmetry import Symmetry
from tile_jigsaw.jigsaw.Tile import Tile


@dataclass(frozen=True)
class ArrangedTile:
    """
    A tile as it appears after applying a symmetry to it. The tile itself is shared, not copied.
    """

    # ------------------------------------------------------------------------------------------------------------------
    tile: Tile
    """
    The tile.
    """

    symmetry: Symmetry
    """
    The symmetry applied to the tile.
    """

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def arrangements(tile: Tile) -> List['ArrangedTile']:
        """
        Returns a tile under all eight symmetries.

        :param tile: The tile.
        """
        return [ArrangedTile(tile, symmetry) for symmetry in Symmetry]

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def id(self) -> int:
        """
        Returns the ID of the tile.
        """
        return self.tile.id

    # ------------------------------------------------------------------------------------------------------------------
    def edge_value(self, edge: OrientedEdge) -> int:
        """
        Returns the value of an oriented edge of the arranged tile.

        :param edge: The oriented edge.
        """
        return self.tile.edges[self.symmetry.inverse().apply(edge)]

    # ------------------------------------------------------------------------------------------------------------------
    def pixel(self, row: int, col: int) -> bool:
        """
        Returns the value of a pixel of the arranged tile.

        :param row: The row of the pixel.
        :param col: The column of the pixel.
        """
        return bool(self.tile.grid[self.symmetry.inverse().transform(row, col, self.tile.size)])

    # ------------------------------------------------------------------------------------------------------------------
    def __str__(self) -> str:
        return EdgeCodec.describe(self.tile.id, self.edge_value)

# ----------------------------------------------------------------------------------------------------------------------
