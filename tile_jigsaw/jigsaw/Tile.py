from dataclasses import dataclass
from typing import Dict

import numpy as np

from tile_jigsaw.jigsaw.EdgeCodec import EdgeCodec
from tile_jigsaw.jigsaw.OrientedEdge import OrientedEdge


@dataclass(frozen=True, eq=False)
class Tile:
    """
    A tile.
    """

    # ------------------------------------------------------------------------------------------------------------------
    id: int
    """
    The ID of the tile.
    """

    grid: np.ndarray
    """
    The pixels of the tile, a read-only square boolean matrix.
    """

    edges: Dict[OrientedEdge, int]
    """
    The values of the eight oriented edges of the tile.
    """

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def create(tile_id: int, grid: np.ndarray) -> 'Tile':
        """
        Creates a tile from its pixels.

        :param tile_id: The ID of the tile.
        :param grid: The pixels of the tile.
        """
        grid = np.array(grid, dtype=bool)
        edges = EdgeCodec.edges(grid)
        grid.setflags(write=False)

        return Tile(id=tile_id, grid=grid, edges=edges)

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def size(self) -> int:
        """
        Returns the width (and height) of this tile.
        """
        return self.grid.shape[0]

    # ------------------------------------------------------------------------------------------------------------------
    def __str__(self) -> str:
        return EdgeCodec.describe(self.id, self.edges.__getitem__)

# ----------------------------------------------------------------------------------------------------------------------
