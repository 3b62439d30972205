from typing import Dict, Iterable, List, Tuple

from tile_jigsaw.jigsaw.OrientedEdge import OrientedEdge
from tile_jigsaw.jigsaw.Tile import Tile


class EdgeIndex:
    """
    Index from edge values to the oriented edges of tiles with that value.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, tiles: Iterable[Tile]):
        """
        Object constructor.

        :param tiles: The tiles.
        """
        self._buckets: Dict[int, Tuple[Tuple[OrientedEdge, Tile], ...]] = {}
        """
        Map from edge value to the oriented edges and their tiles with that value.
        """

        self._build(tiles)

    # ------------------------------------------------------------------------------------------------------------------
    def _build(self, tiles: Iterable[Tile]) -> None:
        """
        Registers all oriented edges of all tiles and discards edge values that can not be matched.

        :param tiles: The tiles.
        """
        buckets: Dict[int, List[Tuple[OrientedEdge, Tile]]] = {}
        for tile in tiles:
            for edge in OrientedEdge.all():
                buckets.setdefault(tile.edges[edge], []).append((edge, tile))

        for value, entries in buckets.items():
            # An edge value found in one tile only must be at the boundary of the puzzle.
            if len({id(tile) for _, tile in entries}) >= 2:
                self._buckets[value] = tuple(entries)

    # ------------------------------------------------------------------------------------------------------------------
    def lookup(self, value: int) -> Tuple[Tuple[OrientedEdge, Tile], ...]:
        """
        Returns the oriented edges and their tiles with a given edge value.

        :param value: The edge value.
        """
        return self._buckets.get(value, ())

    # ------------------------------------------------------------------------------------------------------------------
    def values(self) -> List[int]:
        """
        Returns the edge values in this index.
        """
        return list(self._buckets.keys())

    # ------------------------------------------------------------------------------------------------------------------
    def __contains__(self, value: int) -> bool:
        return value in self._buckets

    # ------------------------------------------------------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._buckets)

# ----------------------------------------------------------------------------------------------------------------------
