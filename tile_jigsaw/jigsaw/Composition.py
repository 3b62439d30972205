from typing import List, Set, Tuple

from tile_jigsaw.jigsaw.ArrangedTile import ArrangedTile
from tile_jigsaw.jigsaw.Assembler import Assembler
from tile_jigsaw.jigsaw.Direction import Direction
from tile_jigsaw.jigsaw.Image import Image
from tile_jigsaw.jigsaw.OrientedEdge import OrientedEdge
from tile_jigsaw.jigsaw.Side import Side


class Composition:
    """
    A grid of (partially) placed arranged tiles.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, width: int, height: int):
        """
        Object constructor.

        :param width: The number of columns of the grid.
        :param height: The number of rows of the grid.
        """
        self._width: int = width
        """
        The number of columns of the grid.
        """

        self._height: int = height
        """
        The number of rows of the grid.
        """

        self._cells: List[List[ArrangedTile | None]] = [[None] * width for _ in range(height)]
        """
        The arranged tiles, row by row.
        """

        self._used_ids: Set[int] = set()
        """
        The IDs of the placed tiles.
        """

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._width

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def height(self) -> int:
        return self._height

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def used_ids(self) -> Set[int]:
        """
        Returns a copy of the IDs of the placed tiles.
        """
        return set(self._used_ids)

    # ------------------------------------------------------------------------------------------------------------------
    def get(self, x: int, y: int) -> ArrangedTile | None:
        """
        Returns the arranged tile at a cell, or None if the cell is empty or outside the grid.

        :param x: The column of the cell.
        :param y: The row of the cell.
        """
        if 0 <= x < self._width and 0 <= y < self._height:
            return self._cells[y][x]

        return None

    # ------------------------------------------------------------------------------------------------------------------
    def try_insert(self, arranged_tile: ArrangedTile, x: int, y: int) -> bool:
        """
        Places an arranged tile at an empty cell if it matches all its placed neighbours. Returns whether the tile has
        been placed.

        :param arranged_tile: The arranged tile.
        :param x: The column of the cell.
        :param y: The row of the cell.
        """
        assert self._cells[y][x] is None, f'Cell ({x}, {y}) is occupied.'

        for side, neighbour in self._neighbours(x, y):
            edge = OrientedEdge(side, Direction.CLOCKWISE)
            if arranged_tile.edge_value(edge) != neighbour.edge_value(edge.opposite()):
                return False

        self._cells[y][x] = arranged_tile
        self._used_ids.add(arranged_tile.id)

        return True

    # ------------------------------------------------------------------------------------------------------------------
    def clear(self, x: int, y: int) -> None:
        """
        Removes the arranged tile at an occupied cell.

        :param x: The column of the cell.
        :param y: The row of the cell.
        """
        arranged_tile = self._cells[y][x]
        assert arranged_tile is not None, f'Cell ({x}, {y}) is empty.'

        self._cells[y][x] = None
        self._used_ids.remove(arranged_tile.id)

    # ------------------------------------------------------------------------------------------------------------------
    def contains(self, tile_id: int) -> bool:
        """
        Returns whether a tile has been placed in this composition.

        :param tile_id: The ID of the tile.
        """
        return tile_id in self._used_ids

    # ------------------------------------------------------------------------------------------------------------------
    def edge_value(self, x: int, y: int, edge: OrientedEdge) -> int:
        """
        Returns the value of an oriented edge of the arranged tile at an occupied cell.

        :param x: The column of the cell.
        :param y: The row of the cell.
        :param edge: The oriented edge.
        """
        arranged_tile = self._cells[y][x]
        assert arranged_tile is not None, f'Cell ({x}, {y}) is empty.'

        return arranged_tile.edge_value(edge)

    # ------------------------------------------------------------------------------------------------------------------
    def is_complete(self) -> bool:
        """
        Returns whether all cells are occupied.
        """
        return len(self._used_ids) == self._width * self._height

    # ------------------------------------------------------------------------------------------------------------------
    def corners(self) -> int:
        """
        Returns the product of the IDs of the tiles at the four corners.
        """
        product = 1
        for x, y in ((0, 0), (self._width - 1, 0), (0, self._height - 1), (self._width - 1, self._height - 1)):
            arranged_tile = self._cells[y][x]
            assert arranged_tile is not None, f'Corner ({x}, {y}) is empty.'
            product *= arranged_tile.id

        return product

    # ------------------------------------------------------------------------------------------------------------------
    def ids(self) -> List[List[int | None]]:
        """
        Returns the IDs of the placed tiles, row by row.
        """
        return [[None if cell is None else cell.id for cell in row] for row in self._cells]

    # ------------------------------------------------------------------------------------------------------------------
    def assemble(self) -> Image:
        """
        Returns the image formed by the placed tiles with the borders of each tile stripped.
        """
        return Assembler.assemble(self._cells)

    # ------------------------------------------------------------------------------------------------------------------
    def _neighbours(self, x: int, y: int) -> List[Tuple[Side, ArrangedTile]]:
        """
        Returns the placed neighbours of a cell with the side of the cell at which they are.

        :param x: The column of the cell.
        :param y: The row of the cell.
        """
        neighbours = []
        for x1, y1, side in ((x, y - 1, Side.TOP),
                             (x + 1, y, Side.RIGHT),
                             (x, y + 1, Side.BOTTOM),
                             (x - 1, y, Side.LEFT)):
            neighbour = self.get(x1, y1)
            if neighbour is not None:
                neighbours.append((side, neighbour))

        return neighbours

# ----------------------------------------------------------------------------------------------------------------------
