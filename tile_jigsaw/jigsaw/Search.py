import math
from collections import deque
from typing import List, Sequence, Tuple

from tile_jigsaw.io.TileJigsawIO import TileJigsawIO
from tile_jigsaw.jigsaw.ArrangedTile import ArrangedTile
from tile_jigsaw.jigsaw.Composition import Composition
from tile_jigsaw.jigsaw.Direction import Direction
from tile_jigsaw.jigsaw.EdgeIndex import EdgeIndex
from tile_jigsaw.jigsaw.JigsawError import JigsawError
from tile_jigsaw.jigsaw.OrientedEdge import OrientedEdge
from tile_jigsaw.jigsaw.SearchFrame import SearchFrame
from tile_jigsaw.jigsaw.SearchStatus import SearchStatus
from tile_jigsaw.jigsaw.Side import Side
from tile_jigsaw.jigsaw.Symmetry import Symmetry
from tile_jigsaw.jigsaw.Tile import Tile


class Search:
    """
    Depth-first search with an explicit stack for an arrangement of tiles into a square in which all adjacent tiles
    match.

    Cells are filled in row-major order. The candidates for a cell are the tiles with an edge matching the right edge
    of the tile to the left, or at the start of a row, the bottom edge of the tile above. The stack can be inspected
    between steps.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, io: TileJigsawIO, tiles: Sequence[Tile]):
        """
        Object constructor.

        :param io: The Output decorator.
        :param tiles: The tiles.
        """
        self._io: TileJigsawIO = io
        """
        The Output decorator.
        """

        self._tiles: List[Tile] = list(tiles)
        """
        The tiles.
        """

        self._size: int = Search.grid_size(self._tiles)
        """
        The number of tiles along each side of the square.
        """

        self._index: EdgeIndex = EdgeIndex(self._tiles)
        """
        The index of matchable edge values.
        """

        self._composition: Composition = Composition(self._size, self._size)
        """
        The grid of placed tiles.
        """

        self._frames: List[SearchFrame] = []
        """
        The stack of the search. The candidates of all frames but the top frame are placed in the composition.
        """

        self._status: SearchStatus = SearchStatus.RUNNING
        """
        The state of the search.
        """

        self._steps: int = 0
        """
        The number of steps taken.
        """

        candidates = [arranged_tile for tile in self._tiles for arranged_tile in ArrangedTile.arrangements(tile)]
        self._frames.append(SearchFrame(0, 0, candidates[0], deque(candidates[1:])))

        self._io.log_verbose(f'Searching a {self._size}x{self._size} arrangement of {len(self._tiles)} tiles, '
                             f'{len(self._index)} matchable edge values.')

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def grid_size(tiles: Sequence[Tile]) -> int:
        """
        Returns the number of tiles along each side of the square formed by the given tiles.

        :param tiles: The tiles.
        """
        if not tiles:
            raise JigsawError('No tiles given.')

        size = math.isqrt(len(tiles))
        if size * size != len(tiles):
            raise JigsawError(f'The number of tiles ({len(tiles)}) is not a perfect square.')

        sizes = {tile.size for tile in tiles}
        if len(sizes) != 1:
            raise JigsawError(f'All tiles must have the same size, found sizes {sorted(sizes)}.')

        ids = set()
        for tile in tiles:
            if tile.id in ids:
                raise JigsawError(f'Duplicate tile ID {tile.id}.')
            ids.add(tile.id)

        return size

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def composition(self) -> Composition:
        """
        Returns the grid of placed tiles.
        """
        return self._composition

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def frames(self) -> Tuple[SearchFrame, ...]:
        """
        Returns the stack of the search, bottom first.
        """
        return tuple(self._frames)

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def index(self) -> EdgeIndex:
        """
        Returns the index of matchable edge values.
        """
        return self._index

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def status(self) -> SearchStatus:
        """
        Returns the state of the search.
        """
        return self._status

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def steps(self) -> int:
        """
        Returns the number of steps taken.
        """
        return self._steps

    # ------------------------------------------------------------------------------------------------------------------
    def search(self) -> Composition | None:
        """
        Runs the search until an arrangement is found or all candidates are exhausted. Returns the complete composition
        or None if there is no arrangement.
        """
        while self.step() == SearchStatus.RUNNING:
            pass

        if self._status == SearchStatus.SOLVED:
            self._io.log_verbose(f'Found an arrangement after {self._steps} steps.')

            return self._composition

        self._io.log_verbose(f'No arrangement found after {self._steps} steps.')

        return None

    # ------------------------------------------------------------------------------------------------------------------
    def step(self) -> SearchStatus:
        """
        Tries the candidate of the top frame at its cell and either pushes a frame for the next cell, backtracks, or
        finishes the search. Returns the state of the search after the step.
        """
        if self._status != SearchStatus.RUNNING:
            return self._status

        self._steps += 1
        frame = self._frames[-1]
        self._io.log_debug(f'Step {self._steps}: trying {frame.candidate} at ({frame.x}, {frame.y}).')

        if self._composition.try_insert(frame.candidate, frame.x, frame.y):
            cell = self._next_cell(frame.x, frame.y)
            if cell is None:
                self._status = SearchStatus.SOLVED

                return self._status

            candidates = self._candidates(*cell)
            if candidates:
                self._frames.append(SearchFrame(cell[0], cell[1], candidates[0], deque(candidates[1:])))

                return self._status

            self._composition.clear(frame.x, frame.y)

        self._backtrack()

        return self._status

    # ------------------------------------------------------------------------------------------------------------------
    def _backtrack(self) -> None:
        """
        Moves to the next untried candidate, dropping exhausted frames and removing their parent's tile from the
        composition. The candidate of the top frame must not be placed.
        """
        while self._frames:
            if self._frames[-1].advance():
                return

            self._frames.pop()
            if self._frames:
                parent = self._frames[-1]
                self._composition.clear(parent.x, parent.y)
                self._io.log_debug(f'Backtracking to ({parent.x}, {parent.y}).')

        self._status = SearchStatus.EXHAUSTED

    # ------------------------------------------------------------------------------------------------------------------
    def _next_cell(self, x: int, y: int) -> Tuple[int, int] | None:
        """
        Returns the cell after a cell in row-major order, or None after the last cell.

        :param x: The column of the cell.
        :param y: The row of the cell.
        """
        if x + 1 < self._size:
            return x + 1, y

        if y + 1 < self._size:
            return 0, y + 1

        return None

    # ------------------------------------------------------------------------------------------------------------------
    def _candidates(self, x: int, y: int) -> List[ArrangedTile]:
        """
        Returns the unused arranged tiles that match the previously placed neighbour of a cell.

        :param x: The column of the cell.
        :param y: The row of the cell.
        """
        if x > 0:
            source = OrientedEdge(Side.RIGHT, Direction.CLOCKWISE)
            value = self._composition.edge_value(x - 1, y, source)
        else:
            source = OrientedEdge(Side.BOTTOM, Direction.CLOCKWISE)
            value = self._composition.edge_value(x, y - 1, source)
        target = source.opposite()

        candidates = []
        for edge, tile in self._index.lookup(value):
            if not self._composition.contains(tile.id):
                candidates.append(ArrangedTile(tile, Symmetry.such_that(edge, target)))

        return candidates

# ----------------------------------------------------------------------------------------------------------------------
