from functools import lru_cache
from typing import Callable, Dict, Iterable, Tuple

import numpy as np

from tile_jigsaw.jigsaw.Direction import Direction
from tile_jigsaw.jigsaw.JigsawError import JigsawError
from tile_jigsaw.jigsaw.OrientedEdge import OrientedEdge
from tile_jigsaw.jigsaw.Side import Side


class EdgeCodec:
    """
    Encodes the borders of a tile as integers.
    """

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    @lru_cache(maxsize=None)
    def reversal_table() -> Tuple[int, ...]:
        """
        Returns the lookup table for reversing the bits of a byte.
        """
        table = []
        for value in range(256):
            reversed_value = 0
            for bit in range(8):
                if value & (1 << bit):
                    reversed_value |= 1 << (7 - bit)
            table.append(reversed_value)

        return tuple(table)

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def reverse(value: int, width: int) -> int:
        """
        Returns an integer with the bits of an integer in reversed order.

        The integer is reversed byte by byte as if padded to a whole number of bytes, after which the padding is shifted
        out.

        :param value: The integer.
        :param width: The bit width of the integer.
        """
        table = EdgeCodec.reversal_table()

        reversed_value = 0
        for _ in range((width + 7) // 8):
            reversed_value = (reversed_value << 8) | table[value & 0xff]
            value >>= 8

        return reversed_value >> (-width % 8)

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def encode(cells: Iterable[bool]) -> int:
        """
        Returns the integer with the given cells as bits, most significant bit first.

        :param cells: The cells.
        """
        value = 0
        for cell in cells:
            value = (value << 1) | int(bool(cell))

        return value

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def edges(grid: np.ndarray) -> Dict[OrientedEdge, int]:
        """
        Returns the values of the eight oriented edges of a grid.

        :param grid: The grid of the tile.
        """
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1] or grid.shape[0] < 2:
            raise JigsawError(f'A tile must be a square grid of at least 2x2 pixels, got {grid.shape}.')

        width = grid.shape[0]
        clockwise = {Side.TOP:    EdgeCodec.encode(grid[0, :]),
                     Side.RIGHT:  EdgeCodec.encode(grid[:, -1]),
                     Side.BOTTOM: EdgeCodec.encode(grid[-1, ::-1]),
                     Side.LEFT:   EdgeCodec.encode(grid[::-1, 0])}

        edges = {}
        for side, value in clockwise.items():
            edges[OrientedEdge(side, Direction.CLOCKWISE)] = value
            edges[OrientedEdge(side, Direction.COUNTER_CLOCKWISE)] = EdgeCodec.reverse(value, width)

        return edges

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def describe(tile_id: int, edge_value: Callable[[OrientedEdge], int]) -> str:
        """
        Returns the ID and the edge values of a tile as a compact string, e.g. #7(T256/2 R128/4 B64/8 L32/16).

        :param tile_id: The ID of the tile.
        :param edge_value: The function returning the value of an oriented edge.
        """
        parts = []
        for side in Side:
            clockwise = edge_value(OrientedEdge(side, Direction.CLOCKWISE))
            counter_clockwise = edge_value(OrientedEdge(side, Direction.COUNTER_CLOCKWISE))
            parts.append(f'{side.name[0]}{clockwise}/{counter_clockwise}')

        return f'#{tile_id}({" ".join(parts)})'

# ----------------------------------------------------------------------------------------------------------------------
