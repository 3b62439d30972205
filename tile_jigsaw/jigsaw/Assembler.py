from typing import Sequence

import numpy as np

from tile_jigsaw.jigsaw.ArrangedTile import ArrangedTile
from tile_jigsaw.jigsaw.Image import Image


class Assembler:
    """
    Class for assembling the image of a complete composition of tiles.
    """

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def assemble(cells: Sequence[Sequence[ArrangedTile | None]]) -> Image:
        """
        Returns the image formed by the arranged tiles with the borders of each tile stripped.

        :param cells: The arranged tiles, row by row.
        """
        assert len(cells) > 0 and len(cells[0]) > 0, 'Cannot assemble an empty composition.'
        assert all(cell is not None for row in cells for cell in row), 'Cannot assemble an incomplete composition.'

        size = cells[0][0].tile.size
        inner = size - 2
        data = np.zeros((len(cells) * inner, len(cells[0]) * inner), dtype=bool)

        for y, row in enumerate(cells):
            for x, arranged_tile in enumerate(row):
                source = arranged_tile.tile.grid
                inverse = arranged_tile.symmetry.inverse()
                for r in range(1, size - 1):
                    for c in range(1, size - 1):
                        data[y * inner + r - 1, x * inner + c - 1] = source[inverse.transform(r, c, size)]

        return Image(data)

# ----------------------------------------------------------------------------------------------------------------------
