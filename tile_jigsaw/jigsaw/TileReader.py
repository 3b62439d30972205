import re
from pathlib import Path
from typing import List

import numpy as np

from tile_jigsaw.jigsaw.JigsawError import JigsawError
from tile_jigsaw.jigsaw.Tile import Tile


class TileReader:
    """
    Class for reading tiles from text.

    The text consists of blocks separated by blank lines. Each block starts with a header 'Tile <id>:' followed by the
    rows of the tile with '#' for set pixels and '.' for unset pixels.
    """

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def read(path: Path) -> List[Tile]:
        """
        Reads tiles from a file.

        :param path: The path to the file.
        """
        try:
            text = path.read_text(encoding='utf-8')
        except OSError as error:
            raise JigsawError(f"Unable to read tiles from '{path}': {error.strerror}.") from error

        return TileReader.parse(text)

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def parse(text: str) -> List[Tile]:
        """
        Parses tiles from text.

        :param text: The text.
        """
        tiles = []
        ids = set()
        for block in re.split(r'\n\s*\n', text.strip()):
            if not block.strip():
                continue

            tile = TileReader._parse_block(block)
            if tile.id in ids:
                raise JigsawError(f'Duplicate tile ID {tile.id}.')
            ids.add(tile.id)
            tiles.append(tile)

        return tiles

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def _parse_block(block: str) -> Tile:
        """
        Parses a single tile.

        :param block: The header and rows of the tile.
        """
        lines = [line.strip() for line in block.strip().splitlines()]

        parts = re.fullmatch(r'Tile (?P<id>\d+):', lines[0])
        if parts is None:
            raise JigsawError(f"Invalid tile header: '{lines[0]}'.")
        tile_id = int(parts.group('id'))

        rows = lines[1:]
        for row in rows:
            if len(row) != len(rows) or re.fullmatch(r'[.#]+', row) is None:
                raise JigsawError(f'Tile {tile_id} is not a square of pixels: invalid row {row!r}.')

        grid = np.array([[char == '#' for char in row] for row in rows], dtype=bool)

        return Tile.create(tile_id, grid)

# ----------------------------------------------------------------------------------------------------------------------
