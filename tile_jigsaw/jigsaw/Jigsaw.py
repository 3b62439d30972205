import re
from typing import List

import cv2
from cleo.ui.table import Table

from tile_jigsaw.io.TileJigsawIO import TileJigsawIO
from tile_jigsaw.jigsaw.Composition import Composition
from tile_jigsaw.jigsaw.Config import Config
from tile_jigsaw.jigsaw.Image import Image
from tile_jigsaw.jigsaw.JigsawError import JigsawError
from tile_jigsaw.jigsaw.MonsterScanner import MonsterScanner, ScanResult
from tile_jigsaw.jigsaw.Search import Search
from tile_jigsaw.jigsaw.Tile import Tile
from tile_jigsaw.jigsaw.TileReader import TileReader


class Jigsaw:
    """
    Class for assembling tiles into a single image.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, io: TileJigsawIO, config: Config):
        """
        Object constructor.

        :param io:The Output decorator.
        :param config: The configuration.
        """
        self._io: TileJigsawIO = io
        """
        The Output decorator.
        """

        self._config: Config = config
        """
        The configuration.
        """

        self._tiles: List[Tile] = []
        """
        The tiles.
        """

        self._composition: Composition | None = None
        """
        The arrangement of the tiles.
        """

        self._image: Image | None = None
        """
        The assembled image.
        """

    # ------------------------------------------------------------------------------------------------------------------
    def assemble(self) -> int:
        """
        Assembles the tiles and returns the product of the IDs of the corner tiles.
        """
        self._output_format()
        self._read_tiles()
        self._search()
        self._log_composition()
        self._assemble_image()
        self._save_image()

        checksum = self._composition.corners()
        self._io.text('')
        self._io.text(f'Product of the IDs of the corner tiles: {checksum}')

        return checksum

    # ------------------------------------------------------------------------------------------------------------------
    def roughness(self) -> ScanResult:
        """
        Assembles the tiles and scans the assembled image for sea monsters.
        """
        self._read_tiles()
        self._search()
        self._assemble_image()

        self._io.text('')
        self._io.title('Scanning for Sea Monsters')

        result = MonsterScanner(self._image).scan()
        self._io.log_verbose(f'Found {result.monsters} sea monsters under symmetry {result.symmetry.name}.')
        self._io.text(f'Roughness: {result.roughness}')

        return result

    # ------------------------------------------------------------------------------------------------------------------
    def _read_tiles(self) -> None:
        """
        Reads the tiles.
        """
        self._io.text('')
        self._io.title('Reading Tiles')

        self._io.log_notice(f'Reading tiles from <fso>{self._config.input_path}</fso>.')
        self._tiles = TileReader.read(self._config.input_path)
        self._io.log_verbose(f'Read {len(self._tiles)} tiles.')
        for tile in self._tiles:
            self._io.log_very_verbose(str(tile))

    # ------------------------------------------------------------------------------------------------------------------
    def _search(self) -> None:
        """
        Searches an arrangement of the tiles.
        """
        self._io.text('')
        self._io.title('Searching Arrangement')

        search = Search(self._io, self._tiles)
        self._composition = search.search()
        if self._composition is None:
            raise JigsawError(f"No arrangement found for the tiles in '{self._config.input_path}'.")

        self._io.log_notice(f'Found an arrangement in {search.steps} steps.')

    # ------------------------------------------------------------------------------------------------------------------
    def _log_composition(self) -> None:
        """
        Logs the IDs of the arranged tiles in a nice table.
        """
        table = Table(self._io)

        rows = []
        for y in range(self._composition.height):
            row = []
            for x in range(self._composition.width):
                arranged_tile = self._composition.get(x, y)
                row.append(f'{arranged_tile.id} {arranged_tile.symmetry.name}')
            rows.append(row)

        self._io.text('')
        table.set_headers([str(x) for x in range(self._composition.width)])
        table.set_rows(rows)
        table.render()

    # ------------------------------------------------------------------------------------------------------------------
    def _assemble_image(self) -> None:
        """
        Assembles the image from the arranged tiles.
        """
        self._image = self._composition.assemble()
        self._io.log_verbose(f'Assembled an image of {self._image.width}x{self._image.height} pixels.')

    # ------------------------------------------------------------------------------------------------------------------
    def _output_format(self) -> str | None:
        """
        Returns the format of the assembled image derived from the extension of the output path, or None if no output
        path is given.
        """
        path = self._config.output_path
        if path is None:
            return None

        if str(path).lower().endswith('.png'):
            return 'png'

        if re.match(r'.*\.je?pg$', str(path), re.IGNORECASE):
            return 'jpeg'

        if str(path).lower().endswith('.txt'):
            return 'text'

        raise JigsawError(f"Unable to save assembled image as '{path}'.")

    # ------------------------------------------------------------------------------------------------------------------
    def _save_image(self) -> None:
        """
        Saves the assembled image.
        """
        if self._config.output_path is None:
            return

        self._io.text('')
        self._io.title('Saving Image')

        path = self._config.output_path
        output_format = self._output_format()
        if output_format == 'png':
            self._image.write(path, [cv2.IMWRITE_PNG_COMPRESSION, 9])

        elif output_format == 'jpeg':
            self._image.write(path, [cv2.IMWRITE_JPEG_QUALITY, self._config.quality])

        else:
            path.write_text(self._image.to_text() + '\n', encoding='utf-8')

        self._io.text(f'Saved assembled image as <fso>{path}</fso>.')

# ----------------------------------------------------------------------------------------------------------------------
