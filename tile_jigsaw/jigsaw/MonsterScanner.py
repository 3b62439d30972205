from dataclasses import dataclass
from typing import Tuple

import numpy as np

from tile_jigsaw.jigsaw.Image import Image
from tile_jigsaw.jigsaw.Symmetry import Symmetry

MONSTER = Image.from_text('''
..................#.
#....##....##....###
.#..#..#..#..#..#...
''')
"""
The sea monster.
"""


@dataclass(frozen=True)
class ScanResult:
    """
    The result of scanning an image for sea monsters.
    """

    # ------------------------------------------------------------------------------------------------------------------
    symmetry: Symmetry
    """
    The symmetry under which the image shows the sea monsters.
    """

    monsters: int
    """
    The number of sea monsters found.
    """

    roughness: int
    """
    The number of set pixels that are not part of any sea monster.
    """


class MonsterScanner:
    """
    Class for finding sea monsters in an assembled image.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, image: Image, monster: Image = MONSTER):
        """
        Object constructor.

        :param image: The assembled image.
        :param monster: The pattern to search for.
        """
        self._image: Image = image
        """
        The assembled image.
        """

        self._monster: Image = monster
        """
        The pattern to search for.
        """

    # ------------------------------------------------------------------------------------------------------------------
    def scan(self) -> ScanResult:
        """
        Scans the image under all symmetries and returns the result for the first symmetry showing sea monsters.
        """
        for symmetry in Symmetry:
            image = self._image.transform(symmetry)
            monsters, covered = self._find_monsters(image.data)
            if monsters > 0:
                return ScanResult(symmetry=symmetry,
                                  monsters=monsters,
                                  roughness=int(np.count_nonzero(image.data & ~covered)))

        return ScanResult(symmetry=Symmetry.IDENTITY, monsters=0, roughness=self._image.count())

    # ------------------------------------------------------------------------------------------------------------------
    def _find_monsters(self, data: np.ndarray) -> Tuple[int, np.ndarray]:
        """
        Returns the number of sea monsters in an image and the mask of the pixels covered by sea monsters.

        :param data: The pixels of the image.
        """
        pattern = self._monster.data
        height, width = pattern.shape
        covered = np.zeros(data.shape, dtype=bool)
        monsters = 0
        for y in range(data.shape[0] - height + 1):
            for x in range(data.shape[1] - width + 1):
                window = data[y:y + height, x:x + width]
                if np.all(window[pattern]):
                    monsters += 1
                    covered[y:y + height, x:x + width] |= pattern

        return monsters, covered

# ----------------------------------------------------------------------------------------------------------------------
