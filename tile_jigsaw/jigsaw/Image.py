from pathlib import Path
from typing import Any, Tuple

import cv2
import numpy as np

from tile_jigsaw.jigsaw.Symmetry import Symmetry


class Image:
    """
    Class for bitmap images.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, data: np.ndarray):
        """
        Object constructor.

        :param data: The pixels of the image, a boolean matrix.
        """
        self._data: np.ndarray = np.asarray(data, dtype=bool)

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def data(self) -> np.ndarray:
        return self._data

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def width(self) -> int:
        """
        Returns the width of this image.
        """
        _, width = self._data.shape[:2]

        return width

    # ------------------------------------------------------------------------------------------------------------------
    @property
    def height(self) -> int:
        """
        Returns the height of this image.
        """
        height, _ = self._data.shape[:2]

        return height

    # ------------------------------------------------------------------------------------------------------------------
    def size(self) -> Tuple[int, int]:
        """
        Returns the size (width and height) of this image.
        """
        height, width = self._data.shape[:2]

        return width, height

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def from_text(text: str):
        """
        Creates an image from lines of '#' (set) and '.' (unset) pixels.

        :param text: The text.
        """
        lines = [line.strip() for line in text.strip().splitlines()]

        return Image(np.array([[char == '#' for char in line] for line in lines], dtype=bool))

    # ------------------------------------------------------------------------------------------------------------------
    def to_text(self) -> str:
        """
        Returns this image as lines of '#' (set) and '.' (unset) pixels.
        """
        return '\n'.join(''.join('#' if pixel else '.' for pixel in row) for row in self._data)

    # ------------------------------------------------------------------------------------------------------------------
    def transform(self, symmetry: Symmetry):
        """
        Returns a copy of this image under a symmetry.

        :param symmetry: The symmetry.
        """
        has_flip, quarter_turns = symmetry.factor()

        data = self._data
        if has_flip:
            data = np.flipud(data)
        data = np.rot90(data, k=-quarter_turns)

        return Image(data.copy())

    # ------------------------------------------------------------------------------------------------------------------
    def count(self) -> int:
        """
        Returns the number of set pixels in this image.
        """
        return int(np.count_nonzero(self._data))

    # ------------------------------------------------------------------------------------------------------------------
    def write(self, path: Path, params: Any = None) -> None:
        """
        Writes the image to the given path. Set pixels are black, unset pixels are white.

        :param path: The path.
        :param params: The parameters for OpenCV's imwrite.
        """
        data = np.where(self._data, 0, 255).astype(np.uint8)
        if params is None:
            cv2.imwrite(str(path), data)
        else:
            cv2.imwrite(str(path), data, params)

    # ------------------------------------------------------------------------------------------------------------------
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Image):
            return NotImplemented

        return self._data.shape == other._data.shape and bool(np.array_equal(self._data, other._data))

    # ------------------------------------------------------------------------------------------------------------------
    __hash__ = None

# ----------------------------------------------------------------------------------------------------------------------
