from collections import deque
from dataclasses import dataclass
from typing import Deque

from tile_jigsaw.jigsaw.ArrangedTile import ArrangedTile


@dataclass
class SearchFrame:
    """
    A frame on the stack of the search: a cell, the arranged tile currently tried at that cell, and the arranged tiles
    still to be tried at that cell.
    """

    # ------------------------------------------------------------------------------------------------------------------
    x: int
    """
    The column of the cell.
    """

    y: int
    """
    The row of the cell.
    """

    candidate: ArrangedTile
    """
    The arranged tile currently tried at the cell.
    """

    alternatives: Deque[ArrangedTile]
    """
    The arranged tiles still to be tried at the cell.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def advance(self) -> bool:
        """
        Replaces the current candidate with the next alternative. Returns False if there are no alternatives left.
        """
        if not self.alternatives:
            return False

        self.candidate = self.alternatives.popleft()

        return True

# ----------------------------------------------------------------------------------------------------------------------
