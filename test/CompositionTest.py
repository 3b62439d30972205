import unittest

from tile_jigsaw.jigsaw.ArrangedTile import ArrangedTile
from tile_jigsaw.jigsaw.Composition import Composition
from tile_jigsaw.jigsaw.Image import Image
from tile_jigsaw.jigsaw.Symmetry import Symmetry
from tile_jigsaw.jigsaw.Tile import Tile


class CompositionTest(unittest.TestCase):
    """
    Unit test for placing tiles in a composition.
    """

    # ------------------------------------------------------------------------------------------------------------------
    @staticmethod
    def _tile(tile_id: int, text: str) -> ArrangedTile:
        """
        Returns a tile from text as is.

        :param tile_id: The ID of the tile.
        :param text: The pixels of the tile.
        """
        return ArrangedTile(Tile.create(tile_id, Image.from_text(text).data), Symmetry.IDENTITY)

    # ------------------------------------------------------------------------------------------------------------------
    def test_insert_and_clear(self):
        """
        Test inserting a tile and clearing it restores the composition.
        """
        composition = Composition(2, 2)
        tile1 = self._tile(1, '###\n#.#\n###')
        tile2 = self._tile(2, '###\n#..\n###')

        self.assertTrue(composition.try_insert(tile1, 0, 0))
        used_ids = composition.used_ids
        ids = composition.ids()

        self.assertTrue(composition.try_insert(tile2, 1, 0))
        self.assertTrue(composition.contains(2))
        self.assertIs(tile2, composition.get(1, 0))

        composition.clear(1, 0)
        self.assertEqual(used_ids, composition.used_ids)
        self.assertEqual(ids, composition.ids())
        self.assertFalse(composition.contains(2))
        self.assertIsNone(composition.get(1, 0))

    # ------------------------------------------------------------------------------------------------------------------
    def test_mismatch(self):
        """
        Test a tile that does not match a neighbour is not inserted.
        """
        composition = Composition(2, 2)
        self.assertTrue(composition.try_insert(self._tile(1, '###\n#.#\n###'), 0, 0))

        # Left column does not match the right column of the first tile.
        self.assertFalse(composition.try_insert(self._tile(2, '.##\n#..\n###'), 1, 0))
        self.assertIsNone(composition.get(1, 0))
        self.assertFalse(composition.contains(2))
        self.assertEqual({1}, composition.used_ids)

        # Top row does not match the bottom row of the first tile.
        self.assertFalse(composition.try_insert(self._tile(3, '#.#\n#..\n###'), 0, 1))
        self.assertEqual({1}, composition.used_ids)

        self.assertTrue(composition.try_insert(self._tile(4, '###\n...\n#.#'), 0, 1))
        self.assertEqual({1, 4}, composition.used_ids)

    # ------------------------------------------------------------------------------------------------------------------
    def test_match_with_symmetry(self):
        """
        Test an arranged tile matches only under a symmetry that moves the matching edge next to its neighbour.
        """
        composition = Composition(2, 1)
        self.assertTrue(composition.try_insert(self._tile(1, '##.\n..#\n..#'), 0, 0))

        # The right column of the first tile is .##, top to bottom. Flipped and turned a quarter clockwise, the top row
        # .## of the second tile becomes its left column .## top to bottom.
        tile2 = Tile.create(2, Image.from_text('.##\n...\n...').data)
        self.assertFalse(composition.try_insert(ArrangedTile(tile2, Symmetry.ROT90), 1, 0))
        self.assertFalse(composition.try_insert(ArrangedTile(tile2, Symmetry.ROT270), 1, 0))
        self.assertTrue(composition.try_insert(ArrangedTile(tile2, Symmetry.FLIP_ROT90), 1, 0))

    # ------------------------------------------------------------------------------------------------------------------
    def test_corners(self):
        """
        Test the product of the IDs of the corner tiles.
        """
        composition = Composition(2, 2)
        for tile_id, (x, y) in zip((2, 3, 5, 7), ((0, 0), (1, 0), (0, 1), (1, 1))):
            self.assertTrue(composition.try_insert(self._tile(tile_id, '###\n###\n###'), x, y))

        self.assertTrue(composition.is_complete())
        self.assertEqual(210, composition.corners())
        self.assertEqual([[2, 3], [5, 7]], composition.ids())

    # ------------------------------------------------------------------------------------------------------------------
    def test_assemble(self):
        """
        Test assembling strips the borders of the tiles and undoes their symmetries.
        """
        composition = Composition(2, 1)
        tile1 = Tile.create(1, Image.from_text('####\n##.#\n#..#\n####').data)
        tile2 = Tile.create(2, Image.from_text('####\n#..#\n#.##\n####').data)
        self.assertTrue(composition.try_insert(ArrangedTile(tile1, Symmetry.IDENTITY), 0, 0))
        self.assertTrue(composition.try_insert(ArrangedTile(tile2, Symmetry.ROT180), 1, 0))

        self.assertEqual(Image.from_text('#.#.\n....'), composition.assemble())

    # ------------------------------------------------------------------------------------------------------------------
    def test_invalid_use(self):
        """
        Test clearing an empty cell and inserting into an occupied cell are programming errors.
        """
        composition = Composition(1, 1)
        with self.assertRaises(AssertionError):
            composition.clear(0, 0)

        self.assertTrue(composition.try_insert(self._tile(1, '###\n###\n###'), 0, 0))
        with self.assertRaises(AssertionError):
            composition.try_insert(self._tile(2, '###\n###\n###'), 0, 0)

# ----------------------------------------------------------------------------------------------------------------------
if __name__ == '__main__':
    unittest.main()
