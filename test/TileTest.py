import unittest
from pathlib import Path

import numpy as np

from tile_jigsaw.jigsaw.ArrangedTile import ArrangedTile
from tile_jigsaw.jigsaw.Direction import Direction
from tile_jigsaw.jigsaw.EdgeCodec import EdgeCodec
from tile_jigsaw.jigsaw.Image import Image
from tile_jigsaw.jigsaw.JigsawError import JigsawError
from tile_jigsaw.jigsaw.OrientedEdge import OrientedEdge
from tile_jigsaw.jigsaw.Side import Side
from tile_jigsaw.jigsaw.Symmetry import Symmetry
from tile_jigsaw.jigsaw.Tile import Tile
from tile_jigsaw.jigsaw.TileReader import TileReader


class TileTest(unittest.TestCase):
    """
    Unit test for the edge values of tiles and arranged tiles.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def test_reverse_is_involution(self):
        """
        Test reversing the bits twice gives the original value.
        """
        for width in (1, 3, 8, 10):
            for value in range(1 << width):
                self.assertEqual(value, EdgeCodec.reverse(EdgeCodec.reverse(value, width), width))

        self.assertEqual(0b0000000001, EdgeCodec.reverse(0b1000000000, 10))
        self.assertEqual(0b0100101100, EdgeCodec.reverse(0b0011010010, 10))

    # ------------------------------------------------------------------------------------------------------------------
    def test_reverse_wide(self):
        """
        Test reversing the bits of integers wider than a byte.
        """
        self.assertEqual(1, EdgeCodec.reverse(1 << 31, 32))
        self.assertEqual(0b11 << 30, EdgeCodec.reverse(0b11, 32))
        self.assertEqual(0x0000ffff, EdgeCodec.reverse(0xffff0000, 32))
        self.assertEqual(1 << 16, EdgeCodec.reverse(1, 17))
        self.assertEqual(0b10000000000000011, EdgeCodec.reverse(0b11000000000000001, 17))

        for value in (0, 1, 0x12345, 0x1abcd, (1 << 17) - 1):
            self.assertEqual(value, EdgeCodec.reverse(EdgeCodec.reverse(value, 17), 17))

    # ------------------------------------------------------------------------------------------------------------------
    def test_edges_of_wide_tile(self):
        """
        Test the clockwise and counter clockwise edge values of a 32x32 tile.
        """
        grid = np.zeros((32, 32), dtype=bool)
        grid[0, 0] = True
        grid[0, 3] = True
        grid[5, 31] = True
        tile = Tile.create(1, grid)

        expected = {Side.TOP:    ((1 << 31) | (1 << 28), 0b1001),
                    Side.RIGHT:  (1 << 26, 1 << 5),
                    Side.BOTTOM: (0, 0),
                    Side.LEFT:   (1, 1 << 31)}
        for side, (clockwise, counter_clockwise) in expected.items():
            self.assertEqual(clockwise, tile.edges[OrientedEdge(side, Direction.CLOCKWISE)], side.name)
            self.assertEqual(counter_clockwise, tile.edges[OrientedEdge(side, Direction.COUNTER_CLOCKWISE)], side.name)
            self.assertEqual(counter_clockwise, EdgeCodec.reverse(clockwise, 32), side.name)

    # ------------------------------------------------------------------------------------------------------------------
    def test_edges_of_example_tile(self):
        """
        Test the edge values of the first tile of the example.
        """
        tiles = TileReader.read(Path(__file__).parent / 'fixtures' / 'example.txt')
        tile = tiles[0]
        self.assertEqual(2311, tile.id)

        expected = {(Side.TOP, Direction.CLOCKWISE):            0b0011010010,
                    (Side.RIGHT, Direction.CLOCKWISE):          0b0001011001,
                    (Side.BOTTOM, Direction.CLOCKWISE):         0b1110011100,
                    (Side.LEFT, Direction.CLOCKWISE):           0b0100111110,
                    (Side.TOP, Direction.COUNTER_CLOCKWISE):    0b0100101100,
                    (Side.LEFT, Direction.COUNTER_CLOCKWISE):   0b0111110010,
                    (Side.BOTTOM, Direction.COUNTER_CLOCKWISE): 0b0011100111,
                    (Side.RIGHT, Direction.COUNTER_CLOCKWISE):  0b1001101000}
        for (side, direction), value in expected.items():
            self.assertEqual(value, tile.edges[OrientedEdge(side, direction)], f'{side.name} {direction.name}')

    # ------------------------------------------------------------------------------------------------------------------
    def test_arranged_edges(self):
        """
        Test the edge values of a tile with one pixel set at each side under all symmetries.
        """
        grid = np.zeros((10, 10), dtype=bool)
        grid[0, 1] = True
        grid[2, 9] = True
        grid[9, 6] = True
        grid[5, 0] = True
        tile = Tile.create(0, grid)
        self.assertEqual('#0(T256/2 R128/4 B64/8 L32/16)', str(tile))

        expected = {Symmetry.IDENTITY:    '#0(T256/2 R128/4 B64/8 L32/16)',
                    Symmetry.ROT90:       '#0(T32/16 R256/2 B128/4 L64/8)',
                    Symmetry.ROT180:      '#0(T64/8 R32/16 B256/2 L128/4)',
                    Symmetry.ROT270:      '#0(T128/4 R64/8 B32/16 L256/2)',
                    Symmetry.FLIP:        '#0(T8/64 R4/128 B2/256 L16/32)',
                    Symmetry.FLIP_ROT90:  '#0(T16/32 R8/64 B4/128 L2/256)',
                    Symmetry.FLIP_ROT180: '#0(T2/256 R16/32 B8/64 L4/128)',
                    Symmetry.FLIP_ROT270: '#0(T4/128 R2/256 B16/32 L8/64)'}
        for symmetry, description in expected.items():
            self.assertEqual(description, str(ArrangedTile(tile, symmetry)), symmetry.name)

    # ------------------------------------------------------------------------------------------------------------------
    def test_arranged_pixels(self):
        """
        Test the pixels of an arranged tile equal the transformed image of the tile and its edges read the same pixels.
        """
        tile = TileReader.read(Path(__file__).parent / 'fixtures' / 'example.txt')[1]
        size = tile.size

        for arranged_tile in ArrangedTile.arrangements(tile):
            pixels = np.array([[arranged_tile.pixel(row, col) for col in range(size)] for row in range(size)])
            self.assertEqual(Image(tile.grid).transform(arranged_tile.symmetry), Image(pixels))
            self.assertEqual(EdgeCodec.edges(pixels)[OrientedEdge(Side.TOP, Direction.CLOCKWISE)],
                             arranged_tile.edge_value(OrientedEdge(Side.TOP, Direction.CLOCKWISE)))
            self.assertEqual(EdgeCodec.edges(pixels)[OrientedEdge(Side.LEFT, Direction.COUNTER_CLOCKWISE)],
                             arranged_tile.edge_value(OrientedEdge(Side.LEFT, Direction.COUNTER_CLOCKWISE)))

    # ------------------------------------------------------------------------------------------------------------------
    def test_tile_is_read_only(self):
        """
        Test the pixels of a tile can not be modified.
        """
        tile = Tile.create(1, np.ones((3, 3), dtype=bool))
        with self.assertRaises(ValueError):
            tile.grid[0, 0] = False

    # ------------------------------------------------------------------------------------------------------------------
    def test_irregular_grid(self):
        """
        Test a grid that is not square is rejected.
        """
        with self.assertRaises(JigsawError):
            Tile.create(1, np.ones((3, 4), dtype=bool))

        with self.assertRaises(JigsawError):
            Tile.create(1, np.ones(9, dtype=bool))

# ----------------------------------------------------------------------------------------------------------------------
if __name__ == '__main__':
    unittest.main()
