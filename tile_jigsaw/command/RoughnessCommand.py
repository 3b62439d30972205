from pathlib import Path

from cleo.commands.command import Command
from cleo.helpers import argument

from tile_jigsaw.io.TileJigsawIO import TileJigsawIO
from tile_jigsaw.jigsaw.Config import Config
from tile_jigsaw.jigsaw.Jigsaw import Jigsaw


class RoughnessCommand(Command):
    """
    The roughness command.
    """
    name = 'roughness'
    description = 'Assembles tiles and counts the set pixels that are not part of a sea monster.'
    arguments = [argument(name='tiles', description='The file with the tiles.', optional=False)]

    # ------------------------------------------------------------------------------------------------------------------
    def handle(self) -> int:
        """
        Executes the roughness command.
        """
        io = TileJigsawIO(self._io.input, self._io.output, self._io.error_output)

        jigsaw = Jigsaw(io, Config(input_path=Path(self.argument('tiles'))))
        jigsaw.roughness()

        io.text('')

        return 0

# ----------------------------------------------------------------------------------------------------------------------
