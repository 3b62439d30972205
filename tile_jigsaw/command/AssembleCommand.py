from pathlib import Path

from cleo.commands.command import Command
from cleo.helpers import argument, option

from tile_jigsaw.io.TileJigsawIO import TileJigsawIO
from tile_jigsaw.jigsaw.Config import Config
from tile_jigsaw.jigsaw.Jigsaw import Jigsaw


class AssembleCommand(Command):
    """
    The assemble command.
    """
    name = 'assemble'
    description = 'Assembles tiles into a square image and prints the product of the IDs of the corner tiles.'
    options = [option(long_name='output',
                      short_name='o',
                      description='The assembled output image (.png, .jpg, or .txt).',
                      flag=False,
                      value_required=True),
               option(long_name='quality',
                      description='The quality of the assembled image when saved as jpeg.',
                      default=90,
                      flag=False)]
    arguments = [argument(name='tiles', description='The file with the tiles.', optional=False)]

    # ------------------------------------------------------------------------------------------------------------------
    def handle(self) -> int:
        """
        Executes the assemble command.
        """
        io = TileJigsawIO(self._io.input, self._io.output, self._io.error_output)
        config = self._create_config()

        jigsaw = Jigsaw(io, config)
        jigsaw.assemble()

        io.text('')

        return 0

    # ------------------------------------------------------------------------------------------------------------------
    def _create_config(self) -> Config:
        """
        Creates a Config object from the given option and arguments.
        """
        output = self.option('output')

        return Config(input_path=Path(self.argument('tiles')),
                      output_path=Path(output) if output else None,
                      quality=int(self.option('quality')))

# ----------------------------------------------------------------------------------------------------------------------
