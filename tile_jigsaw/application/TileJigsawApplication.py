from cleo.application import Application
from cleo.io.io import IO
from cleo.io.outputs.output import Verbosity

from tile_jigsaw.command.AssembleCommand import AssembleCommand
from tile_jigsaw.command.RoughnessCommand import RoughnessCommand
from tile_jigsaw.io.TileJigsawIO import TileJigsawIO


class TileJigsawApplication(Application):
    """
    The TileJigsaw application.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self):
        """
        Object constructor
        """
        Application.__init__(self, 'tile-jigsaw', '0.0.0')

        self.add(AssembleCommand())
        self.add(RoughnessCommand())

    # ------------------------------------------------------------------------------------------------------------------
    def render_error(self, error: Exception, io: IO) -> None:
        if io.output.verbosity == Verbosity.NORMAL:
            my_io = TileJigsawIO(io.input, io.output, io.error_output)
            lines = [error.__class__.__name__, str(error)]
            my_io.error(lines)
        else:
            Application.render_error(self, error, io)

# ----------------------------------------------------------------------------------------------------------------------
