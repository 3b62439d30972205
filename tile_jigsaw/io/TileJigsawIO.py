from typing import List

from cleo.formatters.style import Style
from cleo.io.inputs.input import Input
from cleo.io.io import IO
from cleo.io.outputs.output import Output, Verbosity


class TileJigsawIO(IO):
    """
    The Output decorator for TileJigsaw.
    """

    # ------------------------------------------------------------------------------------------------------------------
    def __init__(self, input: Input, output: Output, error_output: Output):
        """
        Object constructor.

        :param input: The input interface.
        :param output: The output interface.
        :param error_output: The error output interface.
        """
        IO.__init__(self, input, output, error_output)

        for formatter in (output.formatter, error_output.formatter):
            formatter.set_style('fso', Style('green', None, ['bold']))
            formatter.set_style('title', Style('yellow', None, ['bold']))
            formatter.set_style('error_block', Style('white', 'red', ['bold']))

    # ------------------------------------------------------------------------------------------------------------------
    def title(self, message: str) -> None:
        """
        Writes a title.

        :param message: The title.
        """
        self.write_line([f'<title>{message}</title>', f'<title>{"=" * len(message)}</title>', ''])

    # ------------------------------------------------------------------------------------------------------------------
    def text(self, message: str | List[str]) -> None:
        """
        Writes informational text.

        :param message: The message or messages.
        """
        self.write_line(message)

    # ------------------------------------------------------------------------------------------------------------------
    def log_notice(self, message: str | List[str]) -> None:
        """
        Logs a message at normal verbosity.

        :param message: The message or messages.
        """
        self.write_line(message, Verbosity.NORMAL)

    # ------------------------------------------------------------------------------------------------------------------
    def log_verbose(self, message: str | List[str]) -> None:
        """
        Logs a message only when verbose output is enabled (-v).

        :param message: The message or messages.
        """
        self.write_line(message, Verbosity.VERBOSE)

    # ------------------------------------------------------------------------------------------------------------------
    def log_very_verbose(self, message: str | List[str]) -> None:
        """
        Logs a message only when very verbose output is enabled (-vv).

        :param message: The message or messages.
        """
        self.write_line(message, Verbosity.VERY_VERBOSE)

    # ------------------------------------------------------------------------------------------------------------------
    def log_debug(self, message: str | List[str]) -> None:
        """
        Logs a message only when debug output is enabled (-vvv).

        :param message: The message or messages.
        """
        self.write_line(message, Verbosity.DEBUG)

    # ------------------------------------------------------------------------------------------------------------------
    def error(self, lines: str | List[str]) -> None:
        """
        Writes an error block to the error output.

        :param lines: The lines of the error message.
        """
        if isinstance(lines, str):
            lines = [lines]

        width = max(len(line) for line in lines) + 4
        block = [' ' * width]
        for line in lines:
            block.append('  ' + line.ljust(width - 2))
        block.append(' ' * width)

        self.write_error_line('')
        self.write_error_line([f'<error_block>{line}</error_block>' for line in block])
        self.write_error_line('')

# ----------------------------------------------------------------------------------------------------------------------
