"""
Command line parser of pinsetup. Argument errors are turned into UsageError instead of exiting the process, so the
caller decides what to print and which exit code to return.
"""
from argparse import ArgumentError, ArgumentParser

from pinsetup.common.exceptions import UsageError

LOG_LEVELS: list[str] = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

PIN_FLAGS_HELP: str = 'comma separated list of pin numbers, the flag can be repeated'


class PinSetupArgumentParser(ArgumentParser):

    def error(self, message: str):
        raise UsageError(message)


def pin_arguments(parser: ArgumentParser):
    pins = parser.add_argument_group('pin operations',
                                     'Applied in the order add, remove, input, output')
    pins.add_argument('-a', '--add', dest='add', action='append', default=[], metavar='PINS',
                      help=f'export pins to userspace: {PIN_FLAGS_HELP}')
    pins.add_argument('-r', '--remove', dest='remove', action='append', default=[], metavar='PINS',
                      help=f'unexport pins: {PIN_FLAGS_HELP}')
    pins.add_argument('-i', '--input', dest='input', action='append', default=[], metavar='PINS',
                      help=f'set pins direction to input: {PIN_FLAGS_HELP}')
    pins.add_argument('-o', '--output', dest='output', action='append', default=[], metavar='PINS',
                      help=f'set pins direction to output: {PIN_FLAGS_HELP}')


def board_arguments(parser: ArgumentParser):
    board = parser.add_argument_group('board')
    board_source = board.add_mutually_exclusive_group()
    board_source.add_argument('-b', '--board', dest='board', default=None,
                              help='built-in board profile name')
    board_source.add_argument('--board-file', dest='board_file', default=None,
                              help='TOML board profile file')
    board.add_argument('--sysfs-path', dest='sysfs_path', default=None,
                       help='GPIO pseudo-filesystem directory')
    board.add_argument('--list-boards', dest='list_boards', action='store_true',
                       help='print the built-in board profiles and exit')
    board.add_argument('--list-pins', dest='list_pins', action='store_true',
                       help='print the pins of the selected board and exit')


def pinsetup_arg_parser(additional_arguments: callable = None) -> ArgumentParser:
    """
    Common arguments creator for pinsetup.
    It also receives an additional_arguments function to add extra arguments
    :return: A configured ArgumentParser object
    """

    parser: ArgumentParser = PinSetupArgumentParser(prog='pinsetup',
                                                    description='Configure GPIO pins through the sysfs interface',
                                                    exit_on_error=False)
    pin_arguments(parser)
    board_arguments(parser)

    parser.add_argument('-c', '--config', dest='config', default=None,
                        help='TOML settings file')
    parser.add_argument('-l', '--log-level', dest='log_level',
                        choices=LOG_LEVELS, default=None, help='Log level')
    parser.add_argument('-d', '--debug', dest='debug',
                        action='store_true', default=None,
                        help='Set log level to debug')
    parser.add_argument('--log-file', dest='log_file', default=None,
                        help='Also log to this file')

    if additional_arguments:
        additional_arguments(parser)

    return parser


def parse_arg(parser: ArgumentParser, args: list[str] | None = None):
    """
    Parses the command line. Raises UsageError for every kind of malformed invocation.
    """
    try:
        return parser.parse_args(args)
    except ArgumentError as ex:
        raise UsageError(str(ex)) from ex
