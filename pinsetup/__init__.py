"""
pinsetup

Exports, unexports and sets the direction of GPIO pins through the kernel sysfs interface, checking every pin
against the legal pin set of the selected board.
"""
import logging
import sys

from pydantic import ValidationError

from pinsetup.common.constants import CTE
from pinsetup.common.exceptions import ConfigurationError, UsageError
from pinsetup.common.pinsetup_config import parse_arg, pinsetup_arg_parser
from pinsetup.common.pinsetup_logging import LoggingSettings, get_pinsetup_logger, set_logging_configuration
from pinsetup.gpio.executor import ActionExecutor
from pinsetup.gpio.interpreter import PinArguments, interpret
from pinsetup.gpio.sysfs_writer import SysfsWriter
from pinsetup.gpio.validator import PinValidator
from pinsetup.models.board import list_board_profiles
from pinsetup.settings import PinSetupSettings, get_settings

__version__ = '1.0.0'


def configure_logging(settings: PinSetupSettings | LoggingSettings) -> logging.Logger:
    set_logging_configuration(debug=settings.pinsetup_debug,
                              log_level=settings.pinsetup_log_level,
                              log_file=settings.pinsetup_log_file)
    return get_pinsetup_logger()


def main(argv: list[str] | None = None) -> int:
    """
    Runs one pinsetup invocation.

    Returns: the process exit code. 0 when the actions were applied, even if some pins failed, 1 when the
    configuration or the board profile cannot be loaded and 2 for a malformed command line. In the last two cases no
    control file is written.
    """
    try:
        logging_settings = LoggingSettings()
    except ValidationError:
        # Reported as a ConfigurationError once the settings are resolved
        logging_settings = LoggingSettings.model_construct()
    logger = configure_logging(logging_settings)
    parser = pinsetup_arg_parser()

    try:
        args = parse_arg(parser, argv)
        settings = get_settings(args)
        logger = configure_logging(settings)

        if args.list_boards:
            print('\n'.join(list_board_profiles()))
            return 0

        board = settings.load_board()
        if args.list_pins:
            print(', '.join(str(p) for p in board.legal_pins))
            return 0

        command = interpret(PinArguments.from_namespace(args))
    except UsageError as ex:
        parser.print_help(sys.stderr)
        sys.stderr.write(f'{parser.prog}: error: {ex.message}\n')
        return CTE.USAGE_EXIT_CODE
    except ConfigurationError as ex:
        logger.error(str(ex))
        return CTE.CONFIG_EXIT_CODE

    logger.debug(f'Using board {board.name} and sysfs path {settings.pinsetup_sysfs_path}')
    for error in command.errors:
        logger.warning(error.message)

    executor = ActionExecutor(PinValidator(board), SysfsWriter(settings.pinsetup_sysfs_path))
    executor.execute(command.actions)
    return 0


def run():
    sys.exit(main())
