import logging
from argparse import Namespace
from pathlib import Path

import toml
from pydantic import ValidationError, field_validator

from pinsetup.common.constants import CTE
from pinsetup.common.exceptions import ConfigurationError
from pinsetup.common.pinsetup_config import LOG_LEVELS
from pinsetup.common.settings_parser import PinSetupBaseSettings
from pinsetup.models.board import BoardProfile, load_board_profile

logger: logging.Logger = logging.getLogger(__name__)

# Command line destinations overriding a setting
_CMD_LINE_OVERRIDES: dict[str, str] = {
    'board': 'pinsetup_board',
    'board_file': 'pinsetup_board_file',
    'sysfs_path': 'pinsetup_sysfs_path',
    'log_level': 'pinsetup_log_level',
    'debug': 'pinsetup_debug',
    'log_file': 'pinsetup_log_file',
}


class PinSetupSettings(PinSetupBaseSettings):
    """
    PinSetupSettings class represents the settings of pinsetup. Each attribute can be set with the environmental
    variable of the same name in upper case.

    Attributes:
        pinsetup_board (str): Built-in board profile. Default value is "raspberry-pi".
        pinsetup_board_file (Optional[str]): TOML board profile, takes precedence over pinsetup_board.
        pinsetup_sysfs_path (str): GPIO sysfs directory. Default value is "/sys/class/gpio".
        pinsetup_log_level (str): Log level. Default value is "INFO".
        pinsetup_debug (bool): Set log level to debug. Default value is False.
        pinsetup_log_file (Optional[str]): Also log to this file.
    """
    pinsetup_board: str = CTE.DEFAULT_BOARD
    pinsetup_board_file: str | None = None
    pinsetup_sysfs_path: str = CTE.SYSFS_GPIO_PATH
    pinsetup_log_level: str = 'INFO'
    pinsetup_debug: bool = False
    pinsetup_log_file: str | None = None

    @field_validator('pinsetup_log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        v = str(v).upper()
        if v not in LOG_LEVELS:
            raise ValueError(f'log level must be one of {", ".join(LOG_LEVELS)}')
        return v

    def load_board(self) -> BoardProfile:
        if self.pinsetup_board_file:
            logger.debug(f'Loading board profile from {self.pinsetup_board_file}')
            return BoardProfile.from_toml(self.pinsetup_board_file)
        return load_board_profile(self.pinsetup_board)


def get_file_settings(config_file: str | Path) -> PinSetupSettings:
    """
    Loads the settings from a TOML file. Values found in the file replace the environmental ones.
    Raises:
        ConfigurationError: the file does not exist or contains invalid settings
    """
    try:
        return PinSetupSettings.from_toml(config_file)
    except FileNotFoundError as ex:
        raise ConfigurationError(f'Settings file {config_file} not found') from ex
    except (toml.TomlDecodeError, ValidationError) as ex:
        raise ConfigurationError(f'Invalid settings file {config_file}: {ex}') from ex


def get_cmd_line_settings(base_settings: PinSetupSettings, cmd_settings: Namespace | None) -> PinSetupSettings:
    if cmd_settings is None:
        return base_settings

    update = {setting: getattr(cmd_settings, dest)
              for dest, setting in _CMD_LINE_OVERRIDES.items()
              if getattr(cmd_settings, dest, None) is not None}
    if update.get('pinsetup_board') is not None:
        # An explicit board on the command line wins over a board file from the environment
        update.setdefault('pinsetup_board_file', None)

    return base_settings.model_copy(update=update)


def get_settings(cmd_settings: Namespace | None = None) -> PinSetupSettings:
    """
    Resolves the settings: command line first, then the settings file if one is given, otherwise the environment,
    then the defaults.
    """
    config_file = getattr(cmd_settings, 'config', None)
    try:
        base_settings = get_file_settings(config_file) if config_file else PinSetupSettings()
    except ValidationError as ex:
        raise ConfigurationError(f'Invalid environment settings: {ex}') from ex
    return get_cmd_line_settings(base_settings, cmd_settings)
