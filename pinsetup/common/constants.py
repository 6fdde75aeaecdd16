from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Constants:
    # Kernel GPIO pseudo-filesystem
    SYSFS_GPIO_PATH: str = '/sys/class/gpio'
    EXPORT_FILE: str = 'export'
    UNEXPORT_FILE: str = 'unexport'
    DIRECTION_FILE: str = 'direction'
    PIN_DIR_PREFIX: str = 'gpio'

    # Board profiles
    DEFAULT_BOARD: str = 'raspberry-pi'
    BOARD_PROFILES_DIR: Path = Path(__file__).parent.parent / 'boards'
    BOARD_PROFILE_SUFFIX: str = '.toml'

    # Command line
    PIN_SEPARATOR: str = ','
    USAGE_EXIT_CODE: int = 2
    CONFIG_EXIT_CODE: int = 1

    # Logging
    LOG_FILE_MAX_BYTES: int = 5 * 1024 * 1024


CTE: Constants = Constants()
