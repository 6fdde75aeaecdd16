""" Board profiles: the set of GPIO numbers usable on a given board """
import logging
from pathlib import Path

import toml
from pydantic import Field, ValidationError, field_validator

from pinsetup.common.constants import CTE
from pinsetup.common.exceptions import BoardProfileError
from pinsetup.common.file_operations import read_file
from pinsetup.common.pinsetup_base_model import PinSetupBaseModel

logger: logging.Logger = logging.getLogger(__name__)


class BoardProfile(PinSetupBaseModel):
    """
    Legal pin set of a board. The pin order is the one of the profile file and it is kept when listing them.
    """
    name: str
    description: str = ''
    legal_pins: tuple[int, ...] = Field(min_length=1)

    @field_validator('legal_pins')
    @classmethod
    def unique_non_negative(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        negatives = [p for p in v if p < 0]
        if negatives:
            raise ValueError(f'pin numbers cannot be negative: {negatives}')
        if len(set(v)) != len(v):
            duplicated = sorted({p for p in v if v.count(p) > 1})
            raise ValueError(f'duplicated pin numbers: {duplicated}')
        return v

    def is_legal(self, pin: int) -> bool:
        return pin in self.legal_pins

    @classmethod
    def from_toml(cls, profile_file: str | Path) -> 'BoardProfile':
        """
        Loads a board profile from a TOML file with the keys name, description and legal-pins
        Args:
            profile_file: path of the profile

        Returns: the board profile

        Raises:
            BoardProfileError: if the file is missing or its content is not a valid profile
        """
        if isinstance(profile_file, str):
            profile_file = Path(profile_file)

        content = read_file(profile_file)
        if content is None:
            raise BoardProfileError(str(profile_file), 'file does not exist or is empty')

        try:
            return cls.model_validate(toml.loads(content))
        except toml.TomlDecodeError as ex:
            raise BoardProfileError(str(profile_file), f'not a valid TOML file, {ex}') from ex
        except ValidationError as ex:
            errors = '; '.join(f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}" for e in ex.errors())
            raise BoardProfileError(str(profile_file), errors) from ex


def list_board_profiles(profiles_dir: Path = CTE.BOARD_PROFILES_DIR) -> list[str]:
    """ Names of the built-in board profiles """
    return sorted(f.stem for f in profiles_dir.glob(f'*{CTE.BOARD_PROFILE_SUFFIX}'))


def load_board_profile(name: str = CTE.DEFAULT_BOARD, profiles_dir: Path = CTE.BOARD_PROFILES_DIR) -> BoardProfile:
    """
    Loads a built-in board profile by name
    Raises:
        BoardProfileError: if there is no profile with this name
    """
    if name not in list_board_profiles(profiles_dir):
        raise BoardProfileError(name, f'unknown board, available boards: {", ".join(list_board_profiles(profiles_dir))}')

    logger.debug(f'Loading board profile {name} from {profiles_dir}')
    return BoardProfile.from_toml(profiles_dir / f'{name}{CTE.BOARD_PROFILE_SUFFIX}')
