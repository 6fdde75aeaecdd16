import toml

from pydantic_settings import BaseSettings, SettingsConfigDict

from pathlib import Path


class PinSetupBaseSettings(BaseSettings):
    model_config = SettingsConfigDict(populate_by_name=True)

    @classmethod
    def from_toml(cls, config_file: str | Path):
        if isinstance(config_file, str):
            config_file = Path(config_file)

        if not config_file.exists() or not config_file.is_file():
            raise FileNotFoundError(f'File {config_file}')

        with config_file.open('r') as f:
            config_dict = toml.loads(f.read())
            return cls.model_validate(config_dict)
