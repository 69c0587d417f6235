from pathlib import Path
from typing import Annotated

from appdirs import user_config_dir as appdirs_user_config_dir
from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from .. import app_name

settings_file_name = f"{app_name}.yml"


def default_user_config_dir() -> Path:
    return Path(appdirs_user_config_dir(app_name))


def _join(base_key: str, to_add: str) -> Path:
    return Field(default_factory=lambda data: data[base_key] / to_add)


_Path = Annotated[Path, AfterValidator(Path.resolve)]


class Paths(BaseModel):
    model_config = ConfigDict(validate_default=True)

    current_dir: _Path
    user_config_dir: _Path = Field(default_factory=default_user_config_dir)
    user_settings: _Path = _join("user_config_dir", settings_file_name)
    local_settings: _Path = _join("current_dir", settings_file_name)
