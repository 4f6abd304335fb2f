from typing import Annotated, Optional

import annotated_types
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from .criteria import PasswordCriteria

DEFAULT_PASSWORD_LENGTH = 20


class Settings(BaseSettings):
    """
    Defaults for the command line options.

    Values come from, in order of precedence, ``RANDPASS_*`` environment variables,
    secret files and the YAML configuration file.
    """

    model_config = SettingsConfigDict(
        extra="forbid",
        validate_default=False,
        env_prefix="RANDPASS_",
        env_nested_delimiter="__",
    )

    length: Annotated[int, annotated_types.Ge(1)] = DEFAULT_PASSWORD_LENGTH
    quantity: Annotated[int, annotated_types.Ge(1)] = 1
    criteria: Optional[PasswordCriteria] = Field(default=None)
    extra_charset: Optional[str] = None
    format_string: Optional[str] = None
    delimiter: Optional[str] = None
    no_newline: bool = False
    quiet: bool = False
    verbose: bool = False
    fail: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        _: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, file_secret_settings, init_settings
