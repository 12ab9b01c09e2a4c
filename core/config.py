"""
Run configuration using pydantic-settings.

The extractors take no configuration; only the renamer and the batch
runner see a RenameConfig. Values come from keyword arguments (the CLI
options), then the environment (TARGET_FOLDER, CLIENT_NAME,
OPPONENT_NAME, DEFAULT_CASE_NUM), then the defaults below.
"""

from pathlib import Path
from typing import Union

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TARGET_FOLDER = "./docs"


class RenameConfig(BaseSettings):
    """Settings shared by every file in one run."""

    model_config = SettingsConfigDict(frozen=True, extra="ignore")

    client_name: str = Field(min_length=1)
    opponent_name: str = Field(min_length=1)
    target_folder: Path = Path(DEFAULT_TARGET_FOLDER)
    default_case_number: str = Field(
        "",
        validation_alias=AliasChoices("default_case_number", "DEFAULT_CASE_NUM"),
    )
    dry_run: bool = False

    @field_validator("target_folder", mode="before")
    @classmethod
    def expand_path(cls, v: Union[str, Path]) -> Path:
        return Path(v).expanduser()
