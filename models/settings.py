"""Runtime configuration for a drive session."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DriveSettings(BaseSettings):
    """Settings read from ``CLOUDDRIVE_*`` environment variables or ``.env``.

    Args:
        search_debounce_ms: Quiet window before typed search text is applied.
        recent_limit: Number of files the recent view shows.
        root_label: Breadcrumb root of the my-drive section.
        seed: Which seed dataset a new store starts from.
        log_level: Root logging level for the API process.
    """

    model_config = SettingsConfigDict(
        env_prefix="CLOUDDRIVE_",
        env_file=".env",
        extra="ignore",
    )

    search_debounce_ms: int = Field(default=300, ge=0)
    recent_limit: int = Field(default=8, ge=0)
    root_label: str = Field(default="Drive", min_length=1)
    seed: Literal["demo", "empty"] = "demo"
    log_level: str = "INFO"
