import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class DecoderSettings(BaseSettings):
    octet_preview_bytes: int = Field(16, ge=1, validation_alias="IPPDECODE_OCTET_PREVIEW_BYTES")
    indent_width: int = Field(4, ge=2, validation_alias="IPPDECODE_INDENT_WIDTH")

    # JSON file merged over the packaged operation/status/enum tables
    names_file: Optional[str] = Field(None, validation_alias="IPPDECODE_NAMES_FILE")

    log_level: str = Field("WARNING", validation_alias="IPPDECODE_LOG_LEVEL")
    log_ring_size: int = Field(200, ge=1, validation_alias="IPPDECODE_LOG_RING_SIZE")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_log_level(cls, value: object) -> str:
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    def with_overrides(self, **overrides) -> "DecoderSettings":
        """Return validated settings with ``overrides`` applied over these values."""
        return type(self).model_validate({**self.model_dump(), **overrides})


@lru_cache
def get_settings() -> DecoderSettings:
    return DecoderSettings()
