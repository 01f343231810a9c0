from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict, BaseSettings


class DumpSettings(BaseSettings):
    log_level: str = Field("INFO", validation_alias="MIDISTREAM_LOG_LEVEL")
    log_ring_size: int = Field(200, validation_alias="MIDISTREAM_LOG_RING_SIZE", gt=0)

    output_format: Literal["text", "json"] = Field("text", validation_alias="MIDISTREAM_OUTPUT_FORMAT")
    # Presentation only; real-time bytes are always decoded.
    show_realtime: bool = Field(True, validation_alias="MIDISTREAM_SHOW_REALTIME")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> DumpSettings:
    return DumpSettings()
