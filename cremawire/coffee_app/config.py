from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings


class AppSettings(BaseSettings):
    heater_warmup_seconds: float = Field(0.0, ge=0, validation_alias="HEATER_WARMUP_SECONDS")

    log_ring_size: int = Field(200, gt=0, validation_alias="LOG_RING_SIZE")
    logger_name: str = Field("cremawire", validation_alias="LOGGER_NAME")

    timing_label: str = Field("Got Coffee", validation_alias="TIMING_LABEL")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
