from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="SQLITE_VIZ_", extra="ignore")

    log_level: LogLevel = Field(default="WARNING")

    primary_color: str = Field(default="#2aa198")
    nullable_color: str = Field(default="#6c71c4")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v

@lru_cache()
def get_settings() -> Settings:
    return Settings()
