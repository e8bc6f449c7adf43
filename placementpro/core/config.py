"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import Literal
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from placementpro.schemas.schemas import TIME_PATTERN


class Settings(BaseSettings):
    # Record store
    store_backend: Literal["memory", "mongo"] = "memory"
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "placementpro"
    mongodb_collection: str = "record_store"

    # Load the sample TPO/students/alumni on first start
    seed_demo_data: bool = True

    # Interview day grid (HH:MM, both ends inclusive)
    interview_day_start: str = "09:00"
    interview_day_end: str = "17:00"
    interview_slot_minutes: int = Field(30, gt=0)

    # Session tokens
    jwt_secret_key: str = "change-this-secret"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 1440

    # App
    debug: bool = True
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PLACEMENT_",
    )

    @field_validator("interview_day_start", "interview_day_end")
    @classmethod
    def validate_hhmm(cls, value: str) -> str:
        if not TIME_PATTERN.match(value):
            raise ValueError("must be HH:MM")
        return value

    @model_validator(mode="after")
    def check_day_order(self):
        # zero-padded HH:MM compares correctly as text
        if self.interview_day_end < self.interview_day_start:
            raise ValueError("interview_day_end is before interview_day_start")
        return self


@lru_cache()
def get_settings() -> Settings:
    return Settings()
