from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SEED = 20240101


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Seed for the linear-congruential generator driving the simulated monthly era.
    # Same seed -> byte-identical series.
    DENOM_SEED: int = DEFAULT_SEED

    # Scorecard change policy: "cagr" (since inception) or "yoy" (vs one year earlier).
    # One policy per deployment; never mixed inside a single scorecard set.
    DENOM_CHANGE_POLICY: str = "cagr"

    # Default time-range selector for `denominator series`.
    DENOM_DEFAULT_RANGE: str = "ALL"

    DENOM_LOG_LEVEL: str = "WARNING"

    # When false only the annual anchor era is built (no simulated months).
    DENOM_MONTHLY: bool = True

    @field_validator("DENOM_CHANGE_POLICY")
    @classmethod
    def _check_policy(cls, v: str) -> str:
        v = (v or "cagr").strip().lower()
        if v not in {"cagr", "yoy"}:
            raise ValueError(f"DENOM_CHANGE_POLICY must be 'cagr' or 'yoy', got {v!r}")
        return v

    @field_validator("DENOM_DEFAULT_RANGE")
    @classmethod
    def _check_range(cls, v: str) -> str:
        v = (v or "ALL").strip().upper()
        if v not in {"10Y", "25Y", "50Y", "ALL"}:
            raise ValueError(f"DENOM_DEFAULT_RANGE must be one of 10Y/25Y/50Y/ALL, got {v!r}")
        return v

    # snake_case accessors, same style as the rest of the codebase
    @property
    def seed(self) -> int:
        return self.DENOM_SEED

    @property
    def change_policy(self) -> str:
        return self.DENOM_CHANGE_POLICY

    @property
    def default_range(self) -> str:
        return self.DENOM_DEFAULT_RANGE

    @property
    def log_level(self) -> str:
        return (self.DENOM_LOG_LEVEL or "WARNING").strip().upper()

    @property
    def monthly(self) -> bool:
        return self.DENOM_MONTHLY


def load_settings() -> Settings:
    return Settings()
