"""Application configuration and settings management."""

from pathlib import Path
from typing import Any

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="SWR_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Smart Waste Route Planner API"
    api_prefix: str = "/api"
    data_root: Path = Field(default=Path("data"), description="Root directory for run outputs.")
    travel_minutes_per_km: float = Field(default=2.0, ge=0.0)
    dwell_minutes_per_stop: float = Field(default=10.0, ge=0.0)
    fuel_efficiency_km_per_liter: dict[str, float] = Field(
        default={"truck": 6.0, "van": 10.0, "auto": 15.0},
        description="Fuel efficiency (km per liter) by vehicle class.",
    )
    default_fuel_efficiency_km_per_liter: float = Field(default=8.0, gt=0.0)
    baseline_leg_km: float = Field(
        default=2.0,
        ge=0.0,
        description="Assumed average distance between bins on an unoptimized tour.",
    )
    baseline_inefficiency_factor: float = Field(default=1.5, ge=0.0)
    co2_kg_per_liter: float = Field(default=2.68, ge=0.0)
    collection_fill_threshold: float = Field(
        default=70.0,
        ge=0.0,
        le=100.0,
        description="Minimum fill percentage for a bin to be considered for collection.",
    )
    max_candidates_per_route: int = Field(default=500, ge=1)
    tie_tolerance_km: float = Field(default=1e-9, ge=0.0)
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("data_root", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("fuel_efficiency_km_per_liter", mode="before")
    @classmethod
    def _parse_efficiency_table(cls, value: Any) -> dict[str, float]:
        """Parse the efficiency table from JSON or ``class=value`` pairs."""
        if isinstance(value, dict):
            return {str(key).lower(): float(item) for key, item in value.items()}
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, dict):
                    return {str(key).lower(): float(item) for key, item in parsed.items()}
            except (json.JSONDecodeError, TypeError, ValueError):
                pass
            table: dict[str, float] = {}
            for pair in value.split(","):
                if "=" not in pair:
                    continue
                key, raw = pair.split("=", 1)
                table[key.strip().lower()] = float(raw.strip())
            return table
        return {}

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            # Try JSON first
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
