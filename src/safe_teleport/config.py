"""Runtime configuration for safe-teleport."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(
        env_prefix="SAFE_TELEPORT_",
        env_file=".env",
        extra="ignore",
        env_parse_none_str="none",
    )

    app_name: str = "safe-teleport"
    log_level: str = "INFO"
    max_distance: int = Field(default=64, ge=1, description="Horizontal radius for random teleports, in blocks.")
    max_placement_attempts: int | None = Field(
        default=1024,
        ge=1,
        description="Candidate columns to try before giving up; \"none\" searches without a bound.",
    )
    fallback_to_origin_surface: bool = Field(
        default=True,
        description="Land on the origin column's surface when the placement search is exhausted.",
    )
    base_reach: float = Field(default=64.0, ge=0.0, description="Aim ray length in blocks.")
    privileged_multiplier: float = Field(default=2.0, ge=0.0, description="Reach multiplier for privileged actors.")
    nostalgic_sounds: bool = False
    particle_amount: int = Field(default=80, ge=0)


settings = Settings()
