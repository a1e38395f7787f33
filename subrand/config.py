"""Library configuration derived from the environment."""
from typing import Literal

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Runtime settings, overridable with SUBRAND_* environment variables."""

    model_config = ConfigDict(env_prefix="SUBRAND_")

    debug: bool = False

    # Default instance seeding
    default_seed: int | None = Field(default=None, ge=-(2**31), le=2**31 - 1)
    tick_source: Literal["monotonic", "wall"] = "monotonic"

    # Telemetry
    telemetry_enabled: bool = True


settings = Settings()
