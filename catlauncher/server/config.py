# catlauncher/server/config.py
"""Server configuration with sensible defaults for local play."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings, overridable via environment variables."""

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8095

    # Session defaults
    VIEWPORT_WIDTH: float = 960.0
    VIEWPORT_HEIGHT: float = 540.0
    SEED: int | None = None
    RECORD_REPLAY: bool = False

    # Upper bound for POST /api/session/tick
    MAX_TICKS_PER_REQUEST: int = 600

    model_config = SettingsConfigDict(env_prefix="CATLAUNCHER_", env_file=".env", extra="ignore")


settings = Settings()
