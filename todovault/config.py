"""Configuration management using pydantic-settings."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    host: str = "127.0.0.1"
    port: int = 8080
    cors_origins: list[str] = ["http://localhost:3000"]
    log_level: str = "INFO"

    # JWT Configuration
    jwt_secret_key: str = "change-me-in-production-use-env-var"
    jwt_algorithm: str = "HS256"
    token_expiry_minutes: int = 5

    # Session carrier
    token_cookie_name: str = "token"

    # Bcrypt work factor (higher = more secure but slower)
    # For tests, use 4 for faster execution while maintaining functionality
    bcrypt_work_factor: int = 12

    # "length": next id is len(list) + 1, so ids can repeat after a delete
    # "monotonic": per-user counter that never goes backwards
    todo_id_policy: Literal["length", "monotonic"] = "length"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False
    )


settings = Settings()
