import logging

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    # Environment
    ENV: str = "development"
    CONFIG_STRICT: bool = False

    # Targets applied when a document carries none
    DEFAULT_WEEKLY_STAR_TARGET: float = 10.0
    DEFAULT_MONTHLY_TARGET: float = 35.0
    DEFAULT_MONTHLY_STRETCH: float = 45.0

    # Flavor text (None = unseeded)
    MESSAGE_SEED: Optional[int] = None

    # HTTP
    CORS_ORIGINS: str = "http://localhost:5173"  # comma-separated

    model_config = SettingsConfigDict(
        env_prefix="STARFLOW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()


def validate_config(strict: Optional[bool] = None, settings_obj: Optional[Settings] = None, logger: Optional[logging.Logger] = None) -> bool:
    """Validate default targets.

    In strict mode raise RuntimeError; otherwise emit warnings only.
    """
    cfg = settings_obj or settings
    log = logger or logging.getLogger("starflow")
    strict_mode = strict if strict is not None else getattr(cfg, "CONFIG_STRICT", False)

    problems = []
    for key in ("DEFAULT_WEEKLY_STAR_TARGET", "DEFAULT_MONTHLY_TARGET", "DEFAULT_MONTHLY_STRETCH"):
        if getattr(cfg, key) <= 0:
            problems.append(f"{key} must be positive")
    if cfg.DEFAULT_MONTHLY_STRETCH < cfg.DEFAULT_MONTHLY_TARGET:
        problems.append("DEFAULT_MONTHLY_STRETCH is below DEFAULT_MONTHLY_TARGET")

    if problems:
        message = f"Invalid configuration: {'; '.join(problems)}"
        if strict_mode:
            raise RuntimeError(message)
        log.warning(message)
        return False

    return True
