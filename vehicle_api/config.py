from dataclasses import dataclass

from pydantic_settings import BaseSettings

ISO_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./vehicles.sqlite3"
    cors_origins: list[str] = ["http://localhost:8000"]
    seed_demo_data: bool = True
    log_level: str = "INFO"
    launch_date_pattern: str = ISO_DATE_PATTERN

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@dataclass(frozen=True)
class DateParsingConfig:
    """Accepted shape of a launch date before it is handed to the ISO parser."""

    pattern: str = ISO_DATE_PATTERN

    @classmethod
    def from_settings(cls, settings: Settings) -> "DateParsingConfig":
        return cls(pattern=settings.launch_date_pattern)


settings = Settings()
