"""Application settings via Pydantic Settings."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration loaded from ``PRICETRACKER_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PRICETRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Storage
    data_dir: Path = Path("data")
    collection_id: str = "meu-preco-tracker-v1"

    # Identity stamped on everything this process creates
    owner_id: str = "local"

    # Presentation
    date_format: str = "%d/%m/%Y"
    recent_limit: int = Field(default=4, ge=1, le=100)

    # Logging
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        return v.strip().upper() or "WARNING"

    @field_validator("owner_id", "collection_id")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()

    @property
    def data_file(self) -> Path:
        return self.data_dir / f"{self.collection_id}.json"
