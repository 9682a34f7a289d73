"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from importexport.domain.models.enums import BackendKind


def get_default_data_dir() -> Path:
    """Return the default data directory."""
    return Path.home() / ".importexport"


class BackendRegistration(BaseModel):
    """Catalog entry for one object or format backend."""

    name: str


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="IMPORTEXPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    app_name: str = "Import/Export Template Service"
    app_version: str = "0.1.0"

    # Data directory (default database lives here)
    data_dir: Optional[Path] = None

    # Database URL (derived from data_dir if not set explicitly)
    database_url: Optional[str] = None

    log_level: str = "INFO"

    # Audit user recorded when a caller does not identify itself
    default_user_id: int = 1

    # Backend catalogs: logical name -> display label
    object_backend_registration: dict[str, BackendRegistration] = {}
    format_backend_registration: dict[str, BackendRegistration] = {
        "CSV": BackendRegistration(name="CSV (Comma Separated Values)"),
    }

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """Get database URL, deriving from data_dir if not set."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / "importexport.db"
        return f"sqlite:///{db_path}"

    def backend_catalog(self, kind: BackendKind) -> dict[str, str]:
        """Configured backends of one kind as name -> label, sorted by name."""
        registrations = (
            self.object_backend_registration
            if BackendKind(kind) == BackendKind.OBJECT
            else self.format_backend_registration
        )
        return {name: registrations[name].name for name in sorted(registrations)}


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
