"""Application configuration"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# WHY: The backend and the static frontend ship side by side in the repository,
# so defaults are resolved relative to the repository root rather than the CWD.
REPO_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    WHY: One explicit settings object is built at startup and handed to
    create_app(). Request handlers read it from app.state instead of a
    process-wide global, so tests can build isolated apps with their own
    data directory.
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # API
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "CyberShield API"
    VERSION: str = "1.0.0"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # WHY: NODE_ENV is accepted so existing deployment scripts keep working.
    # Only affects whether error detail is echoed to clients.
    ENVIRONMENT: str = Field(
        default="development",
        validation_alias=AliasChoices("ENVIRONMENT", "NODE_ENV"),
    )

    # Logging
    LOG_LEVEL: str = "INFO"

    # Storage
    DATA_DIR: Path = REPO_ROOT / "backend" / "data"
    CONTACTS_FILENAME: str = "contacts.json"

    # WHY: The read-modify-write cycle on the contacts file is unsynchronized
    # by default. Enabling this serializes appends within one process.
    CONTACT_STORE_SERIALIZE_WRITES: bool = False

    # Frontend
    FRONTEND_DIR: Path = REPO_ROOT / "frontend"
    FRONTEND_ENTRY: str = "index.html"

    # Request context
    # WHY: Proxy headers can be spoofed by clients; only trust them when the
    # app is deployed behind a proxy that overwrites them.
    TRUST_PROXY_HEADERS: bool = False

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    @property
    def is_development(self) -> bool:
        """Whether error details may be echoed to clients."""
        return self.ENVIRONMENT.lower() == "development"

    @property
    def contacts_file(self) -> Path:
        """Full path of the JSON file holding contact records."""
        return Path(self.DATA_DIR) / self.CONTACTS_FILENAME

    @property
    def frontend_entry_file(self) -> Path:
        return Path(self.FRONTEND_DIR) / self.FRONTEND_ENTRY

    @property
    def local_url(self) -> str:
        return f"http://localhost:{self.PORT}"


@lru_cache
def get_settings(env_file: Optional[str] = ".env") -> Settings:
    """
    Build the process settings once.

    WHY: Only the process entry point calls this. Everything below
    create_app() receives the Settings instance explicitly.
    """
    return Settings(_env_file=env_file)
