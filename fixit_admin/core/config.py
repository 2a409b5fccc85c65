
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Page sizes offered by the "Rows per page" selector.
PAGE_SIZE_OPTIONS = (5, 10, 20, 30, 40, 50)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "FixIt Admin"
    app_env: str = "development"
    app_port: int = 8000
    frontend_url: str = "http://localhost:3000"

    # Upstream REST backend (json-server style store)
    backend_api_url: str = Field(
        default="http://localhost:3001", alias="BACKEND_API_URL",
    )
    backend_timeout: float = Field(default=10.0, alias="BACKEND_TIMEOUT")
    backend_api_token: str | None = Field(default=None, alias="BACKEND_API_TOKEN")

    # Local store for auth sessions and the audit trail
    database_url: str = Field(
        default="sqlite+aiosqlite:///./fixit_admin.db",
        alias="DATABASE_URL",
    )
    auto_create_tables: bool = Field(default=True, alias="AUTO_CREATE_TABLES")

    # Auth sessions
    session_ttl_minutes: int = Field(default=720, alias="SESSION_TTL_MINUTES")

    # List views
    default_page_size: int = Field(default=10, alias="DEFAULT_PAGE_SIZE")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @field_validator("default_page_size")
    @classmethod
    def _known_page_size(cls, value: int) -> int:
        if value not in PAGE_SIZE_OPTIONS:
            raise ValueError(f"DEFAULT_PAGE_SIZE must be one of {list(PAGE_SIZE_OPTIONS)}")
        return value

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

settings = Settings()
