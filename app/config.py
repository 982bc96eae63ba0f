# app/config.py
from pydantic_settings import BaseSettings
from typing import Optional
from pydantic import Field

class Settings(BaseSettings):
    SECRET_KEY: str = Field("change-me-in-production")
    ALGORITHM: str = Field("HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(30)
    REFRESH_TOKEN_EXPIRE_DAYS: int = Field(7)

    DATABASE_URL: str = Field("sqlite+aiosqlite:///./kpi_dashboard.db")
    SQLALCHEMY_DATABASE_URL: Optional[str] = None
    SQL_ECHO: bool = Field(False)

    LOG_LEVEL: str = Field("INFO")

    # Seeded on first startup when admin_users is empty
    DEFAULT_ADMIN_EMAIL: str = Field("admin@example.com")
    DEFAULT_ADMIN_PASSWORD: str = Field("change-me-now")
    DEFAULT_ADMIN_NAME: str = Field("Admin")

    # Operating calendar used to derive annual targets (monthly × periods)
    ANNUAL_PERIODS: int = Field(13, ge=1)

    # metric | role | role_with_fallback
    TARGET_LOOKUP: str = Field("role_with_fallback", pattern="^(metric|role|role_with_fallback)$")

    model_config = {
        "env_file": ".env",
        "extra": "allow",
    }

    @property
    def effective_database_url(self) -> str:
        url = self.SQLALCHEMY_DATABASE_URL or self.DATABASE_URL or "sqlite+aiosqlite:///./kpi_dashboard.db"
        # Ensure asyncpg is used
        if url.startswith("postgresql://") and "+asyncpg" not in url:
            url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url

settings = Settings()
