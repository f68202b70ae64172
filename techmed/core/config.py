from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
import os


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "TechMed"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    TESTING: bool = os.getenv("TESTING", "0").lower() in ("1", "true", "t", "yes", "y")
    LOG_LEVEL: str = "INFO"
    API_V1_PREFIX: str = "/api/v1"

    # Database - SQLite by default, PostgreSQL through DATABASE_URL
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./techmed.db")
    TEST_DATABASE_URL: str = os.getenv(
        "TEST_DATABASE_URL",
        "sqlite:///./techmed_test.db"
    )

    # CORS - only the front-end is allowed
    FRONTEND_ORIGIN: str = "http://localhost:3000"
    ALLOWED_HOSTS: List[str] = ["localhost", "127.0.0.1", "*.localhost", "testserver"]

    @property
    def get_database_url(self):
        """Return the appropriate database URL based on if we're testing"""
        if self.TESTING:
            return self.TEST_DATABASE_URL
        return self.DATABASE_URL

    @property
    def allowed_origins(self) -> List[str]:
        return [self.FRONTEND_ORIGIN]

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Create settings instance
settings = Settings()
