"""Configuration and environment settings"""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    """Application configuration"""

    # Output
    FRONTEND_DIR: str = "../frontend"
    UPLOAD_DIR: str = "uploads"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # console | json

    # Parsing
    EMPTY_UI_COMPONENT_POLICY: str = "default"  # default | omit

    # Generation
    APP_TITLE: str = "Admin Panel"
    API_BASE_URL: str = "http://localhost:5000/api"
    LANGUAGES: str = "en,fr,ar"
    DEFAULT_LANGUAGE: str = "en"
    MAX_LISTING_COLUMNS: int = 7
    MOCK_ROW_COUNT: int = 13

    # Scaffolding (npm / vite / shadcn)
    SCAFFOLD_ENABLED: bool = False
    NPM_COMMAND: str = "npm"
    NPX_COMMAND: str = "npx"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"

    def get_languages(self) -> List[str]:
        """Get configured translation languages"""
        languages = [lang.strip() for lang in self.LANGUAGES.split(",") if lang.strip()]
        return languages or [self.DEFAULT_LANGUAGE]

    def get_frontend_path(self) -> Path:
        """Get generated frontend root path"""
        return Path(self.FRONTEND_DIR).resolve()

    def get_upload_path(self) -> Path:
        """Get temporary upload directory path"""
        path = Path(self.UPLOAD_DIR)
        path.mkdir(parents=True, exist_ok=True)
        return path


settings = Settings()
