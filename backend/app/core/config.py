import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    DATABASE_URL: str = "sqlite+aiosqlite:///./employee_directory.db"
    DATABASE_ECHO: bool = False
    SEED_SAMPLE_DATA: bool = True

    SECRET_KEY: str = "change-me-in-production"
    JWT_ALGORITHM: str = "HS256"
    SESSION_EXPIRE_MINUTES: int = 30
    SESSION_COOKIE_NAME: str = "employee_directory_session"
    SESSION_COOKIE_SECURE: bool = False

    PASSWORD_MIN_LENGTH: int = 6
    PASSWORD_REQUIRE_DIGIT: bool = True
    BCRYPT_ROUNDS: int = 12

    CORS_ORIGINS: list[str] = ["http://localhost:5173"]

    DEFAULT_PAGE_SIZE: int = 10

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
