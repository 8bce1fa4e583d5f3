# dashboard/config.py

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///db.sqlite"  # file in project root
    SQL_ECHO: bool = False

    # Remote user collection consumed by scripts/import_users.py
    USERS_API_URL: str = "https://6972725932c6bacb12c6eec6.mockapi.io/users"
    IMPORT_PAGE_LIMIT: int = 100
    HTTP_TIMEOUT: float = 10.0

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()
