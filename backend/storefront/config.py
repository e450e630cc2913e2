from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 8080
    SECRET_KEY: str = "change-this-secret"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    FRONTEND_ORIGINS: List[str] = ["http://localhost:3000"]
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "Admin@123"
    BCRYPT_ROUNDS: int = 12
    DEFAULT_ITEM_STATUS: str = "active"
    PURCHASABLE_STATUSES: List[str] = ["active", "available"]
    SEED_ON_STARTUP: bool = True
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
