from pydantic_settings import BaseSettings


DEFAULT_JWT_SECRET = "dev-secret-students"


class Settings(BaseSettings):
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    JWT_SECRET: str = DEFAULT_JWT_SECRET
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_MINUTES: int = 60 * 24
    AUTH_ENABLED: bool = True
    SEED_DATA: bool = True
    CORS_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
