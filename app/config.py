from pydantic_settings import BaseSettings, SettingsConfigDict


def _split_csv(raw_value: str, fallback: list[str]) -> list[str]:
    items = [item.strip() for item in (raw_value or "").split(",") if item.strip()]
    return items or fallback


class Settings(BaseSettings):
    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "http://localhost,http://localhost:80,http://localhost:3000"

    # Database
    DATABASE_PATH: str = "blog.db"
    DATABASE_ECHO: bool = False

    # Posts
    PREVIEW_LENGTH: int = 128
    MAX_IMAGE_BYTES: int = 5 * 1024 * 1024

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    @property
    def database_url(self) -> str:
        return f"sqlite+aiosqlite:///{self.DATABASE_PATH}"

    @property
    def cors_origins(self) -> list[str]:
        return _split_csv(self.CORS_ORIGINS, ["http://localhost"])


settings = Settings()
