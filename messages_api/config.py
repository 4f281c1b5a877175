from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Service
    service_name: str = "messages-api"
    debug: bool = False

    # Database
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "messages"
    db_user: str = "dbadmin"
    db_password: str = ""
    database_url_override: str | None = None

    # Authentication
    jwt_secret_key: str = "change-me"  # noqa: S105
    jwt_algorithm: str = "HS256"
    jwt_issuer: str | None = None
    access_token_expire_minutes: int = 60

    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        return f"postgresql+asyncpg://{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"


settings = Settings()
