from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_env: str = "development"
    app_host: str = "0.0.0.0"
    app_port: int = 8080
    log_level: str = "INFO"

    # Name used in alert headers (X-<app_name>-alert) and alert messages
    app_name: str = "myApp"
    api_prefix: str = "/api"

    # Database
    database_url: str = "sqlite+aiosqlite:///./myapp.db"
    database_create_tables: bool = True


    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
