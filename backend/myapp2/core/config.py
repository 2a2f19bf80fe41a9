from myapp.core.config import Settings as BaseAppSettings


class Settings(BaseAppSettings):
    """Settings of the second application, read from ``MYAPP2_*`` variables."""

    app_port: int = 8081
    app_name: str = "myApp2"

    database_url: str = "sqlite+aiosqlite:///./myapp2.db"


    class Config:
        env_prefix = "myapp2_"
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
