from sqlalchemy.orm import declarative_base

from myapp.core.database import DatabaseManager
from myapp2.core.config import settings

# Separate metadata: myapp2 owns its own schema and database
Base = declarative_base()

db_manager = DatabaseManager(
    settings.database_url,
    base=Base,
    echo=settings.app_env == "development" and settings.log_level.upper() == "DEBUG",
)
