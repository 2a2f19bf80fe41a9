"""Initialize database tables.

Usage: python scripts/init_db.py [create|drop] [myapp|myapp2]
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from myapp.core.database import DatabaseManager
from myapp.core.logger import get_logger


logger = get_logger(__name__)


def load_db_manager(app_name: str) -> DatabaseManager:
    """Import the application so its models register on the right metadata."""
    if app_name == "myapp2":
        from myapp2.main import app
    else:
        from myapp.main import app
    return app.state.db_manager


async def init_database(db_manager: DatabaseManager):
    """Initialize database tables."""
    try:
        logger.info("Creating database tables...")
        await db_manager.create_tables()
        logger.info("Database tables created successfully")
    except Exception as e:
        logger.error(f"Failed to create database tables: {e}")
        raise
    finally:
        await db_manager.close()


async def drop_database(db_manager: DatabaseManager):
    """Drop all database tables."""
    try:
        logger.info("Dropping database tables...")
        await db_manager.drop_tables()
        logger.info("Database tables dropped successfully")
    except Exception as e:
        logger.error(f"Failed to drop database tables: {e}")
        raise
    finally:
        await db_manager.close()


if __name__ == "__main__":
    command = sys.argv[1] if len(sys.argv) > 1 else "create"
    db_manager = load_db_manager(sys.argv[2] if len(sys.argv) > 2 else "myapp")

    if command == "drop":
        asyncio.run(drop_database(db_manager))
    else:
        asyncio.run(init_database(db_manager))
