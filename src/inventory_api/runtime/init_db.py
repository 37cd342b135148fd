"""Database initialization script."""

from src.inventory_api.core.services.database.db_session import DbSessionService
from src.inventory_api.core.services.database.db_manage import DbManageService


def init_db() -> None:
    """Create all database tables."""
    DbManageService(DbSessionService().engine).create_all()


if __name__ == "__main__":
    init_db()
