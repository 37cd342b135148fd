"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.inventory_api.api.http.app_data import ApplicationDependencies
from src.inventory_api.core.services import DbSessionService, InventoryService
from src.inventory_api.entities.service.product import ProductRepository


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Yield a request-scoped database session, closed when the request ends."""
    with database_service.get_session() as session:
        yield session


def get_product_repository(
    db: Session = Depends(get_db_session),
) -> ProductRepository:
    return ProductRepository(db)


def get_inventory_service(
    repository: ProductRepository = Depends(get_product_repository),
) -> InventoryService:
    """Get the inventory service bound to this request's repository."""
    return InventoryService(repository)
