"""Product API router: CRUD, stock adjustments and the low-stock report.

Bodies are taken as plain JSON objects and handed to the inventory service,
which owns all field validation. Domain errors propagate to the exception
handlers registered in app.py.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from src.inventory_api.api.http.deps import get_inventory_service
from src.inventory_api.core.services import InventoryService
from src.inventory_api.entities.service.product import Product

router = APIRouter(prefix="/products", tags=["products"])

JsonObject = dict[str, Any] | None


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: JsonObject = Body(default=None),
    service: InventoryService = Depends(get_inventory_service),
) -> Product:
    """Create a new product."""
    return service.create_product(payload or {})


@router.get("", response_model=list[Product])
def list_products(
    service: InventoryService = Depends(get_inventory_service),
) -> list[Product]:
    """List all products, newest first."""
    return service.list_products()


# Declared before /{product_id} so "low-stock" is not captured as an id
@router.get("/low-stock", response_model=list[Product])
def list_low_stock_products(
    service: InventoryService = Depends(get_inventory_service),
) -> list[Product]:
    """List products below their low-stock threshold, lowest stock first."""
    return service.list_low_stock()


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: str,
    service: InventoryService = Depends(get_inventory_service),
) -> Product:
    """Get a product by ID."""
    return service.get_product(product_id)


@router.put("/{product_id}", response_model=Product)
def update_product(
    product_id: str,
    payload: JsonObject = Body(default=None),
    service: InventoryService = Depends(get_inventory_service),
) -> Product:
    """Update the fields present in the body; absent fields are left unchanged."""
    return service.update_product(product_id, payload or {})


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: str,
    service: InventoryService = Depends(get_inventory_service),
) -> Response:
    """Delete a product."""
    service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{product_id}/increase-stock", response_model=Product)
def increase_stock(
    product_id: str,
    payload: JsonObject = Body(default=None),
    service: InventoryService = Depends(get_inventory_service),
) -> Product:
    """Add ``quantity`` units to a product's stock."""
    return service.increase_stock(product_id, (payload or {}).get("quantity"))


@router.post("/{product_id}/decrease-stock", response_model=Product)
def decrease_stock(
    product_id: str,
    payload: JsonObject = Body(default=None),
    service: InventoryService = Depends(get_inventory_service),
) -> Product:
    """Remove ``quantity`` units from a product's stock; never goes below zero."""
    return service.decrease_stock(product_id, (payload or {}).get("quantity"))
