from typing import List

from fastapi import HTTPException

from .core import ProductIn, ProductUpdate
from .database import ProductStore
from .exceptions import ProductNotFound
from .models import DeleteResponse, HealthResponse, Product

# Endpoint logic. Store errors are turned into HTTP errors here so the
# routes in main.py stay thin.

def _not_found(exc: ProductNotFound) -> HTTPException:
    return HTTPException(status_code=404, detail=str(exc))

async def create_product_logic(store: ProductStore, payload: ProductIn) -> Product:
    return store.create(payload)

async def list_products_logic(store: ProductStore) -> List[Product]:
    return store.find_all()

async def get_product_logic(store: ProductStore, product_id: int) -> Product:
    try:
        return store.find_one(product_id)
    except ProductNotFound as e:
        raise _not_found(e)

async def update_product_logic(store: ProductStore, product_id: int, payload: ProductUpdate) -> Product:
    try:
        return store.update(product_id, payload)
    except ProductNotFound as e:
        raise _not_found(e)

async def delete_product_logic(store: ProductStore, product_id: int) -> DeleteResponse:
    try:
        return DeleteResponse(message=store.remove(product_id))
    except ProductNotFound as e:
        raise _not_found(e)

async def health_logic(store: ProductStore) -> HealthResponse:
    return HealthResponse(status="ok", service="product-store", products=len(store))
