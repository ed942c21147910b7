# app/main.py
import logging
from typing import List, Optional

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Settings, configure_logging, get_settings
from .core import ProductIn, ProductUpdate
from .database import ProductStore
from .handlers import (
    create_product_logic, delete_product_logic, get_product_logic,
    health_logic, list_products_logic, update_product_logic
)
from .models import DeleteResponse, HealthResponse, Product

logger = logging.getLogger(__name__)

def get_store(request: Request) -> ProductStore:
    return request.app.state.store

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # client errors are 400 here; raw inputs are dropped since NaN/Infinity can't be encoded
    errors = [{k: v for k, v in e.items() if k != "input"} for e in exc.errors()]
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(errors)})

def create_app(store: Optional[ProductStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title=settings.title)
    app.state.store = store if store is not None else ProductStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # ---------------------------
    # Product endpoints
    # ---------------------------
    @app.post("/products", response_model=Product, status_code=201)
    async def create_product(payload: ProductIn, store: ProductStore = Depends(get_store)):
        return await create_product_logic(store, payload)

    @app.get("/products", response_model=List[Product])
    async def list_products(store: ProductStore = Depends(get_store)):
        return await list_products_logic(store)

    @app.get("/products/{product_id}", response_model=Product)
    async def get_product(product_id: int, store: ProductStore = Depends(get_store)):
        return await get_product_logic(store, product_id)

    @app.patch("/products/{product_id}", response_model=Product)
    async def update_product(product_id: int, payload: ProductUpdate, store: ProductStore = Depends(get_store)):
        return await update_product_logic(store, product_id, payload)

    @app.delete("/products/{product_id}", response_model=DeleteResponse)
    async def delete_product(product_id: int, store: ProductStore = Depends(get_store)):
        return await delete_product_logic(store, product_id)

    # ---------------------------
    # Health
    # ---------------------------
    @app.get("/health", response_model=HealthResponse)
    async def health(store: ProductStore = Depends(get_store)):
        return await health_logic(store)

    return app

app = create_app()

def run():
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("serving %s on %s:%s", settings.title, settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())

if __name__ == "__main__":
    run()
