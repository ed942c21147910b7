# sdk/pystore.py
import argparse
import os
from typing import Any, Dict, Optional

import httpx
import requests
from rich import print

DEFAULT_BASE_URL = "http://127.0.0.1:8085"


class StoreAPIError(Exception):
    """Non-2xx answer from the product store."""

    def __init__(self, status_code: int, detail: Any):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"HTTP {status_code}: {detail}")


class ProductNotFoundError(StoreAPIError):
    pass


class ValidationFailedError(StoreAPIError):
    pass


def _detail(r) -> Any:
    try:
        body = r.json()
    except ValueError:
        return r.text
    return body.get("detail") if isinstance(body, dict) else body


def _handle(r) -> Any:
    # works for both requests and httpx responses
    if r.status_code == 404:
        raise ProductNotFoundError(404, _detail(r))
    if r.status_code in (400, 422):
        raise ValidationFailedError(r.status_code, _detail(r))
    r.raise_for_status()
    return r.json()


class StoreClient:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: int = 10,
                 session=None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.transport = transport

    def health(self):
        r = self.session.get(f"{self.base_url}/health", timeout=self.timeout)
        return _handle(r)

    # Products
    def create_product(self, name: str, description: str, price: float, stock: float):
        r = self.session.post(f"{self.base_url}/products", json={
            "name": name, "description": description, "price": price, "stock": stock
        }, timeout=self.timeout)
        return _handle(r)

    def list_products(self):
        r = self.session.get(f"{self.base_url}/products", timeout=self.timeout)
        return _handle(r)

    def get_product(self, product_id: int):
        r = self.session.get(f"{self.base_url}/products/{product_id}", timeout=self.timeout)
        return _handle(r)

    def update_product(self, product_id: int, **fields):
        # only send what the caller set, so the rest stays untouched server-side
        payload: Dict[str, Any] = {k: v for k, v in fields.items() if v is not None}
        r = self.session.patch(f"{self.base_url}/products/{product_id}", json=payload, timeout=self.timeout)
        return _handle(r)

    def delete_product(self, product_id: int):
        r = self.session.delete(f"{self.base_url}/products/{product_id}", timeout=self.timeout)
        return _handle(r)

    # Async variants
    def _async_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout, transport=self.transport)

    async def create_product_async(self, name: str, description: str, price: float, stock: float):
        async with self._async_client() as client:
            r = await client.post("/products", json={
                "name": name, "description": description, "price": price, "stock": stock
            })
            return _handle(r)

    async def get_product_async(self, product_id: int):
        async with self._async_client() as client:
            r = await client.get(f"/products/{product_id}")
            return _handle(r)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Product store CLI")
    parser.add_argument("--base-url", default=os.environ.get("PRODUCT_STORE_URL", DEFAULT_BASE_URL),
                        help="Base URL of the product store API")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list-products", help="List all products")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", type=int, required=True, help="ID of the product")

    cp = subparsers.add_parser("create-product", help="Create a new product")
    cp.add_argument("--name", required=True, help="Product name")
    cp.add_argument("--description", default="", help="Product description")
    cp.add_argument("--price", type=float, required=True, help="Unit price")
    cp.add_argument("--stock", type=float, required=True, help="Units in stock")

    up = subparsers.add_parser("update-product", help="Update some fields of a product")
    up.add_argument("--product-id", type=int, required=True, help="ID of the product")
    up.add_argument("--name", help="New name")
    up.add_argument("--description", help="New description")
    up.add_argument("--price", type=float, help="New price")
    up.add_argument("--stock", type=float, help="New stock")

    dp = subparsers.add_parser("delete-product", help="Delete a product")
    dp.add_argument("--product-id", type=int, required=True, help="ID of the product")

    subparsers.add_parser("health", help="Check the service")

    args = parser.parse_args(argv)
    c = StoreClient(base_url=args.base_url)

    try:
        if args.command == "list-products":
            print(c.list_products())
        elif args.command == "get-product":
            print(c.get_product(args.product_id))
        elif args.command == "create-product":
            print(c.create_product(args.name, args.description, args.price, args.stock))
        elif args.command == "update-product":
            print(c.update_product(args.product_id, name=args.name, description=args.description,
                                   price=args.price, stock=args.stock))
        elif args.command == "delete-product":
            print(c.delete_product(args.product_id))
        elif args.command == "health":
            print(c.health())
    except StoreAPIError as e:
        print(f"[red]{e}[/red]")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
