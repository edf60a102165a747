# sdk/catalog.py
import argparse
import logging
import os
from decimal import Decimal, InvalidOperation
from typing import List, Optional

import httpx
import requests
from dotenv import load_dotenv

from app.models import Product, ProductIn

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = os.getenv("CATALOG_API_URL", "http://localhost:5219/api")


class CatalogClientError(Exception):
    """The catalog API was reached but answered with a non-success status."""


class CatalogFetchError(CatalogClientError):
    pass


class CatalogCreateError(CatalogClientError):
    pass


def _rejected(error_cls, message: str, status_code: int) -> CatalogClientError:
    logger.warning("%s (HTTP %s)", message, status_code)
    return error_cls(message)


def price_arg(raw: str) -> Decimal:
    """argparse type for --price: a finite decimal number."""
    try:
        price = Decimal(raw)
    except InvalidOperation:
        price = None
    if price is None or not price.is_finite():
        raise argparse.ArgumentTypeError(f"invalid price: {raw!r}")
    return price


class CatalogClient:
    """
    Blocking client for the catalog API.

    Non-2xx answers become CatalogFetchError / CatalogCreateError. Connection
    problems surface as the requests exception that caused them.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: Optional[float] = None):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.timeout = timeout

    def fetch_all(self) -> List[Product]:
        r = self.session.get(f"{self.base_url}/products", timeout=self.timeout)
        if not r.ok:
            raise _rejected(CatalogFetchError, "Failed to fetch products", r.status_code)
        return [Product.model_validate(p) for p in r.json()]

    def fetch_one(self, product_id: int) -> Product:
        r = self.session.get(f"{self.base_url}/products/{product_id}", timeout=self.timeout)
        if not r.ok:
            raise _rejected(CatalogFetchError, "Failed to fetch product", r.status_code)
        return Product.model_validate(r.json())

    def create(self, candidate: ProductIn) -> Product:
        r = self.session.post(
            f"{self.base_url}/products",
            json=candidate.model_dump(mode="json"),
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )
        if not r.ok:
            raise _rejected(CatalogCreateError, "Failed to create product", r.status_code)
        return Product.model_validate(r.json())


class AsyncCatalogClient:
    """Same operations as CatalogClient, as coroutines over httpx."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: Optional[float] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    async def fetch_all(self) -> List[Product]:
        async with self._client() as client:
            r = await client.get(f"{self.base_url}/products")
        if not r.is_success:
            raise _rejected(CatalogFetchError, "Failed to fetch products", r.status_code)
        return [Product.model_validate(p) for p in r.json()]

    async def fetch_one(self, product_id: int) -> Product:
        async with self._client() as client:
            r = await client.get(f"{self.base_url}/products/{product_id}")
        if not r.is_success:
            raise _rejected(CatalogFetchError, "Failed to fetch product", r.status_code)
        return Product.model_validate(r.json())

    async def create(self, candidate: ProductIn) -> Product:
        async with self._client() as client:
            r = await client.post(
                f"{self.base_url}/products",
                json=candidate.model_dump(mode="json"),
                headers={"Content-Type": "application/json"},
            )
        if not r.is_success:
            raise _rejected(CatalogCreateError, "Failed to create product", r.status_code)
        return Product.model_validate(r.json())


if __name__ == "__main__":
    from rich import print

    parser = argparse.ArgumentParser(description="Catalog API client")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="Catalog API base URL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list-products", help="List all products")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", type=int, required=True, help="ID of the product")

    cp = subparsers.add_parser("create-product", help="Create a new product")
    cp.add_argument("--name", required=True, help="Product name")
    cp.add_argument("--price", type=price_arg, required=True, help="Price, e.g. 19.99")
    cp.add_argument("--description", default="", help="Product description")

    args = parser.parse_args()
    c = CatalogClient(base_url=args.base_url)

    if args.command == "list-products":
        print(c.fetch_all())
    elif args.command == "get-product":
        print(c.fetch_one(args.product_id))
    elif args.command == "create-product":
        print(c.create(ProductIn(name=args.name, price=args.price, description=args.description)))
