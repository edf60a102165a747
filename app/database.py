import threading
from decimal import Decimal
from typing import List

from .models import Product

# This file holds the in-memory product list and the lock that guards it.

SEED_PRODUCTS = (
    Product(id=1, name="Laptop", price=Decimal("999.99"), description="High-performance laptop"),
    Product(id=2, name="Mouse", price=Decimal("29.99"), description="Wireless optical mouse"),
    Product(id=3, name="Keyboard", price=Decimal("79.99"), description="Mechanical gaming keyboard"),
)

PRODUCTS: List[Product] = []
_LOCK = threading.Lock()


def reset_products() -> None:
    """Restore the seeded catalog (tests and demos)."""
    with _LOCK:
        PRODUCTS.clear()
        PRODUCTS.extend(p.model_copy() for p in SEED_PRODUCTS)


reset_products()
