import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional

from .database import PRODUCTS, _LOCK
from .models import Product, ProductIn

logger = logging.getLogger(__name__)

# This file contains the catalog store operations.


class Outcome(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    REJECTED = "rejected"


@dataclass(frozen=True)
class Result:
    outcome: Outcome
    value: Optional[Any] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK


def _next_id() -> int:
    # caller holds _LOCK; an empty catalog starts at 1
    return max((p.id for p in PRODUCTS), default=0) + 1


def list_products() -> List[Product]:
    with _LOCK:
        return list(PRODUCTS)


def get_product(product_id: int) -> Result:
    with _LOCK:
        for p in PRODUCTS:
            if p.id == product_id:
                return Result(Outcome.OK, p)
    return Result(Outcome.NOT_FOUND)


def create_product(candidate: ProductIn) -> Result:
    """
    Store a new product built from candidate and return it with its assigned id.

    Any id carried by the candidate is discarded. Reading the max id and
    appending happen under one lock acquisition so concurrent creations
    never share an id.
    """
    fields = candidate.model_dump(include={"name", "price", "description"})
    with _LOCK:
        product = Product(id=_next_id(), **fields)
        PRODUCTS.append(product)
    logger.info("created product %d (%s)", product.id, product.name)
    return Result(Outcome.OK, product)
