# tests/test_store.py
from decimal import Decimal

import pytest
from pydantic import ValidationError

from app import core
from app.core import Outcome
from app.database import PRODUCTS, _LOCK
from app.models import Product, ProductIn


def _candidate(name="Test Product", price="19.99", description="A test product"):
    return ProductIn(name=name, price=Decimal(price), description=description)


def test_seeded_products_in_order():
    products = core.list_products()
    assert [(p.id, p.name, p.price, p.description) for p in products] == [
        (1, "Laptop", Decimal("999.99"), "High-performance laptop"),
        (2, "Mouse", Decimal("29.99"), "Wireless optical mouse"),
        (3, "Keyboard", Decimal("79.99"), "Mechanical gaming keyboard"),
    ]


def test_get_product_hits_every_held_id():
    for p in core.list_products():
        result = core.get_product(p.id)
        assert result.outcome is Outcome.OK
        assert result.value == p


def test_get_product_unknown_id():
    for pid in (0, -1, 4, 999):
        result = core.get_product(pid)
        assert result.outcome is Outcome.NOT_FOUND
        assert result.value is None
        assert not result.ok


def test_create_assigns_next_id():
    result = core.create_product(_candidate())
    assert result.ok
    assert result.value == Product(id=4, name="Test Product", price=Decimal("19.99"), description="A test product")
    assert len(core.list_products()) == 4
    assert core.get_product(4).value == result.value


def test_sequential_creations():
    n = 7
    created = [core.create_product(_candidate(name=f"p{i}")).value for i in range(1, n + 1)]
    assert [p.id for p in created] == [3 + i for i in range(1, n + 1)]
    assert len(core.list_products()) == 3 + n


def test_creations_interleaved_with_reads():
    first = core.create_product(_candidate(name="a")).value
    core.list_products()
    core.get_product(first.id)
    second = core.create_product(_candidate(name="b")).value
    assert (first.id, second.id) == (4, 5)


def test_create_ignores_candidate_id():
    candidate = Product(id=100, name="Sneaky", price=Decimal("1.00"), description="")
    created = core.create_product(candidate).value
    assert created.id == 4
    assert core.get_product(100).outcome is Outcome.NOT_FOUND


def test_create_id_follows_max_not_count():
    with _LOCK:
        PRODUCTS.append(Product(id=10, name="Gap", price=Decimal("2.50"), description=""))
    assert core.create_product(_candidate()).value.id == 11


def test_create_on_empty_store_starts_at_one():
    with _LOCK:
        PRODUCTS.clear()
    assert core.list_products() == []
    assert core.create_product(_candidate()).value.id == 1


def test_no_content_validation():
    created = core.create_product(ProductIn(name="", price=Decimal("0"), description="")).value
    assert created.id == 4
    assert created.name == ""


def test_list_returns_snapshot():
    snapshot = core.list_products()
    core.create_product(_candidate())
    assert len(snapshot) == 3


def test_stored_products_cannot_be_changed_in_place():
    laptop = core.get_product(1).value
    with pytest.raises(ValidationError):
        laptop.price = Decimal("0.01")
    with pytest.raises(ValidationError):
        core.list_products()[1].name = "Renamed"
    assert core.get_product(1).value.price == Decimal("999.99")
    assert core.get_product(2).value.name == "Mouse"
