import pytest

from app.database import reset_products


@pytest.fixture(autouse=True)
def seeded_store():
    reset_products()
    yield
    reset_products()
