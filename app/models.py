# app/models.py
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, field_serializer


class ProductIn(BaseModel):
    name: str
    price: Decimal
    description: str

    # prices go over the wire as JSON numbers, not strings
    @field_serializer("price", when_used="json")
    def _price_as_number(self, price: Decimal) -> float:
        return float(price)


class Product(ProductIn):
    # stored products are never changed in place
    model_config = ConfigDict(frozen=True)

    id: int
