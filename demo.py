#!/usr/bin/env python
from decimal import Decimal

from app.models import ProductIn
from sdk.catalog import CatalogClient, CatalogFetchError


def main():
    c = CatalogClient(base_url="http://127.0.0.1:5219/api")

    # -----------------------------
    # List seeded products
    # -----------------------------
    print("Listing products...")
    for p in c.fetch_all():
        print(f"  {p.id}: {p.name} ${p.price:.2f}")

    # -----------------------------
    # Create a product
    # -----------------------------
    print("\nCreating product...")
    created = c.create(ProductIn(name="Monitor", price=Decimal("189.50"), description="27-inch IPS monitor"))
    print(created)

    # -----------------------------
    # Fetch it back
    # -----------------------------
    print(f"\nFetching product {created.id}...")
    print(c.fetch_one(created.id))

    # -----------------------------
    # Unknown id
    # -----------------------------
    print("\nFetching product 999...")
    try:
        c.fetch_one(999)
    except CatalogFetchError as e:
        print(f"  {e}")


if __name__ == "__main__":
    main()
