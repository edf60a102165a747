import asyncio
from decimal import Decimal

from app.models import ProductIn
from sdk.catalog import AsyncCatalogClient


async def create_one(client: AsyncCatalogClient, n: int):
    product = await client.create(ProductIn(name=f"Widget {n}", price=Decimal("4.99"), description="bulk item"))
    print(f"✅ Widget {n} stored with id {product.id}")
    return product.id


async def main():
    c = AsyncCatalogClient(base_url="http://127.0.0.1:5219/api")

    print("\n⚡ Creating products concurrently...")
    ids = await asyncio.gather(*(create_one(c, n) for n in range(10)))

    assert len(set(ids)) == len(ids), f"duplicate ids assigned: {sorted(ids)}"
    print(f"\n📦 Assigned ids: {sorted(ids)}")
    print(f"📦 Catalog size: {len(await c.fetch_all())}")


if __name__ == "__main__":
    asyncio.run(main())
