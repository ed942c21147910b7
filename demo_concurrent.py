import asyncio

from app.config import get_settings
from sdk.pystore import StoreClient

async def create_one(client, n):
    product = await client.create_product_async(f"Item {n}", "concurrent demo", 10 + n, 1)
    print(f"✅ Item {n} stored with ID {product['id']}")
    return product["id"]

async def main():
    c = StoreClient(base_url=get_settings().base_url)

    print("\n⚡ Creating products concurrently...")
    ids = await asyncio.gather(*(create_one(c, n) for n in range(10)))

    # ids must all differ no matter how the requests interleaved
    print(f"\n🧾 {len(ids)} products, {len(set(ids))} distinct IDs: {sorted(ids)}")
    print("📦 Total in store:", len(c.list_products()))

if __name__ == "__main__":
    asyncio.run(main())
