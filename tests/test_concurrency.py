# tests/test_concurrency.py
import asyncio
from concurrent.futures import ThreadPoolExecutor

import httpx

from app.core import ProductIn, ProductUpdate
from app.database import ProductStore

def _input(n):
    return ProductIn(name=f"Item {n}", description="", price=1 + n, stock=1)

def test_threaded_creates_get_unique_ids():
    store = ProductStore()
    with ThreadPoolExecutor(max_workers=8) as pool:
        products = list(pool.map(lambda n: store.create(_input(n)), range(200)))
    ids = [p.id for p in products]
    assert sorted(ids) == list(range(1, 201))
    assert [p.id for p in store.find_all()] == list(range(1, 201))

def test_threaded_mixed_writes_keep_counter_monotonic():
    store = ProductStore()
    for n in range(50):
        store.create(_input(n))

    def work(n):
        if n % 2:
            store.remove(n)
        else:
            store.update(n, ProductUpdate(stock=n))
        return store.create(_input(n)).id

    with ThreadPoolExecutor(max_workers=8) as pool:
        new_ids = list(pool.map(work, range(1, 51)))
    assert sorted(new_ids) == list(range(51, 101))
    assert len(store) == 75

async def _create_task(client, n):
    r = await client.post("/products", json={"name": f"Item {n}", "description": "", "price": 10, "stock": 1})
    return r

def test_concurrent_http_creates(app):
    async def run():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
            return await asyncio.gather(*(_create_task(ac, n) for n in range(20)))

    results = asyncio.run(run())
    assert all(r.status_code == 201 for r in results)
    assert sorted(r.json()["id"] for r in results) == list(range(1, 21))
