# tests/test_products_api.py
PRODUCT = {"name": "Test Product", "description": "Test Description", "price": 100, "stock": 10}

def create(client, **overrides):
    r = client.post("/products", json={**PRODUCT, **overrides})
    assert r.status_code == 201
    return r.json()

def test_create_product(client):
    body = create(client)
    assert body["id"] == 1
    assert body["name"] == "Test Product"
    assert body["description"] == "Test Description"
    assert body["price"] == 100
    assert body["stock"] == 10
    assert body["createdAt"] == body["updatedAt"]

def test_list_products_empty(client):
    r = client.get("/products")
    assert r.status_code == 200
    assert r.json() == []

def test_list_products_in_creation_order(client):
    create(client, name="Test Product 1")
    create(client, name="Test Product 2", price=200, stock=20)
    r = client.get("/products")
    assert r.status_code == 200
    assert [p["name"] for p in r.json()] == ["Test Product 1", "Test Product 2"]
    assert [p["id"] for p in r.json()] == [1, 2]

def test_get_product(client):
    created = create(client)
    r = client.get(f"/products/{created['id']}")
    assert r.status_code == 200
    assert r.json() == created

def test_get_product_not_found(client):
    r = client.get("/products/999")
    assert r.status_code == 404
    assert r.json()["detail"] == "Product with ID 999 not found"

def test_update_product(client):
    created = create(client)
    r = client.patch(f"/products/{created['id']}", json={"name": "Updated Product", "price": 150})
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == created["id"]
    assert body["name"] == "Updated Product"
    assert body["price"] == 150
    assert body["description"] == "Test Description"
    assert body["stock"] == 10
    assert body["createdAt"] == created["createdAt"]

def test_update_ignores_readonly_fields(client):
    created = create(client)
    r = client.patch(f"/products/{created['id']}", json={"id": 50, "createdAt": "2000-01-01T00:00:00Z"})
    assert r.status_code == 200
    assert r.json()["id"] == created["id"]
    assert r.json()["createdAt"] == created["createdAt"]

def test_update_product_not_found(client):
    r = client.patch("/products/999", json={"name": "Updated Product"})
    assert r.status_code == 404
    assert r.json()["detail"] == "Product with ID 999 not found"

def test_update_rejects_invalid_field(client):
    created = create(client)
    r = client.patch(f"/products/{created['id']}", json={"price": -1})
    assert r.status_code == 400
    assert client.get(f"/products/{created['id']}").json()["price"] == 100

def test_delete_product(client):
    created = create(client)
    r = client.delete(f"/products/{created['id']}")
    assert r.status_code == 200
    assert r.json() == {"message": f"Product with ID {created['id']} has been deleted"}
    assert client.get(f"/products/{created['id']}").status_code == 404
    assert client.get("/products").json() == []

def test_delete_product_not_found(client):
    r = client.delete("/products/999")
    assert r.status_code == 404

def test_create_rejects_invalid_body(client, store):
    for bad in (
        {**PRODUCT, "name": "x"},
        {**PRODUCT, "price": 0},
        {**PRODUCT, "stock": "ten"},
        {"name": "Only Name"},
    ):
        r = client.post("/products", json=bad)
        assert r.status_code == 400
        assert isinstance(r.json()["detail"], list)
    assert len(store) == 0

def test_non_integer_id_is_rejected(client):
    assert client.get("/products/abc").status_code == 400

def test_health(client):
    create(client)
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "service": "product-store", "products": 1}

def test_apps_do_not_share_state(client):
    from fastapi.testclient import TestClient
    from app.main import create_app

    create(client)
    other = TestClient(create_app())
    assert other.get("/products").json() == []

def test_non_finite_numbers_are_rejected(client, store):
    # Python's json module parses these literals, so they reach validation
    for raw in (
        '{"name":"Inf","description":"","price":Infinity,"stock":1}',
        '{"name":"Nan","description":"","price":1,"stock":NaN}',
    ):
        r = client.post("/products", content=raw, headers={"content-type": "application/json"})
        assert r.status_code == 400
    assert len(store) == 0

    created = create(client)
    r = client.patch(f"/products/{created['id']}", content='{"price":Infinity}',
                     headers={"content-type": "application/json"})
    assert r.status_code == 400
    assert client.get(f"/products/{created['id']}").json()["price"] == 100

def test_validation_errors_name_the_field(client):
    r = client.post("/products", content='{"name":"Inf","description":"","price":Infinity,"stock":1}',
                    headers={"content-type": "application/json"})
    assert r.status_code == 400
    locs = [e["loc"] for e in r.json()["detail"]]
    assert ["body", "price"] in [loc[:2] for loc in locs]
    assert all("input" not in e for e in r.json()["detail"])
