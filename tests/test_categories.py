"""Tests for Category API endpoints."""


def _category_names(client, headers):
    return [c["name"] for c in client.get("/api/categories", headers=headers).json()["categories"]]


def test_default_categories_seeded(client, auth_headers):
    """Test the default categories exist at startup, ordered by name."""
    response = client.get("/api/categories", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 3
    assert [c["name"] for c in data["categories"]] == ["In Stock", "Stock Out", "Uncategorized"]


def test_create_category(client, auth_headers):
    response = client.post("/api/categories", json={"name": "  Back Room  "}, headers=auth_headers)

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "Category created successfully"
    assert data["category"]["name"] == "Back Room"
    assert "Back Room" in _category_names(client, auth_headers)


def test_create_category_requires_name(client, auth_headers):
    """Test blank or missing names are rejected with 400."""
    blank = client.post("/api/categories", json={"name": "   "}, headers=auth_headers)
    missing = client.post("/api/categories", json={}, headers=auth_headers)

    assert blank.status_code == 400
    assert missing.status_code == 400
    assert blank.json()["detail"] == "Category name is required"


def test_create_category_name_too_long(client, auth_headers):
    response = client.post("/api/categories", json={"name": "x" * 101}, headers=auth_headers)

    assert response.status_code == 400


def test_create_category_duplicate(client, auth_headers):
    """Test duplicate names conflict, but matching is case-sensitive."""
    duplicate = client.post("/api/categories", json={"name": "In Stock"}, headers=auth_headers)
    other_case = client.post("/api/categories", json={"name": "in stock"}, headers=auth_headers)

    assert duplicate.status_code == 409
    assert other_case.status_code == 201


def test_get_category(client, auth_headers):
    created = client.post("/api/categories", json={"name": "Shelf A"}, headers=auth_headers).json()

    response = client.get(f"/api/categories/{created['category']['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["category"] == created["category"]


def test_get_category_not_found(client, auth_headers):
    response = client.get("/api/categories/9999", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["detail"] == "Category not found"


def test_delete_unused_category(client, auth_headers):
    """Test deleting a category no product uses removes it."""
    created = client.post("/api/categories", json={"name": "Temporary"}, headers=auth_headers).json()
    category_id = created["category"]["id"]

    response = client.delete(f"/api/categories/{category_id}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["category"]["name"] == "Temporary"
    assert "Temporary" not in _category_names(client, auth_headers)
    assert client.get(f"/api/categories/{category_id}", headers=auth_headers).status_code == 404


def test_delete_category_in_use(client, auth_headers, create_product):
    """Test deleting a category with products fails with 409 and keeps it."""
    created = client.post("/api/categories", json={"name": "Busy"}, headers=auth_headers).json()
    create_product(1, "busy-1", category="Busy")

    response = client.delete(f"/api/categories/{created['category']['id']}", headers=auth_headers)

    assert response.status_code == 409
    assert "being used" in response.json()["detail"]
    assert "Busy" in _category_names(client, auth_headers)


def test_delete_category_after_products_move(client, auth_headers, create_product):
    """Test a category can be deleted once its products are moved away."""
    created = client.post("/api/categories", json={"name": "Busy"}, headers=auth_headers).json()
    product = create_product(1, "busy-1", category="Busy")
    client.patch(
        f"/api/products/{product['id']}/category",
        json={"category": "In Stock"},
        headers=auth_headers
    )

    response = client.delete(f"/api/categories/{created['category']['id']}", headers=auth_headers)

    assert response.status_code == 200


def test_delete_category_not_found(client, auth_headers):
    response = client.delete("/api/categories/9999", headers=auth_headers)

    assert response.status_code == 404
