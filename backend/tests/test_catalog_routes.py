"""Tests for the category, subcategory and article HTTP API."""

import pytest

ARTICLE = {
    "name": "Dell Inspiron 15",
    "description": "15 inch laptop, 16GB RAM",
    "price": "650000.00",
}


async def create_category(client, name="Computers"):
    response = await client.post("/api/v1/categories", json={"name": name, "description": "All computers"})
    assert response.status_code == 201
    return response.json()


async def create_subcategory(client, category_id, name="Laptops"):
    response = await client.post("/api/v1/subcategories", json={"category_id": category_id, "name": name})
    assert response.status_code == 201
    return response.json()


class TestCategoryEndpoints:
    async def test_create_and_get_by_name(self, client):
        await create_category(client)

        response = await client.get("/api/v1/categories/Computers")

        assert response.status_code == 200
        assert response.json()["description"] == "All computers"

    async def test_duplicate_name_conflicts(self, client):
        await create_category(client)

        response = await client.post("/api/v1/categories", json={"name": "Computers"})

        assert response.status_code == 409

    async def test_name_is_required(self, client):
        response = await client.post("/api/v1/categories", json={"description": "No name"})

        assert response.status_code == 422

    async def test_list(self, client):
        await create_category(client, "Computers")
        await create_category(client, "Phones")

        body = (await client.get("/api/v1/categories")).json()

        assert body["total"] == 2
        assert [c["name"] for c in body["categories"]] == ["Phones", "Computers"]

    async def test_update(self, client):
        await create_category(client)

        response = await client.put("/api/v1/categories/Computers", json={"name": "Computing", "description": None})

        assert response.status_code == 200
        assert response.json()["name"] == "Computing"
        assert (await client.get("/api/v1/categories/Computing")).status_code == 200

    async def test_delete(self, client):
        await create_category(client)

        response = await client.delete("/api/v1/categories/Computers")

        assert response.status_code == 200
        assert response.json()["status"] == "deleted"
        assert (await client.get("/api/v1/categories/Computers")).status_code == 404

    @pytest.mark.parametrize("method", ["get", "delete"])
    async def test_unknown_returns_404(self, client, method):
        response = await getattr(client, method)("/api/v1/categories/Nothing")

        assert response.status_code == 404
        assert response.json() == {"detail": "Category not found."}


class TestSubcategoryEndpoints:
    async def test_create_embeds_category(self, client):
        category = await create_category(client)

        subcategory = await create_subcategory(client, category["id"])

        assert subcategory["name"] == "Laptops"
        assert subcategory["category"]["name"] == "Computers"

    async def test_unknown_category_is_rejected(self, client):
        response = await client.post("/api/v1/subcategories", json={"category_id": 999, "name": "Laptops"})

        assert response.status_code == 422

    async def test_duplicate_in_category_conflicts(self, client):
        category = await create_category(client)
        await create_subcategory(client, category["id"])

        response = await client.post("/api/v1/subcategories", json={"category_id": category["id"], "name": "Laptops"})

        assert response.status_code == 409

    async def test_list_by_category(self, client):
        computers = await create_category(client, "Computers")
        phones = await create_category(client, "Phones")
        await create_subcategory(client, computers["id"], "Laptops")
        await create_subcategory(client, phones["id"], "Android")

        body = (await client.get("/api/v1/subcategories", params={"category_id": phones["id"]})).json()

        assert body["total"] == 1
        assert body["subcategories"][0]["name"] == "Android"
        assert body["subcategories"][0]["category"]["name"] == "Phones"

    async def test_partial_update(self, client):
        category = await create_category(client)
        subcategory = await create_subcategory(client, category["id"])

        response = await client.put(f"/api/v1/subcategories/{subcategory['id']}", json={"description": "Portable"})

        assert response.status_code == 200
        assert response.json()["name"] == "Laptops"
        assert response.json()["description"] == "Portable"

    async def test_update_rejects_null_name(self, client):
        category = await create_category(client)
        subcategory = await create_subcategory(client, category["id"])

        response = await client.put(f"/api/v1/subcategories/{subcategory['id']}", json={"name": None})

        assert response.status_code == 422

    async def test_delete(self, client):
        category = await create_category(client)
        subcategory = await create_subcategory(client, category["id"])

        response = await client.delete(f"/api/v1/subcategories/{subcategory['id']}")

        assert response.status_code == 200
        assert (await client.get(f"/api/v1/subcategories/{subcategory['id']}")).status_code == 404


class TestArticleEndpoints:
    @pytest.fixture
    async def placement(self, client):
        category = await create_category(client)
        subcategory = await create_subcategory(client, category["id"])
        return {"category_id": category["id"], "subcategory_id": subcategory["id"]}

    async def test_create_and_get(self, client, placement):
        response = await client.post("/api/v1/articles", json={**ARTICLE, **placement})

        assert response.status_code == 201
        article_id = response.json()["id"]
        fetched = (await client.get(f"/api/v1/articles/{article_id}")).json()
        assert fetched["name"] == "Dell Inspiron 15"
        assert fetched["subcategory_id"] == placement["subcategory_id"]

    @pytest.mark.parametrize(
        "overrides",
        [{"name": "TV"}, {"description": "Too short"}, {"price": "-1"}],
    )
    async def test_invalid_payload(self, client, placement, overrides):
        response = await client.post("/api/v1/articles", json={**ARTICLE, **placement, **overrides})

        assert response.status_code == 422

    async def test_mismatched_subcategory(self, client, placement):
        phones = await create_category(client, "Phones")

        response = await client.post(
            "/api/v1/articles",
            json={**ARTICLE, "category_id": phones["id"], "subcategory_id": placement["subcategory_id"]},
        )

        assert response.status_code == 422

    async def test_update_replaces_fields(self, client, placement):
        article_id = (await client.post("/api/v1/articles", json={**ARTICLE, **placement})).json()["id"]

        response = await client.put(
            f"/api/v1/articles/{article_id}",
            json={**ARTICLE, **placement, "name": "Dell Inspiron 16", "price": "700000.00"},
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Dell Inspiron 16"

    async def test_list_and_delete(self, client, placement):
        article_id = (await client.post("/api/v1/articles", json={**ARTICLE, **placement})).json()["id"]

        assert (await client.get("/api/v1/articles")).json()["total"] == 1
        assert (await client.delete(f"/api/v1/articles/{article_id}")).status_code == 200
        assert (await client.get("/api/v1/articles")).json()["total"] == 0
        assert (await client.get(f"/api/v1/articles/{article_id}")).status_code == 404
