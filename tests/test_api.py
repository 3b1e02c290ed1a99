"""
==============================================================================
API Integration Tests
==============================================================================

Tests for the REST endpoints, using an in-process client.

==============================================================================
"""

import json

import pytest
from fastapi.testclient import TestClient

from coffeeshop.application import Application
from coffeeshop.catalog import MemoryStore, Product, ProductNotFoundError
from coffeeshop.core.exceptions import ConfigurationError


JSON_CONTENT_TYPE = "application/json; charset=utf-8"


class UnserializableProduct:
    """Stand-in whose wire form cannot be encoded as JSON."""

    id = "1"

    def to_wire(self):
        return {"id": self.id, "price": object()}


class BrokenStore:
    """Store returning products that fail to serialize."""

    def get_all(self):
        return [UnserializableProduct()]

    def get_product(self, product_id):
        if product_id != "1":
            raise ProductNotFoundError(product_id)
        return UnserializableProduct()

    def get_coffee(self):
        return [UnserializableProduct()]

    def get_tea(self):
        return []


class TestListProducts:
    """Tests for GET /products."""

    def test_returns_200_on_valid_request(self, client: TestClient):
        response = client.get("/products")
        assert response.status_code == 200

    def test_returns_all_products(self, client: TestClient, inventory):
        response = client.get("/products")
        assert response.status_code == 200

        got = sorted(response.json(), key=lambda p: p["id"])
        want = [inventory[key].to_wire() for key in sorted(inventory)]
        assert got == want

    def test_returns_seeded_products(self, make_client, two_coffees_store: MemoryStore):
        client = make_client(two_coffees_store)
        response = client.get("/products")

        assert response.status_code == 200
        got = sorted(response.json(), key=lambda p: p["id"])
        assert got == [
            {"id": "1", "type": "", "brand": "Segafredo", "name": "Coffee"},
            {"id": "2", "type": "", "brand": "illy", "name": "Coffee"},
        ]

    def test_empty_catalog_returns_empty_array(self, make_client):
        client = make_client(MemoryStore({}))
        response = client.get("/products")

        assert response.status_code == 200
        assert response.json() == []

    def test_body_is_pretty_printed_json(self, client: TestClient):
        response = client.get("/products")

        assert response.headers["content-type"] == JSON_CONTENT_TYPE
        assert response.text == json.dumps(response.json(), indent=2, ensure_ascii=False)
        assert "Caffé Crema Gustoso" in response.text

    def test_serialization_failure_returns_500(self, make_client):
        client = make_client(BrokenStore())
        response = client.get("/products")
        assert response.status_code == 500


class TestGetProduct:
    """Tests for GET /products/{id}."""

    def test_returns_single_product(self, client: TestClient, inventory):
        response = client.get("/products/1")
        assert response.status_code == 200
        assert response.headers["content-type"] == JSON_CONTENT_TYPE

        got = Product.model_validate(response.json())
        assert got == inventory["1"]

    def test_returns_404_on_not_existing_product(self, client: TestClient):
        response = client.get("/products/20")

        assert response.status_code == 404
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "product not found"

    def test_empty_optional_fields_are_omitted(self, make_client):
        client = make_client(MemoryStore({"9": Product(id="9", type="Tea", brand="Caykur", name="Black")}))
        response = client.get("/products/9")

        assert response.json() == {"id": "9", "type": "Tea", "brand": "Caykur", "name": "Black"}

    def test_properties_keep_order_and_empty_values(self, client: TestClient):
        response = client.get("/products/1")

        assert response.json()["properties"] == [
            {"name": "flavour", "value": "Acidic Robusta, Nuts, Aromatic Arabica, Caramel, Medium roasted beans"},
            {"name": "property", "value": "1000 grams, Arabica/Robusta"},
            {"name": "intensity", "value": ""},
        ]

    def test_serialization_failure_returns_500(self, make_client):
        client = make_client(BrokenStore())
        response = client.get("/products/1")
        assert response.status_code == 500

    def test_repeated_requests_return_identical_bodies(self, client: TestClient):
        assert client.get("/products/4").content == client.get("/products/4").content


class TestTypeEndpoints:
    """Tests for GET /products/coffee and GET /products/tea."""

    def test_coffee_returns_only_coffee(self, client: TestClient):
        response = client.get("/products/coffee")

        assert response.status_code == 200
        assert sorted(p["id"] for p in response.json()) == ["1", "2", "3", "4", "5", "6"]
        assert all(p["type"].lower() == "coffee" for p in response.json())

    def test_tea_returns_only_tea(self, client: TestClient):
        response = client.get("/products/tea")

        assert response.status_code == 200
        assert sorted(p["id"] for p in response.json()) == ["7", "8"]

    @pytest.mark.parametrize("path", ["/products/coffee", "/products/tea"])
    def test_empty_view_returns_404(self, make_client, path: str):
        client = make_client(MemoryStore({"1": Product(id="1", type="Cocoa")}))
        response = client.get(path)

        assert response.status_code == 404
        assert response.text == "product not found"

    def test_type_routes_take_precedence_over_ids(self, make_client):
        client = make_client(MemoryStore({
            "coffee": Product(id="coffee", type="Tea"),
            "x": Product(id="x", type="Coffee"),
        }))
        response = client.get("/products/coffee")

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == ["x"]

    def test_serialization_failure_returns_500(self, make_client):
        client = make_client(BrokenStore())
        assert client.get("/products/coffee").status_code == 500


class TestRouting:
    """Tests for requests outside the catalog routes."""

    def test_unknown_path_returns_404(self, client: TestClient):
        assert client.get("/orders").status_code == 404

    def test_write_methods_are_not_allowed(self, client: TestClient):
        assert client.post("/products", json={"id": "9"}).status_code == 405
        assert client.delete("/products/1").status_code == 405

    def test_docs_are_not_exposed(self, client: TestClient):
        assert client.get("/docs").status_code == 404
        assert client.get("/openapi.json").status_code == 404


class TestMiddleware:
    """Tests for timeout and delay middleware."""

    def test_request_exceeding_timeout_returns_504(self, make_client, store: MemoryStore):
        client = make_client(store, latency=1.0, request_timeout=0.2)
        response = client.get("/products/1")

        assert response.status_code == 504
        assert response.text == "request timed out"

    def test_request_within_timeout_succeeds(self, make_client, store: MemoryStore):
        client = make_client(store, latency=0.05, request_timeout=5.0)
        assert client.get("/products/1").status_code == 200

    @pytest.mark.parametrize("options", [{"latency": -1.0}, {"request_timeout": 0}])
    def test_invalid_options_are_rejected(self, settings, store: MemoryStore, options):
        with pytest.raises(ConfigurationError):
            Application(store, settings=settings, **options)
