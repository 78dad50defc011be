"""Integration tests for Restaurant API endpoints."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.restaurants.models import Restaurant

pytestmark = pytest.mark.integration

BASE_URL = "/api/v1/restaurants/"


def _restaurant(name, category="Italiana", rating="4.00", active=True) -> Restaurant:
    return Restaurant.objects.create(
        name=name, category=category, rating=Decimal(rating), is_active=active
    )


# ===========================================================================
# CREATE
# ===========================================================================


class TestRestaurantCreate:
    def test_create_success(self, api_client):
        payload = {"name": "Pizzaria do João", "category": "Italiana", "rating": 4.5}
        response = api_client.post(BASE_URL, payload, format="json")

        assert response.status_code == 201
        assert response.data["rating"] == "4.50"
        assert response.data["is_active"] is True

    def test_rating_out_of_range(self, api_client):
        payload = {"name": "Outra Pizzaria", "category": "Italiana", "rating": 7.5}
        response = api_client.post(BASE_URL, payload, format="json")

        assert response.status_code == 400
        error = response.json()["errors"][0]
        assert error["attr"] == "rating"
        assert "less than or equal to 5" in error["detail"]
        assert Restaurant.objects.count() == 0

    def test_duplicate_name(self, api_client, restaurant):
        payload = {"name": restaurant.name, "category": "Pizzas", "rating": 3}
        response = api_client.post(BASE_URL, payload, format="json")

        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "duplicate_name"

    def test_non_numeric_rating(self, api_client):
        payload = {"name": "Outra Pizzaria", "category": "Italiana", "rating": "abc"}
        response = api_client.post(BASE_URL, payload, format="json")

        assert response.status_code == 400
        assert response.json()["errors"][0]["attr"] == "rating"

    def test_rating_with_more_than_two_decimals_rejected(self, api_client):
        payload = {"name": "Outra Pizzaria", "category": "Italiana", "rating": "4.555"}
        response = api_client.post(BASE_URL, payload, format="json")

        assert response.status_code == 400
        assert response.json()["errors"][0]["attr"] == "rating"
        assert Restaurant.objects.count() == 0

    def test_created_restaurant_reads_back_unchanged(self, api_client):
        payload = {"name": "Tempero Mineiro", "category": "Brasileira", "rating": "4.55"}
        created = api_client.post(BASE_URL, payload, format="json")

        fetched = api_client.get(f"{BASE_URL}{created.data['id']}/")

        assert fetched.status_code == 200
        assert fetched.data["name"] == payload["name"]
        assert fetched.data["category"] == payload["category"]
        assert Decimal(fetched.data["rating"]) == Decimal("4.55")
        assert fetched.data["is_active"] is True

    def test_non_object_body_rejected(self, api_client):
        response = api_client.post(BASE_URL, [1, 2], format="json")

        assert response.status_code == 400
        assert response.json()["type"] == "validation_error"


# ===========================================================================
# LIST / LOOK-UPS
# ===========================================================================


class TestRestaurantList:
    def test_list_all_by_name(self, api_client):
        _restaurant("Zé Lanches")
        _restaurant("Adega", active=False)

        response = api_client.get(BASE_URL)

        assert [r["name"] for r in response.data["results"]] == ["Adega", "Zé Lanches"]

    def test_list_active_ranking(self, api_client):
        _restaurant("Boa Pizza", rating="4.00")
        _restaurant("Melhor Pizza", rating="4.90")
        _restaurant("Fechada", rating="5.00", active=False)

        response = api_client.get(BASE_URL, {"active": "true"})

        assert [r["name"] for r in response.data["results"]] == [
            "Melhor Pizza",
            "Boa Pizza",
        ]

    def test_by_name(self, api_client, restaurant):
        response = api_client.get(f"{BASE_URL}by-name/", {"name": restaurant.name})

        assert response.status_code == 200
        assert response.data["id"] == restaurant.id

    def test_by_name_not_found(self, api_client):
        response = api_client.get(f"{BASE_URL}by-name/", {"name": "Inexistente"})

        assert response.status_code == 404

    def test_search(self, api_client, restaurant):
        _restaurant("Sushi Kenzo", category="Japonesa")

        response = api_client.get(f"{BASE_URL}search/", {"name": "pizz"})

        assert [r["name"] for r in response.data["results"]] == ["Pizzaria do João"]

    def test_by_category_and_count(self, api_client):
        _restaurant("Sushi Kenzo", category="Japonesa", rating="4.20")
        _restaurant("Temaki House", category="Japonesa", rating="4.70")
        _restaurant("Sushi Fechado", category="Japonesa", active=False)

        response = api_client.get(f"{BASE_URL}by-category/", {"category": "Japonesa"})
        assert [r["name"] for r in response.data["results"]] == [
            "Temaki House",
            "Sushi Kenzo",
        ]

        response = api_client.get(
            f"{BASE_URL}count-by-category/", {"category": "Japonesa"}
        )
        assert response.data == {"count": 2}


# ===========================================================================
# UPDATE / STATUS / DELETE
# ===========================================================================


class TestRestaurantUpdate:
    def test_patch_rating(self, api_client, restaurant):
        response = api_client.patch(
            f"{BASE_URL}{restaurant.id}/", {"rating": "3.8"}, format="json"
        )

        assert response.status_code == 200
        assert response.data["rating"] == "3.80"
        assert response.data["name"] == restaurant.name

    def test_deactivate_and_status(self, api_client, restaurant):
        response = api_client.post(f"{BASE_URL}{restaurant.id}/deactivate/")
        assert response.status_code == 200
        assert response.data["is_active"] is False

        response = api_client.get(f"{BASE_URL}{restaurant.id}/status/")
        assert response.data == {"id": restaurant.id, "active": False}

    def test_deactivate_twice(self, api_client, inactive_restaurant):
        response = api_client.post(f"{BASE_URL}{inactive_restaurant.id}/deactivate/")

        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "status_unchanged"


class TestRestaurantDelete:
    def test_delete(self, api_client, restaurant):
        response = api_client.delete(f"{BASE_URL}{restaurant.id}/")

        assert response.status_code == 204
        assert not Restaurant.objects.filter(id=restaurant.id).exists()

    def test_delete_with_products(self, api_client, product):
        response = api_client.delete(f"{BASE_URL}{product.restaurant_id}/")

        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "restaurant_has_products"

    def test_delete_missing(self, api_client):
        response = api_client.delete(f"{BASE_URL}4242/")

        assert response.status_code == 404
