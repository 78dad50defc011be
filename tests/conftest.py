from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.customers.models import Customer
from modules.orders.constants import OrderStatus
from modules.orders.models import Order
from modules.products.models import Product
from modules.restaurants.models import Restaurant


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


# ---------------------------------------------------------------------------
# Persisted entities
# ---------------------------------------------------------------------------


@pytest.fixture()
def customer():
    return Customer.objects.create(name="João Silva", email="joao@example.com")


@pytest.fixture()
def inactive_customer():
    return Customer.objects.create(
        name="Maria Inativa", email="maria@example.com", is_active=False
    )


@pytest.fixture()
def restaurant():
    return Restaurant.objects.create(
        name="Pizzaria do João", category="Italiana", rating=Decimal("4.50")
    )


@pytest.fixture()
def inactive_restaurant():
    return Restaurant.objects.create(
        name="Cantina Fechada",
        category="Italiana",
        rating=Decimal("3.00"),
        is_active=False,
    )


@pytest.fixture()
def product(restaurant):
    return Product.objects.create(
        name="Pizza Margherita", category="Pizzas", restaurant=restaurant
    )


@pytest.fixture()
def order(customer):
    return Order.objects.create(
        customer=customer,
        status=OrderStatus.PENDING,
        total_amount=Decimal("50.00"),
    )
