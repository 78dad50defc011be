from __future__ import annotations

import random
from decimal import Decimal
from typing import Iterable

from django.core.management.base import BaseCommand

from config.container import build_container
from modules.customers.dtos import CreateCustomerDTO
from modules.customers.models import Customer
from modules.orders.constants import OrderStatus
from modules.orders.dtos import CreateOrderDTO
from modules.products.dtos import CreateProductDTO
from modules.products.models import Product
from modules.restaurants.dtos import CreateRestaurantDTO
from modules.restaurants.models import Restaurant

# Path from PENDING to each seeded status
STATUS_PATHS = {
    OrderStatus.PENDING: [],
    OrderStatus.CONFIRMED: [OrderStatus.CONFIRMED],
    OrderStatus.IN_PREPARATION: [OrderStatus.CONFIRMED, OrderStatus.IN_PREPARATION],
    OrderStatus.DELIVERED: [
        OrderStatus.CONFIRMED,
        OrderStatus.IN_PREPARATION,
        OrderStatus.OUT_FOR_DELIVERY,
        OrderStatus.DELIVERED,
    ],
    OrderStatus.CANCELED: [OrderStatus.CANCELED],
}


class Command(BaseCommand):
    help = "Seed database with realistic development data."

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")
        container = build_container()

        restaurants = self._seed_restaurants(container.restaurant_service)
        products = self._seed_products(container.product_service, restaurants)
        customers = self._seed_customers(container.customer_service)
        orders_created = self._seed_orders(container.order_service, customers)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"restaurants={len(restaurants)}, "
                f"products={products}, "
                f"customers={len(customers)}, "
                f"orders={orders_created}"
            )
        )

    def _seed_restaurants(self, service) -> list[Restaurant]:
        self.stdout.write("Creating restaurants...")
        restaurants: list[Restaurant] = []
        catalog = [
            ("Cantina da Nonna", "Italiana", Decimal("4.70")),
            ("Sushi Kenzo", "Japonesa", Decimal("4.50")),
            ("Burger Station", "Lanches", Decimal("4.10")),
            ("Tempero Mineiro", "Brasileira", Decimal("4.80")),
            ("Taqueria El Sol", "Mexicana", Decimal("3.90")),
        ]
        for name, category, rating in catalog:
            restaurant = Restaurant.objects.filter(name=name).first()
            if restaurant is None:
                restaurant = service.create_restaurant(
                    CreateRestaurantDTO(name=name, category=category, rating=rating)
                )
            restaurants.append(restaurant)
        self.stdout.write(self.style.SUCCESS("Creating restaurants... Done!"))
        return restaurants

    def _seed_products(self, service, restaurants: Iterable[Restaurant]) -> int:
        self.stdout.write("Creating products...")
        menu = {
            "Italiana": [("Lasanha Bolonhesa", "Massas"), ("Pizza Margherita", "Pizzas")],
            "Japonesa": [("Combo Sashimi", "Combinados"), ("Temaki Salmão", "Temakis")],
            "Lanches": [("Cheeseburger", "Burgers"), ("Batata Frita", "Porções")],
            "Brasileira": [("Feijão Tropeiro", "Pratos"), ("Pão de Queijo", "Porções")],
            "Mexicana": [("Burrito de Carne", "Burritos"), ("Nachos", "Porções")],
        }
        created = 0
        for restaurant in restaurants:
            for name, category in menu.get(restaurant.category, []):
                if Product.objects.filter(restaurant=restaurant, name=name).exists():
                    continue
                service.create_product(
                    CreateProductDTO(
                        name=name, category=category, restaurant_id=restaurant.id
                    )
                )
                created += 1
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return created

    def _seed_customers(self, service) -> list[Customer]:
        self.stdout.write("Creating customers...")
        customers: list[Customer] = []
        seed_customers = [
            ("Ana Souza", "ana@example.com"),
            ("Bruno Lima", "bruno@example.com"),
            ("Carla Mendes", "carla@example.com"),
            ("Daniel Costa", "daniel@example.com"),
            ("Eduardo Alves", "eduardo@example.com"),
            ("Fernanda Rocha", "fernanda@example.com"),
        ]
        for name, email in seed_customers:
            customer = Customer.objects.filter(email=email).first()
            if customer is None:
                customer = service.create_customer(
                    CreateCustomerDTO(name=name, email=email)
                )
            customers.append(customer)
        self.stdout.write(self.style.SUCCESS("Creating customers... Done!"))
        return customers

    def _seed_orders(self, service, customers: Iterable[Customer]) -> int:
        self.stdout.write("Creating orders...")
        customers_list = [c for c in customers if c.is_active]
        if not customers_list:
            self.stdout.write(self.style.WARNING("Skipping orders (no active customers)."))
            return 0

        statuses = list(STATUS_PATHS)
        weights = [0.25, 0.25, 0.10, 0.25, 0.15]

        orders_created = 0
        for _ in range(20):
            customer = random.choice(customers_list)
            total = Decimal(random.randint(1500, 25000)) / 100
            order = service.create_order(
                CreateOrderDTO(customer_id=customer.id, total_amount=total)
            )
            status = random.choices(statuses, weights=weights, k=1)[0]
            for step in STATUS_PATHS[status]:
                service.update_status(order.id, step)
            orders_created += 1

        self.stdout.write(self.style.SUCCESS("Creating orders... Done!"))
        return orders_created
