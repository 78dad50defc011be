"""Product model.

Business rules implemented:
- Every product belongs to exactly one restaurant.
- Products can only be registered for an active restaurant (enforced at
  service layer); deactivating the restaurant later does not touch them.
- New products are available; availability is toggled explicitly.
- The restaurant FK uses PROTECT: a restaurant with products cannot be
  deleted.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Product(BaseModel):
    """Product owned by a restaurant."""

    name = models.CharField(max_length=100)
    category = models.CharField(max_length=50)
    is_available = models.BooleanField(default=True)
    restaurant = models.ForeignKey(
        "restaurants.Restaurant",
        on_delete=models.PROTECT,
        related_name="products",
    )

    class Meta:
        db_table = "products"
        ordering = ["name"]
        indexes = [
            models.Index(
                fields=["restaurant", "is_available", "name"],
                name="products_restaurant_idx",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.category})"
