"""Restaurant model.

Business rules implemented:
- Name must be unique in the system.
- Rating lies in [0.0, 5.0] (service validation + DB check constraint).
- Inactive restaurant cannot receive new products (enforced at service layer).
"""

from __future__ import annotations

from decimal import Decimal

from django.db import models

from modules.core.models import BaseModel


class Restaurant(BaseModel):
    """Restaurant aggregate root; owns its products by reference."""

    name = models.CharField(max_length=100, unique=True)
    category = models.CharField(max_length=50)
    rating = models.DecimalField(max_digits=3, decimal_places=2)
    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = "restaurants"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["category", "is_active"], name="restaurants_category_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(rating__gte=Decimal("0.00"), rating__lte=Decimal("5.00")),
                name="restaurants_rating_range",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} [{self.category}]"
