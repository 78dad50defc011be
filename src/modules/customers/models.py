"""Customer model.

Business rules implemented:
- Email must be unique in the system, active or not (DB constraint
  backs the check done by the service).
- Inactive customer cannot place orders (enforced at service layer).
- Customers start active; deletion is permanent.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Customer(BaseModel):
    """Customer aggregate root."""

    name = models.CharField(max_length=100)
    email = models.EmailField(max_length=100, unique=True)
    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = "customers"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["is_active", "name"], name="customers_active_name_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} (#{self.pk})"
