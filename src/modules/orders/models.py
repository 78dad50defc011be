"""Order model.

Business rules implemented:
- Status is one of the six ``OrderStatus`` values and changes only along
  ``VALID_TRANSITIONS`` (enforced by ``state_machine``).
- Total amount lies in [0.01, 999999.99] (service validation + DB check).
- ``created_at`` is stamped once by the service and never changes.
- Customer FK uses PROTECT: a customer with orders cannot be deleted.
"""

from __future__ import annotations

from decimal import Decimal

from django.db import models
from django.utils import timezone

from modules.core.models import BaseModel
from modules.orders.constants import TERMINAL_STATES, VALID_TRANSITIONS, OrderStatus


class Order(BaseModel):
    """Order aggregate root."""

    customer = models.ForeignKey(
        "customers.Customer",
        on_delete=models.PROTECT,
        related_name="orders",
    )
    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING,
    )
    total_amount = models.DecimalField(max_digits=8, decimal_places=2)
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        db_table = "orders"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["customer", "-created_at"], name="orders_customer_idx"),
            models.Index(fields=["status", "-created_at"], name="orders_status_idx"),
            models.Index(fields=["-created_at"], name="orders_created_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(
                    total_amount__gte=Decimal("0.01"),
                    total_amount__lte=Decimal("999999.99"),
                ),
                name="orders_total_amount_range",
            ),
        ]

    # ------------------------------------------------------------------
    # State machine helpers
    # ------------------------------------------------------------------

    def can_transition_to(self, new_status: str) -> bool:
        return new_status in VALID_TRANSITIONS.get(self.status, set())

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATES

    def __str__(self) -> str:
        return f"Order #{self.pk} [{self.status}]"
