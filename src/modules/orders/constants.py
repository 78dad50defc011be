"""Order domain constants.

Defines status choices and the transition table of the order lifecycle
state machine.
"""

from django.db import models


class OrderStatus(models.TextChoices):
    PENDING = "PENDING", "Pendente"
    CONFIRMED = "CONFIRMED", "Confirmado"
    IN_PREPARATION = "IN_PREPARATION", "Em preparação"
    OUT_FOR_DELIVERY = "OUT_FOR_DELIVERY", "Saiu para entrega"
    DELIVERED = "DELIVERED", "Entregue"
    CANCELED = "CANCELED", "Cancelado"


VALID_TRANSITIONS: dict[str, set[str]] = {
    OrderStatus.PENDING: {OrderStatus.CONFIRMED, OrderStatus.CANCELED},
    OrderStatus.CONFIRMED: {OrderStatus.IN_PREPARATION, OrderStatus.CANCELED},
    OrderStatus.IN_PREPARATION: {OrderStatus.OUT_FOR_DELIVERY, OrderStatus.CANCELED},
    OrderStatus.OUT_FOR_DELIVERY: {OrderStatus.DELIVERED, OrderStatus.CANCELED},
    OrderStatus.DELIVERED: set(),
    OrderStatus.CANCELED: set(),
}

TERMINAL_STATES: set[str] = {OrderStatus.DELIVERED, OrderStatus.CANCELED}

# Orders counted as revenue
REVENUE_STATUSES: tuple[str, ...] = (OrderStatus.CONFIRMED, OrderStatus.DELIVERED)
