"""Django ORM implementation of the Customer repository.

Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising, and the Service Layer decides how to translate a
missing entity.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.core.exceptions import ValidationError

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Customer]:
        """Return ``None`` for non-existent or malformed IDs."""
        try:
            return Customer.objects.filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return None

    def create(self, entity: Customer) -> Customer:
        entity.save(force_insert=True)
        logger.debug("customer.inserted", customer_id=entity.id)
        return entity

    def save(self, entity: Customer) -> Customer:
        entity.save()
        return entity

    def delete(self, entity: Customer) -> None:
        customer_id = entity.id
        entity.delete()
        logger.debug("customer.deleted_row", customer_id=customer_id)

    def get_by_email(self, email: str) -> Optional[Customer]:
        return Customer.objects.filter(email=email).first()

    def get_active_by_email(self, email: str) -> Optional[Customer]:
        return Customer.objects.filter(email=email, is_active=True).first()

    def list_active(self) -> List[Customer]:
        return list(Customer.objects.filter(is_active=True).order_by("name", "id"))

    def count_active(self) -> int:
        return Customer.objects.filter(is_active=True).count()
