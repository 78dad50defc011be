"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate, delegating
persistence to the injected ``ICustomerRepository``.

Business rules enforced here:
- Email is unique across all customers (checked on create and update).
- Look-up by email only returns active customers.
- Activate/deactivate reject a customer already in the target state.
- A customer with orders cannot be deleted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.customers.exceptions import (
    ActiveCustomerNotFound,
    CustomerAlreadyExists,
    CustomerHasOrders,
    CustomerNotFound,
    CustomerStatusUnchanged,
)
from modules.customers.models import Customer

if TYPE_CHECKING:
    from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
    from modules.customers.repositories.interfaces import ICustomerRepository
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives its repositories via constructor injection (DIP).  The order
    repository is only consulted to guard deletion.
    """

    def __init__(
        self,
        repository: ICustomerRepository,
        order_repository: IOrderRepository,
    ) -> None:
        self._repo = repository
        self._order_repo = order_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_customer(self, dto: CreateCustomerDTO) -> Customer:
        """Create a new, active customer.

        Raises:
            CustomerAlreadyExists: email already registered.
        """
        name, email = dto.name, dto.email
        log = logger.bind(email=email)

        if self._repo.get_by_email(email):
            log.warning("customer.duplicate_email")
            raise CustomerAlreadyExists("Email already registered.")

        customer = self._repo.create(Customer(name=name, email=email, is_active=True))
        log.info("customer.created", customer_id=customer.id)
        return customer

    @transaction.atomic
    def update_customer(self, id: int, dto: UpdateCustomerDTO) -> Customer:
        """Apply the supplied fields to an existing customer.

        Raises:
            CustomerNotFound: the customer does not exist.
            CustomerAlreadyExists: the new email belongs to another customer.
        """
        customer = self._get_or_raise(id)
        log = logger.bind(customer_id=id)

        name, email = dto.name, dto.email

        if email is not None and email != customer.email:
            existing = self._repo.get_by_email(email)
            if existing and existing.id != customer.id:
                log.warning("customer.duplicate_email")
                raise CustomerAlreadyExists("Email already registered.")

        if name is not None:
            customer.name = name
        if email is not None:
            customer.email = email

        customer = self._repo.save(customer)
        log.info("customer.updated")
        return customer

    @transaction.atomic
    def activate_customer(self, id: int) -> Customer:
        return self._set_active(id, True)

    @transaction.atomic
    def deactivate_customer(self, id: int) -> Customer:
        return self._set_active(id, False)

    @transaction.atomic
    def delete_customer(self, id: int) -> None:
        """Permanently delete a customer.

        Raises:
            CustomerNotFound: the customer does not exist.
            CustomerHasOrders: orders still reference the customer.
        """
        customer = self._get_or_raise(id)
        if self._order_repo.exists_for_customer(id):
            logger.warning("customer.delete_blocked", customer_id=id)
            raise CustomerHasOrders(
                "Customer cannot be deleted while it has orders."
            )
        self._repo.delete(customer)
        logger.info("customer.deleted", customer_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_customer(self, id: int) -> Customer:
        """Raises ``CustomerNotFound`` when absent."""
        return self._get_or_raise(id)

    def get_active_customer_by_email(self, email: str) -> Customer:
        """Return the active customer owning ``email``.

        Inactive customers are treated as not found, which is a business
        rule violation rather than a missing resource.
        """
        customer = self._repo.get_active_by_email(email)
        if not customer:
            raise ActiveCustomerNotFound(f"No active customer found with email {email}.")
        return customer

    def list_active_customers(self) -> List[Customer]:
        return self._repo.list_active()

    def count_active_customers(self) -> int:
        return self._repo.count_active()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_raise(self, id: int) -> Customer:
        customer = self._repo.get_by_id(id)
        if not customer:
            raise CustomerNotFound(f"Customer {id} not found.")
        return customer

    def _set_active(self, id: int, active: bool) -> Customer:
        customer = self._get_or_raise(id)
        log = logger.bind(customer_id=id, active=active)
        if customer.is_active == active:
            log.warning("customer.status_unchanged")
            state = "active" if active else "inactive"
            raise CustomerStatusUnchanged(f"Customer is already {state}.")

        customer.is_active = active
        customer = self._repo.save(customer)
        log.info("customer.activated" if active else "customer.deactivated")
        return customer
