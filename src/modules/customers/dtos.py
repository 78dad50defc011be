"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  Field rules
(name length, email shape) are enforced here; ``CustomerService`` only
checks what needs the store, such as email uniqueness.  DTOs are
immutable (``frozen=True``).
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from modules.core.validators import Email, Name


class CreateCustomerDTO(BaseModel):
    """Input for customer creation."""

    model_config = ConfigDict(frozen=True)

    name: Name
    email: Email


class UpdateCustomerDTO(BaseModel):
    """Patch for an existing customer.

    ``None`` means "leave unchanged"; any supplied value goes through the
    same rules as on creation.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[Name] = None
    email: Optional[Email] = None
