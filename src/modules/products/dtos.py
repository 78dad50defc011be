"""Product DTOs for the Service Layer (Pydantic v2, immutable).

- ``CreateProductDTO``: name, category and owning restaurant.
- ``UpdateProductDTO``: patch of name/category only.  Availability and
  the restaurant reference are not editable through a generic update,
  so those keys are ignored when present.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from modules.core.validators import Category, Identifier, Name


class CreateProductDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: Name
    category: Category
    restaurant_id: Identifier


class UpdateProductDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: Optional[Name] = None
    category: Optional[Category] = None
