"""Restaurant DTOs for the Service Layer (Pydantic v2, immutable)."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from modules.core.validators import Category, Name, Rating


class CreateRestaurantDTO(BaseModel):
    """Input for restaurant creation; new restaurants are always active."""

    model_config = ConfigDict(frozen=True)

    name: Name
    category: Category
    rating: Rating


class UpdateRestaurantDTO(BaseModel):
    """Patch for an existing restaurant (``None`` = leave unchanged)."""

    model_config = ConfigDict(frozen=True)

    name: Optional[Name] = None
    category: Optional[Category] = None
    rating: Optional[Rating] = None
