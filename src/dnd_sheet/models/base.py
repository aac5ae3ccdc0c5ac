"""Shared pydantic base for character record components."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SheetModel(BaseModel):
    """Base class for all character record components.

    Components are mutated in place by the rule engine and the screen
    controllers, so assignment is validated.
    """

    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        extra="ignore",
        use_enum_values=True,
    )


__all__ = ["SheetModel"]
