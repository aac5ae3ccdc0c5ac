"""Hit points, hit dice, death saves and conditions.

These components carry the combat state the main sheet mutates. Every
mutator clamps rather than raising, so a screen can apply user input
directly without pre-validating it.
"""

from __future__ import annotations

from pydantic import Field, model_validator

from dnd_sheet.core.constants import DEFAULT_SPEED, MAX_DEATH_SAVES, MAX_EXHAUSTION
from dnd_sheet.models.base import SheetModel
from dnd_sheet.models.enums import Condition


class HitPoints(SheetModel):
    """Current, maximum and temporary hit points."""

    maximum: int = Field(default=10, ge=1, description="Maximum hit points")
    current: int = Field(default=10, ge=0, description="Current hit points")
    temporary: int = Field(default=0, ge=0, description="Temporary hit points")

    @model_validator(mode="after")
    def clamp_current(self) -> "HitPoints":
        """Keep current HP within [0, maximum]."""
        if self.current > self.maximum:
            self.current = self.maximum
        return self

    @property
    def is_unconscious(self) -> bool:
        return self.current <= 0

    def take_damage(self, amount: int) -> int:
        """Apply damage, draining temporary HP first.

        Args:
            amount: Raw damage. Non-positive amounts do nothing.

        Returns:
            Damage that reached current HP after temporary HP absorbed
            its share.
        """
        if amount <= 0:
            return 0

        if self.temporary > 0:
            absorbed = min(self.temporary, amount)
            self.temporary -= absorbed
            amount -= absorbed

        if amount > 0:
            self.current = max(0, self.current - amount)
        return amount

    def heal(self, amount: int) -> int:
        """Restore HP up to the maximum. Temporary HP is untouched.

        Returns:
            HP actually restored.
        """
        if amount <= 0:
            return 0
        before = self.current
        self.current = min(self.maximum, self.current + amount)
        return self.current - before

    def add_temporary_hp(self, amount: int) -> None:
        """Grant temporary HP. Temporary HP does not stack; the larger value wins."""
        if amount > self.temporary:
            self.temporary = amount


class HitDice(SheetModel):
    """Hit dice available for short rest healing."""

    total: int = Field(default=1, ge=0)
    remaining: int = Field(default=1, ge=0)
    die_type: str = Field(default="d8", pattern=r"^d\d+$", description="e.g. d8, d10")

    @model_validator(mode="after")
    def clamp_remaining(self) -> "HitDice":
        if self.remaining > self.total:
            self.remaining = self.total
        return self

    @property
    def die_size(self) -> int:
        """Number of faces on the hit die (8 for 'd8')."""
        return int(self.die_type[1:])

    def use(self) -> bool:
        """Spend one hit die.

        Returns:
            True if a die was available.
        """
        if self.remaining > 0:
            self.remaining -= 1
            return True
        return False

    def recover_on_long_rest(self) -> int:
        """Recover half the total (minimum one), bounded by the number spent.

        Returns:
            Dice recovered.
        """
        to_recover = max(1, self.total // 2)
        recovered = min(to_recover, self.total - self.remaining)
        self.remaining += recovered
        return recovered


class DeathSaves(SheetModel):
    """Death saving throw successes and failures."""

    successes: int = Field(default=0, ge=0, le=MAX_DEATH_SAVES)
    failures: int = Field(default=0, ge=0, le=MAX_DEATH_SAVES)

    @property
    def is_stable(self) -> bool:
        return self.successes >= MAX_DEATH_SAVES

    @property
    def is_dead(self) -> bool:
        return self.failures >= MAX_DEATH_SAVES

    def add_success(self) -> bool:
        """Record a success.

        Returns:
            True if the character is now stable.
        """
        self.successes = min(MAX_DEATH_SAVES, self.successes + 1)
        return self.is_stable

    def add_failure(self) -> bool:
        """Record a failure.

        Returns:
            True if the character is now dead.
        """
        self.failures = min(MAX_DEATH_SAVES, self.failures + 1)
        return self.is_dead

    def reset(self) -> None:
        self.successes = 0
        self.failures = 0


class CombatStats(SheetModel):
    """Everything the combat panel shows and edits."""

    hit_points: HitPoints = Field(default_factory=HitPoints)
    armor_class: int = Field(default=10, ge=0)
    speed: int = Field(default=DEFAULT_SPEED, ge=0)
    initiative_bonus: int = Field(default=0, description="Bonus on top of DEX")
    hit_dice: HitDice = Field(default_factory=HitDice)
    death_saves: DeathSaves = Field(default_factory=DeathSaves)
    conditions: list[Condition] = Field(default_factory=list, description="Active conditions")
    exhaustion_level: int = Field(default=0, ge=0, le=MAX_EXHAUSTION)

    def take_damage(self, amount: int) -> int:
        return self.hit_points.take_damage(amount)

    def heal(self, amount: int) -> int:
        return self.hit_points.heal(amount)

    def add_temporary_hp(self, amount: int) -> None:
        self.hit_points.add_temporary_hp(amount)

    def add_condition(self, condition: Condition | str) -> bool:
        """Add a condition unless already present.

        Returns:
            True if the condition was added.
        """
        condition = Condition(condition)
        if condition in self.conditions:
            return False
        self.conditions = [*self.conditions, condition]
        return True

    def remove_condition(self, condition: Condition | str) -> bool:
        """Remove a condition if present.

        Returns:
            True if the condition was removed.
        """
        condition = Condition(condition)
        if condition not in self.conditions:
            return False
        self.conditions = [c for c in self.conditions if c != condition]
        return True

    def missing_conditions(self) -> list[Condition]:
        """Conditions not currently active, in standard order."""
        return [c for c in Condition if c not in self.conditions]


__all__ = [
    "HitPoints",
    "HitDice",
    "DeathSaves",
    "CombatStats",
]
