"""Read-only catalog records for static game content."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from dnd_sheet.models.enums import WeaponCategory


class CatalogEntry(BaseModel):
    """Base for every catalog record. Entries never change at runtime."""

    model_config = ConfigDict(frozen=True, extra="ignore", use_enum_values=True)

    name: str


class PricedEntry(CatalogEntry):
    """An entry that can be bought and carried."""

    id: str
    cost: dict[str, int] = Field(default_factory=dict, description="e.g. {'gp': 15}")
    weight: float = 0.0
    description: str = ""


class WeaponEntry(PricedEntry):
    category: WeaponCategory
    damage: str
    damage_type: str
    properties: list[str] = Field(default_factory=list)
    range_normal: int = 0
    range_long: int = 0
    versatile_damage: str = ""


class ArmorEntry(PricedEntry):
    category: str = Field(description="light, medium, heavy or shield")
    armor_class: str = Field(description="Rules text, e.g. '11 + Dex modifier'")
    base_ac: int = 0
    stealth_disadvantage: bool = False
    strength_required: int = 0


class GearEntry(PricedEntry):
    """Adventuring gear, tools and packs. Packs list their contents by gear id."""

    kind: str = Field(default="gear", description="gear, tool or pack")
    contents: list[str] = Field(default_factory=list)


class SpellEntry(CatalogEntry):
    """A spell.

    casting_time uses the action economy codes the actions panel groups
    by: "A" (action), "BA" (bonus action), "R" (reaction), or free text
    such as "1 minute" for anything longer.
    """

    level: int = Field(ge=0, le=9)
    school: str = ""
    casting_time: str = "A"
    range: str = ""
    components: list[str] = Field(default_factory=list)
    duration: str = ""
    description: str = ""
    classes: list[str] = Field(default_factory=list)
    ritual: bool = False
    concentration: bool = False
    damage: str = ""
    damage_type: str = ""
    saving_throw: str = ""
    upcast: str = ""

    @property
    def is_cantrip(self) -> bool:
        return self.level == 0

    def available_to(self, class_name: str) -> bool:
        return any(c.lower() == class_name.lower() for c in self.classes)


class TraitEntry(CatalogEntry):
    description: str = ""
    level: int = 1


class SubclassEntry(CatalogEntry):
    features: list[TraitEntry] = Field(default_factory=list)


class ClassEntry(CatalogEntry):
    hit_die: str = "d8"
    primary_ability: list[str] = Field(default_factory=list)
    saving_throws: list[str] = Field(default_factory=list)
    armor_proficiencies: list[str] = Field(default_factory=list)
    weapon_proficiencies: list[str] = Field(default_factory=list)
    spellcasting_ability: str = ""
    prepares_spells: bool = False
    ritual_caster: bool = False
    ritual_caster_unprepared: bool = False
    features: list[TraitEntry] = Field(default_factory=list)
    subclasses: list[SubclassEntry] = Field(default_factory=list)

    @property
    def is_spellcaster(self) -> bool:
        return bool(self.spellcasting_ability)


class RaceEntry(CatalogEntry):
    size: str = "Medium"
    speed: int = 30
    traits: list[TraitEntry] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)


class BackgroundEntry(CatalogEntry):
    description: str = ""
    skill_proficiencies: list[str] = Field(default_factory=list)
    tool_proficiency: str = ""
    feat: str = ""


class ConditionEntry(CatalogEntry):
    description: str = ""


ItemEntry = WeaponEntry | ArmorEntry | GearEntry


__all__ = [
    "CatalogEntry",
    "PricedEntry",
    "WeaponEntry",
    "ArmorEntry",
    "GearEntry",
    "SpellEntry",
    "TraitEntry",
    "SubclassEntry",
    "ClassEntry",
    "RaceEntry",
    "BackgroundEntry",
    "ConditionEntry",
    "ItemEntry",
]
