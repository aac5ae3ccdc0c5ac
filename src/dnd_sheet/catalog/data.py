"""Built-in D&D 5E reference data.

SRD-style weapons, armor, gear, spells, classes, races, backgrounds and
conditions. Each table is keyed by id (or name where the content has no
id) and is validated into catalog entries on load. A JSON file with the
same category name in the configured catalog directory replaces a table.
"""

from __future__ import annotations

from typing import Any


# =============================================================================
# Weapons (PHB Chapter 6)
# =============================================================================

WEAPONS: dict[str, dict[str, Any]] = {
    # Simple Melee
    "club": {
        "name": "Club",
        "category": "simple_melee",
        "cost": {"sp": 1},
        "damage": "1d4",
        "damage_type": "bludgeoning",
        "weight": 2.0,
        "properties": ["light"],
    },
    "dagger": {
        "name": "Dagger",
        "category": "simple_melee",
        "cost": {"gp": 2},
        "damage": "1d4",
        "damage_type": "piercing",
        "weight": 1.0,
        "properties": ["finesse", "light", "thrown"],
        "range_normal": 20,
        "range_long": 60,
    },
    "handaxe": {
        "name": "Handaxe",
        "category": "simple_melee",
        "cost": {"gp": 5},
        "damage": "1d6",
        "damage_type": "slashing",
        "weight": 2.0,
        "properties": ["light", "thrown"],
        "range_normal": 20,
        "range_long": 60,
    },
    "javelin": {
        "name": "Javelin",
        "category": "simple_melee",
        "cost": {"sp": 5},
        "damage": "1d6",
        "damage_type": "piercing",
        "weight": 2.0,
        "properties": ["thrown"],
        "range_normal": 30,
        "range_long": 120,
    },
    "mace": {
        "name": "Mace",
        "category": "simple_melee",
        "cost": {"gp": 5},
        "damage": "1d6",
        "damage_type": "bludgeoning",
        "weight": 4.0,
    },
    "quarterstaff": {
        "name": "Quarterstaff",
        "category": "simple_melee",
        "cost": {"sp": 2},
        "damage": "1d6",
        "damage_type": "bludgeoning",
        "weight": 4.0,
        "properties": ["versatile"],
        "versatile_damage": "1d8",
    },
    "spear": {
        "name": "Spear",
        "category": "simple_melee",
        "cost": {"gp": 1},
        "damage": "1d6",
        "damage_type": "piercing",
        "weight": 3.0,
        "properties": ["thrown", "versatile"],
        "range_normal": 20,
        "range_long": 60,
        "versatile_damage": "1d8",
    },
    # Simple Ranged
    "light_crossbow": {
        "name": "Light Crossbow",
        "category": "simple_ranged",
        "cost": {"gp": 25},
        "damage": "1d8",
        "damage_type": "piercing",
        "weight": 5.0,
        "properties": ["ammunition", "loading", "two-handed"],
        "range_normal": 80,
        "range_long": 320,
    },
    "shortbow": {
        "name": "Shortbow",
        "category": "simple_ranged",
        "cost": {"gp": 25},
        "damage": "1d6",
        "damage_type": "piercing",
        "weight": 2.0,
        "properties": ["ammunition", "two-handed"],
        "range_normal": 80,
        "range_long": 320,
    },
    # Martial Melee
    "battleaxe": {
        "name": "Battleaxe",
        "category": "martial_melee",
        "cost": {"gp": 10},
        "damage": "1d8",
        "damage_type": "slashing",
        "weight": 4.0,
        "properties": ["versatile"],
        "versatile_damage": "1d10",
    },
    "greataxe": {
        "name": "Greataxe",
        "category": "martial_melee",
        "cost": {"gp": 30},
        "damage": "1d12",
        "damage_type": "slashing",
        "weight": 7.0,
        "properties": ["heavy", "two-handed"],
    },
    "greatsword": {
        "name": "Greatsword",
        "category": "martial_melee",
        "cost": {"gp": 50},
        "damage": "2d6",
        "damage_type": "slashing",
        "weight": 6.0,
        "properties": ["heavy", "two-handed"],
    },
    "longsword": {
        "name": "Longsword",
        "category": "martial_melee",
        "cost": {"gp": 15},
        "damage": "1d8",
        "damage_type": "slashing",
        "weight": 3.0,
        "properties": ["versatile"],
        "versatile_damage": "1d10",
    },
    "rapier": {
        "name": "Rapier",
        "category": "martial_melee",
        "cost": {"gp": 25},
        "damage": "1d8",
        "damage_type": "piercing",
        "weight": 2.0,
        "properties": ["finesse"],
    },
    "scimitar": {
        "name": "Scimitar",
        "category": "martial_melee",
        "cost": {"gp": 25},
        "damage": "1d6",
        "damage_type": "slashing",
        "weight": 3.0,
        "properties": ["finesse", "light"],
    },
    "shortsword": {
        "name": "Shortsword",
        "category": "martial_melee",
        "cost": {"gp": 10},
        "damage": "1d6",
        "damage_type": "piercing",
        "weight": 2.0,
        "properties": ["finesse", "light"],
    },
    "warhammer": {
        "name": "Warhammer",
        "category": "martial_melee",
        "cost": {"gp": 15},
        "damage": "1d8",
        "damage_type": "bludgeoning",
        "weight": 2.0,
        "properties": ["versatile"],
        "versatile_damage": "1d10",
    },
    # Martial Ranged
    "hand_crossbow": {
        "name": "Hand Crossbow",
        "category": "martial_ranged",
        "cost": {"gp": 75},
        "damage": "1d6",
        "damage_type": "piercing",
        "weight": 3.0,
        "properties": ["ammunition", "light", "loading"],
        "range_normal": 30,
        "range_long": 120,
    },
    "longbow": {
        "name": "Longbow",
        "category": "martial_ranged",
        "cost": {"gp": 50},
        "damage": "1d8",
        "damage_type": "piercing",
        "weight": 2.0,
        "properties": ["ammunition", "heavy", "two-handed"],
        "range_normal": 150,
        "range_long": 600,
    },
}


# =============================================================================
# Armor
# =============================================================================

ARMOR: dict[str, dict[str, Any]] = {
    "padded": {
        "name": "Padded Armor",
        "category": "light",
        "cost": {"gp": 5},
        "armor_class": "11 + Dex modifier",
        "base_ac": 11,
        "weight": 8.0,
        "stealth_disadvantage": True,
    },
    "leather": {
        "name": "Leather Armor",
        "category": "light",
        "cost": {"gp": 10},
        "armor_class": "11 + Dex modifier",
        "base_ac": 11,
        "weight": 10.0,
    },
    "studded_leather": {
        "name": "Studded Leather Armor",
        "category": "light",
        "cost": {"gp": 45},
        "armor_class": "12 + Dex modifier",
        "base_ac": 12,
        "weight": 13.0,
    },
    "chain_shirt": {
        "name": "Chain Shirt",
        "category": "medium",
        "cost": {"gp": 50},
        "armor_class": "13 + Dex modifier (max 2)",
        "base_ac": 13,
        "weight": 20.0,
    },
    "scale_mail": {
        "name": "Scale Mail",
        "category": "medium",
        "cost": {"gp": 50},
        "armor_class": "14 + Dex modifier (max 2)",
        "base_ac": 14,
        "weight": 45.0,
        "stealth_disadvantage": True,
    },
    "half_plate": {
        "name": "Half Plate Armor",
        "category": "medium",
        "cost": {"gp": 750},
        "armor_class": "15 + Dex modifier (max 2)",
        "base_ac": 15,
        "weight": 40.0,
        "stealth_disadvantage": True,
    },
    "chain_mail": {
        "name": "Chain Mail",
        "category": "heavy",
        "cost": {"gp": 75},
        "armor_class": "16",
        "base_ac": 16,
        "weight": 55.0,
        "stealth_disadvantage": True,
        "strength_required": 13,
    },
    "plate": {
        "name": "Plate Armor",
        "category": "heavy",
        "cost": {"gp": 1500},
        "armor_class": "18",
        "base_ac": 18,
        "weight": 65.0,
        "stealth_disadvantage": True,
        "strength_required": 15,
    },
    "shield": {
        "name": "Shield",
        "category": "shield",
        "cost": {"gp": 10},
        "armor_class": "+2",
        "base_ac": 2,
        "weight": 6.0,
    },
}


# =============================================================================
# Adventuring Gear, Tools & Packs
# =============================================================================

GEAR: dict[str, dict[str, Any]] = {
    "backpack": {"name": "Backpack", "cost": {"gp": 2}, "weight": 5.0},
    "bedroll": {"name": "Bedroll", "cost": {"gp": 1}, "weight": 7.0},
    "component_pouch": {"name": "Component Pouch", "cost": {"gp": 25}, "weight": 2.0},
    "crowbar": {"name": "Crowbar", "cost": {"gp": 2}, "weight": 5.0},
    "holy_symbol": {"name": "Holy Symbol", "cost": {"gp": 5}, "weight": 1.0},
    "lantern_hooded": {"name": "Hooded Lantern", "cost": {"gp": 5}, "weight": 2.0},
    "oil_flask": {"name": "Oil (flask)", "cost": {"sp": 1}, "weight": 1.0},
    "potion_of_healing": {
        "name": "Potion of Healing",
        "cost": {"gp": 50},
        "weight": 0.5,
        "description": "Regain 2d4 + 2 Hit Points.",
    },
    "rations": {"name": "Rations (1 day)", "cost": {"sp": 5}, "weight": 2.0},
    "rope_hempen": {"name": "Rope, Hempen (50 feet)", "cost": {"gp": 1}, "weight": 10.0},
    "spellbook": {"name": "Spellbook", "cost": {"gp": 50}, "weight": 3.0},
    "tinderbox": {"name": "Tinderbox", "cost": {"sp": 5}, "weight": 1.0},
    "torch": {"name": "Torch", "cost": {"cp": 1}, "weight": 1.0},
    "waterskin": {"name": "Waterskin", "cost": {"sp": 2}, "weight": 5.0},
    "arrows": {"name": "Arrows (20)", "cost": {"gp": 1}, "weight": 1.0},
    "crossbow_bolts": {"name": "Crossbow Bolts (20)", "cost": {"gp": 1}, "weight": 1.5},
}

TOOLS: dict[str, dict[str, Any]] = {
    "thieves_tools": {"name": "Thieves' Tools", "cost": {"gp": 25}, "weight": 1.0},
    "herbalism_kit": {"name": "Herbalism Kit", "cost": {"gp": 5}, "weight": 3.0},
    "smiths_tools": {"name": "Smith's Tools", "cost": {"gp": 20}, "weight": 8.0},
    "disguise_kit": {"name": "Disguise Kit", "cost": {"gp": 25}, "weight": 3.0},
    "lute": {"name": "Lute", "cost": {"gp": 35}, "weight": 2.0},
}

PACKS: dict[str, dict[str, Any]] = {
    "explorers_pack": {
        "name": "Explorer's Pack",
        "cost": {"gp": 10},
        "weight": 59.0,
        "contents": ["backpack", "bedroll", "rations", "rope_hempen", "tinderbox", "torch", "waterskin"],
    },
    "dungeoneers_pack": {
        "name": "Dungeoneer's Pack",
        "cost": {"gp": 12},
        "weight": 55.0,
        "contents": ["backpack", "crowbar", "rations", "rope_hempen", "tinderbox", "torch", "waterskin"],
    },
    "scholars_pack": {
        "name": "Scholar's Pack",
        "cost": {"gp": 40},
        "weight": 22.0,
        "contents": ["backpack"],
    },
}


# =============================================================================
# Spells
# =============================================================================

SPELLS: dict[str, dict[str, Any]] = {
    # Cantrips
    "Eldritch Blast": {
        "level": 0,
        "school": "Evocation",
        "casting_time": "A",
        "range": "120 feet",
        "components": ["V", "S"],
        "duration": "Instantaneous",
        "description": "A beam of crackling energy streaks toward a creature within range.",
        "classes": ["Warlock"],
        "damage": "1d10",
        "damage_type": "force",
    },
    "Fire Bolt": {
        "level": 0,
        "school": "Evocation",
        "casting_time": "A",
        "range": "120 feet",
        "components": ["V", "S"],
        "duration": "Instantaneous",
        "description": "You hurl a mote of fire at a creature or object within range.",
        "classes": ["Sorcerer", "Wizard"],
        "damage": "1d10",
        "damage_type": "fire",
    },
    "Light": {
        "level": 0,
        "school": "Evocation",
        "casting_time": "A",
        "range": "Touch",
        "components": ["V", "M"],
        "duration": "1 hour",
        "description": "You touch one object, which sheds Bright Light in a 20-foot radius.",
        "classes": ["Bard", "Cleric", "Sorcerer", "Wizard"],
    },
    "Mage Hand": {
        "level": 0,
        "school": "Conjuration",
        "casting_time": "A",
        "range": "30 feet",
        "components": ["V", "S"],
        "duration": "1 minute",
        "description": "A spectral, floating hand appears at a point you choose within range.",
        "classes": ["Bard", "Sorcerer", "Warlock", "Wizard"],
    },
    "Sacred Flame": {
        "level": 0,
        "school": "Evocation",
        "casting_time": "A",
        "range": "60 feet",
        "components": ["V", "S"],
        "duration": "Instantaneous",
        "description": "Flame-like radiance descends on a creature that you can see within range.",
        "classes": ["Cleric"],
        "damage": "1d8",
        "damage_type": "radiant",
        "saving_throw": "DEX",
    },
    "Vicious Mockery": {
        "level": 0,
        "school": "Enchantment",
        "casting_time": "A",
        "range": "60 feet",
        "components": ["V"],
        "duration": "Instantaneous",
        "description": "You unleash a string of insults laced with subtle enchantments.",
        "classes": ["Bard"],
        "damage": "1d6",
        "damage_type": "psychic",
        "saving_throw": "WIS",
    },
    # 1st level
    "Burning Hands": {
        "level": 1,
        "school": "Evocation",
        "casting_time": "A",
        "range": "Self (15-foot cone)",
        "components": ["V", "S"],
        "duration": "Instantaneous",
        "description": "A thin sheet of flames shoots forth from you.",
        "classes": ["Sorcerer", "Wizard"],
        "damage": "3d6",
        "damage_type": "fire",
        "saving_throw": "DEX",
        "upcast": "+1d6 per slot level above 1st",
    },
    "Cure Wounds": {
        "level": 1,
        "school": "Abjuration",
        "casting_time": "A",
        "range": "Touch",
        "components": ["V", "S"],
        "duration": "Instantaneous",
        "description": "A creature you touch regains Hit Points.",
        "classes": ["Bard", "Cleric", "Druid", "Paladin", "Ranger"],
        "damage": "2d8",
        "damage_type": "healing",
        "upcast": "+2d8 healing per slot level above 1st",
    },
    "Detect Magic": {
        "level": 1,
        "school": "Divination",
        "casting_time": "A",
        "range": "Self",
        "components": ["V", "S"],
        "duration": "Concentration, up to 10 minutes",
        "description": "For the duration, you sense the presence of magical effects within 30 feet.",
        "classes": ["Bard", "Cleric", "Druid", "Paladin", "Ranger", "Sorcerer", "Wizard"],
        "ritual": True,
        "concentration": True,
    },
    "Find Familiar": {
        "level": 1,
        "school": "Conjuration",
        "casting_time": "1 hour",
        "range": "10 feet",
        "components": ["V", "S", "M"],
        "duration": "Instantaneous",
        "description": "You gain the service of a familiar, a spirit that takes an animal form.",
        "classes": ["Wizard"],
        "ritual": True,
    },
    "Healing Word": {
        "level": 1,
        "school": "Abjuration",
        "casting_time": "BA",
        "range": "60 feet",
        "components": ["V"],
        "duration": "Instantaneous",
        "description": "A creature of your choice that you can see within range regains Hit Points.",
        "classes": ["Bard", "Cleric", "Druid"],
        "damage": "2d4",
        "damage_type": "healing",
        "upcast": "+2d4 healing per slot level above 1st",
    },
    "Hex": {
        "level": 1,
        "school": "Enchantment",
        "casting_time": "BA",
        "range": "90 feet",
        "components": ["V", "S", "M"],
        "duration": "Concentration, up to 1 hour",
        "description": "You place a curse on a creature that you can see within range.",
        "classes": ["Warlock"],
        "concentration": True,
        "damage": "1d6",
        "damage_type": "necrotic",
        "upcast": "Duration increases at higher slot levels",
    },
    "Magic Missile": {
        "level": 1,
        "school": "Evocation",
        "casting_time": "A",
        "range": "120 feet",
        "components": ["V", "S"],
        "duration": "Instantaneous",
        "description": "You create three glowing darts of magical force.",
        "classes": ["Sorcerer", "Wizard"],
        "damage": "1d4+1",
        "damage_type": "force",
        "upcast": "+1 dart per slot level above 1st",
    },
    "Shield": {
        "level": 1,
        "school": "Abjuration",
        "casting_time": "R",
        "range": "Self",
        "components": ["V", "S"],
        "duration": "1 round",
        "description": "An imperceptible barrier of magical force grants +5 AC until the start of your next turn.",
        "classes": ["Sorcerer", "Wizard"],
    },
    "Sleep": {
        "level": 1,
        "school": "Enchantment",
        "casting_time": "A",
        "range": "60 feet",
        "components": ["V", "S", "M"],
        "duration": "Concentration, up to 1 minute",
        "description": "Each creature of your choice in a 5-foot-radius Sphere must succeed on a Wisdom save.",
        "classes": ["Bard", "Sorcerer", "Wizard"],
        "concentration": True,
        "saving_throw": "WIS",
    },
    "Hellish Rebuke": {
        "level": 1,
        "school": "Evocation",
        "casting_time": "R",
        "range": "60 feet",
        "components": ["V", "S"],
        "duration": "Instantaneous",
        "description": "The creature that damaged you is momentarily surrounded by green flames.",
        "classes": ["Warlock"],
        "damage": "2d10",
        "damage_type": "fire",
        "saving_throw": "DEX",
        "upcast": "+1d10 per slot level above 1st",
    },
    # 2nd level
    "Misty Step": {
        "level": 2,
        "school": "Conjuration",
        "casting_time": "BA",
        "range": "Self",
        "components": ["V"],
        "duration": "Instantaneous",
        "description": "Briefly surrounded by silvery mist, you teleport up to 30 feet.",
        "classes": ["Sorcerer", "Warlock", "Wizard"],
    },
    "Scorching Ray": {
        "level": 2,
        "school": "Evocation",
        "casting_time": "A",
        "range": "120 feet",
        "components": ["V", "S"],
        "duration": "Instantaneous",
        "description": "You hurl three fiery rays.",
        "classes": ["Sorcerer", "Wizard"],
        "damage": "2d6",
        "damage_type": "fire",
        "upcast": "+1 ray per slot level above 2nd",
    },
    "Spiritual Weapon": {
        "level": 2,
        "school": "Evocation",
        "casting_time": "BA",
        "range": "60 feet",
        "components": ["V", "S"],
        "duration": "Concentration, up to 1 minute",
        "description": "You create a floating, spectral force that resembles a weapon.",
        "classes": ["Cleric"],
        "damage": "1d8",
        "damage_type": "force",
        "upcast": "+1d8 per slot level above 2nd",
    },
    # 3rd level
    "Counterspell": {
        "level": 3,
        "school": "Abjuration",
        "casting_time": "R",
        "range": "60 feet",
        "components": ["S"],
        "duration": "Instantaneous",
        "description": "You attempt to interrupt a creature in the process of casting a spell.",
        "classes": ["Sorcerer", "Warlock", "Wizard"],
        "saving_throw": "CON",
    },
    "Fireball": {
        "level": 3,
        "school": "Evocation",
        "casting_time": "A",
        "range": "150 feet",
        "components": ["V", "S", "M"],
        "duration": "Instantaneous",
        "description": "A bright streak flashes from you to a point you choose and then blossoms into an explosion of flame.",
        "classes": ["Sorcerer", "Wizard"],
        "damage": "8d6",
        "damage_type": "fire",
        "saving_throw": "DEX",
        "upcast": "+1d6 per slot level above 3rd",
    },
    "Leomund's Tiny Hut": {
        "level": 3,
        "school": "Evocation",
        "casting_time": "1 minute",
        "range": "Self",
        "components": ["V", "S", "M"],
        "duration": "8 hours",
        "description": "A 10-foot Emanation springs into existence around you and remains stationary.",
        "classes": ["Bard", "Wizard"],
        "ritual": True,
    },
}


# =============================================================================
# Conditions
# =============================================================================

CONDITIONS: dict[str, str] = {
    "Blinded": "You can't see. Attack rolls against you have Advantage; yours have Disadvantage.",
    "Charmed": "You can't attack the charmer, who has Advantage on social checks against you.",
    "Deafened": "You can't hear and automatically fail checks that rely on hearing.",
    "Exhaustion": "Cumulative levels reduce d20 tests and Speed. Level 6 is death.",
    "Frightened": "Disadvantage on checks and attacks while the source of fear is in sight.",
    "Grappled": "Speed 0. Disadvantage on attacks against targets other than the grappler.",
    "Incapacitated": "You can't take actions, Bonus Actions or Reactions.",
    "Invisible": "Attacks against you have Disadvantage; your attacks have Advantage.",
    "Paralyzed": "Incapacitated, Speed 0, and melee hits against you are critical.",
    "Petrified": "Transformed into solid inanimate substance, with Resistance to all damage.",
    "Poisoned": "Disadvantage on attack rolls and ability checks.",
    "Prone": "You can only crawl. Melee attacks against you have Advantage.",
    "Restrained": "Speed 0. Your attacks and DEX saves have Disadvantage.",
    "Stunned": "Incapacitated. You automatically fail STR and DEX saves.",
    "Unconscious": "Incapacitated and Prone. You drop whatever you're holding.",
}


# =============================================================================
# Classes
# =============================================================================

CLASSES: dict[str, dict[str, Any]] = {
    "Cleric": {
        "hit_die": "d8",
        "primary_ability": ["wisdom"],
        "saving_throws": ["wisdom", "charisma"],
        "armor_proficiencies": ["Light armor", "Medium armor", "Shields"],
        "weapon_proficiencies": ["Simple weapons"],
        "spellcasting_ability": "wisdom",
        "prepares_spells": True,
        "ritual_caster": True,
        "features": [
            {"name": "Spellcasting", "level": 1, "description": "Cast prepared cleric spells using Wisdom."},
            {"name": "Divine Order", "level": 1, "description": "Choose Protector or Thaumaturge."},
            {"name": "Channel Divinity", "level": 2, "description": "Channel divine energy for magical effects."},
        ],
        "subclasses": [
            {
                "name": "Life Domain",
                "features": [
                    {"name": "Disciple of Life", "level": 3, "description": "Healing spells restore extra HP."},
                ],
            },
        ],
    },
    "Fighter": {
        "hit_die": "d10",
        "primary_ability": ["strength", "dexterity"],
        "saving_throws": ["strength", "constitution"],
        "armor_proficiencies": ["Light armor", "Medium armor", "Heavy armor", "Shields"],
        "weapon_proficiencies": ["Simple weapons", "Martial weapons"],
        "features": [
            {"name": "Fighting Style", "level": 1, "description": "Adopt a particular style of fighting."},
            {"name": "Second Wind", "level": 1, "description": "Regain 1d10 + Fighter level HP as a Bonus Action."},
            {"name": "Action Surge", "level": 2, "description": "Take one additional action on your turn."},
        ],
        "subclasses": [
            {
                "name": "Champion",
                "features": [
                    {"name": "Improved Critical", "level": 3, "description": "Critical hits on a 19 or 20."},
                ],
            },
        ],
    },
    "Rogue": {
        "hit_die": "d8",
        "primary_ability": ["dexterity"],
        "saving_throws": ["dexterity", "intelligence"],
        "armor_proficiencies": ["Light armor"],
        "weapon_proficiencies": ["Simple weapons", "Hand crossbows", "Longswords", "Rapiers", "Shortswords"],
        "features": [
            {"name": "Sneak Attack", "level": 1, "description": "Deal extra damage once per turn."},
            {"name": "Cunning Action", "level": 2, "description": "Dash, Disengage or Hide as a Bonus Action."},
        ],
        "subclasses": [
            {
                "name": "Thief",
                "features": [
                    {"name": "Fast Hands", "level": 3, "description": "Use an object as a Bonus Action."},
                ],
            },
        ],
    },
    "Sorcerer": {
        "hit_die": "d6",
        "primary_ability": ["charisma"],
        "saving_throws": ["constitution", "charisma"],
        "weapon_proficiencies": ["Simple weapons"],
        "spellcasting_ability": "charisma",
        "features": [
            {"name": "Spellcasting", "level": 1, "description": "Cast known sorcerer spells using Charisma."},
            {"name": "Font of Magic", "level": 2, "description": "Tap into Sorcery Points."},
        ],
    },
    "Warlock": {
        "hit_die": "d8",
        "primary_ability": ["charisma"],
        "saving_throws": ["wisdom", "charisma"],
        "armor_proficiencies": ["Light armor"],
        "weapon_proficiencies": ["Simple weapons"],
        "spellcasting_ability": "charisma",
        "features": [
            {"name": "Pact Magic", "level": 1, "description": "Pact slots recharge on a short rest."},
            {"name": "Eldritch Invocations", "level": 1, "description": "Fragments of forbidden knowledge."},
        ],
        "subclasses": [
            {
                "name": "Fiend Patron",
                "features": [
                    {"name": "Dark One's Blessing", "level": 3, "description": "Gain temp HP when you reduce a foe to 0."},
                ],
            },
        ],
    },
    "Wizard": {
        "hit_die": "d6",
        "primary_ability": ["intelligence"],
        "saving_throws": ["intelligence", "wisdom"],
        "weapon_proficiencies": ["Simple weapons"],
        "spellcasting_ability": "intelligence",
        "prepares_spells": True,
        "ritual_caster": True,
        "ritual_caster_unprepared": True,
        "features": [
            {"name": "Spellcasting", "level": 1, "description": "Cast prepared wizard spells using Intelligence."},
            {"name": "Ritual Adept", "level": 1, "description": "Cast any Ritual spell in your spellbook as a Ritual."},
            {"name": "Arcane Recovery", "level": 1, "description": "Recover spell slots on a short rest once per day."},
        ],
        "subclasses": [
            {
                "name": "Evoker",
                "features": [
                    {"name": "Sculpt Spells", "level": 3, "description": "Protect allies from your evocations."},
                ],
            },
        ],
    },
}


# =============================================================================
# Races & Backgrounds
# =============================================================================

RACES: dict[str, dict[str, Any]] = {
    "Dwarf": {
        "speed": 30,
        "traits": [
            {"name": "Darkvision", "description": "See in dim light within 120 feet."},
            {"name": "Dwarven Resilience", "description": "Resistance to Poison damage."},
        ],
        "languages": ["Common", "Dwarvish"],
    },
    "Elf": {
        "speed": 30,
        "traits": [
            {"name": "Darkvision", "description": "See in dim light within 60 feet."},
            {"name": "Fey Ancestry", "description": "Advantage on saves to avoid or end Charmed."},
            {"name": "Trance", "description": "Finish a Long Rest in 4 hours."},
        ],
        "languages": ["Common", "Elvish"],
    },
    "Halfling": {
        "size": "Small",
        "speed": 30,
        "traits": [
            {"name": "Brave", "description": "Advantage on saves to avoid or end Frightened."},
            {"name": "Luck", "description": "Reroll a 1 on a d20 test."},
        ],
        "languages": ["Common", "Halfling"],
    },
    "Human": {
        "speed": 30,
        "traits": [
            {"name": "Resourceful", "description": "Gain Heroic Inspiration after a Long Rest."},
            {"name": "Skillful", "description": "Gain proficiency in one skill."},
        ],
        "languages": ["Common"],
    },
    "Tiefling": {
        "speed": 30,
        "traits": [
            {"name": "Darkvision", "description": "See in dim light within 60 feet."},
            {"name": "Fiendish Legacy", "description": "Innate spellcasting from your legacy."},
        ],
        "languages": ["Common", "Infernal"],
    },
}

BACKGROUNDS: dict[str, dict[str, Any]] = {
    "Acolyte": {
        "description": "You devoted yourself to service in a temple.",
        "skill_proficiencies": ["insight", "religion"],
        "tool_proficiency": "Calligrapher's Supplies",
        "feat": "Magic Initiate (Cleric)",
    },
    "Criminal": {
        "description": "You eked out a living in dark alleyways.",
        "skill_proficiencies": ["sleight_of_hand", "stealth"],
        "tool_proficiency": "Thieves' Tools",
        "feat": "Alert",
    },
    "Sage": {
        "description": "You spent years poring over ancient manuscripts.",
        "skill_proficiencies": ["arcana", "history"],
        "tool_proficiency": "Calligrapher's Supplies",
        "feat": "Magic Initiate (Wizard)",
    },
    "Soldier": {
        "description": "You trained for war from a young age.",
        "skill_proficiencies": ["athletics", "intimidation"],
        "tool_proficiency": "Gaming Set",
        "feat": "Savage Attacker",
    },
}


__all__ = [
    "WEAPONS",
    "ARMOR",
    "GEAR",
    "TOOLS",
    "PACKS",
    "SPELLS",
    "CONDITIONS",
    "CLASSES",
    "RACES",
    "BACKGROUNDS",
]
