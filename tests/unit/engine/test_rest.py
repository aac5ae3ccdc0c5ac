"""Tests for short and long rest resolution."""

from __future__ import annotations

import pytest

from dnd_sheet.core.exceptions import RulesError
from dnd_sheet.engine.rest import long_rest, short_rest
from dnd_sheet.models.character import Character


class TestShortRest:
    """Tests for spending hit dice."""

    def test_heals_average_plus_con(self, fighter: Character) -> None:
        fighter.combat.hit_points.current = 10

        result = short_rest(fighter, 2)

        assert fighter.combat.hit_points.current == 26
        assert result.healed == 16
        assert fighter.combat.hit_dice.remaining == 1

    def test_healing_capped_at_maximum(self, fighter: Character) -> None:
        fighter.combat.hit_points.current = 25
        result = short_rest(fighter, 3)
        assert result.hp_after == 28
        assert fighter.combat.hit_dice.remaining == 0

    def test_minimum_one_per_die(self, wizard: Character) -> None:
        wizard.ability_scores.constitution = 1
        wizard.combat.hit_points.current = 1
        result = short_rest(wizard, 1)
        assert result.dice_spent[0].total == 1
        assert wizard.combat.hit_points.current == 2

    @pytest.mark.parametrize("dice", [-1, 4])
    def test_out_of_range(self, fighter: Character, dice: int) -> None:
        with pytest.raises(RulesError):
            short_rest(fighter, dice)
        assert fighter.combat.hit_dice.remaining == 3

    def test_restores_features(self, fighter: Character) -> None:
        result = short_rest(fighter, 0)
        assert result.features_restored == ["Second Wind", "Action Surge"]

    def test_summary(self, fighter: Character) -> None:
        fighter.combat.hit_points.current = 10
        lines = short_rest(fighter, 2).summary_lines()
        assert lines[0] == "SHORT REST COMPLETE"
        assert "Hit Dice Spent: 2 (d10)" in lines
        assert "  Die 1: avg (6) + con (2) = 8 HP" in lines
        assert "HP: 10 → 26" in lines
        assert "Hit Dice Remaining: 1/3" in lines
        assert lines[-1] == "Features Restored: Second Wind, Action Surge"

    def test_summary_without_dice(self, wizard: Character) -> None:
        lines = short_rest(wizard, 0).summary_lines()
        assert "No hit dice spent." in lines


class TestLongRest:
    def test_restores_everything(self, fighter: Character) -> None:
        fighter.combat.hit_points.current = 5
        fighter.combat.hit_dice.remaining = 0
        fighter.combat.exhaustion_level = 1

        result = long_rest(fighter)

        assert result.hp_after == 28
        assert result.dice_recovered == 1
        assert result.exhaustion_reduced is True
        lines = result.summary_lines()
        assert lines[0] == "LONG REST COMPLETE"
        assert "HP Restored: +23 (now 28/28)" in lines
        assert "Hit Dice Recovered: +1 (now 1/3)" in lines
        assert "Exhaustion reduced by 1 level" in lines

    def test_already_rested(self, fighter: Character) -> None:
        lines = long_rest(fighter).summary_lines()
        assert "HP: 28/28 (already at max)" in lines
        assert "Hit Dice: 3/3 (already at max)" in lines
        assert "Exhaustion reduced by 1 level" not in lines

    def test_restores_slots(self, wizard: Character) -> None:
        wizard.spellcasting.slot(3).remaining = 0
        long_rest(wizard)
        assert wizard.spellcasting.slot(3).remaining == 2
