"""Projection of screen state into rich renderables.

Every function here is pure: it reads a controller and returns a
renderable, never mutating anything. The terminal adapter pushes the
result into a single textual ``Static``.
"""

from __future__ import annotations

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from dnd_sheet.catalog.entries import SpellEntry
from dnd_sheet.core.constants import MAX_ATTUNED_ITEMS
from dnd_sheet.engine.hp_bar import hp_bar_segments, hp_color
from dnd_sheet.engine.modifiers import format_modifier, saving_throw_modifier, skill_modifier
from dnd_sheet.engine.spells import describe_upcast
from dnd_sheet.models.character import Character
from dnd_sheet.models.enums import Ability, Condition, ProficiencyLevel, ProgressionType, Skill
from dnd_sheet.ui.base import ScreenController
from dnd_sheet.ui.modals import (
    CastResolution,
    Confirmation,
    ListPicker,
    Modal,
    NumericEntry,
    RestFlow,
    RestPhase,
    Search,
    TextEntry,
)
from dnd_sheet.ui.screens.character_info import CharacterInfoController, InfoPanel, features_for_tab
from dnd_sheet.ui.screens.inventory import (
    CURRENCY_ROWS,
    EQUIPMENT_ROWS,
    RING_SLOTS,
    RINGS_ROW,
    TOTAL_ROW,
    InventoryController,
    InventoryPanel,
    currency_label,
)
from dnd_sheet.ui.screens.main_sheet import MainSheetController, SheetPanel
from dnd_sheet.ui.screens.selection import SelectionController
from dnd_sheet.ui.screens.spellbook import SpellbookController, SpellbookMode


# =============================================================================
# Styles
# =============================================================================

FOCUSED_BORDER = "bold yellow"
BLURRED_BORDER = "grey50"
CURSOR_STYLE = "reverse"
HEADER_STYLE = "bold magenta"

_PROFICIENCY_MARKS = {
    ProficiencyLevel.NONE: " ",
    ProficiencyLevel.PROFICIENT: "●",
    ProficiencyLevel.EXPERTISE: "◆",
}


def _panel(body: RenderableType, title: str, focused: bool) -> Panel:
    return Panel(
        body,
        title=title,
        border_style=FOCUSED_BORDER if focused else BLURRED_BORDER,
        box=box.ROUNDED,
        padding=(0, 1),
    )


def _row_style(selected: bool, focused: bool = True) -> str:
    return CURSOR_STYLE if selected and focused else ""


def _footer(status: str, help_text: str) -> Group:
    return Group(
        Text(status, style="bold cyan") if status else Text(""),
        Text(help_text, style="dim"),
    )


# =============================================================================
# Shared pieces
# =============================================================================


def hp_bar(character: Character, width: int) -> Text:
    """HP bar with current, temporary and missing segments."""
    hp = character.combat.hit_points
    segments = hp_bar_segments(hp.current, hp.maximum, hp.temporary, width)
    color = hp_color(hp.current, hp.maximum)

    bar = Text()
    bar.append("█" * segments.current, style=color)
    bar.append("█" * segments.temporary, style="cyan")
    bar.append("░" * segments.empty, style="grey35")
    return bar


def character_header(character: Character) -> Text:
    info = character.info
    header = Text()
    header.append(info.name, style="bold")
    details = " ".join(part for part in (info.race, info.class_name) if part)
    header.append(f"  Level {info.level} {details}".rstrip())
    if info.subclass:
        header.append(f" ({info.subclass})", style="dim")
    return header


def progression_line(character: Character) -> Text:
    """"XP: n / next" or "Milestone", with level-up and inspiration markers."""
    info = character.info
    line = Text(style="dim")
    if info.progression == ProgressionType.MILESTONE:
        line.append("Milestone")
    elif info.xp_for_next_level:
        line.append(f"XP: {info.experience_points} / {info.xp_for_next_level}")
    else:
        line.append(f"XP: {info.experience_points}")
    if info.can_level_up():
        line.append("  ▲ Level up available", style="bold green")
    if info.inspiration:
        line.append("  ★ Inspired", style="bold yellow")
    return line


# =============================================================================
# Selection
# =============================================================================


def render_selection(ctrl: SelectionController) -> RenderableType:
    if ctrl.loading:
        body: RenderableType = Text("Loading characters...", style="italic")
    elif not ctrl.characters:
        body = Text("No saved characters. Press n to create one.", style="dim")
    else:
        table = Table(box=None, show_header=True, header_style=HEADER_STYLE, expand=True)
        table.add_column("Name")
        table.add_column("Level", justify="right")
        table.add_column("Race")
        table.add_column("Class")
        table.add_column("Updated", style="dim")
        for index, summary in enumerate(ctrl.characters):
            table.add_row(
                summary.name,
                str(summary.level),
                summary.race,
                summary.class_name,
                summary.updated_at.strftime("%Y-%m-%d %H:%M"),
                style=_row_style(index == ctrl.cursor),
            )
        body = table

    return Group(
        _panel(body, "Characters", True),
        _footer(ctrl.status, "↑/↓ select  enter open  n new  d delete  q quit"),
    )


# =============================================================================
# Main sheet
# =============================================================================


def _abilities_panel(ctrl: MainSheetController) -> Panel:
    character = ctrl.character
    focused = ctrl.focus.current == SheetPanel.ABILITIES
    table = Table(box=None, show_header=True, header_style=HEADER_STYLE)
    table.add_column("Ability")
    table.add_column("Score", justify="right")
    table.add_column("Mod", justify="right")
    table.add_column("Save", justify="right")
    for index, ability in enumerate(Ability):
        mark = "●" if character.saving_throws.is_proficient(ability) else " "
        table.add_row(
            ability.abbreviation,
            str(character.ability_scores.score(ability)),
            format_modifier(character.ability_scores.modifier(ability)),
            f"{mark} {format_modifier(saving_throw_modifier(character, ability))}",
            style=_row_style(index == ctrl.ability_cursor, focused),
        )
    return _panel(table, "Abilities", focused)


def _skills_panel(ctrl: MainSheetController) -> Panel:
    character = ctrl.character
    focused = ctrl.focus.current == SheetPanel.SKILLS
    table = Table(box=None, show_header=False)
    table.add_column(width=1)
    table.add_column("Skill")
    table.add_column("Mod", justify="right")
    for index, skill in enumerate(Skill):
        table.add_row(
            _PROFICIENCY_MARKS[character.skills.level(skill)],
            f"{skill.display_name} ({skill.ability.abbreviation})",
            format_modifier(skill_modifier(character, skill)),
            style=_row_style(index == ctrl.skill_cursor, focused),
        )
    return _panel(table, "Skills", focused)


def _combat_panel(ctrl: MainSheetController) -> Panel:
    character = ctrl.character
    combat = character.combat
    hp = combat.hit_points
    focused = ctrl.focus.current == SheetPanel.COMBAT

    readout = Text("HP ")
    readout.append(f"{hp.current}/{hp.maximum}", style=f"bold {hp_color(hp.current, hp.maximum)}")
    if hp.temporary:
        readout.append(f" (+{hp.temporary} temp)", style="cyan")

    stats = Text(
        f"AC {combat.armor_class}   Init {format_modifier(character.initiative)}   "
        f"Speed {combat.speed} ft   Prof {format_modifier(character.proficiency_bonus)}\n"
        f"Hit Dice {combat.hit_dice.remaining}/{combat.hit_dice.total} {combat.hit_dice.die_type}   "
        f"Passive Perception {character.passive_perception}"
    )

    lines: list[RenderableType] = [readout, hp_bar(character, max(ctrl.width // 2 - 4, 0)), stats]

    saves = combat.death_saves
    if hp.current == 0:
        death = Text("Death Saves  ")
        death.append("✓" * saves.successes + "·" * (3 - saves.successes), style="green")
        death.append("  ")
        death.append("✗" * saves.failures + "·" * (3 - saves.failures), style="red")
        if saves.is_stable:
            death.append("  STABLE", style="bold green")
        elif saves.is_dead:
            death.append("  DEAD", style="bold red")
        lines.append(death)

    conditions = ", ".join(Condition(c).display_name for c in combat.conditions) or "None"
    lines.append(Text(f"Conditions: {conditions}"))
    if combat.exhaustion_level:
        lines.append(Text(f"Exhaustion: {combat.exhaustion_level}", style="yellow"))
    return _panel(Group(*lines), "Combat", focused)


def _actions_panel(ctrl: MainSheetController) -> Panel:
    focused = ctrl.focus.current == SheetPanel.ACTIONS
    tabs = Text()
    for tab in ctrl.action_tabs.tabs:
        style = "bold underline" if tab == ctrl.action_tabs.current else "dim"
        tabs.append(f" {tab} ", style=style)

    rows = Table(box=None, show_header=False, expand=True)
    rows.add_column("Name")
    rows.add_column("Summary", style="dim")
    items = ctrl.action_items()
    for index, item in enumerate(items):
        rows.add_row(item.name, item.summary, style=_row_style(index == ctrl.action_cursor, focused))
    if not items:
        rows.add_row(Text("Nothing available", style="dim"), "")
    return _panel(Group(tabs, rows), "Actions", focused)


def render_main_sheet(ctrl: MainSheetController) -> RenderableType:
    grid = Table.grid(expand=True)
    grid.add_column(ratio=1)
    grid.add_column(ratio=1)
    grid.add_row(_abilities_panel(ctrl), _combat_panel(ctrl))
    grid.add_row(_skills_panel(ctrl), _actions_panel(ctrl))
    return Group(
        character_header(ctrl.character),
        progression_line(ctrl.character),
        grid,
        _footer(
            ctrl.status,
            "tab focus  d dmg  h heal  t temp  1/2 saves  +/- cond  r rest  i inv  s spells  c info  esc back  q quit",
        ),
    )


# =============================================================================
# Inventory
# =============================================================================


def _equipment_panel(ctrl: InventoryController) -> Panel:
    inventory = ctrl.character.inventory
    focused = ctrl.focus.current == InventoryPanel.EQUIPMENT
    table = Table(box=None, show_header=False, expand=True)
    table.add_column("Slot", style="bold")
    table.add_column("Item")
    for index, row in enumerate(EQUIPMENT_ROWS):
        if row == RINGS_ROW:
            worn = [inventory.equipped_item(slot) for slot in RING_SLOTS]
            label, value = "Rings", ", ".join(item.name for item in worn if item) or "—"
        else:
            item = inventory.equipped_item(row)
            label, value = row.display_name, item.name if item else "—"
        table.add_row(label, value, style=_row_style(index == ctrl.equipment_cursor, focused))

    attuned = inventory.attuned_count()
    style = "bold red" if attuned >= MAX_ATTUNED_ITEMS else ""
    return _panel(Group(table, Text(f"Attuned: {attuned}/{MAX_ATTUNED_ITEMS}", style=style)), "Equipment", focused)


def _items_panel(ctrl: InventoryController) -> Panel:
    inventory = ctrl.character.inventory
    focused = ctrl.focus.current == InventoryPanel.ITEMS
    items = ctrl.display_items()
    per_page = ctrl.settings.sheet.items_per_page

    table = Table(box=None, show_header=True, header_style=HEADER_STYLE, expand=True)
    table.add_column("Item")
    table.add_column("Qty", justify="right")
    table.add_column("Wt", justify="right")
    table.add_column("", width=2)
    visible = items[ctrl.item_scroll : ctrl.item_scroll + per_page]
    for offset, item in enumerate(visible):
        index = ctrl.item_scroll + offset
        name = f"{item.name} ▸" if item.is_container else item.name
        marker = "E" if inventory.is_equipped(item.id) else ""
        table.add_row(
            name,
            str(item.quantity),
            f"{item.weight * item.quantity:g}",
            marker,
            style=_row_style(index == ctrl.cursor, focused),
        )
    if not items:
        table.add_row(Text("Empty", style="dim"), "", "", "")

    container = ctrl.container
    title = f"Items › {container.name}" if container is not None else "Items"
    weight = Text(f"Total weight: {inventory.total_weight():g} lb", style="dim")
    return _panel(Group(table, weight), title, focused)


def _currency_panel(ctrl: InventoryController) -> Panel:
    currency = ctrl.character.inventory.currency
    focused = ctrl.focus.current == InventoryPanel.CURRENCY
    table = Table(box=None, show_header=False)
    table.add_column("Coin", style="bold")
    table.add_column("Amount", justify="right")
    for index, row in enumerate(CURRENCY_ROWS):
        if row == TOTAL_ROW:
            amount = f"{currency.total_in_gold():.2f}"
        else:
            amount = str(currency.amount(row))
        table.add_row(currency_label(row), amount, style=_row_style(index == ctrl.currency_cursor, focused))
    return _panel(table, "Currency", focused)


def render_inventory(ctrl: InventoryController) -> RenderableType:
    grid = Table.grid(expand=True)
    grid.add_column(ratio=1)
    grid.add_column(ratio=2)
    grid.add_column(ratio=1)
    grid.add_row(_equipment_panel(ctrl), _items_panel(ctrl), _currency_panel(ctrl))
    return Group(
        character_header(ctrl.character),
        grid,
        _footer(
            ctrl.status,
            "tab focus  enter open  e equip  n qty  x delete  a add  s spend  esc back  q quit",
        ),
    )


# =============================================================================
# Spellbook
# =============================================================================


def _slots_line(ctrl: SpellbookController) -> Text:
    spellcasting = ctrl.spellcasting
    line = Text()
    if spellcasting is None:
        return line
    for level, tracker in sorted(spellcasting.slots.items()):
        if tracker.total:
            line.append(f"L{level} ")
            line.append("●" * tracker.remaining + "○" * (tracker.total - tracker.remaining), style="magenta")
            line.append("  ")
    pact = spellcasting.pact_magic
    if pact is not None and pact.total:
        line.append(f"Pact L{pact.slot_level} ")
        line.append("●" * pact.remaining + "○" * (pact.total - pact.remaining), style="green")
    return line


def _spell_details(ctrl: SpellbookController) -> RenderableType:
    if ctrl.loading:
        return Text("Loading spell data...", style="italic dim")
    row = ctrl.current_row
    entry = ctrl.selected_entry
    if row is None:
        return Text("No spell selected", style="dim")
    if entry is None:
        return Text(f"No data for {row.name}", style="dim")

    level = "Cantrip" if entry.is_cantrip else f"Level {entry.level}"
    lines = [
        Text(entry.name, style="bold"),
        Text(f"{level} {entry.school}".strip() + (" (ritual)" if entry.ritual else ""), style="italic"),
        Text(f"Casting Time: {entry.casting_time}"),
        Text(f"Range: {entry.range}"),
        Text(f"Components: {', '.join(entry.components)}"),
        Text(f"Duration: {entry.duration}"),
    ]
    if entry.damage:
        lines.append(Text(f"Damage: {entry.damage} {entry.damage_type}".rstrip()))
    if entry.saving_throw:
        lines.append(Text(f"Save: {entry.saving_throw} DC {ctrl.character.spell_save_dc}"))
    lines.append(Text(""))
    lines.append(Text(entry.description))
    if entry.upcast:
        lines.append(Text(f"At Higher Levels: {entry.upcast}", style="dim"))
    return Group(*lines)


def render_spellbook(ctrl: SpellbookController) -> RenderableType:
    character = ctrl.character
    preparing = ctrl.mode_name == SpellbookMode.PREPARATION

    if ctrl.spellcasting is None:
        body: RenderableType = Text("This character cannot cast spells.", style="dim")
    else:
        table = Table(box=None, show_header=True, header_style=HEADER_STYLE, expand=True)
        table.add_column("", width=3)
        table.add_column("Spell")
        table.add_column("Lvl", justify="right")
        per_page = ctrl.settings.sheet.items_per_page
        rows = ctrl.rows()
        for offset, row in enumerate(rows[ctrl.scroll : ctrl.scroll + per_page]):
            index = ctrl.scroll + offset
            if row.always_prepared:
                mark = "[●]"
            elif row.prepared or row.is_cantrip:
                mark = "[✓]"
            else:
                mark = "[ ]"
            name = f"{row.name} (R)" if row.ritual else row.name
            table.add_row(
                mark if preparing else "",
                name,
                "C" if row.is_cantrip else str(row.level),
                style=_row_style(index == ctrl.cursor),
            )
        if not rows:
            table.add_row("", Text("No spells", style="dim"), "")
        body = table

    sc = character.spellcasting
    stats = Text(
        f"Save DC {character.spell_save_dc}   Attack {format_modifier(character.spell_attack_bonus)}"
        + (f"   Prepared {sc.count_prepared()}/{sc.max_prepared}" if sc is not None and sc.max_prepared else "")
    )
    grid = Table.grid(expand=True)
    grid.add_column(ratio=1)
    grid.add_column(ratio=1)
    title = "Preparation" if preparing else "Spells"
    if ctrl.filter_level is not None:
        title += f" ({'cantrips' if ctrl.filter_level == 0 else f'level {ctrl.filter_level}'})"
    grid.add_row(_panel(body, title, True), _panel(_spell_details(ctrl), "Details", False))
    return Group(
        character_header(character),
        stats,
        _slots_line(ctrl),
        grid,
        _footer(ctrl.status, "c cast  p prepare  f filter  a add  x remove  esc back  q quit"),
    )


# =============================================================================
# Character info
# =============================================================================


def render_character_info(ctrl: CharacterInfoController) -> RenderableType:
    focused = ctrl.focus.current == InfoPanel.PERSONALITY
    personality = Table(box=None, show_header=False, expand=True)
    personality.add_column("Entry")
    for index, line in enumerate(ctrl.lines()):
        text = line.text
        if line.section == "backstory" and not line.header and not ctrl.backstory_expanded:
            first = text.splitlines()[0] if text else ""
            text = first if len(first) <= 60 else first[:57] + "..."
        style = "bold" if line.header else ("dim" if line.placeholder else "")
        selected = index == ctrl.personality_cursor and focused
        personality.add_row(Text(text if line.header else f"  {text}", style=CURSOR_STYLE if selected else style))

    features_focused = not focused
    tabs = Text()
    for tab in ctrl.feature_tabs.tabs:
        tabs.append(f" {tab} ", style="bold underline" if tab == ctrl.feature_tabs.current else "dim")
    features = Table(box=None, show_header=False, expand=True)
    features.add_column("Feature")
    features.add_column("Uses", justify="right")
    listed = features_for_tab(ctrl.character, ctrl.feature_tabs.current)
    for index, feature in enumerate(listed):
        features.add_row(
            feature.name,
            feature.uses_display,
            style=_row_style(index == ctrl.feature_cursor, features_focused),
        )
    if not listed:
        features.add_row(Text("None", style="dim"), "")
    detail: RenderableType = Text("")
    if features_focused and 0 <= ctrl.feature_cursor < len(listed):
        feature = listed[ctrl.feature_cursor]
        detail = Text(f"{feature.source}\n{feature.description}".strip(), style="dim")

    grid = Table.grid(expand=True)
    grid.add_column(ratio=1)
    grid.add_column(ratio=1)
    grid.add_row(
        _panel(personality, "Personality", focused),
        _panel(Group(tabs, features, detail), "Features", features_focused),
    )
    return Group(
        character_header(ctrl.character),
        grid,
        _footer(ctrl.status, "tab focus  e edit  a add  d delete  enter expand  ←/→ tabs  esc back"),
    )


# =============================================================================
# Modals
# =============================================================================


def render_modal(modal: Modal, ctrl: ScreenController) -> RenderableType:
    """Overlay panel for the active modal."""
    if isinstance(modal, Confirmation):
        confirm = Panel(Text(modal.prompt, style="bold"), border_style="red", title="Confirm")
        if modal.parent is not None:
            return Group(render_modal(modal.parent, ctrl), confirm)
        return confirm

    if isinstance(modal, NumericEntry):
        return Panel(Text(f"{modal.buffer}█"), title=modal.title or "Amount", border_style="cyan")

    if isinstance(modal, TextEntry):
        hint = "ctrl+s save  esc cancel" if modal.multiline else "enter save  esc cancel"
        title = f"{'Add' if modal.adding else 'Edit'} {modal.section}"
        return Panel(Group(Text(f"{modal.buffer}█"), Text(hint, style="dim")), title=title, border_style="cyan")

    if isinstance(modal, ListPicker):
        table = Table(box=None, show_header=False)
        table.add_column(modal.title)
        for index, option in enumerate(modal.options):
            table.add_row(option, style=_row_style(index == modal.cursor))
        return Panel(table, title=modal.title, border_style="cyan")

    if isinstance(modal, Search):
        table = Table(box=None, show_header=False, expand=True)
        table.add_column("Name")
        table.add_column("Info", style="dim")
        for index, entry in enumerate(modal.results):
            info = f"Level {entry.level}" if isinstance(entry, SpellEntry) else getattr(entry, "damage", "")
            table.add_row(entry.name, info, style=_row_style(index == modal.cursor))
        if not modal.ready:
            table.add_row(Text(f"Type at least {modal.min_chars} characters", style="dim"), "")
        elif not modal.results:
            table.add_row(Text("No matches", style="dim"), "")
        return Panel(Group(Text(f"Search: {modal.query}█"), table), title="Add", border_style="cyan")

    if isinstance(modal, CastResolution):
        lines: list[RenderableType] = [Text(f"Cast {modal.name}", style="bold")]
        if not modal.options:
            lines.append(Text("Cantrip: no slot required. enter to cast, esc to cancel"))
        for index, option in enumerate(modal.options):
            label = option.label
            if modal.spell is not None and option.level > modal.level:
                effect = describe_upcast(modal.spell, option.level, modal.level)
                if effect:
                    label = f"{label} ({effect})"
            lines.append(Text(label, style=_row_style(index == modal.cursor)))
        return Panel(Group(*lines), title="Cast", border_style="magenta")

    if isinstance(modal, RestFlow):
        return Panel(_rest_body(modal, ctrl), title="Rest", border_style="green")

    return Text("")


def _rest_body(flow: RestFlow, ctrl: ScreenController) -> RenderableType:
    if flow.phase == RestPhase.MENU:
        return Text("s / 1  Short rest\nl / 2  Long rest\nesc    Cancel")
    if flow.phase == RestPhase.SHORT:
        die = ""
        if ctrl.record is not None:
            die = ctrl.record.combat.hit_dice.die_type
        return Text(
            f"Hit dice to spend: {flow.dice_to_spend} / {flow.max_dice} {die}\n"
            "↑/↓ adjust  enter rest  esc back"
        )
    if flow.phase == RestPhase.LONG:
        return Text("Take a long rest? Restores HP, spell slots and half your hit dice.\nenter/y rest  esc/n back")
    return Group(*(Text(line) for line in flow.summary), Text("Press any key", style="dim"))


# =============================================================================
# Entry point
# =============================================================================


def render_screen(ctrl: ScreenController) -> RenderableType:
    """Render the active screen plus any modal overlay."""
    ctrl.clamp_cursors()
    if isinstance(ctrl, SelectionController):
        body = render_selection(ctrl)
    elif isinstance(ctrl, MainSheetController):
        body = render_main_sheet(ctrl)
    elif isinstance(ctrl, InventoryController):
        body = render_inventory(ctrl)
    elif isinstance(ctrl, SpellbookController):
        body = render_spellbook(ctrl)
    elif isinstance(ctrl, CharacterInfoController):
        body = render_character_info(ctrl)
    else:
        body = Text(ctrl.status)

    if ctrl.modal is None:
        return body
    return Group(body, render_modal(ctrl.modal, ctrl))


__all__ = [
    "hp_bar",
    "character_header",
    "progression_line",
    "render_selection",
    "render_main_sheet",
    "render_inventory",
    "render_spellbook",
    "render_character_info",
    "render_modal",
    "render_screen",
]
