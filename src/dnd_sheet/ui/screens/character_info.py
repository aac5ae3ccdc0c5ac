"""Character info screen: personality notes and features."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from dnd_sheet.core.logging import get_logger
from dnd_sheet.models.character import PERSONALITY_SECTIONS, Character, Feature
from dnd_sheet.ui import keys
from dnd_sheet.ui.base import ScreenController
from dnd_sheet.ui.events import KeyEvent, Navigation, ScreenResult
from dnd_sheet.ui.focus import FocusRing, TabStrip, clamp_cursor
from dnd_sheet.ui.modals import Confirmation, StepKind, TextEntry


logger = get_logger(__name__)

BACKSTORY = "backstory"
PLACEHOLDER = "(none)"


class InfoPanel(StrEnum):
    PERSONALITY = "personality"
    FEATURES = "features"


class FeatureTab(StrEnum):
    RACIAL = "Racial"
    CLASS = "Class"
    SUBCLASS = "Subclass"
    FEATS = "Feats"


@dataclass(frozen=True)
class PersonalityLine:
    """One row of the personality list.

    index is None for headers and for the "(none)" placeholder.
    """

    section: str
    text: str
    index: int | None = None
    header: bool = False

    @property
    def placeholder(self) -> bool:
        return not self.header and self.index is None


def personality_lines(character: Character) -> list[PersonalityLine]:
    """Flatten the personality sections into headers and entries."""
    personality = character.personality
    lines: list[PersonalityLine] = []
    for section in PERSONALITY_SECTIONS:
        lines.append(PersonalityLine(section, f"{section.capitalize()}:", header=True))
        entries = personality.section(section)
        if not entries:
            lines.append(PersonalityLine(section, PLACEHOLDER))
        lines.extend(PersonalityLine(section, text, index=i) for i, text in enumerate(entries))

    lines.append(PersonalityLine(BACKSTORY, "Backstory:", header=True))
    if personality.backstory:
        lines.append(PersonalityLine(BACKSTORY, personality.backstory, index=0))
    else:
        lines.append(PersonalityLine(BACKSTORY, PLACEHOLDER))
    return lines


def features_for_tab(character: Character, tab: FeatureTab | str) -> list[Feature]:
    """Features listed under a tab.

    Subclass features are class features whose source names the subclass;
    the Class tab leaves them out.
    """
    features = character.features
    subclass = character.info.subclass
    if tab == FeatureTab.RACIAL:
        return list(features.racial_traits)
    if tab == FeatureTab.CLASS:
        return [f for f in features.class_features if not (subclass and subclass in f.source)]
    if tab == FeatureTab.SUBCLASS:
        if not subclass:
            return []
        return [f for f in features.class_features if subclass in f.source]
    return list(features.feats)


class CharacterInfoController(ScreenController):
    screen_name = "character_info"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.focus: FocusRing[InfoPanel] = FocusRing(list(InfoPanel))
        self.personality_cursor = 0
        self.backstory_expanded = False
        self.feature_tabs = TabStrip(list(FeatureTab), wrap=False)
        self.feature_cursor = 0

    @property
    def character(self) -> Character:
        assert self.record is not None
        return self.record

    def lines(self) -> list[PersonalityLine]:
        return personality_lines(self.character)

    @property
    def current_line(self) -> PersonalityLine | None:
        lines = self.lines()
        if 0 <= self.personality_cursor < len(lines):
            return lines[self.personality_cursor]
        return None

    def features(self) -> list[Feature]:
        return features_for_tab(self.character, self.feature_tabs.current)

    # -------------------------------------------------------------------------
    # Modal keys
    # -------------------------------------------------------------------------

    def on_modal_key(self, event: KeyEvent) -> ScreenResult:
        modal = self.modal
        if isinstance(modal, TextEntry):
            step = modal.feed(event.key if event.printable is None else event.printable)
            if step.kind == StepKind.COMMIT:
                self.close_modal()
                self.apply_edit(modal)
            elif step.kind == StepKind.CANCEL:
                self.close_modal()
        elif isinstance(modal, Confirmation):
            answer = modal.answer(event.key)
            if answer is None:
                return ScreenResult()
            self.close_modal()
            if answer:
                self.delete_line(modal.payload)
        return ScreenResult()

    def apply_edit(self, modal: TextEntry) -> None:
        """Write a finished edit back. Blank text is ignored except for the backstory."""
        text = modal.buffer.strip()
        personality = self.character.personality
        if modal.section == BACKSTORY:
            personality.backstory = text
        elif not text:
            return
        elif modal.adding:
            personality.add(modal.section, text)
        else:
            personality.update(modal.section, modal.index, text)
        logger.info("Personality edited", section=modal.section, adding=modal.adding)
        self._persist()

    def clamp_cursors(self) -> None:
        self.personality_cursor = clamp_cursor(self.personality_cursor, len(self.lines()))
        listed = features_for_tab(self.character, self.feature_tabs.current)
        self.feature_cursor = clamp_cursor(self.feature_cursor, len(listed))

    def delete_line(self, line: PersonalityLine) -> None:
        personality = self.character.personality
        if line.section == BACKSTORY:
            personality.backstory = ""
        elif line.index is not None:
            personality.remove(line.section, line.index)
        logger.info("Personality entry deleted", section=line.section)
        self._persist()
        self.personality_cursor = clamp_cursor(self.personality_cursor, len(self.lines()))

    # -------------------------------------------------------------------------
    # Accelerators & panels
    # -------------------------------------------------------------------------

    def on_global_key(self, event: KeyEvent) -> ScreenResult | None:
        key = event.key
        if key == keys.ESCAPE:
            return ScreenResult(navigation=Navigation.BACK_TO_SHEET)
        if key == keys.TAB:
            self.focus.next()
            return ScreenResult()
        if key == keys.SHIFT_TAB:
            self.focus.previous()
            return ScreenResult()
        return None

    def on_panel_key(self, event: KeyEvent) -> ScreenResult:
        self.status = ""
        if self.focus.current == InfoPanel.PERSONALITY:
            self._personality_key(event.key)
        else:
            self._features_key(event.key)
        return ScreenResult()

    def _personality_key(self, key: str) -> None:
        count = len(self.lines())
        if key in keys.UP:
            self.personality_cursor = clamp_cursor(self.personality_cursor - 1, count)
            return
        if key in keys.DOWN:
            self.personality_cursor = clamp_cursor(self.personality_cursor + 1, count)
            return

        line = self.current_line
        if line is None:
            return
        multiline = line.section == BACKSTORY
        if key == keys.ENTER:
            if multiline:
                self.backstory_expanded = not self.backstory_expanded
        elif key == "e" and not line.header:
            buffer = "" if line.placeholder else line.text
            self.open_modal(TextEntry(section=line.section, index=line.index, buffer=buffer, multiline=multiline))
        elif key == "a":
            buffer = self.character.personality.backstory if multiline else ""
            self.open_modal(TextEntry(section=line.section, buffer=buffer, multiline=multiline))
        elif key == "d" and not line.header and not line.placeholder:
            self.open_modal(
                Confirmation(
                    f"Delete this {line.section.rstrip('s')}? (y/n)",
                    action="delete_entry",
                    payload=line,
                    negative=("n", "N", keys.ESCAPE),
                )
            )

    def _features_key(self, key: str) -> None:
        if key in keys.LEFT or key in keys.RIGHT:
            if self.feature_tabs.move(-1 if key in keys.LEFT else 1):
                self.feature_cursor = 0
            return
        count = len(self.features())
        if key in keys.UP:
            self.feature_cursor = clamp_cursor(self.feature_cursor - 1, count)
        elif key in keys.DOWN:
            self.feature_cursor = clamp_cursor(self.feature_cursor + 1, count)


__all__ = [
    "InfoPanel",
    "FeatureTab",
    "PersonalityLine",
    "personality_lines",
    "features_for_tab",
    "CharacterInfoController",
]
