"""Terminal user interface.

Screen controllers are plain Python objects that react to events; the
router switches between them, the render module projects their state
into rich renderables, and the textual app is the only code that touches
the terminal.

Submodules:
    events: Events, navigation signals and deferred tasks
    keys: Key names and key groups
    modals: Modal input states
    focus: Focus ring, tab strips and cursor clamping
    base: Shared controller dispatch
    screens: The five screen controllers
    router: Screen switching and task execution
    render: Rich projections of each screen
    app: textual adapter

Usage:
    Run the application with:
        dnd-sheet

    Or programmatically:
        from dnd_sheet.ui.app import run_app
        run_app(get_store(), get_catalog())
"""

from __future__ import annotations
