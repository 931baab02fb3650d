"""
Command-line interface for studying the deck one card at a time.
"""

import logging
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from satwords.constants import STUDY_HINTS
from satwords.models import SwipeAction
from satwords.study_session import StudySession

logger = logging.getLogger(__name__)
console = Console()

_PROMPT = (
    "[bold]Enter/f: flip, n: next, p: previous, "
    "numbers: drag (e.g. -150), q: quit: [/bold]"
)


def _parse_drag(command: str) -> Optional[List[float]]:
    """
    Parse a drag gesture typed as space-separated horizontal displacements.

    Returns:
        Optional[List[float]]: The drag updates in order, or None if any token
        is not a number.
    """
    try:
        return [float(token) for token in command.split()]
    except ValueError:
        return None


def _display_card(session: StudySession) -> None:
    """
    Show the face-up side of the current card, its position, and the usage hints.

    Parameters:
        session (StudySession): Session whose current card is rendered.
    """
    if session.is_flipped:
        panel = Panel(session.visible_text(), title="Meaning", border_style="blue")
    else:
        panel = Panel(session.visible_text(), title="Word", border_style="green")
    console.print(panel)
    console.rule(f"[bold]{session.progress_label()}[/bold]")
    for hint in STUDY_HINTS:
        console.print(f"[italic grey50]{hint}[/italic grey50]")


def _apply_drag(session: StudySession, updates: List[float]) -> SwipeAction:
    """Replay one drag gesture against the session and report the outcome."""
    for dx in updates:
        session.on_drag_update(dx)
    offset = session.drag_offset
    action = session.on_drag_end()
    if action is SwipeAction.NONE:
        console.print(
            f"[yellow]Not far enough to swipe (dragged {offset:g}).[/yellow]"
        )
    return action


def start_study_flow(session: StudySession) -> None:
    """
    Manages the command-line study loop until the user quits.

    Args:
        session: An instance of StudySession.
    """
    console.print("[bold cyan]Starting study session...[/bold cyan]")

    while True:
        _display_card(session)
        try:
            command = console.input(_PROMPT).strip().lower()
        except (EOFError, KeyboardInterrupt):
            logger.debug("Input closed; ending study session.")
            console.print("")
            break

        if command in ("", "f"):
            session.on_tap()
        elif command == "n":
            session.next_card()
        elif command == "p":
            session.previous_card()
        elif command == "q":
            break
        else:
            updates = _parse_drag(command)
            if updates is None:
                console.print(
                    f"[bold red]Unknown command: '{escape(command)}'.[/bold red]"
                )
                continue
            _apply_drag(session, updates)
        console.print("")

    logger.info("Study session finished.")
    console.print("[bold cyan]Study session finished. Well done![/bold cyan]")
