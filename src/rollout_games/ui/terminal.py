"""
Terminal front-end - ANSI board rendering and a text input loop.

Renders any GameBase board with highlighted moves, and reads commands:
    x,y     click the cell at (x, y)
    <enter> let the agent for the active seat play one ply
    r       reset the game
    q       quit
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from rollout_games.games.board import Pos
from rollout_games.games.game_base import GameBase, move_dest, move_origin
from rollout_games.ui.session import PlaySession

# ═══════════════════════════════════════════════════════════════════════════════
# ANSI Colors & Styling
# ═══════════════════════════════════════════════════════════════════════════════

RESET = "\033[0m"
BOLD = "\033[1m"

FG = {
    "first": "\033[38;5;28m",   # Green
    "second": "\033[38;5;124m",  # Red
    "gray": "\033[38;5;245m",
}

BG = {
    "dark": "\033[48;5;236m",
    "light": "\033[48;5;250m",
    "selected": "\033[48;5;25m",  # Blue
    "capture": "\033[48;5;90m",  # Magenta
}


def _highlight_map(moves: Sequence[Any]) -> dict[Pos, str]:
    marks: dict[Pos, str] = {}
    for m in moves:
        marks[move_origin(m)] = "selected"
        marks[move_dest(m)] = "selected"
        capture = getattr(m, "capture", None)
        if capture is not None:
            marks[capture] = "capture"
    return marks


def _owner_color(owner: Optional[int]) -> str:
    if owner is None:
        return ""
    return FG["first"] if owner == 0 else FG["second"]


def render(game: GameBase, highlighted: Sequence[Any] = (), color: bool = True) -> str:
    """Board as text, row 0 at the top, with highlighted move cells."""
    size = game.board_size()
    strings = game.get_cell_strings()
    marks = _highlight_map(highlighted)

    lines = ["   " + "".join(f"{x:^3}" for x in range(size))]
    for y in range(size):
        row = []
        for x in range(size):
            pos = Pos(x, y)
            value = game.cell_at(pos)
            text = f" {strings.get(value, '?')} "
            if color:
                mark = marks.get(pos)
                bg = BG[mark] if mark else BG["dark" if (x + y) % 2 == 0 else "light"]
                text = f"{bg}{BOLD}{_owner_color(game.owner_at(pos))}{text}{RESET}"
            elif pos in marks:
                text = f"[{strings.get(value, '?')}]"
            row.append(text)
        lines.append(f"{y:>2} " + "".join(row))
    return "\n".join(lines)


def parse_pos(raw: str) -> Pos:
    """Parse 'x,y' into a Pos."""
    try:
        x, y = (int(v.strip()) for v in raw.split(","))
    except ValueError as e:
        raise ValueError(f"Expected 'x,y' coordinates, got '{raw}'") from e
    return Pos(x, y)


def run_interactive(
    session: PlaySession,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    color: bool = True,
) -> Optional[int]:
    """Run the read-eval loop until quit or end of input. Returns the winner, if any."""
    write(render(session.game, session.highlighted, color))
    write(session.status())

    if not session.human_to_act:
        session.respond()
        write(render(session.game, session.highlighted, color))
        write(session.status())

    while True:
        try:
            raw = read("> ").strip().lower()
        except EOFError:
            break

        if raw == "q":
            break
        if raw == "r":
            session.reset()
            if not session.human_to_act:
                session.respond()
        elif raw == "":
            session.advance()
        else:
            try:
                session.select(parse_pos(raw))
            except ValueError as e:
                write(f"Invalid input: {e}")
                continue

        write(render(session.game, session.highlighted, color))
        write(session.status())

    return session.game.winner()
