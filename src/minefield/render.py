"""
Plain-text rendering of a session snapshot.
"""
from .session import CellView, Snapshot


def cell_symbol(view: CellView) -> str:
    """Single character for one cell as a player sees it."""
    if view.is_flagged:
        return "F"
    if not view.is_revealed:
        return "."
    if view.is_mine:
        return "*"
    return str(view.adjacent_mines) if view.adjacent_mines else " "


def render_board(snapshot: Snapshot) -> str:
    """Render the grid with column and row indices."""
    header = "   " + " ".join(str(col % 10) for col in range(snapshot.width))
    lines = [header]
    for row, views in enumerate(snapshot.cells):
        symbols = " ".join(cell_symbol(view) for view in views)
        lines.append(f"{row:>2} {symbols}")
    return "\n".join(lines)
