"""
Game rules shared by configuration and the session.
"""

SAFE_ZONE_SIZE = 9


def max_mines(width: int, height: int) -> int:
    """Largest mine count that still leaves room outside any safe zone."""
    return width * height - SAFE_ZONE_SIZE - 1


def has_won(revealed_count: int, width: int, height: int, total_mines: int) -> bool:
    """Check if every non-mine cell has been revealed."""
    return revealed_count == width * height - total_mines
