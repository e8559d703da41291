"""
Jade Night - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from jade_night.engine.base import GRID_SIZE, MAX_PLAYERS, MIN_PLAYERS


def validate_player_count(count: int) -> int:
    """
    Validate number of players.

    Args:
        count: Number of players

    Returns:
        Validated count

    Raises:
        ValueError: If count is not 2-5
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError(f"Player count must be an integer, got {type(count).__name__}.")

    if not (MIN_PLAYERS <= count <= MAX_PLAYERS):
        raise ValueError(f"Player count must be {MIN_PLAYERS}-{MAX_PLAYERS}, got {count}.")

    return count


def validate_slot_index(index: int) -> int:
    """
    Validate a public grid slot index.

    Args:
        index: Slot index to validate

    Returns:
        Validated index

    Raises:
        ValueError: If index is not 0-8
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise ValueError(f"Slot index must be an integer, got {type(index).__name__}.")

    if not (0 <= index < GRID_SIZE):
        raise ValueError(f"Slot index must be 0-{GRID_SIZE - 1}, got {index}.")

    return index


def validate_level(level: int) -> int:
    """
    Validate a tableware level.

    Raises:
        ValueError: If level is not 1-3
    """
    if isinstance(level, bool) or not isinstance(level, int):
        raise ValueError(f"Level must be an integer, got {type(level).__name__}.")

    if not (1 <= level <= 3):
        raise ValueError(f"Level must be 1-3, got {level}.")

    return level
