"""Dot building: word volume and open tasks as calendar markers."""

import math

from daynotes.core.types import DEFAULT_DOT_COLOR, Dot

MIN_SOLID_DOTS = 1
MAX_SOLID_DOTS = 5


def clamp(value: int, lower: int, upper: int) -> int:
    """Clamp value into [lower, upper]."""
    return max(lower, min(value, upper))


def solid_dot_count(
    word_count: int, words_per_dot: float, has_document: bool = True
) -> int:
    """
    Number of filled dots for a note of the given length.

    Any existing note gets at least one dot, even when empty. Dots are
    disabled entirely when words_per_dot is not positive.
    """
    if not has_document or words_per_dot <= 0:
        return 0
    return clamp(math.floor(word_count / words_per_dot), MIN_SOLID_DOTS, MAX_SOLID_DOTS)


def build_dots(
    word_count: int,
    words_per_dot: float,
    open_task_count: int,
    has_document: bool = True,
) -> list[Dot]:
    """
    Build the dot sequence for one day.

    Args:
        word_count: Words in the note
        words_per_dot: Words represented by one filled dot
        open_task_count: Unchecked tasks in the note, one hollow dot each
        has_document: Whether a note exists for the day

    Returns:
        Filled dots (capped) followed by hollow dots (uncapped)
    """
    if not has_document:
        return []

    solid = solid_dot_count(word_count, words_per_dot)
    dots = [Dot(color=DEFAULT_DOT_COLOR, is_filled=True) for _ in range(solid)]
    dots.extend(
        Dot(color=DEFAULT_DOT_COLOR, is_filled=False) for _ in range(open_task_count)
    )
    return dots
