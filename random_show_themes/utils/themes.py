"""Theme aggregation and classification for shows."""

from typing import List, Sequence, TypeVar

from ..models.show import Show, ThemeCategory

T = TypeVar("T")


def smart_append(first: List[T], other: Sequence[T]) -> None:
    """Extend `first` with `other`, skipping the copy when `other` is empty."""
    if other:
        first.extend(other)


def aggregate_themes(show: Show) -> List[str]:
    """
    Merge a show's theme lists into one pool.

    Openings come first, then endings, then other soundtrack songs.
    Order and duplicates are preserved.

    Args:
        show: The show to collect themes from

    Returns:
        A new list; the show's own lists are left untouched
    """
    themes = list(show.opening_themes)
    # Most shows only fill one or two of the lists
    smart_append(themes, show.ending_themes)
    smart_append(themes, show.other_soundtrack)
    return themes


def classify_theme(theme: str, show: Show) -> ThemeCategory:
    """
    Find which list of `show` a theme belongs to.

    A theme listed as both an opening and an ending is an opening.
    Anything not found in either list is reported as other soundtrack.
    """
    if theme in show.opening_themes:
        return ThemeCategory.OPENING
    if theme in show.ending_themes:
        return ThemeCategory.ENDING
    return ThemeCategory.OTHER
