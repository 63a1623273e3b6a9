"""
Genre mutation rules.

Pure functions that compute the genre list resulting from adding or
removing genre names and classify whether the change is worth writing.
No store or cache access happens here.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List


def genre_count(genres: Iterable[str]) -> int:
    """Return the number of distinct genre names."""
    return len(set(genres))


class GenreChange(Enum):
    """Classification of a requested genre mutation."""
    CHANGED = "CHANGED"      # New genre list differs, write it back
    UNCHANGED = "UNCHANGED"  # Nothing to add or remove
    REJECTED = "REJECTED"    # Would leave the content with no genres


@dataclass(frozen=True)
class GenreClassification:
    """
    Result of classifying a genre mutation.

    Attributes:
        status: Change classification
        genres: Genre list to write back when status is CHANGED,
            otherwise the current genre list
    """
    status: GenreChange
    genres: List[str]

    @property
    def changed(self) -> bool:
        return self.status is GenreChange.CHANGED


def add_genres(current: Iterable[str], requested: Iterable[str]) -> GenreClassification:
    """
    Classify adding genres as a set union.

    Duplicates collapse; the result keeps the current genres first followed
    by new names in request order.

    Args:
        current: Genre list of the content as read
        requested: Genre names to add

    Returns:
        UNCHANGED if every requested name was already present, else CHANGED
    """
    current = list(current)
    union = list(dict.fromkeys([*current, *requested]))

    if len(union) == genre_count(current):
        return GenreClassification(GenreChange.UNCHANGED, current)

    return GenreClassification(GenreChange.CHANGED, union)


def remove_genres(current: Iterable[str], requested: Iterable[str]) -> GenreClassification:
    """
    Classify removing genres as a set difference.

    Args:
        current: Genre list of the content as read
        requested: Genre names to remove

    Returns:
        REJECTED if a non-empty request would remove every genre,
        UNCHANGED if none of the requested names were present,
        else CHANGED
    """
    current = list(current)
    to_remove = set(requested)
    remaining = [genre for genre in dict.fromkeys(current) if genre not in to_remove]

    if to_remove and not remaining:
        return GenreClassification(GenreChange.REJECTED, current)

    if len(remaining) == genre_count(current):
        return GenreClassification(GenreChange.UNCHANGED, current)

    return GenreClassification(GenreChange.CHANGED, remaining)
