"""
Content orchestration services.
"""

from .content_cache import ContentCache
from .genre_mutation import (
    GenreChange,
    GenreClassification,
    add_genres,
    remove_genres,
)
from .contents_manager import (
    ContentsManager,
    GenreMutationResult,
    MutationOutcome,
    NOTHING_DELETED,
    create_contents_manager,
)

__all__ = [
    'ContentCache',
    'GenreChange',
    'GenreClassification',
    'add_genres',
    'remove_genres',
    'ContentsManager',
    'GenreMutationResult',
    'MutationOutcome',
    'NOTHING_DELETED',
    'create_contents_manager',
]
