"""
Contents Manager.

Coordinates the content cache and the content store behind a single
CRUD and genre mutation interface. Reads are served cache-first; writes
go to the store and then refresh or evict the cached copy.

Cache and store are not updated under a shared lock, so a concurrent
reader can observe a stale cached record until the writer's own cache
refresh lands or the entry expires.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from ..config.settings import get_cache_ttl_seconds, get_region, get_table_name
from ..data_access.contents_repository import ContentsRepository
from ..data_access.dynamodb_client import DynamoDBClient
from ..data_access.exceptions import ContentStoreError, ContentUpdateError
from ..models.content import Content, ContentPatch
from ..utils.structured_logger import LoggingContext, get_structured_logger
from . import genre_mutation
from .content_cache import ContentCache
from .genre_mutation import GenreChange, genre_count

# Returned by delete_content when no record was removed
NOTHING_DELETED = None


class MutationOutcome(Enum):
    """Outcome of a genre mutation request."""
    CHANGED = "CHANGED"
    UNCHANGED = "UNCHANGED"
    REJECTED = "REJECTED"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class GenreMutationResult:
    """
    Result of add_genres or remove_genres.

    Attributes:
        outcome: What happened
        content: Updated content for CHANGED, current content for
            UNCHANGED and REJECTED, None for NOT_FOUND
    """
    outcome: MutationOutcome
    content: Optional[Content] = None


class ContentsManager:
    """
    Cache-aside orchestrator over a content store.

    The store may be any object exposing create, read, read_all, update
    and delete with ContentsRepository's signatures.
    """

    def __init__(
        self,
        store: ContentsRepository,
        cache: Optional[ContentCache] = None
    ):
        """
        Initialize Contents Manager.

        Args:
            store: Durable content store
            cache: Optional cache instance; a new empty one is created
                with the configured TTL otherwise
        """
        self.store = store
        if cache is None:
            cache = ContentCache(ttl_seconds=get_cache_ttl_seconds())
        self.cache = cache
        self.logger = get_structured_logger('ContentsManager')

    def get_many_contents(self) -> List[Content]:
        """
        Read every content from the store and refresh the cache with each.

        Returns:
            All stored contents
        """
        with LoggingContext(self.logger, 'get_many_contents'):
            contents = self.store.read_all()

        for content in contents:
            self.cache.set(content.id, content.copy())

        self.logger.info(
            f'Returned {len(contents)} contents',
            operation='get_many_contents',
            count=len(contents)
        )
        return contents

    def get_content(self, content_id: str) -> Optional[Content]:
        """
        Get content by ID, cache first.

        Args:
            content_id: Content identifier

        Returns:
            Content or None if the store does not know the identifier
        """
        log = self.logger.bind(content_id)

        cached = self.cache.get(content_id)
        if cached is not None:
            log.log_cache_event('hit')
            return cached.copy()

        log.log_cache_event('miss')
        with LoggingContext(log, 'get_content'):
            content = self.store.read(content_id)

        if content is None:
            log.warning('Content not found', operation='get_content')
            return None

        self.cache.set(content.id, content.copy())
        return content

    def create_content(self, patch: ContentPatch) -> Content:
        """
        Persist a new content and cache it.

        Args:
            patch: Field values for the new content

        Returns:
            Created content

        Raises:
            ContentCreationError: If the store could not add the content
            ContentStoreError: On other store failures
        """
        try:
            content = self.store.create(patch)
        except ContentStoreError as e:
            self.logger.error(
                f'Failed to create content {patch.title}',
                operation='create_content',
                error=e
            )
            raise

        self.cache.set(content.id, content.copy())
        self.logger.bind(content.id).info(
            'Created content',
            operation='create_content',
            title=content.title
        )
        return content

    def update_content(self, content_id: str, patch: ContentPatch) -> Optional[Content]:
        """
        Replace a content's fields in the store and refresh the cache.

        Args:
            content_id: Content identifier
            patch: Full replacement values

        Returns:
            Updated content or None if the identifier is unknown
        """
        log = self.logger.bind(content_id)

        with LoggingContext(log, 'update_content'):
            content = self.store.update(content_id, patch)

        if content is None:
            log.warning('Content not found for update', operation='update_content')
            return None

        self.cache.set(content.id, content.copy())
        log.info('Updated content', operation='update_content', title=content.title)
        return content

    def delete_content(self, content_id: str) -> Optional[str]:
        """
        Evict the cached copy, then delete the content from the store.

        Args:
            content_id: Content identifier

        Returns:
            The identifier if a record was deleted, NOTHING_DELETED otherwise
        """
        log = self.logger.bind(content_id)

        # Evict before the store call so no stale hit is served meanwhile
        self.cache.remove(content_id)

        with LoggingContext(log, 'delete_content'):
            deleted_id = self.store.delete(content_id)

        if deleted_id is None:
            log.info('Nothing deleted', operation='delete_content')
            return NOTHING_DELETED

        log.info('Deleted content', operation='delete_content')
        return deleted_id

    def add_genres(self, content_id: str, genres: Iterable[str]) -> GenreMutationResult:
        """
        Add genre names to a content.

        Args:
            content_id: Content identifier
            genres: Genre names to add

        Returns:
            GenreMutationResult; UNCHANGED when all names were present

        Raises:
            ContentUpdateError: If the content vanished before the write
        """
        return self._mutate_genres(
            content_id, list(genres), genre_mutation.add_genres, 'add_genres'
        )

    def remove_genres(self, content_id: str, genres: Iterable[str]) -> GenreMutationResult:
        """
        Remove genre names from a content.

        Args:
            content_id: Content identifier
            genres: Genre names to remove

        Returns:
            GenreMutationResult; REJECTED when the content would be left
            without genres, UNCHANGED when none of the names were present

        Raises:
            ContentUpdateError: If the content vanished before the write
        """
        return self._mutate_genres(
            content_id, list(genres), genre_mutation.remove_genres, 'remove_genres'
        )

    def _mutate_genres(self, content_id, requested, classify, operation) -> GenreMutationResult:
        log = self.logger.bind(content_id)

        current = self.get_content(content_id)
        if current is None:
            log.warning(
                'Failed to change genres, content not found',
                operation=operation
            )
            return GenreMutationResult(MutationOutcome.NOT_FOUND)

        classification = classify(current.genres, requested)

        if classification.status is GenreChange.REJECTED:
            log.warning(
                'Content must keep at least one genre',
                operation=operation,
                genres=requested
            )
            return GenreMutationResult(MutationOutcome.REJECTED, current)

        if classification.status is GenreChange.UNCHANGED:
            log.info('Content genres unchanged', operation=operation, genres=requested)
            return GenreMutationResult(MutationOutcome.UNCHANGED, current)

        updated = self.update_content(content_id, current.with_genres(classification.genres))
        if updated is None:
            log.error('Content disappeared before genre update', operation=operation)
            raise ContentUpdateError(
                f"Failed to update genres, content {content_id} no longer exists",
                content_id=content_id
            )

        # Compared by distinct genre count only
        if genre_count(updated.genres) == genre_count(current.genres):
            log.info('Content genres unchanged after write', operation=operation)
            return GenreMutationResult(MutationOutcome.UNCHANGED, updated)

        log.info(
            'Content genres changed',
            operation=operation,
            genres=requested,
            result=updated.genres
        )
        return GenreMutationResult(MutationOutcome.CHANGED, updated)


def create_contents_manager(dynamodb_client: Optional[DynamoDBClient] = None) -> ContentsManager:
    """
    Build a ContentsManager wired from environment configuration.

    Args:
        dynamodb_client: Optional DynamoDB client; one is created for the
            configured region otherwise

    Returns:
        ContentsManager over a DynamoDB-backed ContentsRepository
    """
    client = dynamodb_client or DynamoDBClient(region=get_region())
    repository = ContentsRepository(get_table_name('CONTENTS_TABLE_NAME'), client)
    cache = ContentCache(ttl_seconds=get_cache_ttl_seconds())
    return ContentsManager(repository, cache)
