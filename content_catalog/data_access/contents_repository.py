"""
Repository for Contents table operations.
"""
import uuid
import logging
from typing import Iterable, List, Optional

from .dynamodb_client import DynamoDBClient
from .exceptions import ConditionalCheckFailedError, ContentCreationError
from ..models.content import Content, ContentPatch

logger = logging.getLogger(__name__)


class ContentsRepository:
    """
    Repository for managing content records in DynamoDB.

    This is the durable source of truth behind the contents manager.
    """

    def __init__(self, table_name: str, dynamodb_client: Optional[DynamoDBClient] = None):
        """
        Initialize Contents repository.

        Args:
            table_name: Name of the Contents table
            dynamodb_client: Optional DynamoDB client instance
        """
        self.table_name = table_name
        self.client = dynamodb_client or DynamoDBClient()

    def create(self, patch: ContentPatch) -> Content:
        """
        Assign a new identifier and persist the content.

        Args:
            patch: Field values for the new record

        Returns:
            Created content

        Raises:
            ContentCreationError: If the generated identifier already exists
            DynamoDBError: On other DynamoDB errors
        """
        content_id = str(uuid.uuid4())
        content = Content.from_patch(content_id, patch)

        try:
            self.client.put_item(
                table_name=self.table_name,
                item=content.to_item(),
                condition_expression='attribute_not_exists(contentId)'
            )
        except ConditionalCheckFailedError:
            logger.error(f"Content id collision on create: {content_id}")
            raise ContentCreationError(
                "Could not add content to database",
                content_id=content_id
            )

        logger.info(f"Created content {content_id}")
        return content

    def read(self, content_id: str) -> Optional[Content]:
        """
        Get content by ID.

        Args:
            content_id: Content identifier

        Returns:
            Content or None if not found
        """
        item = self.client.get_item(
            table_name=self.table_name,
            key={'contentId': content_id}
        )
        if item is None:
            return None
        return Content.from_item(item)

    def read_all(self) -> List[Content]:
        """
        Get every content record.

        Returns:
            List of all stored contents
        """
        items = self.client.scan(table_name=self.table_name)
        return [Content.from_item(item) for item in items]

    def update(self, content_id: str, patch: ContentPatch) -> Optional[Content]:
        """
        Replace the mutable fields of an existing record.

        Args:
            content_id: Content identifier
            patch: Full replacement values

        Returns:
            Updated content or None if the identifier does not exist
        """
        content = Content.from_patch(content_id, patch)

        try:
            self.client.put_item(
                table_name=self.table_name,
                item=content.to_item(),
                condition_expression='attribute_exists(contentId)'
            )
        except ConditionalCheckFailedError:
            logger.info(f"Content {content_id} not found for update")
            return None

        logger.info(f"Updated content {content_id}")
        return content

    def delete(self, content_id: str) -> Optional[str]:
        """
        Delete content by ID.

        Args:
            content_id: Content identifier

        Returns:
            The identifier if a record was deleted, None otherwise
        """
        old_item = self.client.delete_item(
            table_name=self.table_name,
            key={'contentId': content_id},
            return_values='ALL_OLD'
        )
        if not old_item:
            logger.info(f"Content {content_id} not found for delete")
            return None

        logger.info(f"Deleted content {content_id}")
        return content_id

    def seed_contents(self, contents: Iterable[Content]) -> int:
        """
        Bulk-load prebuilt content records, overwriting matching ids.

        Args:
            contents: Records to write

        Returns:
            Number of records written
        """
        items = [content.to_item() for content in contents]
        if not items:
            return 0

        self.client.batch_write(table_name=self.table_name, items=items)
        logger.info(f"Seeded {len(items)} contents into {self.table_name}")
        return len(items)
