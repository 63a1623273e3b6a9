"""
Custom exceptions for the content store layer.
"""


class ContentStoreError(Exception):
    """Base exception for content store failures."""
    pass


class DynamoDBError(ContentStoreError):
    """Exception raised when a DynamoDB operation fails."""
    pass


class ConditionalCheckFailedError(DynamoDBError):
    """Exception raised when a conditional check fails."""
    pass


class ContentCreationError(ContentStoreError):
    """Exception raised when a content record could not be created."""

    def __init__(self, message: str, content_id: str = None):
        """
        Initialize content creation error.

        Args:
            message: Error message
            content_id: Identifier that failed to be written
        """
        super().__init__(message)
        self.content_id = content_id


class ContentUpdateError(ContentStoreError):
    """Exception raised when an update target disappeared mid-operation."""

    def __init__(self, message: str, content_id: str = None):
        """
        Initialize content update error.

        Args:
            message: Error message
            content_id: Identifier of the content being updated
        """
        super().__init__(message)
        self.content_id = content_id
