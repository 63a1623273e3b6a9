"""
Data access layer for DynamoDB operations.
"""
from .dynamodb_client import DynamoDBClient
from .contents_repository import ContentsRepository
from .exceptions import (
    ContentStoreError,
    DynamoDBError,
    ConditionalCheckFailedError,
    ContentCreationError,
    ContentUpdateError,
)

__all__ = [
    'DynamoDBClient',
    'ContentsRepository',
    'ContentStoreError',
    'DynamoDBError',
    'ConditionalCheckFailedError',
    'ContentCreationError',
    'ContentUpdateError',
]
