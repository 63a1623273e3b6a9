"""
DynamoDB client wrapper with error translation.
"""
import logging
from typing import Dict, List, Optional, Any

import boto3
from botocore.exceptions import ClientError

from .exceptions import DynamoDBError, ConditionalCheckFailedError

logger = logging.getLogger(__name__)


class DynamoDBClient:
    """
    Thin DynamoDB resource wrapper that maps botocore errors onto
    content store exceptions.
    """

    def __init__(self, region: str = 'us-east-1'):
        """
        Initialize DynamoDB client.

        Args:
            region: AWS region for DynamoDB
        """
        self.region = region
        self.dynamodb = boto3.resource('dynamodb', region_name=region)

    def get_table(self, table_name: str):
        """
        Get DynamoDB table resource.

        Args:
            table_name: Name of the table

        Returns:
            DynamoDB table resource
        """
        return self.dynamodb.Table(table_name)

    def get_item(
        self,
        table_name: str,
        key: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """
        Get item from DynamoDB table.

        Args:
            table_name: Name of the table
            key: Primary key of the item

        Returns:
            Item dict or None if not found

        Raises:
            DynamoDBError: On DynamoDB errors
        """
        try:
            table = self.get_table(table_name)
            response = table.get_item(Key=key)
            return response.get('Item')
        except ClientError as e:
            logger.error(f"Error getting item from {table_name}: {e}")
            raise DynamoDBError(f"Failed to get item: {e}")

    def put_item(
        self,
        table_name: str,
        item: Dict[str, Any],
        condition_expression: Optional[str] = None
    ) -> None:
        """
        Put item into DynamoDB table.

        Args:
            table_name: Name of the table
            item: Item to put
            condition_expression: Optional condition expression

        Raises:
            ConditionalCheckFailedError: If condition check fails
            DynamoDBError: On other DynamoDB errors
        """
        try:
            table = self.get_table(table_name)
            kwargs = {'Item': item}

            if condition_expression:
                kwargs['ConditionExpression'] = condition_expression

            table.put_item(**kwargs)
        except ClientError as e:
            if e.response['Error']['Code'] == 'ConditionalCheckFailedException':
                raise ConditionalCheckFailedError("Conditional check failed")
            logger.error(f"Error putting item to {table_name}: {e}")
            raise DynamoDBError(f"Failed to put item: {e}")

    def delete_item(
        self,
        table_name: str,
        key: Dict[str, Any],
        return_values: str = 'NONE'
    ) -> Optional[Dict[str, Any]]:
        """
        Delete item from DynamoDB table.

        Args:
            table_name: Name of the table
            key: Primary key of the item
            return_values: NONE or ALL_OLD

        Returns:
            Deleted attributes when return_values is ALL_OLD and the item existed

        Raises:
            DynamoDBError: On DynamoDB errors
        """
        try:
            table = self.get_table(table_name)
            response = table.delete_item(Key=key, ReturnValues=return_values)
            return response.get('Attributes')
        except ClientError as e:
            logger.error(f"Error deleting item from {table_name}: {e}")
            raise DynamoDBError(f"Failed to delete item: {e}")

    def scan(
        self,
        table_name: str
    ) -> List[Dict[str, Any]]:
        """
        Scan the full table, following pagination.

        Args:
            table_name: Name of the table

        Returns:
            List of items

        Raises:
            DynamoDBError: On DynamoDB errors
        """
        try:
            table = self.get_table(table_name)
            kwargs = {}
            items = []

            while True:
                response = table.scan(**kwargs)
                items.extend(response.get('Items', []))

                last_key = response.get('LastEvaluatedKey')
                if not last_key:
                    break
                kwargs['ExclusiveStartKey'] = last_key

            return items
        except ClientError as e:
            logger.error(f"Error scanning {table_name}: {e}")
            raise DynamoDBError(f"Failed to scan table: {e}")

    def batch_write(
        self,
        table_name: str,
        items: List[Dict[str, Any]]
    ) -> None:
        """
        Batch put items into DynamoDB table.

        Args:
            table_name: Name of the table
            items: List of items to write

        Raises:
            DynamoDBError: On DynamoDB errors
        """
        try:
            table = self.get_table(table_name)

            with table.batch_writer() as batch:
                for item in items:
                    batch.put_item(Item=item)

        except ClientError as e:
            logger.error(f"Error batch writing to {table_name}: {e}")
            raise DynamoDBError(f"Failed to batch write: {e}")
