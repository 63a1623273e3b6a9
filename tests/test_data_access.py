"""
Unit tests for data access layer.
Tests the contents repository contract, conditional writes, and
botocore error translation.
"""
import pytest
from decimal import Decimal
from unittest.mock import Mock, MagicMock
from botocore.exceptions import ClientError

from content_catalog.data_access.dynamodb_client import DynamoDBClient
from content_catalog.data_access.contents_repository import ContentsRepository
from content_catalog.data_access.exceptions import (
    ConditionalCheckFailedError,
    ContentCreationError,
    ContentStoreError,
    DynamoDBError,
)


def _client_error(code, operation='PutItem'):
    return ClientError({'Error': {'Code': code, 'Message': code}}, operation)


class TestContentsRepository:
    """Test repository operations against a mocked DynamoDB client."""

    @pytest.fixture
    def mock_dynamodb_client(self):
        """Create mock DynamoDB client."""
        return Mock(spec=DynamoDBClient)

    @pytest.fixture
    def contents_repo(self, mock_dynamodb_client):
        """Create ContentsRepository with mock client."""
        return ContentsRepository('Contents-test', mock_dynamodb_client)

    def test_create_assigns_id_and_guards_collision(
        self, contents_repo, mock_dynamodb_client, drama_patch
    ):
        """Test that create writes a new id under a not-exists condition."""
        # Act
        content = contents_repo.create(drama_patch)

        # Assert
        assert content.id
        assert content.title == drama_patch.title
        assert content.genres == ['Drama']
        mock_dynamodb_client.put_item.assert_called_once_with(
            table_name='Contents-test',
            item=content.to_item(),
            condition_expression='attribute_not_exists(contentId)'
        )

    def test_create_generates_distinct_ids(self, contents_repo, drama_patch):
        """Test that each create gets its own identifier."""
        first = contents_repo.create(drama_patch)
        second = contents_repo.create(drama_patch)

        assert first.id != second.id

    def test_create_collision_raises_creation_error(
        self, contents_repo, mock_dynamodb_client, drama_patch
    ):
        """Test that an identifier collision fails the creation."""
        # Arrange
        mock_dynamodb_client.put_item.side_effect = ConditionalCheckFailedError(
            "Conditional check failed"
        )

        # Act & Assert
        with pytest.raises(ContentCreationError) as exc_info:
            contents_repo.create(drama_patch)

        assert isinstance(exc_info.value, ContentStoreError)
        assert exc_info.value.content_id

    def test_read_found(self, contents_repo, mock_dynamodb_client, drama_content):
        """Test reading an existing item."""
        # Arrange
        mock_dynamodb_client.get_item.return_value = drama_content.to_item()

        # Act
        content = contents_repo.read(drama_content.id)

        # Assert
        assert content == drama_content
        mock_dynamodb_client.get_item.assert_called_once_with(
            table_name='Contents-test',
            key={'contentId': drama_content.id}
        )

    def test_read_missing_returns_none(self, contents_repo, mock_dynamodb_client):
        """Test reading an unknown id."""
        mock_dynamodb_client.get_item.return_value = None

        assert contents_repo.read('missing-id') is None

    def test_read_all(self, contents_repo, mock_dynamodb_client, drama_content):
        """Test that every scanned item is converted."""
        mock_dynamodb_client.scan.return_value = [drama_content.to_item()]

        assert contents_repo.read_all() == [drama_content]

    def test_update_replaces_existing(
        self, contents_repo, mock_dynamodb_client, drama_content
    ):
        """Test that update writes the full record under an exists condition."""
        # Arrange
        patch_values = drama_content.with_genres(['Drama', 'Crime'])

        # Act
        updated = contents_repo.update(drama_content.id, patch_values)

        # Assert
        assert updated.id == drama_content.id
        assert updated.genres == ['Drama', 'Crime']
        mock_dynamodb_client.put_item.assert_called_once_with(
            table_name='Contents-test',
            item=updated.to_item(),
            condition_expression='attribute_exists(contentId)'
        )

    def test_update_missing_returns_none(
        self, contents_repo, mock_dynamodb_client, drama_patch
    ):
        """Test that updating an unknown id reports absent."""
        mock_dynamodb_client.put_item.side_effect = ConditionalCheckFailedError(
            "Conditional check failed"
        )

        assert contents_repo.update('missing-id', drama_patch) is None

    def test_update_store_failure_propagates(
        self, contents_repo, mock_dynamodb_client, drama_patch
    ):
        """Test that non-conditional failures are not swallowed."""
        mock_dynamodb_client.put_item.side_effect = DynamoDBError("Failed to put item")

        with pytest.raises(DynamoDBError):
            contents_repo.update('some-id', drama_patch)

    def test_delete_existing_returns_id(
        self, contents_repo, mock_dynamodb_client, drama_content
    ):
        """Test that deleting an existing item returns its id."""
        # Arrange
        mock_dynamodb_client.delete_item.return_value = drama_content.to_item()

        # Act
        result = contents_repo.delete(drama_content.id)

        # Assert
        assert result == drama_content.id
        mock_dynamodb_client.delete_item.assert_called_once_with(
            table_name='Contents-test',
            key={'contentId': drama_content.id},
            return_values='ALL_OLD'
        )

    def test_delete_missing_returns_none(self, contents_repo, mock_dynamodb_client):
        """Test that deleting an unknown id returns None."""
        mock_dynamodb_client.delete_item.return_value = None

        assert contents_repo.delete('missing-id') is None

    def test_seed_contents(self, contents_repo, mock_dynamodb_client, drama_content):
        """Test that seeding batch-writes every record."""
        count = contents_repo.seed_contents([drama_content])

        assert count == 1
        mock_dynamodb_client.batch_write.assert_called_once_with(
            table_name='Contents-test',
            items=[drama_content.to_item()]
        )

    def test_seed_nothing(self, contents_repo, mock_dynamodb_client):
        """Test that an empty seed skips the batch write."""
        assert contents_repo.seed_contents([]) == 0
        mock_dynamodb_client.batch_write.assert_not_called()


class TestDynamoDBClientErrorTranslation:
    """Test mapping of botocore errors onto store exceptions."""

    @pytest.fixture
    def client_and_table(self):
        """Create DynamoDBClient with a mocked table resource."""
        client = DynamoDBClient(region='us-east-1')
        mock_table = MagicMock()
        client.get_table = Mock(return_value=mock_table)
        return client, mock_table

    def test_conditional_check_failure(self, client_and_table):
        """Test that a failed condition raises ConditionalCheckFailedError."""
        client, table = client_and_table
        table.put_item.side_effect = _client_error('ConditionalCheckFailedException')

        with pytest.raises(ConditionalCheckFailedError):
            client.put_item(
                table_name='Contents-test',
                item={'contentId': 'x'},
                condition_expression='attribute_not_exists(contentId)'
            )

    def test_other_put_failure(self, client_and_table):
        """Test that other errors raise DynamoDBError."""
        client, table = client_and_table
        table.put_item.side_effect = _client_error('ProvisionedThroughputExceededException')

        with pytest.raises(DynamoDBError) as exc_info:
            client.put_item(table_name='Contents-test', item={'contentId': 'x'})

        assert not isinstance(exc_info.value, ConditionalCheckFailedError)

    def test_get_failure(self, client_and_table):
        """Test that get_item errors raise DynamoDBError."""
        client, table = client_and_table
        table.get_item.side_effect = _client_error('ResourceNotFoundException', 'GetItem')

        with pytest.raises(DynamoDBError):
            client.get_item(table_name='Contents-test', key={'contentId': 'x'})

    def test_delete_returns_old_attributes(self, client_and_table):
        """Test that ALL_OLD attributes are passed back."""
        client, table = client_and_table
        table.delete_item.return_value = {'Attributes': {'contentId': 'x'}}

        result = client.delete_item(
            table_name='Contents-test',
            key={'contentId': 'x'},
            return_values='ALL_OLD'
        )

        assert result == {'contentId': 'x'}
        table.delete_item.assert_called_once_with(
            Key={'contentId': 'x'},
            ReturnValues='ALL_OLD'
        )

    def test_scan_follows_pagination(self, client_and_table):
        """Test that scan keeps reading until no LastEvaluatedKey is returned."""
        # Arrange
        client, table = client_and_table
        table.scan.side_effect = [
            {'Items': [{'contentId': 'a'}], 'LastEvaluatedKey': {'contentId': 'a'}},
            {'Items': [{'contentId': 'b'}]},
        ]

        # Act
        items = client.scan(table_name='Contents-test')

        # Assert
        assert items == [{'contentId': 'a'}, {'contentId': 'b'}]
        assert table.scan.call_count == 2
        assert table.scan.call_args.kwargs['ExclusiveStartKey'] == {'contentId': 'a'}

    def test_scan_failure(self, client_and_table):
        """Test that scan errors raise DynamoDBError."""
        client, table = client_and_table
        table.scan.side_effect = _client_error('InternalServerError', 'Scan')

        with pytest.raises(DynamoDBError):
            client.scan(table_name='Contents-test')


class TestContentItemMapping:
    """Test conversion between Content and DynamoDB items."""

    def test_to_item_uses_storage_names(self, drama_content):
        """Test attribute naming and Decimal duration."""
        item = drama_content.to_item()

        assert item['contentId'] == drama_content.id
        assert item['subTitle'] == 'Pilot'
        assert item['imageUrl'] == drama_content.image_url
        assert item['duration'] == Decimal('52')
        assert item['startTime'] == '2024-05-01T21:00:00'
        assert item['genreList'] == ['Drama']

    def test_from_item_converts_decimal(self, drama_content):
        """Test that numbers read back as Decimal become int."""
        content = type(drama_content).from_item(drama_content.to_item())

        assert content == drama_content
        assert isinstance(content.duration, int)

    def test_missing_window_omitted(self, drama_content):
        """Test that absent timestamps are not stored."""
        drama_content.start_time = None
        drama_content.end_time = None

        item = drama_content.to_item()

        assert 'startTime' not in item
        assert 'endTime' not in item

    def test_copy_does_not_share_genre_list(self, drama_content):
        """Test that a copy can be edited without touching the original."""
        copied = drama_content.copy()

        copied.genres.append('Comedy')

        assert copied is not drama_content
        assert drama_content.genres == ['Drama']
        assert copied.id == drama_content.id
