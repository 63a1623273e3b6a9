"""
Content and ContentPatch models for the content catalog.
"""
from dataclasses import dataclass, field, asdict, replace
from datetime import datetime
from decimal import Decimal
from typing import Dict, Any, List, Optional


def _format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


@dataclass
class ContentPatch:
    """
    Desired field values for a create or update request.

    An update applies the patch as a full replacement of every mutable
    field, not as a sparse merge.

    Attributes:
        title: Content title
        subtitle: Secondary title
        description: Free-text description
        image_url: Artwork location
        duration: Running time in minutes
        start_time: Start of the availability window
        end_time: End of the availability window
        genres: Ordered genre tags
    """
    title: str = ''
    subtitle: str = ''
    description: str = ''
    image_url: str = ''
    duration: int = 0
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    genres: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Validate patch values."""
        if self.duration < 0:
            raise ValueError(f"Duration must be non-negative, got {self.duration}")
        self.genres = list(self.genres)


@dataclass
class Content:
    """
    A persisted content record.

    Attributes:
        id: Store-assigned identifier, immutable once created
        title: Content title
        subtitle: Secondary title
        description: Free-text description
        image_url: Artwork location
        duration: Running time in minutes
        start_time: Start of the availability window
        end_time: End of the availability window
        genres: Ordered genre tags
    """
    id: str
    title: str = ''
    subtitle: str = ''
    description: str = ''
    image_url: str = ''
    duration: int = 0
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    genres: List[str] = field(default_factory=list)

    @classmethod
    def from_patch(cls, content_id: str, patch: ContentPatch) -> 'Content':
        """
        Build a content record by applying a patch to an identifier.

        Args:
            content_id: Identifier to assign
            patch: Field values to write

        Returns:
            Content instance
        """
        return cls(id=content_id, **asdict(patch))

    def copy(self) -> 'Content':
        """Return a copy whose genre list is not shared with this record."""
        return replace(self, genres=list(self.genres))

    def to_patch(self) -> ContentPatch:
        """Return the mutable fields of this record as a patch."""
        data = asdict(self)
        data.pop('id')
        return ContentPatch(**data)

    def with_genres(self, genres: List[str]) -> ContentPatch:
        """
        Create a full-replacement patch that only changes the genre list.

        Args:
            genres: New genre list

        Returns:
            ContentPatch carrying every other field unchanged
        """
        patch = self.to_patch()
        patch.genres = list(genres)
        return patch

    def to_item(self) -> Dict[str, Any]:
        """
        Convert to dictionary for DynamoDB storage.

        Returns:
            Item with camelCase attribute names and Decimal duration
        """
        item = {
            'contentId': self.id,
            'title': self.title,
            'subTitle': self.subtitle,
            'description': self.description,
            'imageUrl': self.image_url,
            'duration': Decimal(str(self.duration)),
            'genreList': list(self.genres),
        }

        if self.start_time is not None:
            item['startTime'] = _format_timestamp(self.start_time)
        if self.end_time is not None:
            item['endTime'] = _format_timestamp(self.end_time)

        return item

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> 'Content':
        """
        Create Content from a DynamoDB item.

        Args:
            item: Item with content attributes

        Returns:
            Content instance
        """
        return cls(
            id=item['contentId'],
            title=item.get('title', ''),
            subtitle=item.get('subTitle', ''),
            description=item.get('description', ''),
            image_url=item.get('imageUrl', ''),
            duration=int(item.get('duration', 0)),
            start_time=_parse_timestamp(item.get('startTime')),
            end_time=_parse_timestamp(item.get('endTime')),
            genres=list(item.get('genreList', []))
        )
