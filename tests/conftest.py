"""
Pytest configuration and fixtures.
"""
import pytest
import os
from datetime import datetime

from content_catalog.models import Content, ContentPatch


class FakeClock:
    """Manually advanced clock for cache expiry tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(scope="session")
def aws_credentials():
    """Mock AWS credentials for testing."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"


@pytest.fixture(scope="session", autouse=True)
def env_vars():
    """Set up environment variables for tests."""
    os.environ["ENV"] = "test"
    os.environ["CONTENTS_TABLE_NAME"] = "Contents-test"


@pytest.fixture
def clock():
    """Create a manually advanced clock."""
    return FakeClock()


@pytest.fixture
def drama_patch():
    """Create a content patch tagged with a single genre."""
    return ContentPatch(
        title='The Long Night',
        subtitle='Pilot',
        description='A detective works one last case.',
        image_url='https://images.example.com/long-night.jpg',
        duration=52,
        start_time=datetime(2024, 5, 1, 21, 0),
        end_time=datetime(2024, 5, 1, 21, 52),
        genres=['Drama']
    )


@pytest.fixture
def drama_content(drama_patch):
    """Create a persisted content record tagged with a single genre."""
    return Content.from_patch('3f2b8c1e-9d4a-4e6b-8f7a-1c2d3e4f5a6b', drama_patch)
