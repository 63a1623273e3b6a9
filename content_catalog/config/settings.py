"""
Environment-driven settings for the content catalog.

Table names, the DynamoDB region and the cache expiration window are read
from environment variables so that each deployment environment (dev,
staging, prod) can override them without code changes.
"""
import os
import logging

logger = logging.getLogger(__name__)

CONTENTS_TABLE_NAME = 'Contents'

DEFAULT_REGION = 'us-east-1'

# Sliding expiration applied to every cached content record
DEFAULT_CACHE_TTL_SECONDS = 30

TABLE_NAME_ENV_VARS = {
    'CONTENTS_TABLE_NAME': CONTENTS_TABLE_NAME,
}


def get_table_name(table_key: str, default: str = None) -> str:
    """
    Get table name from environment variable or use default constant.

    Supports both the _TABLE_NAME suffix and the shorter _TABLE form.

    Args:
        table_key: Environment variable key (e.g., 'CONTENTS_TABLE_NAME')
        default: Default table name if environment variable not set

    Returns:
        Table name from environment or default

    Example:
        >>> os.environ['CONTENTS_TABLE_NAME'] = 'Contents-Dev'
        >>> get_table_name('CONTENTS_TABLE_NAME')
        'Contents-Dev'
    """
    if default is None:
        default = TABLE_NAME_ENV_VARS.get(table_key, '')

    value = os.getenv(table_key)
    if value:
        return value

    legacy_key = table_key.replace('_TABLE_NAME', '_TABLE')
    value = os.getenv(legacy_key)
    if value:
        return value

    return default


def get_region() -> str:
    """Get the AWS region for DynamoDB."""
    return os.getenv('AWS_REGION') or DEFAULT_REGION


def get_cache_ttl_seconds() -> float:
    """
    Get the cache sliding expiration from CONTENT_CACHE_TTL_SECONDS.

    Returns:
        Positive number of seconds, DEFAULT_CACHE_TTL_SECONDS when the
        variable is unset or invalid
    """
    raw_value = os.getenv('CONTENT_CACHE_TTL_SECONDS')
    if not raw_value:
        return DEFAULT_CACHE_TTL_SECONDS

    try:
        ttl_seconds = float(raw_value)
    except ValueError:
        logger.warning(
            f"Invalid CONTENT_CACHE_TTL_SECONDS={raw_value!r}, "
            f"using default {DEFAULT_CACHE_TTL_SECONDS}s"
        )
        return DEFAULT_CACHE_TTL_SECONDS

    if ttl_seconds <= 0:
        logger.warning(
            f"CONTENT_CACHE_TTL_SECONDS must be positive, got {ttl_seconds}, "
            f"using default {DEFAULT_CACHE_TTL_SECONDS}s"
        )
        return DEFAULT_CACHE_TTL_SECONDS

    return ttl_seconds
