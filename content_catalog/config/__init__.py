"""
Configuration module for the content catalog.
"""

from .settings import (
    CONTENTS_TABLE_NAME,
    DEFAULT_CACHE_TTL_SECONDS,
    DEFAULT_REGION,
    get_table_name,
    get_region,
    get_cache_ttl_seconds,
)

__all__ = [
    'CONTENTS_TABLE_NAME',
    'DEFAULT_CACHE_TTL_SECONDS',
    'DEFAULT_REGION',
    'get_table_name',
    'get_region',
    'get_cache_ttl_seconds',
]
