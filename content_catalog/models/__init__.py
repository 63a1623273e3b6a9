"""
Data models for the content catalog.
"""
from .content import Content, ContentPatch

__all__ = [
    'Content',
    'ContentPatch',
]
