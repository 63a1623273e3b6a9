"""
Content catalog: cache-fronted CRUD and genre management for media content.
"""

__version__ = '1.0.0'
