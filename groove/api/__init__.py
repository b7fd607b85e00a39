"""
Groove API modules - Catalog and search clients.
"""
from .catalog import CatalogClient, CatalogError, NotFoundError, ValidationError
from .search import SearchClient, SearchError

__all__ = [
    'CatalogClient', 'CatalogError', 'NotFoundError', 'ValidationError',
    'SearchClient', 'SearchError',
]
