"""
Bookshelf GraphQL API
Authors and books served over GraphQL-over-HTTP
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
