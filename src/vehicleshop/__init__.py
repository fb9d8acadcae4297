"""
Vehicle Shop backend
GraphQL API for vehicles, their parts and the jokes attached to them
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
