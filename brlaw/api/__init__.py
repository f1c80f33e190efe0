"""
API HTTP do motor de citações.
"""

from .router import router, get_store

__all__ = ["router", "get_store"]
