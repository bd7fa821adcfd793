"""
Request DTOs

DTOs for incoming search requests. These decouple callers from database models
and provide a clear contract for what data a search expects.
"""

from .search_request import SearchRequest

__all__ = ["SearchRequest"]
