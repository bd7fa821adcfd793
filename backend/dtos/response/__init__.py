"""
Response DTOs

DTOs for outgoing search results.
"""

from .page_response import PageResponse

__all__ = ["PageResponse"]
