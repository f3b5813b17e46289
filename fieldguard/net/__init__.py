"""Network package - a minimal GET wrapper."""

from .get import FetchResult, GetEndpoint

__all__ = ["FetchResult", "GetEndpoint"]
