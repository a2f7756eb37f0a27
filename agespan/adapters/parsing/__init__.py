"""Date parsing adapters."""

from .iso import IsoDateParser

__all__ = ["IsoDateParser"]
