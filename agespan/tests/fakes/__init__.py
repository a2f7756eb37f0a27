"""Fake/mock implementations of core ports for testing.

- FakeDateParserPort: Canned date lookups with call capture
"""

from .parser import FakeDateParserPort

__all__ = ["FakeDateParserPort"]
