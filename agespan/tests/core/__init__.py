"""Unit tests for core domain logic.

These tests exercise core calendar arithmetic without external dependencies.
The parser port is replaced with an in-memory fake from tests/fakes/.
"""
