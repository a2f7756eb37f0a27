"""Tests for adapter implementations.

Tests cover the ISO date parser and the CLI command handler.
"""
