"""Test suite for the agespan age calculator.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - No third-party dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - Validates parsing and CLI formatting behavior

3. fakes/: Port implementations for testing
   - In-memory implementation of DateParserPort
"""
